"""
Security utilities.

Identity tokens are JWTs minted by the OAuth provider and verified here
with the shared secret.  Claims: ``sub`` (stable user id), ``name``,
``picture``, ``email``.
"""

import datetime
from typing import Any, Optional

from fastapi.security import HTTPBearer
from jose import JWTError, jwt

from app.core.config import settings
from app.schemas.user import Identity

bearer_scheme = HTTPBearer(auto_error=False)


def create_identity_token(identity: Identity, expires_delta: Optional[datetime.timedelta] = None) -> str:
    """Mint a token for *identity*.  Used by local tooling and tests."""
    claims: dict[str, Any] = {"sub": identity.id}
    if identity.display_name is not None:
        claims["name"] = identity.display_name
    if identity.photo_url is not None:
        claims["picture"] = identity.photo_url
    if identity.email is not None:
        claims["email"] = identity.email
    if expires_delta is not None:
        claims["exp"] = datetime.datetime.now(datetime.timezone.utc) + expires_delta
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_identity_token(token: str) -> Optional[Identity]:
    """
    Decode and verify an identity token.

    Returns:
        The identity, or None if the token is invalid or expired
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    subject = payload.get("sub")
    if not subject:
        return None
    return Identity(id=str(subject), display_name=payload.get("name"), photo_url=payload.get("picture"),
                    email=payload.get("email"), )

"""Create users, exercises, routines and workout_history tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profile, exercise catalog, routine and history tables."""
    op.create_table('users', sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=128), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('display_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('photo_url', sqlmodel.sql.sqltypes.AutoString(length=1024), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('height', sa.Float(), nullable=True),
        sa.Column('unit_preference', sqlmodel.sql.sqltypes.AutoString(length=3), nullable=False,
                  server_default='kg'),
        sa.Column('weekly_goal', sa.Integer(), nullable=False, server_default='4'),
        sa.Column('current_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('longest_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_workout_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=False)

    op.create_table('exercises', sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('muscle_groups', sa.JSON(), nullable=False),
        sa.Column('equipment', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exercises_category'), 'exercises', ['category'], unique=False)

    op.create_table('routines', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sqlmodel.sql.sqltypes.AutoString(length=128), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('intensity', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('estimated_duration', sa.Integer(), nullable=False),
        sa.Column('exercises', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_routines_owner_id'), 'routines', ['owner_id'], unique=False)

    op.create_table('workout_history', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sqlmodel.sql.sqltypes.AutoString(length=128), nullable=False),
        sa.Column('routine_id', sa.Integer(), nullable=True),
        sa.Column('routine_name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('started_at', sa.DateTime(), nullable=False),
        sa.Column('ended_at', sa.DateTime(), nullable=False),
        sa.Column('duration_seconds', sa.Integer(), nullable=False),
        sa.Column('exercises', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_history_owner_id'), 'workout_history', ['owner_id'], unique=False)
    op.create_index(op.f('ix_workout_history_category'), 'workout_history', ['category'], unique=False)
    op.create_index(op.f('ix_workout_history_started_at'), 'workout_history', ['started_at'], unique=False)
    op.create_index(op.f('ix_workout_history_created_at'), 'workout_history', ['created_at'], unique=False)


def downgrade() -> None:
    """Drop profile, exercise catalog, routine and history tables."""
    op.drop_index(op.f('ix_workout_history_created_at'), table_name='workout_history')
    op.drop_index(op.f('ix_workout_history_started_at'), table_name='workout_history')
    op.drop_index(op.f('ix_workout_history_category'), table_name='workout_history')
    op.drop_index(op.f('ix_workout_history_owner_id'), table_name='workout_history')
    op.drop_table('workout_history')
    op.drop_index(op.f('ix_routines_owner_id'), table_name='routines')
    op.drop_table('routines')
    op.drop_index(op.f('ix_exercises_category'), table_name='exercises')
    op.drop_table('exercises')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')

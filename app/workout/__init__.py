"""Live workout core: session store, persistence, timer, history commit, streaks and stats."""

"""Tasks To Go - a single persisted task list."""

"""Domain errors, events, subscribers and repository protocols."""

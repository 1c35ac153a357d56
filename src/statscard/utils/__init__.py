"""Small helpers for logging and label formatting."""

"""Commands: use-cases that change state."""

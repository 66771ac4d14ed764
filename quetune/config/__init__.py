"""User-facing strings."""

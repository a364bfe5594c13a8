"""Core release-resolution services."""

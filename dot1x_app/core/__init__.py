"""Core modules."""

"""API routes that do not belong to a feature module."""

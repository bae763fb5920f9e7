"""Application layer - use cases and routing algorithms."""

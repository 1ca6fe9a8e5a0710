"""Infrastructure layer - logging setup and in-memory port implementations."""

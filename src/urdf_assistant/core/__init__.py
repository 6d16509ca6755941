"""Core utilities: configuration, logging and XML I/O."""

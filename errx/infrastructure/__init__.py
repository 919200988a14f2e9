"""Infrastructure adapters (logging, call-site resolution)."""

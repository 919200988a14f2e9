"""Domain layer: error model and protocols."""

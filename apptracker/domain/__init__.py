"""Domain layer - models and protocols."""

"""Core helpers shared across services."""

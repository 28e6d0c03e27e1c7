"""Core helpers shared across treeline domains."""

"""Core configuration for the gobench client."""

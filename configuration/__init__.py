"""Configuration loading for the Aid Coordination API."""

"""Configuration — settings file discovery and loading."""

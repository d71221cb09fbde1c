"""Configuration — settings and logging setup for the CLI."""

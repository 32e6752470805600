"""Configuration — TOML discovery, section models, settings, and logging."""

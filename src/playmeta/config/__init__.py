"""Configuration package: path discovery and TOML-backed settings."""

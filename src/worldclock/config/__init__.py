"""Configuration schema and YAML configuration management."""

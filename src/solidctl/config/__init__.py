"""Configuration: TOML discovery, pydantic-settings merge, structlog setup."""

"""Configuration: settings, constants and prompts."""

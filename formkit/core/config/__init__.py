"""Configuration loading (formkit.yml)."""

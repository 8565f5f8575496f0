"""Logging setup shared by every entrypoint."""

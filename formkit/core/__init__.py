"""Core layer — models, services, configuration and observability."""

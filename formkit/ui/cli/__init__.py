"""CLI sub-command groups registered by formkit.main."""

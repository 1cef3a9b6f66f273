"""Interface layer: CLI command handlers."""

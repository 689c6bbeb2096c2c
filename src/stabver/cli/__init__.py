"""Command-line interface for stabver."""

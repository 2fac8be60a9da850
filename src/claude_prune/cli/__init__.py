"""Command-line interface for claude-prune."""

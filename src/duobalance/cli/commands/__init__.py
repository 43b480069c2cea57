"""CLI commands for duobalance."""

"""Command-line interface for duobalance."""

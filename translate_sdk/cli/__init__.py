"""Command line interface for the Translate SDK."""

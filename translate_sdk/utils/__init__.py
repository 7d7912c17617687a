"""Shared utilities: retry policy and URL helpers."""

"""Scilla CLI commands."""

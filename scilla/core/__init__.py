"""Shared helpers for Scilla commands."""

"""Scilla - Solana RPC configuration manager."""

__version__ = "0.1.0"

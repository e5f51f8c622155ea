"""Validators for Solana JSON-RPC results, one per supported RPC method."""

__version__ = "0.1.0"
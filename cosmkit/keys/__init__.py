"""Cosmos key encodings: bech32, public keys and signature verification."""

__all__ = ["bech32", "public", "signature"]
"""Synthetic KTP record generation and timed B+ tree and hash map stores over them."""

__version__ = "0.1.0"
__all__ = ["records", "bptree", "hashstore", "generate", "cli"]
"""A hash-linked chain of blocks with SHA-256 Merkle roots over their transactions."""

__version__ = "0.1.0"

__all__ = ["block", "blockchain", "cli", "merkle", "transaction"]
"""Proof node hashing, proof paths, commitment-proof operations and merged iteration for IAVL trees."""

__version__ = "0.1.0"
__all__ = [
    "colors",
    "options",
    "proof",
    "proof_ops",
    "proof_path",
    "unsaved_iterator",
    "version",
]
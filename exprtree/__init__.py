"""Prefix-notation expression trees, error-collecting results and a file serializer."""

__version__ = "0.1.0"
__all__ = ["result", "tree", "serializer", "cli"]
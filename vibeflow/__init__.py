"""Ternary logic, comonadic vibe contexts, bounded moment streams and compact vibe records."""

__version__ = "0.1.0"

__all__ = ["ternary", "context", "streams", "optimized"]
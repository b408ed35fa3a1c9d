"""String interning repository with integer IDs, snapshots and frequency-based reordering."""

__version__ = "0.1.0"
__all__ = ["benchmark", "block", "optimize", "strings", "tree", "unsigned"]
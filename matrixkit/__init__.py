"""Float matrices with arithmetic (matrix) and determinants, cofactors, inverses (linalg)."""

__version__ = "1.0.0"
__all__ = ["matrix", "linalg"]
"""Convert bitmap files to C byte-array code files and back."""

__version__ = "1.0.0"

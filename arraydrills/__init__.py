"""Classic array and matrix exercises as plain Python functions."""

__version__ = "0.1.0"
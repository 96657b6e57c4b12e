"""A terminal word-guessing game played in hard mode, with hints and saved statistics."""

__version__ = "1.0.0"
__all__ = ["__version__"]
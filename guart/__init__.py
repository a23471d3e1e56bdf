"""Text-mode widget toolkit for terminals and serial consoles."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""A terminal grid game about collecting plutonium bars in the dark."""

__version__ = "1.0.0"
__all__ = ["cli", "model", "render", "rules"]
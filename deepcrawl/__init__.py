"""Small terminal games and exercises."""

__version__ = "0.1.0"
"""
Arcade Core

Shared platform layer for FruitFall: logging, the game base class,
the standard game states and the input pipeline.
"""

__version__ = "1.0.0"

__all__ = ['__version__']

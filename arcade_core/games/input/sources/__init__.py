"""
Input source implementations.
"""

from arcade_core.games.input.sources.base import InputSource
from arcade_core.games.input.sources.pygame_source import PygameInputSource

__all__ = ['InputSource', 'PygameInputSource']

"""
Input abstraction layer for arcade games.

Games consume InputEvent objects only; sources translate device events.
"""

from arcade_core.games.input.input_event import InputEvent
from arcade_core.games.input.sources import InputSource, PygameInputSource

__all__ = ['InputEvent', 'InputSource', 'PygameInputSource']

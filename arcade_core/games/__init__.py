"""
Arcade Game Framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: Standard GameState enum
- input: Input events and the sources that produce them
"""

from arcade_core.games.game_state import GameState
from arcade_core.games.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]

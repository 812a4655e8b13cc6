"""
FruitFall-specific enumerations.
"""

from enum import Enum

# Re-exported so game models can refer to the common state
from arcade_core.games.game_state import GameState


class InputAction(str, Enum):
    """Player actions produced by input sources.

    Attributes:
        POINTER_MOVE: Pointer moved; position carries playfield coordinates
        FIRE: Throw a knife
        LEFT_PRESSED / LEFT_RELEASED: Left movement key state changed
        RIGHT_PRESSED / RIGHT_RELEASED: Right movement key state changed
    """
    POINTER_MOVE = "pointer_move"
    FIRE = "fire"
    LEFT_PRESSED = "left_pressed"
    LEFT_RELEASED = "left_released"
    RIGHT_PRESSED = "right_pressed"
    RIGHT_RELEASED = "right_released"


class HazardType(str, Enum):
    """Kinds of falling objects."""
    FRUIT = "fruit"
    BOMB = "bomb"


__all__ = ['GameState', 'InputAction', 'HazardType']

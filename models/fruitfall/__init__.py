"""
FruitFall-specific models package.
"""

from .enums import (
    GameState,
    InputAction,
    HazardType,
)

from .models import (
    HudData,
    MIN_SPEED_MULTIPLIER,
    MAX_SPEED_MULTIPLIER,
)

__all__ = [
    "GameState",
    "InputAction",
    "HazardType",
    "HudData",
    "MIN_SPEED_MULTIPLIER",
    "MAX_SPEED_MULTIPLIER",
]

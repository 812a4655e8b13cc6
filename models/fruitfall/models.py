"""
FruitFall-specific data models.
"""

from typing import List

from pydantic import BaseModel, Field, ConfigDict

from .enums import GameState

MIN_SPEED_MULTIPLIER = 0.5
MAX_SPEED_MULTIPLIER = 3.0


class HudData(BaseModel):
    """Immutable snapshot of the values shown on the heads-up display.

    Attributes:
        score: Fruit sliced this game (non-negative)
        lives: Lives remaining (non-negative)
        state: Current game state
        speed_multiplier: Global fall speed multiplier

    Examples:
        >>> hud = HudData(score=3, lives=5, state=GameState.PLAYING, speed_multiplier=1.2)
        >>> hud.lines()[-1]
        'Speed factor: 1.2x'
    """
    score: int = Field(0, ge=0)
    lives: int = Field(0, ge=0)
    state: GameState = GameState.READY
    speed_multiplier: float = Field(1.0, ge=MIN_SPEED_MULTIPLIER, le=MAX_SPEED_MULTIPLIER)

    model_config = ConfigDict(frozen=True)

    def lines(self) -> List[str]:
        """Text lines in display order."""
        return [
            f"Score: {self.score}",
            f"Lives: {self.lives}",
            f"State: {self.state.value}",
            f"Speed factor: {self.speed_multiplier:.1f}x",
        ]

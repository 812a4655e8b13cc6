"""
InputEvent: one player action, independent of the device that produced it.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import Vector2D, InputAction


class InputEvent(BaseModel):
    """Immutable event handed from an InputSource to a game.

    Attributes:
        action: What the player did
        timestamp: Clock reading in seconds when the event was translated
        position: Playfield position for POINTER_MOVE, None for keys
    """
    model_config = ConfigDict(frozen=True)

    action: InputAction
    timestamp: float = Field(ge=0)
    position: Optional[Vector2D] = None

    def __str__(self) -> str:
        where = ""
        if self.position is not None:
            where = f", pos=({self.position.x:.2f}, {self.position.y:.2f})"
        return f"InputEvent({self.action.value}{where}, t={self.timestamp:.3f})"

"""
FruitFall - Base rectangle entity.

Every moving object in the playfield is an axis-aligned rectangle with a
top-left position, a fixed size and a per-tick velocity.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from models import Rectangle, Resolution


@dataclass(frozen=True)
class Appearance:
    """How an entity is drawn: an image if one loads, else a solid colour."""
    color: Tuple[int, int, int]
    image: Optional[str] = None  # Path relative to the assets directory


class Entity:
    """Axis-aligned rectangle that moves by its velocity once per tick.

    Subclasses choose the bounds policy: clamped entities are kept inside
    the playfield after every move, the rest are free to leave it and are
    filtered out by their owners.
    """

    CLAMPED = False

    def __init__(
        self,
        playfield: Resolution,
        x: float,
        y: float,
        width: float,
        height: float,
        appearance: Appearance,
        speed_x: float = 0.0,
        speed_y: float = 0.0,
    ):
        self._playfield = playfield
        self._width = float(width)
        self._height = float(height)
        self.x = float(x)
        self.y = float(y)
        self.speed_x = float(speed_x)
        self.speed_y = float(speed_y)
        self.appearance = appearance
        self.consumed = False

    @property
    def playfield(self) -> Resolution:
        return self._playfield

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self._width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self._height

    @property
    def bounds(self) -> Rectangle:
        """Current bounding box."""
        return Rectangle(x=self.x, y=self.y, width=self._width, height=self._height)

    def advance(self) -> None:
        """Apply velocity once, then clamp if this entity is clamped."""
        self.x += self.speed_x
        self.y += self.speed_y
        if self.CLAMPED:
            self.clamp_to_playfield()

    def clamp_to_playfield(self) -> None:
        """Keep the whole rectangle inside the playfield."""
        max_x = self._playfield.width - self._width
        max_y = self._playfield.height - self._height
        self.x = max(0.0, min(self.x, max_x))
        self.y = max(0.0, min(self.y, max_y))

    def overlaps(self, other: 'Entity') -> bool:
        """Check for overlap with another entity (shared edges count)."""
        return self.bounds.intersects(other.bounds)

    def mark_consumed(self) -> None:
        """Flag for removal at the end of the current collision pass."""
        self.consumed = True

    def __repr__(self) -> str:
        return (f"<{type(self).__name__} x={self.x:.1f} y={self.y:.1f} "
                f"w={self._width:.0f} h={self._height:.0f} consumed={self.consumed}>")

"""
Geometry shared by the platform and the games.

Everything here is an immutable pydantic model in playfield pixels with
the origin at the top-left and y growing downwards (pygame convention).
"""

from pydantic import BaseModel, ConfigDict, Field


class Point2D(BaseModel):
    """A position or a per-tick displacement.

    >>> Point2D(x=400.0, y=-10.0)
    Point2D(x=400.00, y=-10.00)
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __repr__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Pointer positions reported by input sources
Vector2D = Point2D


class Resolution(BaseModel):
    """Pixel size of a surface: the logical playfield or the real window."""
    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Build from a command-line value such as '1280x800'.

        Raises:
            ValueError: text is not WIDTHxHEIGHT with positive integers
        """
        parts = text.strip().lower().split('x')
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Expected WIDTHxHEIGHT, got '{text}'")
        return cls(width=int(parts[0]), height=int(parts[1]))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class Rectangle(BaseModel):
    """Axis-aligned box anchored at its top-left corner.

    Entities hand one of these out as their collision bounds. Overlap
    tests are inclusive: boxes that only share an edge still touch.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: 'Rectangle') -> bool:
        """Inclusive AABB overlap.

        >>> a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
        >>> a.intersects(Rectangle(x=10.0, y=0.0, width=10.0, height=10.0))
        True
        """
        if self.right < other.left or other.right < self.left:
            return False
        return not (self.bottom < other.top or other.bottom < self.top)

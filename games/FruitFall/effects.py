"""
FruitFall - Cosmetic effects.

Explosions and snow are never collidable. The appearance timer swaps the
player's look for a short time and reverts it on a later tick.
"""
import random
from dataclasses import dataclass
from typing import List, Optional

import pygame

from models import Resolution
from games.FruitFall import config
from games.FruitFall.entity import Appearance, Entity
from games.FruitFall.entities import Hazard


class Explosion(Entity):
    """Explosion image left behind by a bomb hit."""

    def __init__(self, playfield: Resolution, x: float, y: float,
                 width: float, height: float, expires_at: float):
        super().__init__(
            playfield, x, y, width, height,
            Appearance(config.EXPLOSION_COLOR, config.EXPLOSION_IMAGE),
        )
        self.expires_at = expires_at

    @classmethod
    def at_bomb(cls, bomb: Hazard, now: float,
                duration: float = config.EXPLOSION_DURATION) -> 'Explosion':
        """Create an explosion anchored at the bomb's top-left, scaled up."""
        return cls(
            bomb.playfield, bomb.x, bomb.y,
            bomb.width * config.EXPLOSION_SCALE,
            bomb.height * config.EXPLOSION_SCALE,
            expires_at=now + duration,
        )

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class AppearanceTimer:
    """Temporary player look with a single pending reversion.

    Setting a new look cancels whatever reversion was pending, so an
    earlier short look can never revert a later one.
    """

    def __init__(self, default: Appearance):
        self.default = default
        self.current = default
        self.revert_at: Optional[float] = None

    def set(self, appearance: Appearance, now: float, duration: Optional[float] = None) -> None:
        """Show an appearance, reverting to the default after duration seconds.

        With no duration the appearance stays until the next set().
        """
        self.current = appearance
        self.revert_at = now + duration if duration is not None else None

    def update(self, now: float) -> Appearance:
        """Revert if the pending deadline has passed. Returns the current look."""
        if self.revert_at is not None and now >= self.revert_at:
            self.current = self.default
            self.revert_at = None
        return self.current


@dataclass
class Snowflake:
    x: float
    y: float
    radius: float
    speed_y: float
    drift: float


class Snowfall:
    """Background snow. Flakes fall forever, independent of game state."""

    def __init__(self, playfield: Resolution, count: int = config.SNOWFLAKE_COUNT,
                 rng: Optional[random.Random] = None):
        self.playfield = playfield
        self.rng = rng or random.Random()
        self.flakes: List[Snowflake] = [self._make_flake() for _ in range(count)]

    def _make_flake(self) -> Snowflake:
        rng = self.rng
        return Snowflake(
            x=rng.random() * self.playfield.width,
            y=rng.random() * self.playfield.height,
            radius=1 + rng.random() * 2,
            speed_y=0.5 + rng.random() * 1.5,
            drift=(rng.random() - 0.5) * 0.5,
        )

    def update(self) -> None:
        """Move every flake one tick, recycling those that leave the playfield."""
        width = self.playfield.width
        for flake in self.flakes:
            flake.y += flake.speed_y
            flake.x += flake.drift
            if flake.y > self.playfield.height:
                flake.y = -flake.radius
                flake.x = self.rng.random() * width
            # Horizontal wrap
            if flake.x < 0:
                flake.x = width
            elif flake.x > width:
                flake.x = 0

    def render(self, screen: pygame.Surface) -> None:
        layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for flake in self.flakes:
            pygame.draw.circle(layer, config.SNOW_COLOR,
                               (int(flake.x), int(flake.y)), max(1, int(flake.radius)))
        screen.blit(layer, (0, 0))

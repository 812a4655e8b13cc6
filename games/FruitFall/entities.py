"""
FruitFall - Player, knives and falling hazards.
"""
import random
from typing import Optional

from models import Resolution
from models.fruitfall import HazardType
from games.FruitFall import config
from games.FruitFall.config import HazardSpec
from games.FruitFall.entity import Appearance, Entity

PLAYER_LOOKS = {
    'idle': Appearance(config.PLAYER_IDLE_COLOR, config.PLAYER_IMAGES['idle']),
    'attack': Appearance(config.PLAYER_ATTACK_COLOR, config.PLAYER_IMAGES['attack']),
    'hurt': Appearance(config.PLAYER_HURT_COLOR, config.PLAYER_IMAGES['hurt']),
}


class Player(Entity):
    """Player character. Moves horizontally only and never leaves the playfield."""

    CLAMPED = True

    def __init__(self, playfield: Resolution, x: float = config.PLAYER_START_X,
                 y: float = config.PLAYER_START_Y):
        super().__init__(
            playfield, x, y,
            config.PLAYER_WIDTH, config.PLAYER_HEIGHT,
            PLAYER_LOOKS['idle'],
        )

    def update_speed(self, left_held: bool, right_held: bool) -> None:
        """Set horizontal speed from the movement keys.

        Holding both directions (or neither) stops the player.
        """
        if left_held and not right_held:
            self.speed_x = -config.PLAYER_SPEED
        elif right_held and not left_held:
            self.speed_x = config.PLAYER_SPEED
        else:
            self.speed_x = 0.0

    def follow_pointer(self, pointer_x: float) -> None:
        """Centre the player on a pointer x position (playfield units)."""
        self.x = pointer_x - self.width / 2
        self.clamp_to_playfield()


class Knife(Entity):
    """Thrown knife. Flies straight up and is not clamped."""

    def __init__(self, playfield: Resolution, x: float, y: float):
        super().__init__(
            playfield, x, y,
            config.KNIFE_WIDTH, config.KNIFE_HEIGHT,
            Appearance(config.KNIFE_COLOR, config.KNIFE_IMAGE),
            speed_y=-config.KNIFE_SPEED,
        )

    @classmethod
    def thrown_by(cls, player: Player) -> 'Knife':
        """Create a knife centred on the player's top edge."""
        x = player.x + player.width / 2 - config.KNIFE_WIDTH / 2
        y = player.y - config.KNIFE_HEIGHT
        return cls(player.playfield, x, y)

    def is_out_of_bounds(self) -> bool:
        """True once the knife has completely left the top of the playfield."""
        return self.bottom <= 0


class Hazard(Entity):
    """Falling fruit or bomb."""

    def __init__(self, playfield: Resolution, kind: HazardType, x: float, y: float,
                 width: float, height: float, speed_y: float, appearance: Appearance):
        super().__init__(playfield, x, y, width, height, appearance, speed_y=speed_y)
        self.kind = kind

    @property
    def is_bomb(self) -> bool:
        return self.kind == HazardType.BOMB

    def is_out_of_bounds(self) -> bool:
        """True once the hazard has fallen past the bottom of the playfield."""
        return self.y > self.playfield.height

    def touches_floor(self) -> bool:
        """True when the bottom edge reaches the floor."""
        return self.bottom >= self.playfield.height


def create_hazard(
    spec: HazardSpec,
    playfield: Resolution,
    speed_multiplier: float,
    rng: Optional[random.Random] = None,
) -> Hazard:
    """Create a hazard just above the playfield at a random column.

    Args:
        spec: Geometry and speed range for this kind of hazard
        playfield: Playfield size
        speed_multiplier: Current global speed multiplier
        rng: Random source (fresh unseeded one if None)

    Returns:
        New Hazard with downward speed scaled by the multiplier
    """
    rng = rng or random.Random()
    x = rng.random() * (playfield.width - spec.width)
    y = -spec.height
    speed_y = (spec.min_speed + rng.random() * (spec.max_speed - spec.min_speed)) * speed_multiplier

    if spec.kind == HazardType.BOMB:
        appearance = Appearance(config.BOMB_COLOR, config.BOMB_IMAGE)
    else:
        index = rng.randrange(len(config.FRUIT_COLORS))
        appearance = Appearance(config.FRUIT_COLORS[index], config.FRUIT_IMAGES[index])

    return Hazard(playfield, spec.kind, x, y, spec.width, spec.height, speed_y, appearance)

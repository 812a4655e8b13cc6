"""
FruitFall - Configuration loader.

Every tunable reads from the environment (optionally via a .env file in
the game directory) and falls back to the defaults below. Speeds are in
playfield units per tick; durations are in seconds.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv

from models.fruitfall import HazardType, MIN_SPEED_MULTIPLIER, MAX_SPEED_MULTIPLIER

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_path(key: str) -> Optional[Path]:
    """Get optional directory path from environment."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else None


# Playfield (logical drawing surface, scaled to the window)
PLAYFIELD_WIDTH = _get_int('PLAYFIELD_WIDTH', 800)
PLAYFIELD_HEIGHT = _get_int('PLAYFIELD_HEIGHT', 500)

# Timing
TICK_RATE = _get_int('TICK_RATE', 50)  # ticks/second (20ms period)

# Player
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 80
PLAYER_START_X = 350.0
PLAYER_START_Y = 420.0
PLAYER_SPEED = _get_float('PLAYER_SPEED', 5.0)

# Knives
KNIFE_WIDTH = 15
KNIFE_HEIGHT = 32
KNIFE_SPEED = _get_float('KNIFE_SPEED', 8.0)  # upward


@dataclass(frozen=True)
class HazardSpec:
    """Geometry and drop timing for one kind of falling object."""
    kind: HazardType
    base_interval: float       # Seconds between drops at 1.0x speed
    width: float
    height: float
    min_speed: float           # Fall speed range at 1.0x speed
    max_speed: float


HAZARD_SPECS: Dict[HazardType, HazardSpec] = {
    HazardType.FRUIT: HazardSpec(
        kind=HazardType.FRUIT,
        base_interval=_get_float('FRUIT_DROP_INTERVAL', 1.2),
        width=40,
        height=40,
        min_speed=2.0,
        max_speed=5.0,
    ),
    HazardType.BOMB: HazardSpec(
        kind=HazardType.BOMB,
        base_interval=_get_float('BOMB_DROP_INTERVAL', 3.0),
        width=40,
        height=40,
        min_speed=2.0,
        max_speed=5.0,
    ),
}

# Game rules
STARTING_LIVES = _get_int('STARTING_LIVES', 5)
POINTS_PER_FRUIT = 1

# Speed multiplier
BASE_SPEED_MULTIPLIER = 1.0
SPEED_STEP = _get_float('SPEED_STEP', 0.2)  # faster/slower buttons

# Difficulty progression while playing
DIFFICULTY_RAMP_INTERVAL = _get_float('DIFFICULTY_RAMP_INTERVAL', 5.0)  # seconds
DIFFICULTY_RAMP_STEP = _get_float('DIFFICULTY_RAMP_STEP', 0.1)

# Effects
EXPLOSION_DURATION = _get_float('EXPLOSION_DURATION', 0.5)
EXPLOSION_SCALE = 2.0
ATTACK_LOOK_DURATION = 0.2
HURT_LOOK_DURATION = 0.5
SNOWFLAKE_COUNT = _get_int('SNOWFLAKE_COUNT', 80)

# Visual
BACKGROUND_COLOR = (24, 32, 48)
BACKGROUND_ALPHA = 0.8
SNOW_COLOR = (255, 255, 255, 204)
HUD_COLOR = (240, 240, 240)

PLAYER_IDLE_COLOR = (70, 130, 220)
PLAYER_ATTACK_COLOR = (240, 200, 60)
PLAYER_HURT_COLOR = (220, 60, 60)
KNIFE_COLOR = (200, 200, 210)
BOMB_COLOR = (40, 40, 40)
EXPLOSION_COLOR = (255, 140, 40)

FRUIT_COLORS: List[Tuple[int, int, int]] = [
    (220, 40, 40),     # Apple
    (240, 190, 80),    # Hami melon
    (60, 170, 60),     # Watermelon
    (250, 160, 150),   # Peach
]

# Optional sprite images; solid colours are used when absent
ASSETS_DIR = _get_path('FRUITFALL_ASSETS_DIR')

PLAYER_IMAGES = {
    'idle': 'images/player/player.png',
    'attack': 'images/player/player_attack.png',
    'hurt': 'images/player/player_hurt.png',
}
FRUIT_IMAGES = [
    'images/fruits/apple.png',
    'images/fruits/Hami_melon.png',
    'images/fruits/watermelon.png',
    'images/fruits/peach.png',
]
KNIFE_IMAGE = 'images/weapons/knife.png'
BOMB_IMAGE = 'images/bomb/bomb.png'
EXPLOSION_IMAGE = 'images/bomb/bomb_explosion.png'
BACKGROUND_IMAGE = 'images/background/snowfield.png'

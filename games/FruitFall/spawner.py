"""
FruitFall - Hazard spawner with speed multiplier and difficulty ramp.

Each hazard kind drops on its own timer. The current drop interval is the
base interval divided by the global speed multiplier, and the multiplier
also scales the fall speed of new and live hazards.
"""
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from models import Resolution
from models.fruitfall import HazardType
from arcade_core.logging import get_logger
from games.FruitFall import config
from games.FruitFall.config import HazardSpec, HAZARD_SPECS
from games.FruitFall.entities import Hazard, create_hazard

log = get_logger('spawner')


@dataclass
class SpawnerState:
    """Current difficulty of the spawner."""
    speed_multiplier: float = config.BASE_SPEED_MULTIPLIER
    last_drop: Dict[HazardType, float] = field(default_factory=dict)
    last_ramp: float = 0.0


class HazardSpawner:
    """Drops fruit and bombs on elapsed-time thresholds."""

    def __init__(
        self,
        playfield: Resolution,
        specs: Optional[Dict[HazardType, HazardSpec]] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the spawner.

        Args:
            playfield: Playfield size hazards fall through
            specs: Per-kind geometry and base intervals (defaults from config)
            rng: Random source for positions, speeds and fruit looks
        """
        self.playfield = playfield
        self.specs = specs or HAZARD_SPECS
        self.rng = rng or random.Random()
        self.state = SpawnerState()

    @property
    def speed_multiplier(self) -> float:
        return self.state.speed_multiplier

    def interval(self, kind: HazardType) -> float:
        """Current seconds between drops of this kind."""
        return self.specs[kind].base_interval / self.state.speed_multiplier

    def should_drop(self, kind: HazardType, now: float) -> bool:
        """Check if the interval for this kind has been exceeded."""
        last = self.state.last_drop.get(kind, 0.0)
        return now - last > self.interval(kind)

    def drop(self, kind: HazardType, now: float) -> Hazard:
        """Record a drop and create the hazard.

        Returns:
            New Hazard just above the playfield
        """
        self.state.last_drop[kind] = now
        hazard = create_hazard(self.specs[kind], self.playfield, self.state.speed_multiplier, self.rng)
        log.trace("Dropped %s at x=%.1f speed=%.2f", kind.value, hazard.x, hazard.speed_y)
        return hazard

    def adjust_speed(self, delta: float, live_hazards: Iterable[Hazard] = ()) -> float:
        """Change the speed multiplier by delta, clamped to its range.

        Live hazards keep their relative speed: each fall speed is scaled
        by new/old multiplier. Drop intervals follow automatically.

        Args:
            delta: Amount to add to the multiplier (negative to slow down)
            live_hazards: Hazards currently in flight

        Returns:
            The new speed multiplier
        """
        old = self.state.speed_multiplier
        new = max(config.MIN_SPEED_MULTIPLIER, min(config.MAX_SPEED_MULTIPLIER, old + delta))
        # Float drift can nudge a stepped value past a bound
        new = round(new, 6)
        if new == old:
            return old

        ratio = new / old
        for hazard in live_hazards:
            hazard.speed_y *= ratio

        self.state.speed_multiplier = new
        log.debug("Speed multiplier %.2f -> %.2f", old, new)
        return new

    def start_ramp(self, now: float) -> None:
        """Set the baseline for automatic difficulty increases."""
        self.state.last_ramp = now

    def update_difficulty(self, now: float, live_hazards: Iterable[Hazard] = ()) -> bool:
        """Speed up once every ramp interval while below the maximum.

        Returns:
            True if the multiplier was increased
        """
        if self.state.speed_multiplier >= config.MAX_SPEED_MULTIPLIER:
            return False
        if now - self.state.last_ramp < config.DIFFICULTY_RAMP_INTERVAL:
            return False
        self.state.last_ramp = now
        self.adjust_speed(config.DIFFICULTY_RAMP_STEP, live_hazards)
        return True

    def reset(self) -> None:
        """Reset multiplier and drop timers to their base values."""
        self.state = SpawnerState()

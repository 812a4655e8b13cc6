"""
FruitFall - Game session state machine.

READY -> PLAYING -> PAUSED
            |
            +-----> GAME_OVER
any state -> READY (reset)

Pause is a dead end: the only way out is a reset.
"""
from dataclasses import dataclass, field
from typing import Optional

from arcade_core.games.game_state import GameState
from arcade_core.logging import get_logger
from games.FruitFall import config

log = get_logger('session')


@dataclass
class GameSession:
    """Phase, score and lives for one run of the game."""
    starting_lives: int = config.STARTING_LIVES
    phase: GameState = GameState.READY
    score: int = 0
    lives: int = field(init=False, default=0)
    started_at: Optional[float] = None

    def __post_init__(self):
        if self.starting_lives < 1:
            raise ValueError(f"starting_lives must be at least 1, got {self.starting_lives}")
        self.lives = self.starting_lives

    @property
    def is_playing(self) -> bool:
        return self.phase == GameState.PLAYING

    def start(self, now: float) -> bool:
        """READY -> PLAYING with a fresh score and full lives."""
        if self.phase != GameState.READY:
            log.debug("Ignoring start while %s", self.phase.value)
            return False
        self.phase = GameState.PLAYING
        self.score = 0
        self.lives = self.starting_lives
        self.started_at = now
        log.info("Game started with %d lives", self.lives)
        return True

    def pause(self) -> bool:
        """PLAYING -> PAUSED."""
        if self.phase != GameState.PLAYING:
            log.debug("Ignoring pause while %s", self.phase.value)
            return False
        self.phase = GameState.PAUSED
        log.info("Game paused at score %d", self.score)
        return True

    def reset(self) -> bool:
        """Any state -> READY. Score and lives stay on display until the next start."""
        previous = self.phase
        self.phase = GameState.READY
        self.started_at = None
        log.info("Game reset from %s", previous.value)
        return True

    def add_points(self, points: int = config.POINTS_PER_FRUIT) -> int:
        self.score += points
        return self.score

    def lose_life(self) -> bool:
        """Take one life (never below zero).

        Returns:
            True if this ended the game
        """
        self.lives = max(0, self.lives - 1)
        log.debug("Life lost, %d remaining", self.lives)
        if self.lives <= 0 and self.phase != GameState.GAME_OVER:
            self.phase = GameState.GAME_OVER
            self.started_at = None
            log.info("Game over, final score %d", self.score)
            return True
        return False

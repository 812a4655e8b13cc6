"""
FruitFall Game Mode

Throw knives at falling fruit and keep bombs off the floor. The mode owns
every entity list, the session and the spawner; one call to update() is
one fixed tick.
"""
import argparse
import random
import time
from pathlib import Path
from typing import Callable, List, Optional

import pygame

from models import Resolution
from models.fruitfall import HazardType, HudData, InputAction
from arcade_core.games import BaseGame, GameState
from arcade_core.games.input import InputEvent
from arcade_core.logging import get_logger
from games.FruitFall import config
from games.FruitFall.collision import compact, find_floor_hits, find_hits
from games.FruitFall.effects import AppearanceTimer, Explosion, Snowfall
from games.FruitFall.entities import Hazard, Knife, Player, PLAYER_LOOKS
from games.FruitFall.session import GameSession
from games.FruitFall.spawner import HazardSpawner
from games.FruitFall.sprites import SpriteCache

log = get_logger('fruitfall')


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


class FruitFallMode(BaseGame):
    """FruitFall game mode - slice fruit, stop bombs.

    Features:
    - Fruit and bombs drop on independent timers
    - Global speed multiplier with manual and automatic adjustment
    - Mark-then-filter collision passes
    - Snowfall, explosions and temporary player looks
    """

    NAME = "Fruit Fall"
    DESCRIPTION = "Throw knives at falling fruit. Bombs cost a life if hit or if they land."
    VERSION = "1.0.0"
    AUTHOR = "Arcade Team"

    ARGUMENTS = [
        {
            'name': '--lives',
            'type': positive_int,
            'default': config.STARTING_LIVES,
            'help': 'Starting lives'
        },
        {
            'name': '--assets-dir',
            'type': str,
            'default': None,
            'help': 'Directory holding the images/ sprite tree (solid colours if omitted)'
        },
    ]

    def __init__(
        self,
        lives: int = config.STARTING_LIVES,
        assets_dir: Optional[str] = None,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
        **kwargs,
    ):
        """Initialize FruitFall.

        Args:
            lives: Lives at the start of each game
            assets_dir: Sprite directory (falls back to FRUITFALL_ASSETS_DIR)
            seed: Seed for drops and snow when rng is not given
            clock: Time source in seconds
            rng: Random source shared by spawner and snow
        """
        self._playfield = Resolution(width=config.PLAYFIELD_WIDTH, height=config.PLAYFIELD_HEIGHT)
        self._clock = clock
        self._rng = rng or random.Random(seed)

        self._session = GameSession(starting_lives=lives)
        self._spawner = HazardSpawner(self._playfield, rng=self._rng)

        # Entities
        self._player = Player(self._playfield)
        self._knives: List[Knife] = []
        self._fruits: List[Hazard] = []
        self._bombs: List[Hazard] = []
        self._explosions: List[Explosion] = []

        # Effects
        self._player_look = AppearanceTimer(PLAYER_LOOKS['idle'])
        self._snow = Snowfall(self._playfield, rng=self._rng)

        # Held movement keys
        self._left_held = False
        self._right_held = False

        self._sprites = SpriteCache(Path(assets_dir) if assets_dir else config.ASSETS_DIR)
        self._font: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

        log.debug("FruitFall created: playfield=%dx%d lives=%d",
                  self._playfield.width, self._playfield.height, lives)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def playfield(self) -> Resolution:
        return self._playfield

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def spawner(self) -> HazardSpawner:
        return self._spawner

    @property
    def player(self) -> Player:
        return self._player

    @property
    def player_appearance(self):
        """Look currently shown for the player."""
        return self._player_look.current

    @property
    def knives(self) -> List[Knife]:
        return self._knives

    @property
    def fruits(self) -> List[Hazard]:
        return self._fruits

    @property
    def bombs(self) -> List[Hazard]:
        return self._bombs

    @property
    def explosions(self) -> List[Explosion]:
        return self._explosions

    @property
    def speed_multiplier(self) -> float:
        return self._spawner.speed_multiplier

    def _get_internal_state(self) -> GameState:
        return self._session.phase

    def get_score(self) -> int:
        return self._session.score

    def hud(self) -> HudData:
        """Snapshot of the values shown on the HUD."""
        return HudData(
            score=self._session.score,
            lives=self._session.lives,
            state=self._session.phase,
            speed_multiplier=self._spawner.speed_multiplier,
        )

    # =========================================================================
    # Control commands
    # =========================================================================

    def start(self) -> bool:
        """READY -> PLAYING; resets score, lives and difficulty."""
        now = self._clock()
        if not self._session.start(now):
            return False
        self._spawner.reset()
        self._spawner.start_ramp(now)
        return True

    def pause(self) -> bool:
        """PLAYING -> PAUSED. There is no resume; reset to play again."""
        return self._session.pause()

    def reset(self) -> None:
        """Back to READY with hazards and effects cleared and base difficulty."""
        self._session.reset()
        self._fruits = []
        self._bombs = []
        self._explosions = []
        self._spawner.reset()

    def adjust_speed(self, delta: float) -> float:
        """Change the global speed multiplier. Allowed in every state.

        Returns:
            The new (clamped) multiplier
        """
        return self._spawner.adjust_speed(delta, self._fruits + self._bombs)

    def get_available_actions(self) -> list:
        """Control buttons valid in the current state."""
        phase = self._session.phase
        actions = []
        if phase == GameState.READY:
            actions.append({'id': 'start', 'label': 'Start', 'style': 'primary'})
        elif phase == GameState.PLAYING:
            actions.append({'id': 'pause', 'label': 'Pause', 'style': 'secondary'})
            actions.append({'id': 'reset', 'label': 'Reset', 'style': 'danger'})
        else:
            actions.append({'id': 'reset', 'label': 'Reset', 'style': 'primary'})

        actions.append({'id': 'faster', 'label': 'Faster', 'style': 'secondary'})
        actions.append({'id': 'slower', 'label': 'Slower', 'style': 'secondary'})
        return actions

    def execute_action(self, action_id: str) -> bool:
        """Execute a control button by id."""
        if action_id == 'start':
            return self.start()
        elif action_id == 'pause':
            return self.pause()
        elif action_id == 'reset':
            self.reset()
            return True
        elif action_id == 'faster':
            self.adjust_speed(config.SPEED_STEP)
            return True
        elif action_id == 'slower':
            self.adjust_speed(-config.SPEED_STEP)
            return True

        return super().execute_action(action_id)

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Apply player input. Movement and throwing work in every state."""
        for event in events:
            action = event.action
            if action == InputAction.POINTER_MOVE and event.position is not None:
                self._player.follow_pointer(event.position.x)
            elif action == InputAction.FIRE:
                self.throw_knife()
            elif action == InputAction.LEFT_PRESSED:
                self._left_held = True
            elif action == InputAction.LEFT_RELEASED:
                self._left_held = False
            elif action == InputAction.RIGHT_PRESSED:
                self._right_held = True
            elif action == InputAction.RIGHT_RELEASED:
                self._right_held = False

        self._player.update_speed(self._left_held, self._right_held)

    def throw_knife(self) -> Knife:
        """Throw a knife from the player's head and show the attack look."""
        knife = Knife.thrown_by(self._player)
        self._knives.append(knife)
        self._player_look.set(PLAYER_LOOKS['attack'], self._clock(), config.ATTACK_LOOK_DURATION)
        log.trace("Knife thrown at x=%.1f", knife.x)
        return knife

    # =========================================================================
    # Tick
    # =========================================================================

    def update(self, dt: float) -> None:
        """Advance one fixed tick.

        Velocities are per tick, so dt is not used for motion; timers
        read the injected clock.
        """
        now = self._clock()

        self._snow.update()
        self._player_look.update(now)

        self._player.advance()
        for knife in self._knives:
            knife.advance()
        self._knives = compact(self._knives)

        # Hazards freeze outside PLAYING but keep rendering
        if self._session.is_playing:
            self._spawner.update_difficulty(now, self._fruits + self._bombs)
            self._drop_hazards(now)

            for hazard in self._fruits + self._bombs:
                hazard.advance()
            self._fruits = compact(self._fruits)
            self._bombs = compact(self._bombs)

            self._resolve_collisions(now)

        self._explosions = [e for e in self._explosions if not e.is_expired(now)]

    def _drop_hazards(self, now: float) -> None:
        if self._spawner.should_drop(HazardType.FRUIT, now):
            self._fruits.append(self._spawner.drop(HazardType.FRUIT, now))
        if self._spawner.should_drop(HazardType.BOMB, now):
            self._bombs.append(self._spawner.drop(HazardType.BOMB, now))

    def _resolve_collisions(self, now: float) -> None:
        """Knife/fruit, knife/bomb and bomb/floor passes, each compacted after."""
        for knife, fruit in find_hits(self._knives, self._fruits):
            score = self._session.add_points()
            log.debug("Fruit sliced at (%.0f, %.0f), score %d", fruit.x, fruit.y, score)
        self._knives = compact(self._knives)
        self._fruits = compact(self._fruits)

        for knife, bomb in find_hits(self._knives, self._bombs):
            self._explosions.append(Explosion.at_bomb(bomb, now))
            self._player_look.set(PLAYER_LOOKS['hurt'], now, config.HURT_LOOK_DURATION)
            log.debug("Knife hit a bomb at (%.0f, %.0f)", bomb.x, bomb.y)
            if self._session.lose_life():
                self._game_over()
                self._knives = compact(self._knives)
                return
        self._knives = compact(self._knives)
        self._bombs = compact(self._bombs)

        for bomb in find_floor_hits(self._bombs):
            log.debug("Bomb reached the floor at x=%.0f", bomb.x)
            if self._session.lose_life():
                self._game_over()
                return
        self._bombs = compact(self._bombs)

    def _game_over(self) -> None:
        self._fruits = []
        self._bombs = []
        self._explosions = []

    # =========================================================================
    # Rendering
    # =========================================================================

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, 28)
        return self._font

    def _get_font_large(self) -> pygame.font.Font:
        if self._font_large is None:
            self._font_large = pygame.font.Font(None, 64)
        return self._font_large

    def render(self, screen: pygame.Surface) -> None:
        """Draw the playfield. The screen is the logical-size surface."""
        self._render_background(screen)
        self._snow.render(screen)

        self._sprites.draw(screen, self._player, self._player_look.current)
        for entity in self._knives + self._fruits + self._bombs + self._explosions:
            self._sprites.draw(screen, entity)

        self._render_hud(screen)

        phase = self._session.phase
        if phase == GameState.READY:
            self._render_overlay(screen, "FRUIT FALL", "Press Enter to start")
        elif phase == GameState.PAUSED:
            self._render_overlay(screen, "PAUSED", "Press R to reset")
        elif phase == GameState.GAME_OVER:
            self._render_overlay(screen, "GAME OVER",
                                 f"Final score: {self._session.score} - press R to reset")

    def _render_background(self, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)
        image = self._sprites.get(config.BACKGROUND_IMAGE, screen.get_size())
        if image is not None:
            image.set_alpha(int(255 * config.BACKGROUND_ALPHA))
            screen.blit(image, (0, 0))

    def _render_hud(self, screen: pygame.Surface) -> None:
        font = self._get_font()
        x, y = 10, 10
        for line in self.hud().lines():
            text = font.render(line, True, config.HUD_COLOR)
            screen.blit(text, (x, y))
            y += text.get_height() + 4

    def _render_overlay(self, screen: pygame.Surface, title: str, subtitle: str) -> None:
        width, height = screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        screen.blit(overlay, (0, 0))

        center_x = width // 2
        y = height // 2 - 50

        text = self._get_font_large().render(title, True, config.HUD_COLOR)
        screen.blit(text, (center_x - text.get_width() // 2, y))
        y += 70

        text = self._get_font().render(subtitle, True, config.HUD_COLOR)
        screen.blit(text, (center_x - text.get_width() // 2, y))

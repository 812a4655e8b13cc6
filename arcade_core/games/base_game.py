"""Common interface for arcade games.

A game declares its metadata and command-line options as class
attributes, so launchers can list games and build parsers without
instantiating anything. A running game exposes its lifecycle through
``state`` and its control buttons through ``get_available_actions()`` and
``execute_action()``.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from arcade_core.games.game_state import GameState
from arcade_core.logging import get_logger

log = get_logger('base_game')

ArgumentSpec = Dict[str, Any]


class BaseGame(ABC):
    """Base class for a pygame arcade game.

    Subclasses fill in the metadata block and implement the abstract
    methods. ``state`` is derived from ``_get_internal_state()`` so games
    keep whatever internal phase bookkeeping they like.

    ARGUMENTS entries are keyword dicts for ``argparse.add_argument`` plus
    a ``name`` key holding the flag.
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = ""
    VERSION: str = "0.0.0"
    AUTHOR: str = ""

    ARGUMENTS: List[ArgumentSpec] = []

    # Options every game accepts; a game may redefine one by name
    COMMON_ARGUMENTS: List[ArgumentSpec] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible spawns',
        },
        {
            'name': '--log-level',
            'type': str,
            'default': None,
            'choices': ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
            'help': 'Global log level (overrides ARCADE_LOG_LEVEL)',
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[ArgumentSpec]:
        """Game options followed by the common ones, first definition wins."""
        merged: Dict[str, ArgumentSpec] = {}
        for arg in [*cls.ARGUMENTS, *cls.COMMON_ARGUMENTS]:
            merged.setdefault(arg['name'], arg)
        return list(merged.values())

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    def state(self) -> GameState:
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        ...

    @abstractmethod
    def get_score(self) -> int:
        ...

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Apply a batch of InputEvents gathered since the last tick."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance one tick; dt is the real elapsed time in seconds."""

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        ...

    def reset(self) -> None:
        """Return to the initial state. No-op unless overridden."""

    def get_available_actions(self) -> List[Dict[str, Any]]:
        """Control buttons valid right now, as dicts with id, label and style."""
        return []

    def execute_action(self, action_id: str) -> bool:
        """Run a control button. Returns False when the action is not handled."""
        log.debug("%s: ignoring action '%s'", self.NAME, action_id)
        return False

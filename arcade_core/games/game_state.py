"""Common GameState enum for arcade games.

All games report one of these states via their `state` property. The
launcher and HUD rely on these values, so games with richer internal
states must map them onto this enum.

Lifecycle:
    READY -> PLAYING      start command
    PLAYING -> PAUSED     pause command (no resume, reset required)
    PLAYING -> GAME_OVER  last life lost
    any -> READY          reset command
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        READY: Waiting for the start command
        PLAYING: Active gameplay in progress
        PAUSED: Frozen by the pause command
        GAME_OVER: Game ended, all lives lost
    """
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"

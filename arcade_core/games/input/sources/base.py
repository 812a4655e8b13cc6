"""
InputSource: the contract between an input backend and the game loop.
"""
from abc import ABC, abstractmethod
from typing import List

from arcade_core.games.input.input_event import InputEvent


class InputSource(ABC):
    """Collects device events once per frame and hands them out as InputEvents."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Drain the backend and queue translated events."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Events queued since the previous poll; the queue is emptied."""

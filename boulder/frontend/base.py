from __future__ import annotations

from abc import ABC, abstractmethod

from boulder.common.models import ViewSnapshot
from boulder.common.types import Sound


class InputSource(ABC):
    """Non-blocking key source."""

    @abstractmethod
    def poll(self) -> int | None:
        """Return the next key code, or None when nothing was pressed."""
        raise NotImplementedError


class SoundSink(ABC):
    @abstractmethod
    def play(self, sound: Sound) -> None:
        raise NotImplementedError


class Screen(ABC):
    @abstractmethod
    def draw(self, view: ViewSnapshot) -> None:
        raise NotImplementedError

"""High score persistence interface.

The engine only needs two operations from storage: read the best score and
write a new one.  Anything offering ``read_high_score``/``write_high_score``
can be plugged into :class:`~tetris_core.session.GameSession`.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol


LOGGER = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def read_high_score(self) -> Optional[int]:
        ...

    def write_high_score(self, score: int) -> None:
        ...


class MemoryHighScoreStore:
    """Keep the high score in memory for the lifetime of the process."""

    def __init__(self, score: Optional[int] = None) -> None:
        self.score = score
        self.writes = 0

    def read_high_score(self) -> Optional[int]:
        return self.score

    def write_high_score(self, score: int) -> None:
        self.score = score
        self.writes += 1


def read_high_score(store: HighScoreStore) -> int:
    """Return the stored high score, falling back to ``0``.

    Missing, negative or unreadable values are treated as ``0`` so a broken
    store never stops a game from starting.
    """

    try:
        value = store.read_high_score()
    except (OSError, ValueError, TypeError) as exc:
        LOGGER.warning("Could not read high score, using 0: %s", exc)
        return 0
    if value is None:
        return 0
    try:
        score = int(value)
    except (TypeError, ValueError):
        LOGGER.warning("Ignoring invalid stored high score %r", value)
        return 0
    return max(score, 0)


def write_high_score(store: HighScoreStore, score: int) -> bool:
    """Persist ``score`` and return whether the store accepted it."""

    try:
        store.write_high_score(score)
    except OSError as exc:
        LOGGER.warning("Could not save high score %d: %s", score, exc)
        return False
    return True

"""Command input: key bindings and timed event streams.

Commands reach the engine from two producers, a fixed-rate timer and the
keyboard.  Both are modelled here as streams of ``(timestamp_ms, command)``
pairs which :func:`merge_events` combines into the single ordered sequence
the reducer consumes.
"""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .commands import Command, Move, Restart, Rotate, Tick


# Milliseconds between timer ticks.
TICK_RATE_MS = 500

KEY_BINDINGS: Dict[str, Command] = {
    "KeyA": Move(-1, 0),
    "KeyD": Move(1, 0),
    "KeyS": Move(0, 1),
    "KeyW": Rotate(),
    "Enter": Restart(),
}

Event = Tuple[float, Command]


def command_for_key(code: str) -> Optional[Command]:
    """Return the command bound to ``code`` or ``None`` if it is unbound."""

    return KEY_BINDINGS.get(code)


def timer_events(interval_ms: float, count: int) -> Iterator[Event]:
    """Yield ``count`` ticks spaced ``interval_ms`` apart, the first after one interval."""

    for n in range(count):
        yield (n + 1) * interval_ms, Tick(n)


def key_events(presses: Iterable[Tuple[float, str]]) -> Iterator[Event]:
    """Translate ``(timestamp_ms, code)`` presses into command events.

    Presses of unbound keys are dropped.
    """

    for ts, code in presses:
        command = command_for_key(code)
        if command is not None:
            yield ts, command


def _tag(stream: Iterable[Event], index: int) -> Iterator[Tuple[float, int, Command]]:
    for ts, command in stream:
        yield ts, index, command


def merge_events(*streams: Iterable[Event]) -> Iterator[Command]:
    """Merge time-ordered event streams into one command sequence.

    Events are ordered by timestamp.  When two events share a timestamp the
    one from the earlier stream comes first.
    """

    tagged = [_tag(stream, index) for index, stream in enumerate(streams)]
    for _, _, command in heapq.merge(*tagged, key=lambda item: item[:2]):
        yield command

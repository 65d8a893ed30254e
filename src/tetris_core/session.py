"""Game session: owns the reducer loop and talks to the outside world.

:class:`GameSession` holds the current :class:`GameState`, applies commands
one at a time and passes each new snapshot to its listeners (renderers).  It
reads the high score from a store when a game starts and writes it back
whenever it improves, so the reducer itself never touches storage.

The session can be driven synchronously with :meth:`GameSession.dispatch` and
:meth:`GameSession.press`, or by the asyncio loop in :meth:`GameSession.run`
which merges a tick timer and submitted key presses into one queue.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import random
from dataclasses import replace
from typing import Callable, List, Optional

from .commands import Command, Restart, Tick, reduce_state
from .controls import TICK_RATE_MS, command_for_key
from .game_state import GameState, initial_state
from .highscore import (
    HighScoreStore,
    MemoryHighScoreStore,
    read_high_score,
    write_high_score,
)


LOGGER = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameSession:
    """Run one player's games from start to stop."""

    def __init__(
        self,
        store: Optional[HighScoreStore] = None,
        *,
        tick_ms: float = TICK_RATE_MS,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store: HighScoreStore = store if store is not None else MemoryHighScoreStore()
        self.tick_ms = tick_ms
        self._rng = rng or random.Random()
        self._listeners: List[Listener] = []
        self._queue: Optional[asyncio.Queue] = None
        self._running = False
        self._ticks = 0
        self.state = initial_state(read_high_score(self.store), self._rng)
        LOGGER.info("Game started (high score %d)", self.state.highscore)

    @property
    def running(self) -> bool:
        return self._running

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new state; return an unsubscribe function."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Synchronous API --------------------------------------------------
    def dispatch(self, command: Command) -> GameState:
        """Apply ``command`` to the current state and return the new state."""

        if isinstance(command, Restart):
            command = replace(command, highscore=read_high_score(self.store))
        previous = self.state
        state = reduce_state(previous, command, self._rng)
        self.state = state
        self._report(previous, state, command)
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                LOGGER.exception("State listener %r failed", listener)
        return state

    def press(self, code: str) -> GameState:
        """Dispatch the command bound to key ``code``; unbound keys do nothing."""

        command = command_for_key(code)
        if command is None:
            LOGGER.debug("Ignoring unbound key %r", code)
            return self.state
        return self.dispatch(command)

    def _report(self, previous: GameState, state: GameState, command: Command) -> None:
        if isinstance(command, Restart):
            LOGGER.info("Game restarted (high score %d)", state.highscore)
            return
        if state.score > previous.score:
            LOGGER.info("Cleared a row. Score: %d", state.score)
        if state.highscore > previous.highscore:
            LOGGER.info("New high score: %d", state.highscore)
            write_high_score(self.store, state.highscore)
        if state.game_end and not previous.game_end:
            LOGGER.info("Game over. Score: %d", state.score)

    # Asynchronous driver ----------------------------------------------
    def submit(self, command: Command) -> None:
        """Queue ``command`` for the running loop."""

        if not self._running or self._queue is None:
            LOGGER.debug("Dropping %r: session not running", command)
            return
        self._queue.put_nowait(command)

    def submit_key(self, code: str) -> None:
        command = command_for_key(code)
        if command is None:
            LOGGER.debug("Ignoring unbound key %r", code)
            return
        self.submit(command)

    async def _timer(self) -> None:
        while self._running:
            await asyncio.sleep(self.tick_ms / 1000.0)
            self.submit(Tick(self._ticks))
            self._ticks += 1

    async def run(self) -> GameState:
        """Process ticks and submitted commands until :meth:`stop` is called.

        Commands are applied strictly in the order they were queued.  Returns
        the last state.

        Raises:
            RuntimeError: If the session is already running.
        """

        if self._running:
            raise RuntimeError("Session already running")
        self._queue = asyncio.Queue()
        self._running = True
        timer = asyncio.get_running_loop().create_task(self._timer())
        try:
            while self._running:
                command = await self._queue.get()
                if command is None or not self._running:
                    break
                self.dispatch(command)
        finally:
            self._running = False
            timer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await timer
            self._queue = None
            LOGGER.info("Session stopped")
        return self.state

    def stop(self) -> None:
        """Stop the loop; commands still waiting in the queue are dropped."""

        if not self._running:
            LOGGER.info("Stop ignored: session not running")
            return
        self._running = False
        if self._queue is not None:
            self._queue.put_nowait(None)

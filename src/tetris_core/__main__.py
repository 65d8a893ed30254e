"""Headless demo for the engine.

Run with: `python -m tetris_core`

Plays a scripted game: a timer stream and a stream of random key presses are
merged and fed through a :class:`~tetris_core.session.GameSession`.  The final
frame is printed as text, useful as a minimal smoke test of the whole
pipeline.  Pass ``--help`` to see the options.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Iterator, List, Optional, Tuple

from .controls import TICK_RATE_MS, key_events, merge_events, timer_events
from .game_state import GameState
from .highscore import MemoryHighScoreStore
from .session import GameSession
from .utils import render_grid


LOGGER = logging.getLogger(__name__)

DEMO_KEYS = ("KeyA", "KeyD", "KeyS", "KeyW")


def random_presses(rng: random.Random, duration_ms: float, count: int) -> Iterator[Tuple[float, str]]:
    """Yield ``count`` random presses spread over ``duration_ms``, in time order."""

    times = sorted(rng.uniform(0, duration_ms) for _ in range(count))
    for ts in times:
        yield ts, rng.choice(DEMO_KEYS)


def simulate(ticks: int, *, seed: Optional[int] = None, highscore: int = 0, presses: int = 0) -> GameState:
    """Play ``ticks`` timer steps with ``presses`` random key presses mixed in."""

    rng = random.Random(seed)
    session = GameSession(MemoryHighScoreStore(highscore), rng=rng)
    duration = ticks * TICK_RATE_MS
    commands = merge_events(
        timer_events(TICK_RATE_MS, ticks),
        key_events(random_presses(rng, duration, presses)),
    )
    for command in commands:
        session.dispatch(command)
        if session.state.game_end:
            break
    LOGGER.info(
        "Finished: score=%d highscore=%d game_end=%s",
        session.state.score,
        session.state.highscore,
        session.state.game_end,
    )
    return session.state


def format_frame(state: GameState) -> List[str]:
    frame = render_grid(state.grid, state.current_piece)
    return ["".join("#" if cell else "." for cell in row) for row in frame]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--ticks", type=int, default=200, help="Number of timer ticks to play.")
    parser.add_argument("--presses", type=int, default=300, help="Number of random key presses.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pieces and key presses.")
    parser.add_argument("--highscore", type=int, default=0, help="High score to start from.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    state = simulate(args.ticks, seed=args.seed, highscore=args.highscore, presses=args.presses)
    for line in format_frame(state):
        print(line)
    print(f"Score: {state.score}  High score: {state.highscore}")


if __name__ == "__main__":
    main()

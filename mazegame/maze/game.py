"""Command line front end for playing a maze."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .evaluator import MazeEvaluator
from .grid import Direction
from .render import MazeRenderer, render_ascii
from .session import Difficulty, MazeSession

WIN_MESSAGE = "Congratulations! You've solved the maze!"
HELP_TEXT = "Commands: up/right/down/left (or w/d/s/a), solve, easy/medium/hard, quit"


def draw(session: MazeSession) -> str:
    return render_ascii(session.grid, session.player, session.solution)


def handle_command(session: MazeSession, command: str) -> Optional[str]:
    """Apply one interactive command and return the text to show, or None to quit."""

    word = command.strip().lower()
    if not word:
        return draw(session)
    if word in ("quit", "exit", "q"):
        return None
    if word == "help":
        return HELP_TEXT
    if word == "solve":
        session.show_solution()
        return draw(session)
    if word.upper() in Difficulty.__members__:
        session.set_difficulty(word)
        return draw(session)
    try:
        direction = Direction.parse(word)
    except ValueError:
        return f"Unknown command '{command.strip()}'. {HELP_TEXT}"
    if not session.move(direction):
        return "Blocked."
    board = draw(session)
    if session.has_won:
        return f"{board}\n{WIN_MESSAGE}"
    return board


def play(session: MazeSession, commands: Iterable[str], *, snapshot: Optional[Path] = None) -> None:
    renderer = MazeRenderer()
    print(draw(session))
    print(HELP_TEXT)
    for command in commands:
        output = handle_command(session, command)
        if output is None:
            break
        print(output)
        if snapshot is not None:
            renderer.save(session.grid, snapshot, player=session.player, solution=session.solution)


def _parse_moves(value: str) -> List[Direction]:
    try:
        return [Direction.parse(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate, navigate and solve a maze")
    parser.add_argument(
        "--difficulty",
        choices=[level.name.lower() for level in Difficulty],
        default="easy",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--moves",
        type=_parse_moves,
        default=[],
        help="Comma separated moves to apply, e.g. right,down,down",
    )
    parser.add_argument("--solve", action="store_true", help="Reveal the shortest solution")
    parser.add_argument("--image", type=Path, default=None, help="Write a PNG snapshot of the final board")
    parser.add_argument("--interactive", action="store_true", help="Read commands from stdin")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    session = MazeSession(args.difficulty, seed=args.seed)

    if args.interactive:
        play(session, sys.stdin, snapshot=args.image)
        return

    for direction in args.moves:
        session.move(direction)
    if args.solve:
        session.show_solution()

    print(draw(session))
    result = MazeEvaluator().evaluate(session.grid, session.trail)
    print(json.dumps(result.to_dict(), indent=2))
    if session.has_won:
        print(WIN_MESSAGE)
    if args.image is not None:
        MazeRenderer().save(session.grid, args.image, player=session.player, solution=session.solution)


if __name__ == "__main__":
    main()

"""Command-line entry point: read a disk count from stdin and print the moves."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, List, Optional, TextIO

from .env import IllegalMoveError, Towers
from .logger import MoveLogger
from .solver import Move, iter_moves, move_count, plan_moves

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanoi-moves",
        description="Read a disk count from standard input and print the three-peg solution moves.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Replay the moves on a peg simulator and exit 1 if the result is not solved",
    )
    parser.add_argument("--trace", metavar="PATH", help="Write per-move frames as JSON to PATH")
    parser.add_argument(
        "--iterative",
        action="store_true",
        help="Enumerate with an explicit work stack instead of recursion",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def read_disk_count(parser: argparse.ArgumentParser, stream: TextIO) -> int:
    """Parse the first whitespace-delimited token of ``stream`` as the disk count.

    Lines are consumed only up to the first non-blank one, so an interactive
    session answers as soon as Enter is pressed.
    """
    tokens: List[str] = []
    while not tokens:
        line = stream.readline()
        if not line:
            break
        tokens = line.split()
    if not tokens:
        parser.error("expected a disk count on standard input")
    try:
        n = int(tokens[0])
    except ValueError:
        parser.error(f"disk count must be an integer (got {tokens[0]!r})")
    if n < 0:
        parser.error(f"disk count must be non-negative (got {n})")
    return n


def _detach_stdout() -> None:
    """Point stdout at devnull so the interpreter's exit-time flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    n = read_disk_count(parser, sys.stdin)
    log.info("solving for %d disks", n)

    moves: Iterable[Move] = iter_moves(n) if args.iterative else plan_moves(n)
    towers = Towers(n) if (args.verify or args.trace) else None
    tracer = MoveLogger() if args.trace else None
    failure: Optional[IllegalMoveError] = None

    total = move_count(n)
    if tracer is not None:
        tracer.header(n, total)

    out = sys.stdout
    try:
        out.write(f"{total}\n")
        for index, mv in enumerate(moves, start=1):
            out.write(f"{mv}\n")
            if towers is None:
                continue
            if not towers.move(mv.from_peg, mv.to_peg) and failure is None:
                failure = IllegalMoveError(index, mv)
            if tracer is not None:
                tracer.record(index, mv, towers.snapshot())
        out.flush()
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); stop without a traceback.
        log.debug("stdout closed after partial output")
        _detach_stdout()
        return 1

    if tracer is not None:
        tracer.to_json(args.trace)
        log.info("wrote %d frames to %s", len(tracer.events), args.trace)

    if args.verify:
        if failure is not None:
            log.error("%s", failure)
            return 1
        if not towers.is_goal():
            log.error("replay finished without all %d disks on the destination peg", n)
            return 1
        log.info("verified %d moves", towers.moves)
    return 0


if __name__ == "__main__":
    sys.exit(main())

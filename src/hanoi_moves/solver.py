"""Canonical recursive move enumeration for the three-peg puzzle."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

log = logging.getLogger(__name__)

SOURCE, AUXILIARY, DESTINATION = 1, 2, 3


@dataclass(frozen=True)
class Move:
    """Relocation of the top disk from one peg to another."""

    from_peg: int
    to_peg: int

    def __iter__(self) -> Iterator[int]:
        yield self.from_peg
        yield self.to_peg

    def __str__(self) -> str:
        return f"{self.from_peg} {self.to_peg}"


def move_count(n: int) -> int:
    """Number of moves needed for ``n`` disks: 2**n - 1."""
    if n < 0:
        raise ValueError(f"Disk count must be non-negative (got {n})")
    return (1 << n) - 1


def _check(n: int, pegs: Tuple[int, int, int]) -> None:
    if n < 0:
        raise ValueError(f"Disk count must be non-negative (got {n})")
    if len(set(pegs)) != 3:
        raise ValueError(f"Peg labels must be distinct (got {pegs})")


def _recurse(n: int, moves: List[Move], source: int, auxiliary: int, destination: int) -> None:
    if n == 0:
        return
    _recurse(n - 1, moves, source, destination, auxiliary)
    moves.append(Move(source, destination))
    _recurse(n - 1, moves, auxiliary, source, destination)


def enumerate_moves(
    n: int,
    moves: List[Move],
    source: int = SOURCE,
    auxiliary: int = AUXILIARY,
    destination: int = DESTINATION,
) -> None:
    """
    Append the moves transferring ``n`` disks from ``source`` to ``destination``.

    The n-1 smaller disks go to ``auxiliary`` first (with ``destination`` as the
    spare), then the largest disk moves, then the n-1 disks go from ``auxiliary``
    onto it (with ``source`` as the spare). Exactly 2**n - 1 moves are appended;
    the list is only ever extended, never read or reordered.
    """
    _check(n, (source, auxiliary, destination))
    before = len(moves)
    _recurse(n, moves, source, auxiliary, destination)
    log.debug("enumerated %d moves for n=%d (%d -> %d)", len(moves) - before, n, source, destination)


def plan_moves(
    n: int,
    source: int = SOURCE,
    auxiliary: int = AUXILIARY,
    destination: int = DESTINATION,
) -> List[Move]:
    """Return a fresh list holding the full move sequence for ``n`` disks."""
    plan: List[Move] = []
    enumerate_moves(n, plan, source, auxiliary, destination)
    return plan


def iter_moves(
    n: int,
    source: int = SOURCE,
    auxiliary: int = AUXILIARY,
    destination: int = DESTINATION,
) -> Iterator[Move]:
    """
    Yield the same sequence as :func:`plan_moves` using an explicit work stack.

    Depth is bounded by the stack list rather than the interpreter's recursion
    limit, and moves are produced lazily.
    """
    _check(n, (source, auxiliary, destination))
    # (disks, source, auxiliary, destination, emit) ; emit frames carry the single move
    stack: List[Tuple[int, int, int, int, bool]] = [(n, source, auxiliary, destination, False)]
    while stack:
        k, src, aux, dst, emit = stack.pop()
        if emit:
            yield Move(src, dst)
            continue
        if k == 0:
            continue
        # Pushed in reverse so the left subtree is popped first.
        stack.append((k - 1, aux, src, dst, False))
        stack.append((k, src, aux, dst, True))
        stack.append((k - 1, src, dst, aux, False))

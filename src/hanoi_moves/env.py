"""Peg simulator used to replay and verify move sequences."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .solver import Move


class IllegalMoveError(ValueError):
    """Raised when a replayed move breaks the puzzle rules."""

    def __init__(self, index: int, move: Move):
        super().__init__(f"Illegal move #{index}: {move.from_peg} -> {move.to_peg}")
        self.index = index
        self.move = move


@dataclass
class Towers:
    """Three pegs with deterministic transitions; disks are numbered 1 (smallest) to n."""

    n: int
    labels: Tuple[int, int, int] = (1, 2, 3)
    pegs: Dict[int, List[int]] = field(init=False)
    moves: int = field(default=0, init=False)
    history: List[Move] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"Disk count must be non-negative (got {self.n})")
        if len(set(self.labels)) != 3:
            raise ValueError(f"Peg labels must be distinct (got {self.labels})")
        # First peg starts with all disks (largest at bottom, smallest at top).
        self.pegs = {label: [] for label in self.labels}
        self.pegs[self.labels[0]] = list(reversed(range(1, self.n + 1)))

    def legal(self, src: int, dst: int) -> bool:
        """Return True iff moving the top disk from src to dst is legal."""
        if src == dst:
            return False
        if src not in self.pegs or dst not in self.pegs:
            return False
        if not self.pegs[src]:
            return False
        if not self.pegs[dst]:
            return True
        return self.pegs[src][-1] < self.pegs[dst][-1]

    def move(self, src: int, dst: int) -> bool:
        """Attempt to move a disk; returns True on success, False otherwise."""
        if not self.legal(src, dst):
            return False
        disk = self.pegs[src].pop()
        self.pegs[dst].append(disk)
        self.moves += 1
        self.history.append(Move(src, dst))
        return True

    def apply(self, moves: Iterable[Move]) -> int:
        """Replay ``moves`` in order and return how many were applied."""
        applied = 0
        for index, mv in enumerate(moves, start=1):
            if not self.move(mv.from_peg, mv.to_peg):
                raise IllegalMoveError(index, mv)
            applied += 1
        return applied

    def is_goal(self, destination: int | None = None) -> bool:
        """Check whether every disk sits on ``destination`` (default: last label)."""
        target = self.labels[-1] if destination is None else destination
        if target not in self.pegs:
            return False
        return len(self.pegs[target]) == self.n

    def snapshot(self) -> Dict[str, List[int]]:
        return {str(label): list(disks) for label, disks in self.pegs.items()}

    def __str__(self) -> str:
        """Render the pegs as ASCII rows (top row first)."""
        levels = []
        for level in range(self.n - 1, -1, -1):
            row = []
            for label in self.labels:
                peg = self.pegs[label]
                if len(peg) > level:
                    row.append(str(peg[level]).rjust(2))
                else:
                    row.append(" |")
            levels.append("  ".join(row))
        names = "  ".join(str(label).rjust(2) for label in self.labels)
        return "\n".join(levels + [names])

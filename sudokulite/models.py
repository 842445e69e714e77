from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional


PLACEHOLDERS = ".0"


# -----------------------------
# Errors
# -----------------------------

class SudokuError(Exception):
    """Base class for every error raised by sudokulite."""


class InvalidInputError(SudokuError, ValueError):
    """Puzzle string or size that cannot describe an N x N grid."""


class ContradictionError(SudokuError):
    """A candidate set collapsed to empty (or two peers hold the same value)."""


class NoSolutionError(SudokuError):
    """No branch of the search yields a solution."""


class GenerationError(SudokuError):
    """No uniquely solvable puzzle within the allowed attempts."""


# -----------------------------
# Grid
# -----------------------------

def parse_value(ch: str) -> int:
    # '1'..'9' then 'A'..'G' for 16x16
    return int(ch, 36)


def format_value(v: int) -> str:
    return str(v) if v < 10 else chr(ord("A") + v - 10)


def box_size_of(length: int) -> int:
    """Validate N and return the box size (isqrt(N))."""
    base = math.isqrt(length) if length > 0 else 0
    if base == 0 or base * base != length:
        raise InvalidInputError(
            f"Invalid size: {length}. Only perfect squares are supported (4, 9, 16, ...)."
        )
    return base


@dataclass
class Grid:
    length: int                                           # N
    cells: List[List[int]] = field(default_factory=list)  # N*N ascending candidate lists

    @staticmethod
    def empty(length: int) -> "Grid":
        box_size_of(length)
        return Grid(length, [list(range(1, length + 1)) for _ in range(length * length)])

    @staticmethod
    def from_string(length: int, cell_string: str) -> "Grid":
        """
        Placeholders ('.' or '0') get every candidate 1..N,
        digits become a singleton candidate list.
        """
        if len(cell_string) != length * length:
            raise InvalidInputError(
                f"Puzzle has {len(cell_string)} cells, expected {length * length} for size {length}."
            )
        box_size_of(length)

        cells: List[List[int]] = []
        for ch in cell_string:
            if ch in PLACEHOLDERS:
                cells.append(list(range(1, length + 1)))
            else:
                cells.append([parse_value(ch)])
        return Grid(length, cells)

    @property
    def size(self) -> int:
        return self.length * self.length

    @property
    def box_size(self) -> int:
        return box_size_of(self.length)

    def is_solved(self) -> bool:
        return all(len(cands) == 1 for cands in self.cells)

    def is_contradictory(self) -> bool:
        return any(len(cands) == 0 for cands in self.cells)

    def value_at(self, cell: int) -> Optional[int]:
        cands = self.cells[cell]
        return cands[0] if len(cands) == 1 else None

    def copy(self) -> "Grid":
        # Deep copy: branches must never share a candidate list
        return Grid(self.length, [list(cands) for cands in self.cells])

    def to_string(self) -> str:
        out = []
        for cands in self.cells:
            out.append(format_value(cands[0]) if len(cands) == 1 else ".")
        return "".join(out)


# -----------------------------
# Search bookkeeping
# -----------------------------

@dataclass
class SearchStats:
    branches: int = 0        # candidates tried on a copied grid
    contradictions: int = 0  # branches pruned
    solutions: int = 0

from __future__ import annotations

import logging
from typing import List, Optional

from .models import ContradictionError, Grid, NoSolutionError, SearchStats
from .peers import peers_of


logger = logging.getLogger(__name__)


# -----------------------------
# Propagation
# -----------------------------

def _propagate(grid: Grid, fixed: List[int]) -> None:
    """
    Drain a worklist of solved cells, removing each cell's value from its peers.
    A peer collapsing to a single candidate is pushed and handled before the
    rest of the list (depth-first). Raises ContradictionError.
    """
    cells = grid.cells
    while fixed:
        cell = fixed.pop()
        value = cells[cell][0]
        for peer in peers_of(cell, grid.length):
            cands = cells[peer]
            if value not in cands:
                continue
            if len(cands) == 1:
                raise ContradictionError(f"Cells {cell} and {peer} are both fixed to {value}.")
            cands.remove(value)
            if len(cands) == 1:
                fixed.append(peer)


def eliminate(grid: Grid) -> bool:
    """
    Naked-single elimination to a fixed point, in place.
    Returns False when the grid turns out to be contradictory.
    """
    if grid.is_contradictory():
        return False

    # Reversed so cells are popped in ascending index order
    fixed = [cell for cell in range(grid.size - 1, -1, -1) if len(grid.cells[cell]) == 1]
    try:
        _propagate(grid, fixed)
    except ContradictionError as e:
        logger.debug("Propagation failed: %s", e)
        return False
    return True


def assign(grid: Grid, cell: int, value: int) -> None:
    """Fix `cell` to `value` and cascade the removal into its peers."""
    if value not in grid.cells[cell]:
        raise ContradictionError(f"{value} is not a candidate of cell {cell}.")
    grid.cells[cell] = [value]
    _propagate(grid, [cell])


# -----------------------------
# Search
# -----------------------------

def _branch_cell(grid: Grid) -> int:
    # Fewest candidates first; min() keeps the lowest index on ties
    unsolved = [c for c in range(grid.size) if len(grid.cells[c]) > 1]
    return min(unsolved, key=lambda c: len(grid.cells[c]))


def _search(
    grid: Grid,
    max_solutions: int,
    solutions: List[Grid],
    stats: Optional[SearchStats],
) -> None:
    # `grid` is already propagated and contradiction free
    if grid.is_solved():
        logger.debug("Solution found")
        solutions.append(grid)
        if stats is not None:
            stats.solutions += 1
        return

    cell = _branch_cell(grid)
    for candidate in grid.cells[cell]:
        logger.debug("Testing candidate %d at cell %d", candidate, cell)
        if stats is not None:
            stats.branches += 1

        branch = grid.copy()
        try:
            assign(branch, cell, candidate)
        except ContradictionError as e:
            logger.debug("Pruned: %s", e)
            if stats is not None:
                stats.contradictions += 1
            continue

        _search(branch, max_solutions, solutions, stats)
        if len(solutions) >= max_solutions:
            return


def search(
    grid: Grid,
    max_solutions: int,
    solutions: List[Grid],
    stats: Optional[SearchStats] = None,
) -> None:
    """
    Propagate `grid` (in place), then backtrack over the remaining ambiguity.
    Solved grids are appended to `solutions`; the search unwinds as soon as it
    holds `max_solutions` of them.
    """
    if not eliminate(grid):
        if stats is not None:
            stats.contradictions += 1
        return
    _search(grid, max_solutions, solutions, stats)


def find_solutions(
    grid: Grid,
    max_solutions: int,
    stats: Optional[SearchStats] = None,
) -> List[Grid]:
    """Up to `max_solutions` distinct solutions of `grid`. `grid` is left untouched."""
    if max_solutions < 1:
        raise ValueError(f"max_solutions must be at least 1, got {max_solutions}.")
    solutions: List[Grid] = []
    search(grid.copy(), max_solutions, solutions, stats)
    return solutions


# -----------------------------
# Solve API
# -----------------------------

def solve_all(puzzle: str, length: int, max_solutions: int) -> List[Grid]:
    return find_solutions(Grid.from_string(length, puzzle), max_solutions)


def solve(puzzle: str, length: int) -> Grid:
    solutions = solve_all(puzzle, length, 1)
    if not solutions:
        raise NoSolutionError("No solution exists.")
    return solutions[0]

from __future__ import annotations

import logging
import random
from typing import Dict, Optional, Tuple

from .engine import assign, find_solutions
from .models import ContradictionError, GenerationError, Grid


logger = logging.getLogger(__name__)


def _seed_grid(length: int, num_starting_cells: int, rng: random.Random) -> Optional[Tuple[Grid, Dict[int, int]]]:
    """
    Assign random candidates to random unsolved cells of an empty grid.
    Returns the propagated grid and the seeded givens, or None on contradiction.
    """
    grid = Grid.empty(length)
    givens: Dict[int, int] = {}

    for _ in range(num_starting_cells):
        if grid.is_solved():
            break

        unsolved = [c for c in range(grid.size) if len(grid.cells[c]) > 1]
        cell = rng.choice(unsolved)
        value = rng.choice(grid.cells[cell])

        seeded = grid.copy()
        try:
            assign(seeded, cell, value)
        except ContradictionError as e:
            logger.debug("Seeding failed: %s", e)
            return None

        grid = seeded
        givens[cell] = value

    return grid, givens


def generate(
    length: int,
    num_starting_cells: int,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> Tuple[Grid, Grid]:
    """
    Returns (solution, puzzle). The puzzle holds only the randomly seeded
    givens; cells that propagation forced are blanked again, so its unique
    completion is `solution`.
    """
    if not 0 <= num_starting_cells <= length * length:
        raise ValueError(
            f"num_starting_cells must be within 0..{length * length}, got {num_starting_cells}."
        )
    rng = rng or random.Random()

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        logger.debug("Trying new puzzle (attempt %d)", attempts)

        seeded = _seed_grid(length, num_starting_cells, rng)
        if seeded is None:
            continue
        grid, givens = seeded

        solutions = find_solutions(grid, 2)
        if len(solutions) != 1:
            logger.debug("Rejected: %d solution(s)", len(solutions))
            continue

        puzzle = Grid.empty(length)
        for cell, value in givens.items():
            puzzle.cells[cell] = [value]

        logger.info("Generated puzzle with %d givens after %d attempt(s)", len(givens), attempts)
        return solutions[0], puzzle

    raise GenerationError(f"No uniquely solvable puzzle found in {max_attempts} attempt(s).")

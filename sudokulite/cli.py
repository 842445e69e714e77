from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from .config import Settings, load_settings
from .engine import solve_all
from .generator import generate
from .models import Grid, SudokuError
from .render import render, render_boxed


logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokulite",
        description="Solve or generate N x N Sudoku puzzles (constraint propagation + backtracking).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search progress (DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Solve a puzzle given as a string of N*N cells")
    p_solve.add_argument("puzzle", help="Digits 1..N, with '.' or '0' for empty cells")
    p_solve.add_argument("--size", type=int, default=settings.size, help="Grid size N")
    p_solve.add_argument(
        "--max-solutions", type=int, default=settings.max_solutions,
        help="Stop after this many distinct solutions",
    )
    p_solve.add_argument("--boxed", action="store_true", help="Draw box separators")

    p_gen = sub.add_parser("generate", help="Generate a puzzle with a unique solution")
    p_gen.add_argument("--size", type=int, default=settings.size, help="Grid size N")
    p_gen.add_argument(
        "--starting-cells", type=int, default=settings.starting_cells,
        help="Number of randomly seeded cells",
    )
    p_gen.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    p_gen.add_argument("--max-attempts", type=int, default=None, help="Give up after this many attempts")
    p_gen.add_argument("--boxed", action="store_true", help="Draw box separators")

    return parser


def _show(grid: Grid, boxed: bool) -> str:
    return render_boxed(grid) if boxed else render(grid)


def run_solve(args: argparse.Namespace) -> int:
    solutions = solve_all(args.puzzle, args.size, args.max_solutions)
    if not solutions:
        print("No solution exists.")
        return 1

    for i, grid in enumerate(solutions, start=1):
        if len(solutions) > 1:
            print(f"Solution {i}:")
        print(_show(grid, args.boxed))
        print()
    return 0


def run_generate(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    solution, puzzle = generate(args.size, args.starting_cells, rng=rng, max_attempts=args.max_attempts)

    print("Puzzle:")
    print(_show(puzzle, args.boxed))
    print()
    print("Solution:")
    print(_show(solution, args.boxed))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "solve":
            return run_solve(args)
        return run_generate(args)
    except (SudokuError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

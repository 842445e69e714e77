from __future__ import annotations

from typing import List

from .models import Grid, format_value


def cell_symbol(cands: List[int]) -> str:
    if len(cands) == 1:
        return format_value(cands[0])
    if not cands:
        return "."  # contradiction
    return "0"      # still ambiguous


def render(grid: Grid) -> str:
    n = grid.length
    rows = []
    for r in range(n):
        rows.append(" ".join(cell_symbol(grid.cells[r * n + c]) for c in range(n)))
    return "\n".join(rows)


def render_boxed(grid: Grid) -> str:
    """
    Same symbols as render(), with '|' between box columns and a
    '-+-' rule between box bands.
    """
    n = grid.length
    base = grid.box_size

    lines: List[str] = []
    for r in range(n):
        if r > 0 and r % base == 0:
            lines.append("-+-".join(["-" * (2 * base - 1)] * base))
        groups = []
        for g in range(base):
            cols = range(g * base, (g + 1) * base)
            groups.append(" ".join(cell_symbol(grid.cells[r * n + c]) for c in cols))
        lines.append(" | ".join(groups))
    return "\n".join(lines)

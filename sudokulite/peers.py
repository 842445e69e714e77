from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from .models import box_size_of


def box_index(cell: int, length: int, base: int) -> int:
    r, c = divmod(cell, length)
    return (r // base) * base + (c // base)


@lru_cache(maxsize=None)
def peers_of(cell: int, length: int) -> Tuple[int, ...]:
    """
    All cells sharing a row, column or box with `cell`, excluding the cell itself.
    Ascending order; fixed for a given N so the result is cached.
    """
    base = box_size_of(length)
    row, col = divmod(cell, length)
    box = box_index(cell, length, base)

    peers = []
    for other in range(length * length):
        if other == cell:
            continue
        r, c = divmod(other, length)
        if r == row or c == col or box_index(other, length, base) == box:
            peers.append(other)
    return tuple(peers)

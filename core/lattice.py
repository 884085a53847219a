# core/lattice.py
from __future__ import annotations
from typing import Optional, Tuple

# A lattice point: one position per input string, None = unreachable / root.
Point = Tuple[Optional[int], ...]

# Sentinel stored in the numpy tables ("no further occurrence").
NO_POS = -1


def root_point(d: int) -> Point:
    """Synthetic start point, father of every starting point."""
    return (None,) * int(d)


def is_root(p: Point) -> bool:
    return all(x is None for x in p)


def as_position(v) -> Optional[int]:
    v = int(v)
    return None if v == NO_POS else v


def to_linear_index(i: int, j: int, d: int) -> int:
    # (i, j) pair -> flat index into the d*d matrix list
    return i * d + j

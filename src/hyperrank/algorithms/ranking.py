from __future__ import annotations

import functools
import math
from typing import Iterable, List, Tuple, TypeVar

Score = TypeVar("Score", int, float)
Ranked = List[Tuple[str, Score]]


def _descending(a: Tuple[str, float], b: Tuple[str, float]) -> int:
    x, y = a[1], b[1]
    if isinstance(x, float) and math.isnan(x) or isinstance(y, float) and math.isnan(y):
        return 0
    if x > y:
        return -1
    if x < y:
        return 1
    return 0


def rank(pairs: Iterable[Tuple[str, Score]]) -> Ranked:
    """Sort ``(node, score)`` pairs by score, highest first.

    The sort is stable, so equal scores keep their input order. NaN compares
    equal to everything.
    """
    return sorted(pairs, key=functools.cmp_to_key(_descending))


def top(ranked: Ranked, k: int) -> Ranked:
    """First ``k`` entries of a ranked table (all of it when shorter)."""
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return ranked[:k]

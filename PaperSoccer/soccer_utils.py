# soccer_utils.py — Pure helper functions (edge keys, screen geometry, input snapping)

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from soccer_constants import GRID_MARGIN, GRID_SPACING
from soccer_entities import EdgeKey, Point


def edge_key(a: Point, b: Point) -> EdgeKey:
    """Canonical undirected key: ``edge_key(a, b) == edge_key(b, a)``."""
    pair: EdgeKey = tuple(sorted((a.as_tuple(), b.as_tuple())))  # type: ignore[assignment]
    return pair


def other_player(player: int) -> int:
    return 1 - player


# ── Screen geometry ───────────────────────────────────────────────────────────

def to_screen(
    point: Point, spacing: float = GRID_SPACING, margin: float = GRID_MARGIN
) -> Tuple[float, float]:
    """Convert a grid point to the pixel position of its node."""
    return (margin + point.x * spacing, margin + point.y * spacing)


def resolve_target(
    raw: Tuple[float, float],
    moves: Iterable[Point],
    tolerance: float,
    spacing: float = GRID_SPACING,
    margin: float = GRID_MARGIN,
) -> Optional[Point]:
    """Snap raw pointer coordinates to the nearest legal move within *tolerance*."""
    best: Optional[Point] = None
    best_distance = math.inf
    for move in moves:
        sx, sy = to_screen(move, spacing, margin)
        distance = math.hypot(sx - raw[0], sy - raw[1])
        if distance < best_distance:
            best, best_distance = move, distance
    if best is None or best_distance > tolerance:
        return None
    return best

# soccer_board.py — Grid topology: bounds, goal/edge classification, rail rule

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from soccer_constants import DIRECTIONS
from soccer_entities import Point
from soccer_models import BoardConfig


class Board:
    """
    Static geometry of the pitch.

    The top row goal scores for player 1 and the bottom row goal scores for
    player 0. Every other boundary node is an edge node.
    """

    def __init__(self, config: Optional[BoardConfig] = None):
        self.config = config or BoardConfig()
        self.cols = self.config.cols
        self.rows = self.config.rows
        self.goal_columns = frozenset(self.config.goal_columns)

    @property
    def center(self) -> Point:
        return Point(*self.config.center)

    @property
    def goal_center_x(self) -> int:
        return self.config.goal_center_x

    def is_inside(self, point: Point) -> bool:
        return 0 <= point.x < self.cols and 0 <= point.y < self.rows

    def goal_owner(self, point: Point) -> Optional[int]:
        """Return the player credited when the ball reaches *point*, if it is a goal."""
        if point.x not in self.goal_columns:
            return None
        if point.y == 0:
            return 1
        if point.y == self.rows - 1:
            return 0
        return None

    def is_goal(self, point: Point) -> bool:
        return self.goal_owner(point) is not None

    def is_edge(self, point: Point) -> bool:
        if self.is_goal(point):
            return False
        return (
            point.x == 0
            or point.x == self.cols - 1
            or point.y == 0
            or point.y == self.rows - 1
        )

    def attacking_row(self, player: int) -> int:
        """Row of the goal that scores for *player*."""
        return 0 if player == 1 else self.rows - 1

    def rail_allows(self, origin: Point, dx: int, dy: int) -> bool:
        """Forbid orthogonal steps from an edge node unless they point inward."""
        if not self.is_edge(origin) or (dx != 0 and dy != 0):
            return True
        return (
            (origin.x == 0 and (dx, dy) == (1, 0))
            or (origin.x == self.cols - 1 and (dx, dy) == (-1, 0))
            or (origin.y == 0 and (dx, dy) == (0, 1))
            or (origin.y == self.rows - 1 and (dx, dy) == (0, -1))
        )

    def neighbors(self, origin: Point) -> Iterator[Tuple[str, Point]]:
        """Yield in-bounds neighbours the rail rule permits, in direction order."""
        for name, dx, dy in DIRECTIONS:
            target = origin.offset(dx, dy)
            if self.is_inside(target) and self.rail_allows(origin, dx, dy):
                yield name, target

    def points(self) -> Iterator[Point]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield Point(x, y)

# soccer_entities.py — Dataclasses for Paper Soccer game entities

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

EdgeKey = Tuple[Tuple[int, int], Tuple[int, int]]


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Segment:
    a: Point
    b: Point
    color: str


@dataclass(frozen=True)
class Player:
    idx: int
    name: str
    color: str


@dataclass
class GameState:
    current_player: int
    ball: Point
    score: List[int] = field(default_factory=lambda: [0, 0])
    segments: List[Segment] = field(default_factory=list)
    drawn_edges: Set[EdgeKey] = field(default_factory=set)
    node_degree: Dict[Point, int] = field(default_factory=dict)

    def degree(self, point: Point) -> int:
        return self.node_degree.get(point, 0)

    def snapshot(self) -> "GameState":
        """Return a copy that shares no mutable containers with this state."""
        # Points and segments are frozen, so copying the containers is enough.
        return GameState(
            current_player=self.current_player,
            ball=self.ball,
            score=list(self.score),
            segments=list(self.segments),
            drawn_edges=set(self.drawn_edges),
            node_degree=dict(self.node_degree),
        )


# ── Outcomes ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScheduledReset:
    """A deferred round reset, captured when the round ended."""

    reset_after: float
    next_starter: int
    score: Tuple[int, int]
    announcement: str


@dataclass
class MoveOutcome:
    accepted: bool
    state: GameState
    target: Optional[Point] = None
    bounced: bool = False
    round_over: bool = False
    scorer: Optional[int] = None
    stuck_player: Optional[int] = None
    reset: Optional[ScheduledReset] = None
    reason: str = ""


@dataclass
class CpuTurnResult:
    moves: List[MoveOutcome] = field(default_factory=list)
    round_over: bool = False
    reset: Optional[ScheduledReset] = None
    guard: Optional["DegenerateLoopGuard"] = None


# ── Errors ────────────────────────────────────────────────────────────────────

class SoccerError(Exception):
    """Base class for rule-engine errors."""


class IllegalMoveError(SoccerError):
    def __init__(self, target: Point, reason: str):
        super().__init__(f"Illegal move to ({target.x}, {target.y}): {reason}")
        self.target = target
        self.reason = reason


class RoundOverError(IllegalMoveError):
    """Raised when a move is requested between round end and reset."""


class EmptyHistoryUndo(SoccerError):
    """Raised when there is no earlier snapshot to return to."""


class DegenerateLoopGuard(SoccerError):
    """Recorded when the opponent's bounce loop hits its iteration cap."""

# soccer_opponent.py — Greedy heuristic for the automated player

from __future__ import annotations

from typing import List, Optional, Tuple

from soccer_board import Board
from soccer_constants import BOUNCE_BONUS, HORIZONTAL_WEIGHT, VERTICAL_WEIGHT
from soccer_entities import GameState, Point
from soccer_graph import will_bounce


def evaluate_move(board: Board, state: GameState, player: int, target: Point) -> float:
    """
    Score a candidate target for *player*; lower is better.

    Distance to the row of the goal that scores for *player*, plus a small
    pull towards the middle of the goal mouth, minus a flat bonus for moves
    that earn another turn.
    """
    distance_y = abs(board.attacking_row(player) - target.y)
    distance_x = abs(board.goal_center_x - target.x)
    bonus = BOUNCE_BONUS if will_bounce(board, state, target) else 0.0
    return VERTICAL_WEIGHT * distance_y + HORIZONTAL_WEIGHT * distance_x + bonus


def rank_moves(
    board: Board, state: GameState, player: int, moves: List[Point]
) -> List[Tuple[Point, float]]:
    return [(move, evaluate_move(board, state, player, move)) for move in moves]


def choose_move(
    board: Board, state: GameState, player: int, moves: List[Point]
) -> Optional[Point]:
    """Pick the lowest-scoring move; the first one wins ties."""
    best: Optional[Tuple[Point, float]] = None
    for move, score in rank_moves(board, state, player, moves):
        if best is None or score < best[1]:
            best = (move, score)
    return best[0] if best else None

# soccer_graph.py — Drawn edges, node degrees and legal move generation

from __future__ import annotations

import logging
from typing import List

from soccer_board import Board
from soccer_entities import GameState, Point, Segment
from soccer_utils import edge_key

logger = logging.getLogger(__name__)


def is_edge_drawn(state: GameState, a: Point, b: Point) -> bool:
    return edge_key(a, b) in state.drawn_edges


def record_edge(state: GameState, a: Point, b: Point, color: str) -> Segment:
    """Append a segment and update the edge set and both endpoint degrees."""
    segment = Segment(a=a, b=b, color=color)
    state.segments.append(segment)
    state.drawn_edges.add(edge_key(a, b))
    state.node_degree[a] = state.degree(a) + 1
    state.node_degree[b] = state.degree(b) + 1
    logger.debug("Drew %s-%s (%d segments)", a.as_tuple(), b.as_tuple(), len(state.segments))
    return segment


def legal_moves(board: Board, state: GameState, origin: Point) -> List[Point]:
    return [
        target
        for _, target in board.neighbors(origin)
        if not is_edge_drawn(state, origin, target)
    ]


def will_bounce(board: Board, state: GameState, target: Point) -> bool:
    """A move bounces on an edge node or on any node already visited."""
    return board.is_edge(target) or state.degree(target) > 0

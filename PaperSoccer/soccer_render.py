# soccer_render.py — Text rendering of the pitch (reads state, never mutates it)

from __future__ import annotations

from typing import Iterable, List, Set

from soccer_board import Board
from soccer_entities import GameState, Player, Point


def cell_char(state: GameState, board: Board, point: Point, hints: Set[Point]) -> str:
    if point == state.ball:
        return "o"
    if point in hints:
        return "*"
    if board.is_goal(point):
        return "G"
    if state.degree(point) > 0:
        return "+"
    if board.is_edge(point):
        return "#"
    return "."


def render_board(
    state: GameState, board: Board, players: List[Player], hints: Iterable[Point] = ()
) -> str:
    """
    Draw the pitch as text, one character per node.

    ``o`` ball, ``*`` legal move, ``G`` goal, ``+`` visited node, ``#`` rail.
    """
    hint_set = set(hints)
    lines = [f"    {''.join(str(x % 10) for x in range(board.cols))}"]
    for y in range(board.rows):
        row = "".join(cell_char(state, board, Point(x, y), hint_set) for x in range(board.cols))
        lines.append(f"{y:>3} {row}")

    drawn = {p.color: 0 for p in players}
    for seg in state.segments:
        drawn[seg.color] = drawn.get(seg.color, 0) + 1
    current = players[state.current_player]
    lines.append(
        f"Score {players[0].name} {state.score[0]} : {state.score[1]} {players[1].name}"
        f" | to move: {current.name} | ball: {state.ball.x}, {state.ball.y}"
    )
    lines.append("Lines: " + ", ".join(f"{p.name}:{drawn[p.color]}" for p in players))
    return "\n".join(lines)

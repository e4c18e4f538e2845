from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pydantic import BaseModel, ValidationError

from soccer_board import Board
from soccer_game import SoccerGame
from soccer_entities import Point
from soccer_render import render_board
from soccer_models import (
    BoardConfig,
    GameConfig,
    PlayerConfig,
    default_game_config,
    load_game_config,
)
from soccer_utils import resolve_target, to_screen


def test_models_are_pydantic_basemodel_subclasses() -> None:
    assert issubclass(BoardConfig, BaseModel)
    assert issubclass(PlayerConfig, BaseModel)
    assert issubclass(GameConfig, BaseModel)


def test_default_config_matches_classic_pitch() -> None:
    config = default_game_config()
    assert (config.board.cols, config.board.rows) == (15, 19)
    assert config.board.goal_columns == [6, 7, 8]
    assert config.board.center == (7, 9)
    assert config.board.goal_center_x == 7
    assert config.cpu_enabled and config.cpu_player == 1
    assert [p.name for p in config.players] == ["Red", "Blue"]


def test_board_config_rejects_bad_goals() -> None:
    with pytest.raises(ValidationError):
        BoardConfig(goal_columns=[6, 8])
    with pytest.raises(ValidationError):
        BoardConfig(goal_columns=[0, 1, 2])
    with pytest.raises(ValidationError):
        BoardConfig(cols=9, rows=11, goal_columns=[7, 8])
    with pytest.raises(ValidationError):
        BoardConfig(goal_columns=[])


def test_game_config_player_count_validation() -> None:
    players = [PlayerConfig(name=n) for n in ("A", "B", "C")]
    with pytest.raises(ValidationError):
        GameConfig(players=players)
    with pytest.raises(ValidationError):
        GameConfig(players=players[:2], cpu_player=2)
    with pytest.raises(ValidationError):
        PlayerConfig(name="")


def test_players_without_colors_get_distinct_seat_colors() -> None:
    config = GameConfig(players=[PlayerConfig(name="Ann"), PlayerConfig(name="Bob")], cpu_enabled=False)
    assert [p.color for p in config.players] == ["#e54848", "#2c6be2"]
    game = SoccerGame(config=config)
    game.request_move(Point(7, 8))
    text = render_board(game.state, game.board, game.players, game.legal_moves())
    assert "Lines: Ann:1, Bob:0" in text


def test_game_config_rejects_shared_player_color() -> None:
    with pytest.raises(ValidationError):
        GameConfig(players=[PlayerConfig(name="Ann", color="#abc"), PlayerConfig(name="Bob", color="#ABC")])
    with pytest.raises(ValidationError):
        GameConfig(players=[PlayerConfig(name="Ann"), PlayerConfig(name="Bob", color="#e54848")])


def test_load_game_config(tmp_path: Path) -> None:
    path = tmp_path / "game.json"
    path.write_text(
        json.dumps(
            {
                "board": {"cols": 9, "rows": 13, "goal_columns": [3, 4, 5]},
                "players": [{"name": "Ann", "color": "#f00"}, {"name": "Bob", "color": "#00f"}],
                "cpu_enabled": False,
                "reset_delay": 0,
            }
        ),
        encoding="utf-8",
    )
    config = load_game_config(path)
    assert config.board.center == (4, 6)
    assert not config.cpu_enabled
    game = SoccerGame(config=config)
    assert game.state.ball == Point(4, 6)
    assert game.board.goal_owner(Point(4, 12)) == 0


def test_load_game_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_game_config(tmp_path / "absent.json")


def test_resolve_target_snaps_within_tolerance() -> None:
    moves = [Point(7, 8), Point(8, 8)]
    x, y = to_screen(Point(7, 8))
    assert (x, y) == (36 + 7 * 32, 36 + 8 * 32)
    assert resolve_target((x + 3, y - 2), moves, tolerance=32 / 3) == Point(7, 8)
    assert resolve_target((x + 16, y), moves, tolerance=32 / 3) is None
    assert resolve_target((x, y), [], tolerance=32 / 3) is None


def test_render_board_marks_ball_hints_and_goals() -> None:
    game = SoccerGame(config=default_game_config(cpu_enabled=False))
    text = render_board(game.state, game.board, game.players, game.legal_moves())
    lines = text.splitlines()
    assert lines[1 + 9][4 + 7] == "o"
    assert lines[1][4 + 6 : 4 + 9] == "GGG"
    assert lines[1][4] == "#"
    assert text.count("*") == 8
    assert "Score Red 0 : 0 Blue" in text
    assert "Lines: Red:0, Blue:0" in text


def test_render_board_does_not_mutate_state() -> None:
    game = SoccerGame(config=default_game_config(cpu_enabled=False))
    game.request_move(Point(7, 8))
    before = game.get_state()
    text = render_board(game.state, game.board, game.players, game.legal_moves())
    assert game.state == before
    assert "Red:1" in text
    assert lines_for(text, Board())[9][7] == "+"


def lines_for(text: str, board: Board) -> list:
    return [line[4:] for line in text.splitlines()[1 : 1 + board.rows]]

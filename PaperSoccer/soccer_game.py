# soccer_game.py — SoccerGame: rules engine, round lifecycle and terminal loop

from __future__ import annotations

import logging
import time
from typing import List, Optional, Tuple

import soccer_graph
from soccer_board import Board
from soccer_constants import DIRECTION_DELTAS
from soccer_entities import (
    CpuTurnResult,
    DegenerateLoopGuard,
    EmptyHistoryUndo,
    GameState,
    IllegalMoveError,
    MoveOutcome,
    Player,
    Point,
    RoundOverError,
    ScheduledReset,
)
from soccer_history import History
from soccer_models import GameConfig, default_game_config
from soccer_opponent import choose_move
from soccer_render import render_board
from soccer_utils import other_player, resolve_target

logger = logging.getLogger(__name__)


class SoccerGame:
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or default_game_config()
        self.board = Board(self.config.board)
        self.players: List[Player] = [
            Player(idx=i, name=p.name, color=p.color) for i, p in enumerate(self.config.players)
        ]
        self.state = GameState(current_player=self.config.starting_player, ball=self.board.center)
        self.history = History(self.state)
        self.announcement = ""
        self.pending_reset: Optional[ScheduledReset] = None
        self.reset_round(self.config.starting_player)

    # ── Read-only views ───────────────────────────────────────────────────────

    def get_state(self) -> GameState:
        return self.state.snapshot()

    def legal_moves(self) -> List[Point]:
        return soccer_graph.legal_moves(self.board, self.state, self.state.ball)

    def resolve_click(self, raw: Tuple[float, float]) -> Optional[Point]:
        """Snap screen coordinates to the nearest legal move, if one is close enough."""
        return resolve_target(raw, self.legal_moves(), self.config.click_tolerance)

    @property
    def current(self) -> Player:
        return self.players[self.state.current_player]

    @property
    def round_over(self) -> bool:
        return self.pending_reset is not None

    @property
    def cpu_to_move(self) -> bool:
        return (
            self.config.cpu_enabled
            and not self.round_over
            and self.state.current_player == self.config.cpu_player
        )

    def announce(self, message: str) -> None:
        self.announcement = message
        logger.info(message)

    # ── Round lifecycle ───────────────────────────────────────────────────────

    def reset_round(self, starting_player: int = 0) -> None:
        self.state = GameState(
            current_player=starting_player,
            ball=self.board.center,
            score=list(self.state.score),
        )
        self.history.reset(self.state)
        self.pending_reset = None
        self.announce(f"New round – {self.players[starting_player].name} starts")

    def reset_match(self) -> None:
        """Start a new match: clear the score and let player 0 kick off."""
        self.state.score = [0, 0]
        self.reset_round(0)

    def apply_scheduled_reset(self) -> bool:
        """Start the round the last goal or stuck position scheduled."""
        if self.pending_reset is None:
            return False
        self.reset_round(self.pending_reset.next_starter)
        return True

    def _schedule_reset(self, next_starter: int) -> ScheduledReset:
        self.pending_reset = ScheduledReset(
            reset_after=self.config.reset_delay,
            next_starter=next_starter,
            score=(self.state.score[0], self.state.score[1]),
            announcement=self.announcement,
        )
        return self.pending_reset

    def _apply_stuck_rule(self) -> ScheduledReset:
        loser = self.state.current_player
        winner = other_player(loser)
        self.state.score[winner] += 1
        self.announce(f"{self.players[loser].name} is stuck. Point for {self.players[winner].name}.")
        return self._schedule_reset(winner)

    # ── Moves ─────────────────────────────────────────────────────────────────

    def can_move(self, target: Point) -> Tuple[bool, str]:
        if self.round_over:
            return False, "Round is over."
        if not self.board.is_inside(target):
            return False, "Target is off the board."
        if target not in self.legal_moves():
            return False, "Target is not a legal move from the ball."
        return True, ""

    def request_move(self, target: Point) -> MoveOutcome:
        ok, reason = self.can_move(target)
        if not ok:
            if self.round_over:
                raise RoundOverError(target, reason)
            raise IllegalMoveError(target, reason)
        return self._play(target)

    def try_move(self, target: Point) -> MoveOutcome:
        """Like :meth:`request_move`, but an illegal target is a no-op outcome."""
        try:
            return self.request_move(target)
        except IllegalMoveError as exc:
            logger.debug("Ignored move: %s", exc)
            return MoveOutcome(accepted=False, state=self.get_state(), target=target, reason=exc.reason)

    def _play(self, target: Point) -> MoveOutcome:
        mover = self.state.current_player
        bounced = soccer_graph.will_bounce(self.board, self.state, target)
        self.history.push(self.state)
        soccer_graph.record_edge(self.state, self.state.ball, target, self.players[mover].color)
        self.state.ball = target

        scorer = self.board.goal_owner(target)
        if scorer is not None:
            self.state.score[scorer] += 1
            self.announce(f"{self.players[scorer].name} scores!")
            reset = self._schedule_reset(scorer)
            return MoveOutcome(
                accepted=True, state=self.get_state(), target=target,
                round_over=True, scorer=scorer, reset=reset,
            )

        if bounced:
            self.announce("Bounce – play again")
        else:
            self.state.current_player = other_player(mover)

        outcome = MoveOutcome(accepted=True, state=self.get_state(), target=target, bounced=bounced)
        if not self.legal_moves():
            stuck = self.state.current_player
            outcome.reset = self._apply_stuck_rule()
            outcome.round_over = True
            outcome.stuck_player = stuck
            outcome.scorer = other_player(stuck)
            outcome.state = self.get_state()
        return outcome

    def undo(self) -> bool:
        if self.round_over:
            return False
        try:
            self.state = self.history.pop_to_previous()
        except EmptyHistoryUndo:
            logger.debug("Undo ignored at round start")
            return False
        self.announce("Move undone")
        return True

    # ── Automated opponent ────────────────────────────────────────────────────

    def play_cpu_turn(self) -> CpuTurnResult:
        """Let the automated player move until it loses the turn or the round ends."""
        result = CpuTurnResult()
        guard = 0
        while self.cpu_to_move:
            if guard >= self.config.cpu_iteration_cap:
                result.guard = DegenerateLoopGuard(
                    f"Automated player still moving after {guard} moves"
                )
                logger.warning("%s; stopping", result.guard)
                break
            guard += 1
            moves = self.legal_moves()
            target = choose_move(self.board, self.state, self.state.current_player, moves)
            if target is None:
                result.reset = self._apply_stuck_rule()
                result.round_over = True
                break
            outcome = self._play(target)
            result.moves.append(outcome)
            if outcome.round_over:
                result.reset = outcome.reset
                result.round_over = True
                break
        return result

    # ── Terminal loop ─────────────────────────────────────────────────────────

    def print_board(self) -> None:
        print(render_board(self.state, self.board, self.players, self.legal_moves()))
        if self.announcement:
            print(self.announcement)

    def _finish_round(self, reset: ScheduledReset) -> None:
        print(reset.announcement)
        print(f"Score {reset.score[0]} : {reset.score[1]}")
        time.sleep(reset.reset_after)
        self.apply_scheduled_reset()

    def _run_cpu(self) -> None:
        while self.cpu_to_move:
            result = self.play_cpu_turn()
            for outcome in result.moves:
                print(f"{self.players[self.config.cpu_player].name} plays {outcome.target.as_tuple()}")
            if result.reset is not None:
                self._finish_round(result.reset)
            self.print_board()
            if result.guard is not None:
                print(str(result.guard))
                break

    def _parse_target(self, parts: List[str]) -> Optional[Point]:
        if len(parts) == 1 and parts[0].upper() in DIRECTION_DELTAS:
            dx, dy = DIRECTION_DELTAS[parts[0].upper()]
            return self.state.ball.offset(dx, dy)
        if len(parts) == 3 and parts[0] in ("move", "click"):
            try:
                if parts[0] == "click":
                    return self.resolve_click((float(parts[1]), float(parts[2])))
                return Point(int(parts[1]), int(parts[2]))
            except ValueError:
                return None
        return None

    def take_turn(self) -> bool:
        """Read and run one command. Returns False when the player quits."""
        self._run_cpu()
        cmd = input(f"{self.current.name} to move> ").strip()
        parts = cmd.split()
        if not parts:
            return True

        if parts[0] == "help":
            print(
                "Commands:\n"
                "  move <x> <y>\n"
                "  click <px> <py>\n"
                "  N | NE | E | SE | S | SW | W | NW\n"
                "  moves\n"
                "  board\n"
                "  undo\n"
                "  reset      (new round, score kept)\n"
                "  newmatch   (score back to 0 : 0)\n"
                "  quit"
            )
        elif parts[0] == "quit":
            return False
        elif parts[0] == "board":
            self.print_board()
        elif parts[0] == "moves":
            print(", ".join(str(m.as_tuple()) for m in self.legal_moves()))
        elif parts[0] == "undo":
            print(self.announcement if self.undo() else "Nothing to undo.")
        elif parts[0] == "reset":
            self.reset_round(0)
            self.print_board()
        elif parts[0] == "newmatch":
            self.reset_match()
            self.print_board()
        else:
            target = self._parse_target(parts)
            if target is None:
                print("No legal move there." if parts[0] == "click" else "Unknown command. Type 'help'.")
                return True
            outcome = self.try_move(target)
            if not outcome.accepted:
                print(outcome.reason)
            elif outcome.reset is not None:
                self._finish_round(outcome.reset)
            self.print_board()
        return True

    def run(self) -> None:
        print("\nWelcome to terminal Paper Soccer.")
        self.print_board()
        while self.take_turn():
            pass
        print(f"\nFinal score {self.state.score[0]} : {self.state.score[1]}")

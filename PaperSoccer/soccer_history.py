# soccer_history.py — Snapshot stack for undo

from __future__ import annotations

from typing import List

from soccer_entities import EmptyHistoryUndo, GameState


class History:
    def __init__(self, initial: GameState):
        self._stack: List[GameState] = []
        self.reset(initial)

    def __len__(self) -> int:
        return len(self._stack)

    def reset(self, initial: GameState) -> None:
        self._stack = [initial.snapshot()]

    def push(self, state: GameState) -> None:
        self._stack.append(state.snapshot())

    def pop_to_previous(self) -> GameState:
        """
        Drop the newest snapshot and return a copy of the one beneath it.

        The round-start snapshot is never dropped.
        """
        if len(self._stack) <= 1:
            raise EmptyHistoryUndo("Nothing to undo")
        self._stack.pop()
        return self._stack[-1].snapshot()

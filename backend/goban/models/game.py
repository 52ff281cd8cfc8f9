import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .go_board import GoBoard, Point, StoneColor, opponent

logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    placed: Point
    captured: List[Point] = field(default_factory=list)


class GoGame:
    """Rules engine: legality, captures, simple ko and undo/redo history.

    Callers are expected to gate ``play`` behind ``can_play``; illegal input
    is reported by boolean results, never by exceptions.
    """

    def __init__(self, size: int = 19):
        self.board = GoBoard(size)
        self.current_color = StoneColor.BLACK
        self._captures: Dict[StoneColor, int] = {StoneColor.BLACK: 0, StoneColor.WHITE: 0}
        self.undo_stack: List[MoveRecord] = []
        self.redo_stack: List[Point] = []

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def enemy_color(self) -> StoneColor:
        return opponent(self.current_color)

    @property
    def captures(self) -> Dict[StoneColor, int]:
        """Stones captured by each color so far"""
        return dict(self._captures)

    def get_stone(self, x: int, y: int) -> StoneColor:
        return self.board.get_stone(x, y)

    def _neighbors_captured(self, x: int, y: int) -> List[Point]:
        """Enemy stones next to (x, y) whose group has no liberties left"""
        enemy = self.enemy_color
        return [
            (nx, ny)
            for nx, ny in self.board.get_neighbors(x, y)
            if self.board.get_stone(nx, ny) == enemy and self.board.count_liberties(nx, ny) == 0
        ]

    def find_all_captures(self, x: int, y: int) -> List[Point]:
        """Every stone removed by a stone of the current color at (x, y)"""
        captured = []
        visited = set()
        for nx, ny in self._neighbors_captured(x, y):
            group, visited = self.board.trace_group(nx, ny, visited)
            captured.extend(group)
        return captured

    def is_ko(self, x: int, y: int) -> bool:
        """Check for an immediate single-stone recapture.

        Must be called with the current player's stone already at (x, y).
        """
        if not self.undo_stack:
            return False

        captured = self.find_all_captures(x, y)
        if len(captured) != 1:
            return False

        previous = self.undo_stack[-1]
        if len(previous.captured) != 1:
            return False

        return previous.captured[0] == (x, y) and previous.placed == captured[0]

    def can_play(self, x: int, y: int) -> bool:
        if not self.board.is_valid_position(x, y):
            return False
        if self.board.get_stone(x, y) != StoneColor.EMPTY:
            return False

        self.board.place_stone(x, y, self.current_color)
        try:
            if self._neighbors_captured(x, y):
                return not self.is_ko(x, y)
            return self.board.count_liberties(x, y) > 0
        finally:
            self.board.remove_stone(x, y)

    def _commit(self, x: int, y: int) -> List[Point]:
        assert self.board.get_stone(x, y) == StoneColor.EMPTY, f"({x}, {y}) is occupied"

        self.board.place_stone(x, y, self.current_color)
        captured = self.find_all_captures(x, y)
        for cx, cy in captured:
            self.board.remove_stone(cx, cy)

        self._captures[self.current_color] += len(captured)
        logger.debug(f"{self.current_color.value} played ({x}, {y}), captured {len(captured)}")

        self.current_color = self.enemy_color
        self.undo_stack.append(MoveRecord((x, y), captured))
        return captured

    def play(self, x: int, y: int) -> List[Point]:
        """Place a stone for the current player and return the captured points.

        Precondition: can_play(x, y) is True for the current state.
        """
        captured = self._commit(x, y)
        self.redo_stack = []
        return captured

    def undo(self) -> bool:
        if not self.undo_stack:
            return False

        record = self.undo_stack.pop()
        x, y = record.placed
        self.board.remove_stone(x, y)

        # The player to move now is the one whose stones were captured
        for cx, cy in record.captured:
            self.board.place_stone(cx, cy, self.current_color)

        self.current_color = self.enemy_color
        self._captures[self.current_color] -= len(record.captured)
        self.redo_stack.append(record.placed)
        logger.debug(f"Undid ({x}, {y}), restored {len(record.captured)}")
        return True

    def redo(self) -> bool:
        if not self.redo_stack:
            return False

        x, y = self.redo_stack.pop()
        self._commit(x, y)
        logger.debug(f"Redid ({x}, {y})")
        return True

    def can_undo(self) -> bool:
        """Check if there are moves that can be undone"""
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        """Check if there are moves that can be redone"""
        return len(self.redo_stack) > 0

    def get_last_move(self) -> Optional[Point]:
        if not self.undo_stack:
            return None
        return self.undo_stack[-1].placed

    def get_move_history(self) -> List[MoveRecord]:
        """Get the committed moves, oldest first"""
        return [MoveRecord(r.placed, list(r.captured)) for r in self.undo_stack]

    def get_board_state(self) -> List[List[str]]:
        return self.board.get_board_state()

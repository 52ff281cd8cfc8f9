from enum import Enum
from typing import List, Tuple, Set, Optional
from pydantic import BaseModel

Point = Tuple[int, int]


class StoneColor(str, Enum):
    BLACK = "black"
    WHITE = "white"
    EMPTY = "empty"


def opponent(color: StoneColor) -> StoneColor:
    """Return the other player's color"""
    return StoneColor.WHITE if color == StoneColor.BLACK else StoneColor.BLACK


class GroupInfo(BaseModel):
    color: StoneColor
    size: int
    liberties: int
    liberty_points: List[Point]
    group_points: List[Point]


class GoBoard:
    """Grid of cell states plus group and liberty queries.

    The board knows nothing about turns, legality or history; it only answers
    questions about the current grid. Groups are recomputed on every call and
    never cached, so they always match the cells.
    """

    def __init__(self, size: int = 19):
        self.size = size
        self.board = [[StoneColor.EMPTY for _ in range(size)] for _ in range(size)]

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get_stone(self, x: int, y: int) -> StoneColor:
        return self.board[y][x]

    def place_stone(self, x: int, y: int, color: StoneColor):
        self.board[y][x] = color

    def remove_stone(self, x: int, y: int):
        self.board[y][x] = StoneColor.EMPTY

    def get_neighbors(self, x: int, y: int) -> List[Point]:
        neighbors = []
        for dx, dy in [(0, 1), (1, 0), (0, -1), (-1, 0)]:
            nx, ny = x + dx, y + dy
            if self.is_valid_position(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def trace_group(
        self, x: int, y: int, visited: Optional[Set[Point]] = None
    ) -> Tuple[List[Point], Set[Point]]:
        """Flood fill from (x, y), returning the group and the visited set.

        Passing the visited set of an earlier call skips stones already
        collected, so several groups can be gathered without duplicates.
        """
        if visited is None:
            visited = set()
        if not self.is_valid_position(x, y) or self.board[y][x] == StoneColor.EMPTY:
            return [], visited
        if (x, y) in visited:
            return [], visited

        color = self.board[y][x]
        visited.add((x, y))
        group = []
        stack = [(x, y)]

        while stack:
            current = stack.pop()
            group.append(current)
            cx, cy = current

            for nx, ny in self.get_neighbors(cx, cy):
                if (nx, ny) not in visited and self.board[ny][nx] == color:
                    visited.add((nx, ny))
                    stack.append((nx, ny))

        return group, visited

    def get_group(self, x: int, y: int) -> List[Point]:
        """Get every stone connected to (x, y), in visit order"""
        group, _ = self.trace_group(x, y)
        return group

    def get_liberties(self, x: int, y: int) -> Set[Point]:
        """Get the distinct empty points adjacent to the group at (x, y)"""
        liberties = set()
        for gx, gy in self.get_group(x, y):
            for nx, ny in self.get_neighbors(gx, gy):
                if self.board[ny][nx] == StoneColor.EMPTY:
                    liberties.add((nx, ny))
        return liberties

    def count_liberties(self, x: int, y: int) -> int:
        # Precondition: (x, y) holds a stone
        return len(self.get_liberties(x, y))

    def analyze_group(self, x: int, y: int) -> Optional[GroupInfo]:
        """Summarize the group at (x, y), or None for an empty point"""
        group = self.get_group(x, y)
        if not group:
            return None

        liberties = self.get_liberties(x, y)
        return GroupInfo(
            color=self.board[y][x],
            size=len(group),
            liberties=len(liberties),
            liberty_points=sorted(liberties),
            group_points=group,
        )

    def get_board_state(self) -> List[List[str]]:
        """Get the current board state"""
        return [[stone.value for stone in row] for row in self.board]

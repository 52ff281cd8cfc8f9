"""Shared pytest fixtures for the engine and API tests."""

import pytest
from fastapi.testclient import TestClient

from goban.config import Settings
from goban.main import create_app
from goban.models.game import GoGame
from goban.models.go_board import GoBoard


@pytest.fixture
def board():
    """Empty 19x19 analyzer board."""
    return GoBoard()


@pytest.fixture
def game():
    """Fresh 19x19 game, black to move."""
    return GoGame()


@pytest.fixture
def small_game():
    """Fresh 9x9 game for longer move sequences."""
    return GoGame(9)


@pytest.fixture
def ko_game():
    """Black has just captured a single white stone at (1, 1) by playing (2, 1).

    White to move; retaking at (1, 1) would capture exactly the stone at (2, 1).
    """
    game = GoGame()
    for x, y in [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2), (10, 10), (1, 1)]:
        game.play(x, y)
    assert game.play(2, 1) == [(1, 1)]
    return game


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client():
    """API client over a fresh app with a 9x9 default board."""
    app = create_app(Settings(board_size=9))
    with TestClient(app) as test_client:
        yield test_client

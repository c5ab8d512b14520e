"""
Shared test fixtures for connect4 tests.
"""

from typing import Iterable, List

import pytest

from connect4.game.player import Player
from connect4.game.rules import GameEngine, MoveResult


# =============================================================================
# Player Fixtures
# =============================================================================

@pytest.fixture
def red() -> Player:
    return Player("red")


@pytest.fixture
def blue() -> Player:
    return Player("blue")


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def engine(red: Player, blue: Player) -> GameEngine:
    """Fresh classic 6x7 game, red to move."""
    return GameEngine(red, blue)


@pytest.fixture
def small_engine(red: Player, blue: Player) -> GameEngine:
    """Fresh 4x4 game, the smallest board a win fits on both ways."""
    return GameEngine(red, blue, height=4, width=4)


# =============================================================================
# Helpers
# =============================================================================

def play(engine: GameEngine, columns: Iterable[int]) -> List[MoveResult]:
    """Play a sequence of columns and return every result."""
    return [engine.attempt_move(col) for col in columns]


def snapshot(engine: GameEngine):
    """Everything observable about an engine's state."""
    return (engine.get_state().tolist(), engine.get_current_player(),
            engine.is_game_over(), engine.last_move)


# Full 6x7 game with no four-in-a-row: pairs columns 1/0 and 3/2, then fills
# 4, 5 and 6 two rows at a time.
TIE_SEQUENCE = (
    [1, 0, 0, 1, 0, 1, 1, 0, 1, 0, 0, 1]
    + [3, 2, 2, 3, 2, 3, 3, 2, 3, 2, 2, 3]
    + [5, 4, 4, 6, 6, 5, 4, 4, 6, 5, 5, 6, 5, 4, 4, 6, 6, 5]
)

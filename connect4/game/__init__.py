"""
connect4.game - Core game mechanics for Connect Four

This package contains the player type, the board representation and the
game engine that enforces the rules.
"""

from connect4.game.board import Board
from connect4.game.player import Player, validate_players
from connect4.game.rules import GameEngine, MoveOutcome, MoveResult

__all__ = ['Board', 'Player', 'validate_players', 'GameEngine', 'MoveOutcome', 'MoveResult']

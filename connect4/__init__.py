"""
connect4 - Connect Four rules engine

This package provides the rules engine for two-player Connect Four on a
board of any size: move validation, win and tie detection and turn
alternation, plus a small terminal front end that drives it.
"""

from connect4.game.player import Player, validate_players
from connect4.game.rules import GameEngine, MoveOutcome, MoveResult

# Version number
__version__ = '0.2.0'

__all__ = ['Player', 'validate_players', 'GameEngine', 'MoveOutcome', 'MoveResult']

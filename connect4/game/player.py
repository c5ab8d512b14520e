"""
player.py - Player identity for Connect Four

A Player is an immutable value carrying the display colour used by a
presentation layer. Two players are told apart by identity, never by colour.
"""

from typing import Optional


class Player:
    """A game participant identified by object identity."""

    __slots__ = ('_color',)

    def __init__(self, color: str):
        self._color = color

    @property
    def color(self) -> str:
        """Display colour of this player's pieces."""
        return self._color

    def __setattr__(self, name, value):
        if hasattr(self, '_color'):
            raise AttributeError("Player is immutable")
        object.__setattr__(self, name, value)

    def __str__(self) -> str:
        return str(self._color)

    def __repr__(self) -> str:
        return f"Player({self._color!r})"


def _normalize(color) -> str:
    return str(color).strip().lower()


def validate_players(player1: Player, player2: Player) -> Optional[str]:
    """
    Check that two players can share a game.

    Args:
        player1: First player
        player2: Second player

    Returns:
        None if the pair is usable, otherwise a message describing the problem
    """
    for label, player in (("Player 1", player1), ("Player 2", player2)):
        if not isinstance(player, Player):
            return f"{label} must be a Player, got {type(player).__name__}"
        if not _normalize(player.color):
            return f"{label} needs a colour"

    if player1 is player2:
        return "The same player cannot take both sides"

    if _normalize(player1.color) == _normalize(player2.color):
        return (f"Player 2's colour cannot be the same as Player 1's colour "
                f"({player1.color}). Please pick a different colour for Player 2.")

    return None

"""
Input sources for driving a World without a graphical front end.
"""

from .base import Player
from .scripted_player import ScriptedPlayer, parse_moves

__all__ = [
    'Player',
    'ScriptedPlayer',
    'parse_moves',
]

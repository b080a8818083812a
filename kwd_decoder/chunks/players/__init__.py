# kwd_decoder/chunks/players/__init__.py
"""Players and their computer player settings."""
from .parser import PlayersChunk
from .entry import Player, AI
from .flags import AIType

__all__ = ['PlayersChunk', 'Player', 'AI', 'AIType']

# kwd_decoder/chunks/level/__init__.py
"""Level info and the companion file table."""
from .parser import LevelChunk
from .entry import GameLevel, FilePath
from .flags import LevFlag, LevelReward, TextTable

__all__ = ['LevelChunk', 'GameLevel', 'FilePath', 'LevFlag', 'LevelReward', 'TextTable']

# kwd_decoder/chunks/doors/__init__.py
"""Doors catalog."""
from .parser import DoorsChunk
from .entry import Door
from .flags import DoorFlag

__all__ = ['DoorsChunk', 'Door', 'DoorFlag']

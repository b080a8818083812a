# kwd_decoder/chunks/rooms/__init__.py
"""Rooms catalog."""
from .parser import RoomsChunk
from .entry import Room
from .flags import RoomFlag, TileConstruction

__all__ = ['RoomsChunk', 'Room', 'RoomFlag', 'TileConstruction']

# kwd_decoder/chunks/map/__init__.py
"""Map grid."""
from .parser import MapChunk
from .entry import GameMap, Tile, TileStruct
from .flags import BridgeTerrainType

__all__ = ['MapChunk', 'GameMap', 'Tile', 'TileStruct', 'BridgeTerrainType']

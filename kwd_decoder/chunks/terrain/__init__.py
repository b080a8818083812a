# kwd_decoder/chunks/terrain/__init__.py
"""Terrain catalog."""
from .parser import TerrainChunk
from .entry import Terrain
from .flags import TerrainFlag

__all__ = ['TerrainChunk', 'Terrain', 'TerrainFlag']

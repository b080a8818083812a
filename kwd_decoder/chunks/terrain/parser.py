# kwd_decoder/chunks/terrain/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import Terrain


class TerrainChunk(CatalogChunk):
    """Terrain.kwd catalog reader."""

    kind = MapDataType.TERRAIN
    label = 'terrain'

    def read_entry(self) -> Terrain:
        return Terrain.from_reader(self.reader)

# kwd_decoder/chunks/shots/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import Shot


class ShotsChunk(CatalogChunk):
    """Shots.kwd catalog reader (239 bytes per shot)."""

    kind = MapDataType.SHOTS
    label = 'shots'

    def read_entry(self) -> Shot:
        return Shot.from_reader(self.reader)

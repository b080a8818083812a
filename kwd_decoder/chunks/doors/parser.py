# kwd_decoder/chunks/doors/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import Door


class DoorsChunk(CatalogChunk):
    """Doors.kwd catalog reader."""

    kind = MapDataType.DOORS
    label = 'doors'

    def read_entry(self) -> Door:
        return Door.from_reader(self.reader)

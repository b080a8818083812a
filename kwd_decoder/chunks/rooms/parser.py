# kwd_decoder/chunks/rooms/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import Room


class RoomsChunk(CatalogChunk):
    """Rooms.kwd catalog reader."""

    kind = MapDataType.ROOMS
    label = 'rooms'

    def read_entry(self) -> Room:
        return Room.from_reader(self.reader)

# kwd_decoder/chunks/objects/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import GameObject


class ObjectsChunk(CatalogChunk):
    """Objects.kwd catalog reader."""

    kind = MapDataType.OBJECTS
    label = 'objects'

    def read_entry(self) -> GameObject:
        return GameObject.from_reader(self.reader)

# kwd_decoder/chunks/traps/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import Trap


class TrapsChunk(CatalogChunk):
    """Traps.kwd catalog reader."""

    kind = MapDataType.TRAPS
    label = 'traps'

    def read_entry(self) -> Trap:
        return Trap.from_reader(self.reader)

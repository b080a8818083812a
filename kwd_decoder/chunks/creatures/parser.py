# kwd_decoder/chunks/creatures/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import Creature


class CreaturesChunk(CatalogChunk):
    """Creatures.kwd catalog reader.

    The per item size from the header picks between the 5449 byte record
    and the bigger revision carrying an extra trailing block.
    """

    kind = MapDataType.CREATURES
    label = 'creatures'

    def read_entry(self) -> Creature:
        return Creature.from_reader(self.reader, self.header.item_size)

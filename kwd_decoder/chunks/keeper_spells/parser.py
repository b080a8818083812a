# kwd_decoder/chunks/keeper_spells/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import KeeperSpell


class KeeperSpellsChunk(CatalogChunk):
    kind = MapDataType.KEEPER_SPELLS
    label = 'keeper spells'

    def read_entry(self) -> KeeperSpell:
        return KeeperSpell.from_reader(self.reader)

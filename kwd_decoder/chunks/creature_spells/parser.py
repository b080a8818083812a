# kwd_decoder/chunks/creature_spells/parser.py
from ...errors import ChunkParsingError
from ...parser.constants import (
    MapDataType, CREATURE_SPELLS_CHECK_ONE, CREATURE_SPELLS_CHECK_TWO
)
from ..base import CatalogChunk
from .entry import CreatureSpell


class CreatureSpellsChunk(CatalogChunk):
    """CreatureSpells.kwd catalog reader.

    The only catalog whose check words are enforced.
    """

    kind = MapDataType.CREATURE_SPELLS
    label = 'creature spells'

    def validate(self) -> None:
        if (self.header.check_one != CREATURE_SPELLS_CHECK_ONE
                or self.header.check_two != CREATURE_SPELLS_CHECK_TWO):
            raise ChunkParsingError("Creature spells file is corrupted")

    def read_entry(self) -> CreatureSpell:
        return CreatureSpell.from_reader(self.reader)

# kwd_decoder/chunks/variables/parser.py
from typing import List, Union
import logging

from ...parser.constants import MapDataType
from ...parser.reader import parse_enum
from ..base import BaseChunk
from .entry import (
    Availability, CreatureFirstPerson, CreaturePool, CreatureStats, MiscVariable, Sacrifice,
    UnknownVariable
)
from .flags import (
    AVAILABILITY, CREATURE_FIRST_PERSON_ID, CREATURE_POOL, CREATURE_STATS_ID, MiscType,
    SACRIFICES_ID, UNKNOWN_IDS
)

logger = logging.getLogger(__name__)

Variable = Union[CreaturePool, Availability, Sacrifice, CreatureStats, CreatureFirstPerson,
                 UnknownVariable, MiscVariable]

VARIABLE_TYPES = {
    CREATURE_POOL: CreaturePool,
    AVAILABILITY: Availability,
    SACRIFICES_ID: Sacrifice,
    CREATURE_STATS_ID: CreatureStats,
    CREATURE_FIRST_PERSON_ID: CreatureFirstPerson,
}


class VariablesChunk(BaseChunk):
    """*Variables.kld reader, the global variables come first and the level's own after."""

    kind = MapDataType.VARIABLES
    label = 'variables'

    def parse(self) -> List[Variable]:
        logger.info("Reading variables!")
        return [self._read_variable() for _ in range(self.header.item_count)]

    def _read_variable(self) -> Variable:
        reader = self.reader
        variable_id = reader.read_int()
        variable_cls = VARIABLE_TYPES.get(variable_id)
        if variable_cls is not None:
            return variable_cls.from_reader(reader)

        value, unknown1, unknown2 = reader.read_int(), reader.read_int(), reader.read_int()
        if variable_id in UNKNOWN_IDS:
            return UnknownVariable(variable_id, value, unknown1, unknown2)
        return MiscVariable(
            variable_id=variable_id,
            variable_type=parse_enum(variable_id, MiscType),
            value=value,
            unknown1=unknown1,
            unknown2=unknown2
        )

# kwd_decoder/chunks/variables/__init__.py
"""Level variables."""
from .parser import VariablesChunk, VARIABLE_TYPES
from .entry import (
    CreaturePool, Availability, Sacrifice, CreatureStats, CreatureFirstPerson,
    UnknownVariable, MiscVariable
)
from .flags import (
    StatType, MiscType, AvailabilityType, AvailabilityValue, SacrificeType,
    SacrificeRewardType, CREATURE_POOL, AVAILABILITY, SACRIFICES_ID, CREATURE_STATS_ID,
    CREATURE_FIRST_PERSON_ID
)
from .store import VariableStore

__all__ = [
    'VariablesChunk',
    'VARIABLE_TYPES',
    'CreaturePool',
    'Availability',
    'Sacrifice',
    'CreatureStats',
    'CreatureFirstPerson',
    'UnknownVariable',
    'MiscVariable',
    'StatType',
    'MiscType',
    'AvailabilityType',
    'AvailabilityValue',
    'SacrificeType',
    'SacrificeRewardType',
    'CREATURE_POOL',
    'AVAILABILITY',
    'SACRIFICES_ID',
    'CREATURE_STATS_ID',
    'CREATURE_FIRST_PERSON_ID',
    'VariableStore',
]

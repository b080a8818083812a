# kwd_decoder/chunks/creatures/__init__.py
"""Creatures catalog."""
from .parser import CreaturesChunk
from .entry import (
    Creature, CreatureAttributes, Attraction, Spell, Resistance, JobPreference,
    JobAlternative, X1323
)
from .flags import (
    CreatureFlag, CreatureFlag2, CreatureFlag3, AnimationType, OffsetType, JobType, AttackType
)

__all__ = [
    'CreaturesChunk',
    'Creature',
    'CreatureAttributes',
    'Attraction',
    'Spell',
    'Resistance',
    'JobPreference',
    'JobAlternative',
    'X1323',
    'CreatureFlag',
    'CreatureFlag2',
    'CreatureFlag3',
    'AnimationType',
    'OffsetType',
    'JobType',
    'AttackType',
]

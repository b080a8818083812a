# kwd_decoder/chunks/creature_spells/__init__.py
"""Creature spells catalog."""
from .parser import CreatureSpellsChunk
from .entry import CreatureSpell
from .flags import CreatureSpellFlag, AlternativeShot

__all__ = ['CreatureSpellsChunk', 'CreatureSpell', 'CreatureSpellFlag', 'AlternativeShot']

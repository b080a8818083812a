# kwd_decoder/chunks/keeper_spells/__init__.py
"""Keeper spells catalog."""
from .parser import KeeperSpellsChunk
from .entry import KeeperSpell
from .flags import KeeperSpellFlag, TargetRule, CastRule, HandAnimId

__all__ = ['KeeperSpellsChunk', 'KeeperSpell', 'KeeperSpellFlag', 'TargetRule',
           'CastRule', 'HandAnimId']

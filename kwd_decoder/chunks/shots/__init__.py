# kwd_decoder/chunks/shots/__init__.py
"""Shots catalog."""
from .parser import ShotsChunk
from .entry import Shot
from .flags import ShotFlag, ShotProcessFlag, DamageType, CollideType, ProcessType, AttackCategory

__all__ = ['ShotsChunk', 'Shot', 'ShotFlag', 'ShotProcessFlag', 'DamageType',
           'CollideType', 'ProcessType', 'AttackCategory']

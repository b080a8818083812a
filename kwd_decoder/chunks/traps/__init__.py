# kwd_decoder/chunks/traps/__init__.py
"""Traps catalog."""
from .parser import TrapsChunk
from .entry import Trap
from .flags import TrapFlag, TriggerType

__all__ = ['TrapsChunk', 'Trap', 'TrapFlag', 'TriggerType']

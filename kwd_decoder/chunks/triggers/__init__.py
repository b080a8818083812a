# kwd_decoder/chunks/triggers/__init__.py
"""Level script triggers."""
from .parser import TriggersChunk, TRIGGER_FAMILIES
from .entry import Trigger, TriggerGeneric, TriggerAction
from .flags import TargetType, ActionType, ComparisonType
from .payloads import GENERIC_LAYOUTS, ACTION_LAYOUTS

__all__ = [
    'TriggersChunk',
    'TRIGGER_FAMILIES',
    'Trigger',
    'TriggerGeneric',
    'TriggerAction',
    'TargetType',
    'ActionType',
    'ComparisonType',
    'GENERIC_LAYOUTS',
    'ACTION_LAYOUTS',
]

# kwd_decoder/chunks/triggers/entry.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from ..common import DictMixin
from .flags import ActionType, ComparisonType, TargetType


@dataclass
class Trigger(DictMixin):
    """Node of the level script graph.

    Siblings are chained through id_next and the first child is id_child,
    0 means none.
    """
    id: int
    id_next: int
    id_child: int
    repeat_times: int
    raw_type: int
    user_data: Dict[str, int] = field(default_factory=dict)

    def get(self, key: str, default: Optional[int] = None) -> Optional[int]:
        return self.user_data.get(key, default)

    @property
    def has_next(self) -> bool:
        return self.id_next != 0

    @property
    def has_child(self) -> bool:
        return self.id_child != 0


@dataclass
class TriggerGeneric(Trigger):
    """Condition trigger."""
    type: Optional[TargetType] = None
    target_value_comparison: Optional[ComparisonType] = None


@dataclass
class TriggerAction(Trigger):
    type: Optional[ActionType] = None


AnyTrigger = Union[TriggerGeneric, TriggerAction]

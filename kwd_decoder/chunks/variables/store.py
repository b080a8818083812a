# kwd_decoder/chunks/variables/store.py
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Set, Union

from .entry import (
    Availability, CreatureFirstPerson, CreaturePool, CreatureStats, MiscVariable, Sacrifice,
    UnknownVariable
)
from .flags import MiscType, StatType


class VariableStore:
    """Tables built from every variables chunk of a level.

    Later records replace earlier ones with the same key, so the level's
    own variables override the global ones.
    """

    def __init__(self):
        self.creature_pools: Dict[int, Dict[int, CreaturePool]] = {}
        self.availabilities: List[Availability] = []
        self.sacrifices: Set[Sacrifice] = set()
        self.creature_stats: Dict[int, Dict[Union[StatType, int], CreatureStats]] = {}
        self.creature_first_person: Dict[int, Dict[Union[StatType, int], CreatureFirstPerson]] = {}
        self.unknown: Set[UnknownVariable] = set()
        self.misc: Dict[int, MiscVariable] = {}
        self._frozen = False

    def add(self, variable) -> None:
        if self._frozen:
            raise RuntimeError("Variables are read only once loaded")
        # CreatureFirstPerson subclasses CreatureStats, test it first
        if isinstance(variable, CreatureFirstPerson):
            self.creature_first_person.setdefault(variable.level, {})[variable.stat_id] = variable
        elif isinstance(variable, CreatureStats):
            self.creature_stats.setdefault(variable.level, {})[variable.stat_id] = variable
        elif isinstance(variable, CreaturePool):
            self.creature_pools.setdefault(variable.player_id, {})[variable.creature_id] = variable
        elif isinstance(variable, Availability):
            self.availabilities.append(variable)
        elif isinstance(variable, Sacrifice):
            self.sacrifices.add(variable)
        elif isinstance(variable, UnknownVariable):
            self.unknown.add(variable)
        elif isinstance(variable, MiscVariable):
            self.misc[variable.variable_id] = variable
        else:
            raise TypeError(f"Not a variable record: {variable!r}")

    def extend(self, variables: Iterable) -> None:
        for variable in variables:
            self.add(variable)

    def freeze(self) -> None:
        """Swap the tables for read only views."""
        self.creature_pools = MappingProxyType(
            {k: MappingProxyType(v) for k, v in self.creature_pools.items()})
        self.creature_stats = MappingProxyType(
            {k: MappingProxyType(v) for k, v in self.creature_stats.items()})
        self.creature_first_person = MappingProxyType(
            {k: MappingProxyType(v) for k, v in self.creature_first_person.items()})
        self.availabilities = tuple(self.availabilities)
        self.sacrifices = frozenset(self.sacrifices)
        self.unknown = frozenset(self.unknown)
        self.misc = MappingProxyType(self.misc)
        self._frozen = True

    def creature_pool(self, player_id: int) -> Optional[Mapping[int, CreaturePool]]:
        return self.creature_pools.get(player_id)

    def stats(self, level: int) -> Optional[Mapping]:
        return self.creature_stats.get(level)

    def first_person_stats(self, level: int) -> Optional[Mapping]:
        return self.creature_first_person.get(level)

    def misc_variable(self, key: Union[MiscType, int]) -> Optional[MiscVariable]:
        return self.misc.get(int(key))

    def __len__(self) -> int:
        return (sum(len(v) for v in self.creature_pools.values())
                + len(self.availabilities) + len(self.sacrifices)
                + sum(len(v) for v in self.creature_stats.values())
                + sum(len(v) for v in self.creature_first_person.values())
                + len(self.unknown) + len(self.misc))

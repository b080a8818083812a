# kwd_decoder/chunks/variables/entry.py
"""Variable records, every one is a 4 byte id plus 12 bytes of payload."""
from dataclasses import dataclass
from typing import Optional, Union

from ...parser.reader import ByteReader, parse_enum
from ..common import DictMixin
from .flags import (
    AvailabilityType, AvailabilityValue, MiscType, SacrificeRewardType, SacrificeType,
    StatType
)


@dataclass
class CreaturePool(DictMixin):
    """How many of a creature may come through a player's portals."""
    creature_id: int
    value: int
    player_id: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'CreaturePool':
        return cls(creature_id=reader.read_int(), value=reader.read_int(),
                   player_id=reader.read_int())


@dataclass
class Availability(DictMixin):
    type: Optional[AvailabilityType]
    player_id: int
    type_id: int
    value: Optional[AvailabilityValue]

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Availability':
        return cls(
            type=reader.read_enum(AvailabilityType, width=2),
            player_id=reader.read_ushort(),
            type_id=reader.read_int(),
            value=parse_enum(reader.read_int(), AvailabilityValue)
        )


@dataclass(frozen=True)
class Sacrifice(DictMixin):
    """Three ingredient temple recipe and its reward."""
    type1: Optional[SacrificeType]
    id1: int
    type2: Optional[SacrificeType]
    id2: int
    type3: Optional[SacrificeType]
    id3: int
    reward_type: Optional[SacrificeRewardType]
    speech_id: int
    reward_value: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Sacrifice':
        return cls(
            type1=reader.read_enum(SacrificeType),
            id1=reader.read_ubyte(),
            type2=reader.read_enum(SacrificeType),
            id2=reader.read_ubyte(),
            type3=reader.read_enum(SacrificeType),
            id3=reader.read_ubyte(),
            reward_type=reader.read_enum(SacrificeRewardType),
            speech_id=reader.read_ubyte(),
            reward_value=reader.read_int()
        )


@dataclass
class CreatureStats(DictMixin):
    """Stat override for one creature experience level."""
    stat_id: Union[StatType, int]
    value: int
    level: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'CreatureStats':
        raw_stat = reader.read_int()
        stat = parse_enum(raw_stat, StatType)
        return cls(
            stat_id=stat if stat is not None else raw_stat,
            value=reader.read_int(),
            level=reader.read_int()
        )


@dataclass
class CreatureFirstPerson(CreatureStats):
    """Same layout as CreatureStats, applies while possessed."""


@dataclass(frozen=True)
class UnknownVariable(DictMixin):
    variable_id: int
    value: int
    unknown1: int
    unknown2: int


@dataclass
class MiscVariable(DictMixin):
    """Scalar tunable, keyed by its raw id; variable_type is set when the id is known."""
    variable_id: int
    variable_type: Optional[MiscType]
    value: int
    unknown1: int
    unknown2: int

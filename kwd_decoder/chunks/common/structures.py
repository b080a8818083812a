"""Small fixed layout structures shared by several catalogs."""
from dataclasses import dataclass
from typing import Tuple

from construct import Struct, Int8ul, Int32ul, Int32sl, Array

from ...parser.reader import ByteReader, FIXED_POINT_FLOAT, parse_flags
from .flags import LightFlag
from .serialize import DictMixin

LightStruct = Struct(
    "position" / Array(3, Int32sl),
    "radius" / Int32sl,
    "flags" / Int32ul,
    "color" / Array(4, Int8ul),
)

StringIdStruct = Struct(
    "ids" / Array(5, Int32ul),
    "x14" / Array(4, Int8ul),
)


@dataclass
class Color(DictMixin):
    r: int
    g: int
    b: int
    a: int = 255


@dataclass
class Light(DictMixin):
    """24 byte light descriptor."""
    position: Tuple[float, float, float]
    radius: float
    flags: LightFlag
    color: Color


@dataclass
class StringId(DictMixin):
    ids: Tuple[int, ...]
    x14: Tuple[int, ...]


def read_light(reader: ByteReader) -> Light:
    raw = reader.read_construct(LightStruct)
    return Light(
        position=tuple(v / FIXED_POINT_FLOAT for v in raw.position),
        radius=raw.radius / FIXED_POINT_FLOAT,
        flags=parse_flags(raw.flags, LightFlag),
        color=Color(*raw.color)
    )


def read_string_id(reader: ByteReader) -> StringId:
    raw = reader.read_construct(StringIdStruct)
    return StringId(ids=tuple(raw.ids), x14=tuple(raw.x14))


def read_color(reader: ByteReader) -> Color:
    """Three byte RGB color"""
    r, g, b = reader.read_ubytes(3)
    return Color(r, g, b)

"""Low level KWD parsing: byte cursor, chunk header and constants."""
from .constants import MapDataType, LoadState
from .reader import ByteReader, parse_enum, parse_flags
from .header import KwdHeader, read_header

__all__ = [
    'MapDataType',
    'LoadState',
    'ByteReader',
    'parse_enum',
    'parse_flags',
    'KwdHeader',
    'read_header',
]

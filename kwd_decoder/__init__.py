"""Dungeon Keeper II KWD/KLD level decoder."""
from .errors import KwdError, ChunkParsingError, UnexpectedEndOfData, KwdLoadError
from .parser.constants import MapDataType, LoadState
from .parser.kwd_file import KwdFile
from .utils.diagnostics import Diagnostics, DiagnosticKind

__version__ = '0.1.0'

__all__ = [
    'KwdFile',
    'MapDataType',
    'LoadState',
    'Diagnostics',
    'DiagnosticKind',
    'KwdError',
    'ChunkParsingError',
    'UnexpectedEndOfData',
    'KwdLoadError',
]

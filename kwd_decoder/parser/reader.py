"""Seekable little-endian byte cursor used by every chunk reader.

All multi-byte values in KWD/KLD files are little endian. Some values are
real numbers stored as fixed point integers, they are converted on read
(divided by 2^12 = 4096 or 2^16 = 65536 depending on the field).
"""
from contextlib import contextmanager
from datetime import datetime
from enum import Enum, IntFlag
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Type, TypeVar, Union
import logging
import struct

from construct import Struct, Int8ul, Int16ul, Padding

from ..errors import UnexpectedEndOfData
from ..utils.diagnostics import Diagnostics, DiagnosticKind
from .constants import STRING_ENCODING

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Enum)
F = TypeVar('F', bound=IntFlag)

FIXED_POINT_FLOAT = 4096.0
FIXED_POINT_DOUBLE = 65536.0

Timestamp = Struct(
    "year" / Int16ul,
    "day" / Int8ul,
    "month" / Int8ul,
    Padding(2),
    "hour" / Int8ul,
    "minute" / Int8ul,
    "second" / Int8ul,
    Padding(1),
)


def parse_enum(value: int, enum_cls: Type[E]) -> Optional[E]:
    """Map a raw value onto an enum, None when the value is not known."""
    try:
        return enum_cls(value)
    except ValueError:
        return None


def parse_flags(value: int, flag_cls: Type[F]) -> F:
    """Parse a bit set against a flag vocabulary, dropping unknown bits."""
    mask = 0
    for member in flag_cls.__members__.values():
        mask |= member.value
    return flag_cls(value & mask)


class ByteReader:
    """Cursor over an in-memory buffer.

    The whole file is buffered up front so peek-ahead reads (seek forward,
    read, seek back) never depend on the underlying stream.

    Args:
        data: Raw bytes
        name: Optional name used in diagnostics (usually the file path)
        diagnostics: Optional sink for recoverable events
    """

    def __init__(
        self,
        data: bytes,
        name: Optional[str] = None,
        diagnostics: Optional[Diagnostics] = None
    ):
        self.data = bytes(data)
        self.name = name
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._pos = 0
        self._saved: List[int] = []

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        diagnostics: Optional[Diagnostics] = None
    ) -> 'ByteReader':
        """Read a whole file into a new cursor."""
        with open(path, 'rb') as f:
            data = f.read()
        logger.debug(f"Buffered {len(data)} bytes from {path}")
        return cls(data, name=str(path), diagnostics=diagnostics)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def remaining(self) -> int:
        return max(0, len(self.data) - self._pos)

    def at_end(self) -> bool:
        return self._pos >= len(self.data)

    def tell(self) -> int:
        """Get current position"""
        return self._pos

    def seek(self, offset: int) -> None:
        """Seek to absolute position, may point past the end."""
        if offset < 0:
            raise ValueError(f"Negative seek offset {offset}")
        self._pos = offset

    def skip(self, count: int) -> None:
        self.seek(self._pos + count)

    def save_position(self) -> int:
        self._saved.append(self._pos)
        return self._pos

    def restore_position(self) -> int:
        self._pos = self._saved.pop()
        return self._pos

    @contextmanager
    def peek(self, offset: int) -> Iterator['ByteReader']:
        """Temporarily move to an absolute offset, restoring on exit."""
        self.save_position()
        try:
            self.seek(offset)
            yield self
        finally:
            self.restore_position()

    def read_bytes(self, count: int) -> bytes:
        """Read raw bytes

        Raises:
            UnexpectedEndOfData: If fewer than count bytes remain
        """
        end = self._pos + count
        if count < 0 or end > len(self.data):
            raise UnexpectedEndOfData(self._pos, count, self.remaining)
        chunk = self.data[self._pos:end]
        self._pos = end
        return chunk

    def read_struct(self, fmt: str) -> Tuple:
        """Read and unpack a struct format (little endian is implied)."""
        if fmt[0] not in '<>!=@':
            fmt = '<' + fmt
        return struct.unpack(fmt, self.read_bytes(struct.calcsize(fmt)))

    def read_construct(self, con: Struct):
        """Parse a fixed size construct Struct at the cursor."""
        return con.parse(self.read_bytes(con.sizeof()))

    # Integers

    def read_ubyte(self) -> int:
        return self.read_bytes(1)[0]

    def read_ushort(self) -> int:
        return self.read_struct('H')[0]

    def read_short(self) -> int:
        return self.read_struct('h')[0]

    def read_uint(self) -> int:
        return self.read_struct('I')[0]

    def read_int(self) -> int:
        return self.read_struct('i')[0]

    def read_ubytes(self, count: int) -> List[int]:
        return list(self.read_bytes(count))

    def read_ushorts(self, count: int) -> List[int]:
        return list(self.read_struct(f'{count}H'))

    def read_uints(self, count: int) -> List[int]:
        return list(self.read_struct(f'{count}I'))

    def read_bool(self) -> bool:
        """32-bit boolean, only 1 means true"""
        return self.read_int() == 1

    # Fixed point

    def read_int_as_float(self) -> float:
        return self.read_int() / FIXED_POINT_FLOAT

    def read_int_as_double(self) -> float:
        return self.read_int() / FIXED_POINT_DOUBLE

    def read_short_as_float(self) -> float:
        return self.read_short() / FIXED_POINT_FLOAT

    def read_vector(self, count: int = 3) -> Tuple[float, ...]:
        return tuple(self.read_int_as_float() for _ in range(count))

    # Strings

    def read_string(self, length: int) -> str:
        """Fixed width single byte string, cut at the first NUL and trimmed."""
        raw = self.read_bytes(length).split(b'\0', 1)[0]
        return raw.decode(STRING_ENCODING, errors='replace').strip()

    def read_string_utf16(self, length: int) -> str:
        """Fixed width UTF-16LE string of length characters."""
        raw = self.read_bytes(length * 2).decode('utf-16-le', errors='replace')
        return raw.split('\0', 1)[0].strip()

    # Enums and flags

    def read_enum(self, enum_cls: Type[E], width: int = 1) -> Optional[E]:
        return parse_enum(self.read_unsigned(width), enum_cls)

    def read_flags(self, flag_cls: Type[F], width: int = 4) -> F:
        return parse_flags(self.read_unsigned(width), flag_cls)

    def read_unsigned(self, width: int) -> int:
        if width == 1:
            return self.read_ubyte()
        if width == 2:
            return self.read_ushort()
        if width == 4:
            return self.read_uint()
        if width == 8:
            return self.read_struct('Q')[0]
        raise ValueError(f"Unsupported field width {width}")

    # Misc

    def read_timestamp(self) -> Optional[datetime]:
        """Read a 10 byte timestamp, None when empty or not a valid date."""
        offset = self._pos
        ts = self.read_construct(Timestamp)
        if not any((ts.year, ts.month, ts.day, ts.hour, ts.minute, ts.second)):
            return None
        try:
            return datetime(ts.year, ts.month, ts.day, ts.hour, ts.minute, ts.second)
        except ValueError:
            self.diagnostics.report(
                DiagnosticKind.INVALID_TIMESTAMP,
                f"Invalid timestamp {ts.year}-{ts.month}-{ts.day} "
                f"{ts.hour}:{ts.minute}:{ts.second}",
                offset=offset
            )
            return None

    def check_null(self, count: int) -> bool:
        """Consume bytes that should be zero, report if they are not."""
        offset = self._pos
        data = self.read_bytes(count)
        if any(data):
            self.diagnostics.report(
                DiagnosticKind.NON_ZERO_PADDING,
                f"Value not 0 at offset {offset} ({data.hex()})",
                offset=offset,
                length=count
            )
            return False
        return True

    def check_offset(self, start: int, item_size: int) -> bool:
        """Drift correction after a record.

        If the cursor is not at start + item_size, report it and seek there.

        Returns:
            True if no correction was needed
        """
        wanted = start + item_size
        if self._pos != wanted:
            self.diagnostics.report(
                DiagnosticKind.RECORD_DRIFT,
                f"Record size differs from expected! File offset is {self._pos} "
                f"and should be {wanted}!",
                offset=start,
                actual=self._pos,
                expected=wanted
            )
            self.seek(wanted)
            return False
        return True

"""Common KWD chunk header."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union
import logging

from ..utils.diagnostics import DiagnosticKind
from .constants import (
    MapDataType, HEADER_SIZE_DEFAULT, HEADER_SIZE_MAP, HEADER_SIZE_TRIGGERS
)
from .reader import ByteReader, parse_enum

logger = logging.getLogger(__name__)


@dataclass
class KwdHeader:
    """Chunk header, one layout per file kind.

    The common part is: kind tag, size width, declared size, first check word
    and the header end offset. A kind dependent tail follows, then the second
    check word and the declared data size.
    """
    raw_id: int
    id: Optional[MapDataType]
    start: int
    size: int = 0
    check_one: int = 0
    header_end_offset: int = 0
    header_size: int = HEADER_SIZE_DEFAULT
    item_count: int = 0
    width: int = 0
    height: int = 0
    unknown: int = 0
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    check_two: int = 0
    data_size: int = 0

    @property
    def item_size(self) -> int:
        """Size of a single record (does not apply to things and triggers)."""
        if self.item_count <= 0:
            return 0
        return (self.size - self.header_size) // self.item_count

    @property
    def end(self) -> int:
        """Absolute offset of the end of this chunk."""
        return self.start + self.size

    @property
    def kind(self) -> Union[str, int]:
        return self.id.name if self.id is not None else self.raw_id

    def to_dict(self) -> dict:
        return {
            'id': self.kind,
            'size': self.size,
            'item_count': self.item_count,
            'item_size': self.item_size,
            'width': self.width,
            'height': self.height,
            'date_created': self.date_created.isoformat() if self.date_created else None,
            'date_modified': self.date_modified.isoformat() if self.date_modified else None,
            'check_one': self.check_one,
            'check_two': self.check_two,
            'data_size': self.data_size,
        }


def read_header(reader: ByteReader) -> KwdHeader:
    """Read a chunk header and leave the cursor at the chunk data.

    Args:
        reader: Cursor positioned at a chunk boundary

    Returns:
        The decoded header
    """
    start = reader.tell()
    raw_id = reader.read_uint()
    header = KwdHeader(raw_id=raw_id, id=parse_enum(raw_id, MapDataType), start=start)

    # Bytes in the real size field, seems to be 4 always
    size_width = reader.read_uint()
    if size_width == 2:
        header.size = reader.read_ushort()
    elif size_width == 4:
        header.size = reader.read_uint()
    header.check_one = reader.read_uint()
    header.header_end_offset = reader.read_uint()

    tail_start = reader.tell()
    if header.id is MapDataType.MAP:
        header.header_size = HEADER_SIZE_MAP
        header.width = reader.read_uint()
        header.height = reader.read_uint()
    elif header.id is MapDataType.TRIGGERS:
        header.header_size = HEADER_SIZE_TRIGGERS
        header.item_count = reader.read_uint() + reader.read_uint()
        header.unknown = reader.read_uint()
        header.date_created = reader.read_timestamp()
        header.date_modified = reader.read_timestamp()
    elif header.id is MapDataType.LEVEL:
        header.item_count = reader.read_ushort()
        header.height = reader.read_ushort()
        header.unknown = reader.read_uint()
        header.date_created = reader.read_timestamp()
        header.date_modified = reader.read_timestamp()
    else:
        header.item_count = reader.read_uint()
        header.unknown = reader.read_uint()
        header.date_created = reader.read_timestamp()
        header.date_modified = reader.read_timestamp()

    if reader.tell() != tail_start + header.header_end_offset:
        reader.diagnostics.report(
            DiagnosticKind.HEADER_MISMATCH,
            f"Incorrect parsing of file header, at {reader.tell()} "
            f"but header end is {tail_start + header.header_end_offset}",
            offset=start,
            actual=reader.tell(),
            expected=tail_start + header.header_end_offset
        )

    header.check_two = reader.read_uint()
    header.data_size = reader.read_uint()
    logger.debug(f"Chunk {header.kind} at {start}: {header.item_count} items")
    return header

"""Base chunk readers."""
from typing import Any, List, Optional
import logging

from ..errors import ChunkParsingError
from ..parser.constants import MapDataType
from ..parser.header import KwdHeader
from ..parser.reader import ByteReader

logger = logging.getLogger(__name__)

__all__ = ['BaseChunk', 'CatalogChunk', 'ChunkParsingError']


class BaseChunk:
    """Base class for chunk readers.

    A reader is created with the already decoded header and a cursor placed
    at the first byte after the header.
    """

    kind: Optional[MapDataType] = None
    label: str = 'chunk'

    def __init__(self, header: KwdHeader, reader: ByteReader):
        """Initialize chunk reader.

        Args:
            header: Decoded chunk header
            reader: Cursor positioned at the chunk data
        """
        self.header = header
        self.reader = reader

    def parse(self) -> Any:
        """Parse chunk data.

        Raises:
            ChunkParsingError: If chunk data is invalid
        """
        raise NotImplementedError("Subclasses must implement parse()")

    def validate(self) -> None:
        """Check enforced header constants, override where needed."""
        pass


class CatalogChunk(BaseChunk):
    """Fixed count loop over fixed layout records.

    Every record is followed by drift correction against the per item size
    declared by the header.
    """

    def read_entry(self) -> Any:
        raise NotImplementedError("Subclasses must implement read_entry()")

    def parse(self) -> List[Any]:
        self.validate()
        logger.info(f"Reading {self.label}!")
        entries = []
        item_size = self.header.item_size
        for _ in range(self.header.item_count):
            start = self.reader.tell()
            entries.append(self.read_entry())
            self.reader.check_offset(start, item_size)
        return entries

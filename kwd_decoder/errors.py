"""Exception hierarchy for the KWD decoder."""
from pathlib import Path
from typing import Optional, Union


class KwdError(Exception):
    """Base class for all decoder errors."""
    pass


class ChunkParsingError(KwdError):
    """Raised when chunk data is structurally corrupt."""
    pass


class UnexpectedEndOfData(ChunkParsingError):
    """Raised when a read runs past the end of the buffer."""

    def __init__(self, offset: int, wanted: int, available: int):
        super().__init__(
            f"Unexpected end of data at offset {offset}: "
            f"wanted {wanted} bytes, {available} available"
        )
        self.offset = offset
        self.wanted = wanted
        self.available = available


class KwdLoadError(KwdError):
    """Raised when a level file or one of its companion files fails to load."""

    def __init__(self, path: Optional[Union[str, Path]]):
        super().__init__(f"Failed to read the file {path}!")
        self.path = path

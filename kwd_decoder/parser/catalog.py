"""Id keyed catalog built from one or more chunk loads."""
from types import MappingProxyType
from typing import Any, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, TypeVar
import logging

from ..utils.diagnostics import DiagnosticKind, Diagnostics
from .constants import MapDataType

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Catalog(Generic[T]):
    """Builder for one catalog.

    The first load fills the catalog. Every later load of the same kind is an
    override: entries are merged in and replace existing ids.

    Args:
        kind: Chunk kind feeding this catalog
        diagnostics: Sink receiving override events
    """

    def __init__(self, kind: MapDataType, diagnostics: Optional[Diagnostics] = None):
        self.kind = kind
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.loads = 0
        self._entries: Dict[int, T] = {}
        self._frozen: Optional[Mapping[int, T]] = None

    @property
    def label(self) -> str:
        return self.kind.name.lower().replace('_', ' ')

    def merge(self, entries: Iterable[T]) -> List[T]:
        """Add decoded entries, last writer wins per id.

        Returns:
            The entries that were merged
        """
        if self._frozen is not None:
            raise RuntimeError(f"Catalog {self.label} is read only")
        entries = list(entries)
        if self.loads:
            replaced = [e.id for e in entries if e.id in self._entries]
            self.diagnostics.report(
                DiagnosticKind.CATALOG_OVERRIDE,
                f"Overrides {self.label}!",
                kind=self.kind.name,
                count=len(entries),
                replaced=replaced
            )
        for entry in entries:
            self._entries[entry.id] = entry
        self.loads += 1
        return entries

    def freeze(self) -> Mapping[int, T]:
        """Stop accepting merges and return a read only view."""
        if self._frozen is None:
            self._frozen = MappingProxyType(self._entries)
        return self._frozen

    @property
    def entries(self) -> Mapping[int, T]:
        return self._frozen if self._frozen is not None else MappingProxyType(self._entries)

    def get(self, entry_id: int, default: Any = None) -> Optional[T]:
        return self._entries.get(entry_id, default)

    def sorted(self) -> List[T]:
        """Entries in id order."""
        return [self._entries[k] for k in sorted(self._entries)]

    def __getitem__(self, entry_id: int) -> T:
        return self._entries[entry_id]

    def __contains__(self, entry_id: int) -> bool:
        return entry_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self.sorted())

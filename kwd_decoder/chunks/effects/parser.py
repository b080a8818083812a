# kwd_decoder/chunks/effects/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import Effect


class EffectsChunk(CatalogChunk):
    """Effects.kwd catalog reader."""

    kind = MapDataType.EFFECTS
    label = 'effects'

    def read_entry(self) -> Effect:
        return Effect.from_reader(self.reader)

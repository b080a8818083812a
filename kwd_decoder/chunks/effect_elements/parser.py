# kwd_decoder/chunks/effect_elements/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import EffectElement


class EffectElementsChunk(CatalogChunk):
    """EffectElements.kwd catalog reader."""

    kind = MapDataType.EFFECT_ELEMENTS
    label = 'effect elements'

    def read_entry(self) -> EffectElement:
        return EffectElement.from_reader(self.reader)

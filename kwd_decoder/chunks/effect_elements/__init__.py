# kwd_decoder/chunks/effect_elements/__init__.py
"""Effect elements catalog."""
from .parser import EffectElementsChunk
from .entry import EffectElement
from .flags import EffectElementFlag

__all__ = ['EffectElementsChunk', 'EffectElement', 'EffectElementFlag']

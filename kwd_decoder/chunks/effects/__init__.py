# kwd_decoder/chunks/effects/__init__.py
"""Effects catalog."""
from .parser import EffectsChunk
from .entry import Effect
from .flags import EffectFlag, GenerationType

__all__ = ['EffectsChunk', 'Effect', 'EffectFlag', 'GenerationType']

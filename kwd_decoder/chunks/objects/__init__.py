# kwd_decoder/chunks/objects/__init__.py
"""Objects catalog."""
from .parser import ObjectsChunk
from .entry import GameObject
from .flags import ObjectFlag, ObjectState

__all__ = ['ObjectsChunk', 'GameObject', 'ObjectFlag', 'ObjectState']

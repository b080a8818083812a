"""Structures shared by several catalogs."""
from .art_resource import (
    ArtResource, ImagePayload, MeshPayload, AnimatingMeshPayload,
    ProceduralMeshPayload, RawPayload, read_art_resource, ART_RESOURCE_SIZE
)
from .flags import ArtResourceType, ArtResourceFlag, LightFlag, Material
from .serialize import DictMixin, to_jsonable
from .structures import Color, Light, StringId, read_light, read_string_id, read_color

__all__ = [
    'ArtResource',
    'ImagePayload',
    'MeshPayload',
    'AnimatingMeshPayload',
    'ProceduralMeshPayload',
    'RawPayload',
    'read_art_resource',
    'ART_RESOURCE_SIZE',
    'ArtResourceType',
    'ArtResourceFlag',
    'LightFlag',
    'Material',
    'DictMixin',
    'to_jsonable',
    'Color',
    'Light',
    'StringId',
    'read_light',
    'read_string_id',
    'read_color',
]

"""ArtResource, the 84 byte visual resource descriptor embedded in catalogs."""
from dataclasses import dataclass
from typing import Optional, Union
import logging

from ...parser.reader import ByteReader
from ...utils.diagnostics import DiagnosticKind
from .flags import ArtResourceFlag, ArtResourceType
from .serialize import DictMixin

logger = logging.getLogger(__name__)

ART_RESOURCE_SIZE = 84
NAME_LENGTH = 64
PAYLOAD_SIZE = 12


@dataclass
class ImagePayload(DictMixin):
    """Sprites and alpha images."""
    width: float
    height: float
    frames: int


@dataclass
class MeshPayload(DictMixin):
    scale: float
    frames: int
    unknown_1: int


@dataclass
class AnimatingMeshPayload(DictMixin):
    frames: int
    fps: int
    start_dist: int
    end_dist: int
    start_af: int
    end_af: int


@dataclass
class ProceduralMeshPayload(DictMixin):
    id: int
    unknown_1: int
    unknown_2: int


@dataclass
class RawPayload(DictMixin):
    """Terrain meshes, mesh collections and unknown kinds, meaning not decoded."""
    unknown_1: int
    unknown_2: int
    unknown_3: int


Payload = Union[ImagePayload, MeshPayload, AnimatingMeshPayload,
                ProceduralMeshPayload, RawPayload]


@dataclass
class ArtResource(DictMixin):
    name: str
    flags: ArtResourceFlag
    type: ArtResourceType
    sometimes_one: int
    payload: Optional[Payload] = None
    unknown_n: Optional[int] = None


def _read_image(reader: ByteReader) -> ImagePayload:
    return ImagePayload(
        width=reader.read_int_as_float(),
        height=reader.read_int_as_float(),
        frames=reader.read_uint()
    )


def _read_mesh(reader: ByteReader) -> MeshPayload:
    return MeshPayload(
        scale=reader.read_int_as_float(),
        frames=reader.read_uint(),
        unknown_1=reader.read_uint()
    )


def _read_animating_mesh(reader: ByteReader, start_af: int, end_af: int) -> AnimatingMeshPayload:
    return AnimatingMeshPayload(
        frames=reader.read_uint(),
        fps=reader.read_uint(),
        start_dist=reader.read_ushort(),
        end_dist=reader.read_ushort(),
        start_af=start_af,
        end_af=end_af
    )


def _read_procedural_mesh(reader: ByteReader) -> ProceduralMeshPayload:
    return ProceduralMeshPayload(
        id=reader.read_uint(),
        unknown_1=reader.read_uint(),
        unknown_2=reader.read_uint()
    )


def _read_raw(reader: ByteReader) -> RawPayload:
    unknown_1, unknown_2, unknown_3 = reader.read_uints(3)
    return RawPayload(unknown_1, unknown_2, unknown_3)


# Animating meshes also need the two animation frame bytes and are read apart
PAYLOAD_READERS = {
    ArtResourceType.SPRITE: _read_image,
    ArtResourceType.ALPHA: _read_image,
    ArtResourceType.ADDITIVE_ALPHA: _read_image,
    ArtResourceType.TERRAIN_MESH: _read_raw,
    ArtResourceType.MESH: _read_mesh,
    ArtResourceType.PROCEDURAL_MESH: _read_procedural_mesh,
    ArtResourceType.MESH_COLLECTION: _read_raw,
    ArtResourceType.UNKNOWN: _read_raw,
}


def read_art_resource(reader: ByteReader) -> Optional[ArtResource]:
    """Read an ArtResource at the cursor (always consumes 84 bytes).

    The type tag sits after the 12 byte payload, so it is peeked first and
    the payload is decoded afterwards in place.

    Returns:
        The resource, or None if it has no name or its type is not known
    """
    name = reader.read_string(NAME_LENGTH)
    flags = reader.read_flags(ArtResourceFlag)

    payload_start = reader.tell()
    with reader.peek(payload_start + PAYLOAD_SIZE):
        raw_type = reader.read_ubyte()
        if raw_type == ArtResourceType.ANIMATING_MESH:
            start_af = reader.read_ubyte()  # if HAS_START_ANIMATION
            end_af = reader.read_ubyte()    # if HAS_END_ANIMATION
            unknown_n = None
        else:
            unknown_n = reader.read_ushort()
        sometimes_one = reader.read_ubyte()

    try:
        resource_type = ArtResourceType(raw_type)
    except ValueError:
        resource_type = None

    payload = None
    if resource_type is ArtResourceType.NONE:
        reader.check_null(PAYLOAD_SIZE)
    elif resource_type is None:
        reader.check_null(PAYLOAD_SIZE)
        reader.diagnostics.report(
            DiagnosticKind.UNKNOWN_ART_RESOURCE_TYPE,
            f"Unknown artResource type {raw_type}",
            offset=payload_start,
            type=raw_type
        )
    elif resource_type is ArtResourceType.ANIMATING_MESH:
        payload = _read_animating_mesh(reader, start_af, end_af)
    else:
        payload = PAYLOAD_READERS[resource_type](reader)

    # Type, the two type dependent bytes and sometimes_one
    reader.skip(4)

    if not name or resource_type is None:
        return None
    return ArtResource(
        name=name,
        flags=flags,
        type=resource_type,
        sometimes_one=sometimes_one,
        payload=payload,
        unknown_n=unknown_n
    )

"""Tests for the shared sub-structure readers."""
import struct

import pytest

from kwd_decoder.chunks.common import (
    ART_RESOURCE_SIZE, ArtResourceFlag, ArtResourceType, read_art_resource, read_light,
    read_string_id
)
from kwd_decoder.chunks.common.art_resource import PAYLOAD_READERS, MeshPayload
from kwd_decoder.parser import ByteReader
from kwd_decoder.utils.diagnostics import DiagnosticKind


def art_resource(name: str, flags: int, payload: bytes, type_bytes: bytes) -> bytes:
    return name.encode().ljust(64, b'\0') + struct.pack('<I', flags) + payload + type_bytes


class TestArtResource:
    def test_sprite(self):
        data = art_resource('GUI_Lair', 0x4,
                            struct.pack('<iiI', 4096 * 2, 4096, 8),
                            bytes([ArtResourceType.SPRITE, 0, 0, 1]))
        reader = ByteReader(data)
        resource = read_art_resource(reader)
        assert reader.tell() == ART_RESOURCE_SIZE
        assert resource.name == 'GUI_Lair'
        assert resource.type is ArtResourceType.SPRITE
        assert ArtResourceFlag.ANIMATING_TEXTURE in resource.flags
        assert resource.payload.width == 2.0
        assert resource.payload.height == 1.0
        assert resource.payload.frames == 8
        assert resource.sometimes_one == 1

    def test_animating_mesh_reads_animation_frames(self):
        data = art_resource('Imp_Walk', 0x18,
                            struct.pack('<IIHH', 24, 30, 10, 20),
                            bytes([ArtResourceType.ANIMATING_MESH, 2, 5, 0]))
        resource = read_art_resource(ByteReader(data))
        assert resource.payload.frames == 24
        assert resource.payload.fps == 30
        assert (resource.payload.start_dist, resource.payload.end_dist) == (10, 20)
        assert (resource.payload.start_af, resource.payload.end_af) == (2, 5)

    def test_mesh_keeps_type_word(self):
        data = art_resource('Imp', 0, struct.pack('<iII', 4096 // 2, 3, 7),
                            bytes([ArtResourceType.MESH, 0x34, 0x12, 1]))
        reader = ByteReader(data)
        resource = read_art_resource(reader)
        assert reader.tell() == ART_RESOURCE_SIZE
        assert resource.payload == MeshPayload(scale=0.5, frames=3, unknown_1=7)
        assert resource.unknown_n == 0x1234
        assert not hasattr(resource.payload, 'start_af')

    def test_procedural_mesh(self):
        data = art_resource('Gem', 0, struct.pack('<III', 9, 1, 2),
                            bytes([ArtResourceType.PROCEDURAL_MESH, 0, 0, 0]))
        resource = read_art_resource(ByteReader(data))
        assert resource.payload.id == 9
        assert resource.unknown_n == 0

    @pytest.mark.parametrize('resource_type', sorted(PAYLOAD_READERS))
    def test_payload_reader_takes_cursor_only(self, resource_type):
        reader = ByteReader(bytes(12))
        PAYLOAD_READERS[resource_type](reader)
        assert reader.at_end()

    def test_animating_mesh_read_apart(self):
        assert ArtResourceType.ANIMATING_MESH not in PAYLOAD_READERS

    def test_empty_name_is_none(self):
        data = art_resource('', 0, struct.pack('<III', 1, 2, 3),
                            bytes([ArtResourceType.MESH, 0, 0, 0]))
        reader = ByteReader(data)
        assert read_art_resource(reader) is None
        assert reader.tell() == ART_RESOURCE_SIZE

    def test_unknown_type_is_none(self):
        data = art_resource('Weird', 0, bytes(12), bytes([42, 0, 0, 0]))
        reader = ByteReader(data)
        assert read_art_resource(reader) is None
        assert reader.tell() == ART_RESOURCE_SIZE
        assert reader.diagnostics.count(DiagnosticKind.UNKNOWN_ART_RESOURCE_TYPE) == 1


class TestStructures:
    def test_light(self):
        data = struct.pack('<iiiiI4B', 4096, 2 * 4096, 0, 3 * 4096, 0x1, 255, 128, 0, 0)
        reader = ByteReader(data)
        light = read_light(reader)
        assert reader.tell() == 24
        assert light.position == (1.0, 2.0, 0.0)
        assert light.radius == 3.0
        assert (light.color.r, light.color.g) == (255, 128)

    def test_string_id(self):
        reader = ByteReader(struct.pack('<5I4B', 1, 2, 3, 4, 5, 0, 0, 0, 0))
        string_id = read_string_id(reader)
        assert reader.tell() == 24
        assert string_id.ids == (1, 2, 3, 4, 5)

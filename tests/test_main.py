"""Tests for the kwd-decode command line."""
import json
import logging

import pytest

from kwd_decoder.main import main
from kwd_decoder.parser.constants import MapDataType

from builders import chunk, level_chunk, map_chunk


@pytest.fixture
def level_file(tmp_path):
    maps = tmp_path / 'Data' / 'editor' / 'maps'
    maps.mkdir(parents=True)
    (maps / 'Tiny.kwd').write_bytes(level_chunk(
        [(MapDataType.MAP, 'Data\\editor\\maps\\TinyMap'),
         (MapDataType.GLOBALS, 'Data\\editor\\maps\\TinyGlobals')],
        name='Tiny'))
    (maps / 'TinyMap.kwd').write_bytes(map_chunk(1, 1, [(1, 0, 0, 0)]))
    (maps / 'TinyGlobals.kwd').write_bytes(chunk(MapDataType.GLOBALS, b''))
    return maps / 'Tiny.kwd'


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers and isinstance(handler, logging.FileHandler):
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMain:
    def test_writes_summary(self, level_file, tmp_path):
        output = tmp_path / 'out'
        code = main([str(level_file), '--base-path', str(tmp_path),
                     '--output', str(output), '--log-dir', str(tmp_path / 'logs')])
        assert code == 0

        summary = json.loads((output / 'Tiny_summary.json').read_text(encoding='utf-8'))
        assert summary['state'] == 'LOADED'
        assert summary['map'] == {'width': 1, 'height': 1}
        assert summary['level']['name'] == 'Tiny'
        assert summary['diagnostics'] == {'NO_READER': 1}

    def test_header_only(self, level_file, tmp_path):
        output = tmp_path / 'out'
        code = main([str(level_file), '--base-path', str(tmp_path), '--header-only',
                     '--output', str(output), '--log-dir', str(tmp_path / 'logs')])
        assert code == 0
        summary = json.loads((output / 'Tiny_summary.json').read_text(encoding='utf-8'))
        assert summary['state'] == 'DIMENSIONS_ONLY'
        assert summary['catalogs']['TERRAIN'] == 0

    def test_failure_returns_one(self, level_file, tmp_path):
        (level_file.parent / 'TinyMap.kwd').unlink()
        code = main([str(level_file), '--base-path', str(tmp_path),
                     '--output', str(tmp_path / 'out'), '--log-dir', str(tmp_path / 'logs')])
        assert code == 1

    def test_missing_level_file(self, tmp_path):
        assert main([str(tmp_path / 'nope.kwd'), '--log-dir', str(tmp_path / 'logs')]) == 1

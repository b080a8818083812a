# kwd_decoder/chunks/things/parser.py
from typing import List
import logging

from ...parser.constants import MapDataType
from ...utils.diagnostics import DiagnosticKind
from ..base import BaseChunk
from .entry import THING_TYPES, Thing

logger = logging.getLogger(__name__)


class ThingsChunk(BaseChunk):
    """*Things.kld reader.

    Records are variable length, each prefixed by (tag, length). Drift
    correction uses the record's own length rather than the header item size.
    """

    kind = MapDataType.THINGS
    label = 'things'

    def parse(self) -> List[Thing]:
        logger.info("Reading things!")
        reader = self.reader
        things = []
        for _ in range(self.header.item_count):
            tag = reader.read_uint()
            length = reader.read_uint()
            start = reader.tell()

            thing_cls = THING_TYPES.get(tag)
            if thing_cls is None:
                reader.skip(length)
                reader.diagnostics.report(
                    DiagnosticKind.UNKNOWN_THING,
                    f"Unsupported thing type {tag}!",
                    offset=start,
                    tag=tag,
                    length=length
                )
                continue

            things.append(thing_cls.from_reader(reader))
            reader.check_offset(start, length)
        return things

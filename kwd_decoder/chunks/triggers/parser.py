# kwd_decoder/chunks/triggers/parser.py
from typing import List
import logging

from ...parser.constants import MapDataType, TRIGGER_ACTION, TRIGGER_GENERIC
from ...parser.reader import parse_enum
from ...utils.diagnostics import DiagnosticKind
from ..base import BaseChunk
from .entry import AnyTrigger, TriggerAction, TriggerGeneric
from .flags import ActionType, TargetType
from .payloads import ACTION_LAYOUTS, BODY_SIZE, GENERIC_LAYOUTS, read_payload

logger = logging.getLogger(__name__)

# family tag -> (record class, inner type enum, payload layouts)
TRIGGER_FAMILIES = {
    TRIGGER_GENERIC: (TriggerGeneric, TargetType, GENERIC_LAYOUTS),
    TRIGGER_ACTION: (TriggerAction, ActionType, ACTION_LAYOUTS),
}


class TriggersChunk(BaseChunk):
    """*Triggers.kld reader.

    Each record is (family tag, length) followed by an 8 byte body, the id
    trailer, then the inner type and repeat count in the last two bytes.
    The inner type is peeked first since the body layout depends on it.
    """

    kind = MapDataType.TRIGGERS
    label = 'triggers'

    def parse(self) -> List[AnyTrigger]:
        logger.info("Reading triggers!")
        reader = self.reader
        triggers = []
        for _ in range(self.header.item_count):
            tag = reader.read_uint()
            length = reader.read_uint()
            start = reader.tell()

            family = TRIGGER_FAMILIES.get(tag)
            if family is None:
                reader.skip(length)
                reader.diagnostics.report(
                    DiagnosticKind.UNKNOWN_TRIGGER,
                    f"Unsupported trigger type {tag}!",
                    offset=start,
                    tag=tag,
                    length=length
                )
            else:
                triggers.append(self._read_trigger(start, length, *family))
            reader.check_offset(start, length)
        return triggers

    def _read_trigger(self, start, length, trigger_cls, type_cls, layouts) -> AnyTrigger:
        reader = self.reader
        with reader.peek(start + length - 2):
            raw_type = reader.read_ubyte()
            repeat_times = reader.read_ubyte()

        trigger_type = parse_enum(raw_type, type_cls)
        layout = layouts.get(trigger_type) if trigger_type is not None else None
        if layout is None:
            reader.check_null(BODY_SIZE)
            reader.diagnostics.report(
                DiagnosticKind.UNKNOWN_TRIGGER_TYPE,
                f"Unsupported Type of {trigger_cls.__name__} {raw_type}",
                offset=start,
                type=raw_type
            )
            comparison, user_data = None, {}
        else:
            comparison, user_data = read_payload(reader, layout)

        trigger_id = reader.read_ushort()
        id_next = reader.read_ushort()
        id_child = reader.read_ushort()
        # inner type and repeat count, already read
        reader.skip(2)

        trigger = trigger_cls(
            id=trigger_id,
            id_next=id_next,
            id_child=id_child,
            repeat_times=repeat_times,
            raw_type=raw_type,
            user_data=user_data,
            type=trigger_type
        )
        if isinstance(trigger, TriggerGeneric):
            trigger.target_value_comparison = comparison
        return trigger

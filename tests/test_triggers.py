"""Tests for the trigger graph reader."""
import struct

from kwd_decoder.chunks import TriggersChunk
from kwd_decoder.chunks.triggers import (
    ActionType, ComparisonType, TargetType, TriggerAction, TriggerGeneric
)
from kwd_decoder.parser import ByteReader, read_header
from kwd_decoder.utils.diagnostics import DiagnosticKind

from builders import trigger, triggers_chunk

GENERIC = 213
ACTION = 214


def parse_triggers(records, generic_count, action_count=0):
    reader = ByteReader(triggers_chunk(records, generic_count, action_count))
    header = read_header(reader)
    return TriggersChunk(header, reader).parse(), reader


class TestTriggers:
    def test_flag_condition(self):
        body = struct.pack('<BBBBI', ComparisonType.EQUAL_TO, 3, 0, 1, 42)
        triggers, reader = parse_triggers(
            [trigger(GENERIC, TargetType.FLAG, 5, body, id_next=6, id_child=7, repeat=2)], 1)
        flag = triggers[0]
        assert isinstance(flag, TriggerGeneric)
        assert flag.type is TargetType.FLAG
        assert flag.target_value_comparison is ComparisonType.EQUAL_TO
        assert flag.user_data == {'target_id': 3, 'flag': 0, 'flag_id': 1, 'value': 42}
        assert (flag.id, flag.id_next, flag.id_child) == (5, 6, 7)
        assert flag.repeat_times == 2
        assert flag.has_next and flag.has_child
        assert reader.at_end()
        assert len(reader.diagnostics) == 0

    def test_action(self):
        body = struct.pack('<BBB5x', 1, 2, 1)
        triggers, _ = parse_triggers([trigger(ACTION, ActionType.SET_ALLIANCE, 9, body)], 0, 1)
        action = triggers[0]
        assert isinstance(action, TriggerAction)
        assert action.type is ActionType.SET_ALLIANCE
        assert action.get('player_two_id') == 2
        assert not action.has_next

    def test_unknown_inner_type_keeps_trailer(self):
        triggers, reader = parse_triggers(
            [trigger(GENERIC, 250, 12, id_next=13, id_child=14),
             trigger(GENERIC, TargetType.TIMER, 13)], 2)
        unknown = triggers[0]
        assert unknown.type is None
        assert unknown.raw_type == 250
        assert (unknown.id, unknown.id_next, unknown.id_child) == (12, 13, 14)
        assert unknown.user_data == {}
        assert triggers[1].id == 13
        assert reader.at_end()
        assert reader.diagnostics.count(DiagnosticKind.UNKNOWN_TRIGGER_TYPE) == 1

    def test_non_zero_padding_is_not_fatal(self):
        triggers, reader = parse_triggers([trigger(GENERIC, 250, 1, b'\x01' + bytes(7))], 1)
        assert triggers[0].id == 1
        assert reader.diagnostics.count(DiagnosticKind.NON_ZERO_PADDING) == 1

    def test_unknown_family_is_skipped(self):
        records = [struct.pack('<II', 300, 4) + bytes(4), trigger(ACTION, ActionType.NONE, 3)]
        triggers, reader = parse_triggers(records, 1, 1)
        assert [t.id for t in triggers] == [3]
        assert reader.at_end()
        assert reader.diagnostics.count(DiagnosticKind.UNKNOWN_TRIGGER) == 1

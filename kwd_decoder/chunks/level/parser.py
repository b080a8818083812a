# kwd_decoder/chunks/level/parser.py
import logging

from ...errors import ChunkParsingError
from ...parser.constants import (
    MapDataType, LEVEL_CHECK_THREE, LEVEL_EXTENDED_DATA_SIZE,
    DEFAULT_EFFECTS_PATH, DEFAULT_EFFECT_ELEMENTS_PATH
)
from ...parser.paths import fix_path
from ...parser.reader import parse_enum
from ..base import BaseChunk
from .entry import FilePath, GameLevel
from .flags import LevFlag, LevelReward, TextTable

logger = logging.getLogger(__name__)


class LevelChunk(BaseChunk):
    """Level info chunk, found alone in the primary level file.

    Holds the level metadata, then the 222 sentinel and the path table
    listing the companion files. The header height gives the count of
    trailing unknown words.
    """

    kind = MapDataType.LEVEL
    label = 'level info'

    def parse(self) -> GameLevel:
        logger.info("Reading level info!")
        r = self.reader
        level = GameLevel()

        name = r.read_string_utf16(64)
        if name.lower().endswith('.kwd'):
            name = name[:-4]
        level.name = name
        level.description = r.read_string_utf16(1024)
        level.author = r.read_string_utf16(64)
        level.email = r.read_string_utf16(64)
        level.information = r.read_string_utf16(1024)

        level.trigger_id = r.read_ushort()
        level.ticks_per_sec = r.read_ushort()
        level.x01184 = r.read_ubytes(520)
        # Rare, only a few campaign levels have any
        for _ in range(512):
            message = r.read_string_utf16(20)
            if message:
                level.messages.append(message)

        level.lvl_flags = r.read_flags(LevFlag, width=2)
        level.sound_category = r.read_string(32)
        level.talisman_pieces = r.read_ubyte()
        level.rewards_prev = [r.read_enum(LevelReward) for _ in range(4)]
        level.rewards_next = [r.read_enum(LevelReward) for _ in range(4)]
        level.sound_track = r.read_ubyte()
        level.text_table_id = r.read_enum(TextTable)
        level.text_title_id = r.read_ushort()
        level.text_plot_id = r.read_ushort()
        level.text_debrief_id = r.read_ushort()
        level.text_objectv_id = r.read_ushort()
        level.x063c3 = r.read_ushort()
        level.text_subobjctv_id1 = r.read_ushort()
        level.text_subobjctv_id2 = r.read_ushort()
        level.text_subobjctv_id3 = r.read_ushort()
        level.speclvl_idx = r.read_ushort()

        # Stored as two parallel arrays, any object above 0 is a creature id
        objects = r.read_ubytes(8)
        text_ids = r.read_ushorts(8)
        level.introduction_override_text_ids = {
            obj: text_id for obj, text_id in zip(objects, text_ids) if obj > 0
        }
        level.terrain_path = r.read_string(32)

        # Some very old files stop here
        if self.header.data_size > LEVEL_EXTENDED_DATA_SIZE:
            level.one_shot_horny_lev = r.read_ubyte()
            level.player_count = r.read_ubyte()
            level.rewards_prev.append(r.read_enum(LevelReward))
            level.rewards_next.append(r.read_enum(LevelReward))
            level.speech_horny_id = r.read_ushort()
            level.speech_prelvl_id = r.read_ushort()
            level.speech_postlvl_win = r.read_ushort()
            level.speech_postlvl_lost = r.read_ushort()
            level.speech_postlvl_news = r.read_ushort()
            level.speech_prelvl_genr = r.read_ushort()
            level.hero_name = r.read_string_utf16(32)

        check_three = r.read_uint()
        if check_three != LEVEL_CHECK_THREE:
            raise ChunkParsingError("Level file is corrupted")
        level.content_size = r.read_uint()

        for _ in range(self.header.item_count):
            raw_id = r.read_uint()
            unknown2 = r.read_int()
            path = fix_path(r.read_string(64))
            file_path = FilePath(id=parse_enum(raw_id, MapDataType), path=path, unknown2=unknown2)
            if file_path.id is MapDataType.GLOBALS:
                level.custom_overrides = True
                logger.info("The map uses custom overrides!")
            level.paths.append(file_path)

        # Normal maps do not refer the effects nor the effect elements
        if not level.custom_overrides:
            for default in (FilePath(MapDataType.EFFECTS, DEFAULT_EFFECTS_PATH),
                            FilePath(MapDataType.EFFECT_ELEMENTS, DEFAULT_EFFECT_ELEMENTS_PATH)):
                if default not in level.paths:
                    level.paths.append(default)

        level.unknown = r.read_uints(self.header.height) if self.header.height else []
        return level

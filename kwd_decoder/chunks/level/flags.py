# kwd_decoder/chunks/level/flags.py
from enum import IntEnum, IntFlag


class LevFlag(IntFlag):
    UNUSED = 0x0001
    ALWAYS_IMPRISON_ENEMIES = 0x0002
    ONE_SHOT_HORNY = 0x0004
    IS_SECRET_LEVEL = 0x0008
    IS_SPECIAL_LEVEL = 0x0010
    SHOW_HERO_KILLS = 0x0020
    AUTO_OBJECTIVE_BED_MONSTER = 0x0040
    IS_MY_PET_DUNGEON_LEVEL = 0x0080
    IS_SKIRMISH_LEVEL = 0x0100
    IS_MULTIPLAYER_LEVEL = 0x0200


class LevelReward(IntEnum):
    NONE = 0
    REAPER_TALISMAN = 1
    SECRET_LEVEL_1 = 2
    SECRET_LEVEL_2 = 3
    SECRET_LEVEL_3 = 4
    SECRET_LEVEL_4 = 5
    SECRET_LEVEL_5 = 6
    SPECIAL_LEVEL_1 = 7
    SPECIAL_LEVEL_2 = 8
    SPECIAL_LEVEL_3 = 9
    SPECIAL_LEVEL_4 = 10
    SPECIAL_LEVEL_5 = 11


class TextTable(IntEnum):
    NONE = 0
    LEVEL_1 = 1
    LEVEL_2 = 2
    LEVEL_3 = 3
    LEVEL_4 = 4
    LEVEL_5 = 5
    LEVEL_6 = 6
    LEVEL_7 = 7
    LEVEL_8 = 8
    LEVEL_9 = 9
    LEVEL_10 = 10
    LEVEL_11 = 11
    LEVEL_12 = 12
    LEVEL_13 = 13
    LEVEL_14 = 14
    LEVEL_15 = 15
    LEVEL_16 = 16
    LEVEL_17 = 17
    LEVEL_18 = 18
    LEVEL_19 = 19
    LEVEL_20 = 20
    MULTI_PLAYER = 21
    MY_PET_DUNGEON = 22
    SECRET = 23
    EXTRA = 24

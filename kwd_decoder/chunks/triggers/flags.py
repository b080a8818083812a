# kwd_decoder/chunks/triggers/flags.py
from enum import IntEnum


class TargetType(IntEnum):
    """Condition tested by a generic trigger."""
    NONE = 0
    FLAG = 1
    TIMER = 2
    CREATURE_CREATED = 12
    CREATURE_KILLED = 13
    CREATURE_SLAPPED = 14
    CREATURE_ATTACKED = 15
    CREATURE_IMPRISONED = 16
    CREATURE_TORTURED = 17
    CREATURE_CONVERTED = 18
    CREATURE_CLAIMED = 19
    CREATURE_ANGRY = 20
    CREATURE_AFRAID = 21
    CREATURE_STEALS = 22
    CREATURE_LEAVES = 23
    CREATURE_STUNNED = 24
    CREATURE_DYING = 25
    CREATURE_HEALTH = 26
    CREATURE_GOLD_HELD = 27
    CREATURE_EXPERIENCE_LEVEL = 28
    CREATURE_HUNGER_SATED = 29
    CREATURE_PICKS_UP_PORTAL_GEM = 30
    CREATURE_SACKED = 31
    CREATURE_PICKED_UP = 32
    PLAYER_CREATURES = 33
    PLAYER_HAPPY_CREATURES = 34
    PLAYER_ANGRY_CREATURES = 35
    PLAYER_CREATURES_KILLED = 36
    PLAYER_KILLS_CREATURES = 37
    PLAYER_ROOM_SLABS = 38
    PLAYER_ROOMS = 39
    PLAYER_ROOM_SIZE = 40
    PLAYER_DOORS = 41
    PLAYER_TRAPS = 42
    PLAYER_KEEPER_SPELL = 43
    PLAYER_GOLD = 44
    PLAYER_GOLD_MINED = 45
    PLAYER_MANA = 46
    PLAYER_DESTROYS = 47
    LEVEL_TIME = 48
    LEVEL_CREATURES = 49
    LEVEL_PAY_DAY = 50
    LEVEL_PLAYED = 51
    PARTY_CREATED = 52
    PARTY_MEMBERS_KILLED = 53
    PARTY_MEMBERS_CAPTURED = 54
    PARTY_MEMBERS_INCAPACITATED = 55
    AP_CONGREGATE_IN = 56
    AP_CLAIM_PART_OF = 57
    AP_CLAIM_ALL_OF = 58
    AP_SLAB_TYPES = 59
    AP_TAG_PART_OF = 60
    AP_TAG_ALL_OF = 61
    AP_POSESSED_CREATURE_ENTERS = 62
    PLAYER_CREATURE_PICKED_UP = 63
    PLAYER_CREATURE_DROPPED = 64
    PLAYER_CREATURE_SLAPPED = 65
    PLAYER_CREATURE_SACKED = 66
    PLAYER_ROOM_FURNITURE = 67
    PLAYER_SLAPS = 68
    PLAYER_CREATURES_GROUPED = 69
    PLAYER_CREATURES_DYING = 70
    PLAYER_CREATURES_AT_LEVEL = 71
    PLAYER_DUNGEON_BREACHED = 72
    PLAYER_ENEMY_BREACHED = 73
    PLAYER_KILLED = 74
    GUI_TRANSITION_ENDS = 75
    GUI_BUTTON_PRESSED = 76


class ActionType(IntEnum):
    """Effect performed by an action trigger."""
    NONE = 0
    CREATE_CREATURE = 1
    DISPLAY_OBJECTIVE = 2
    MAKE = 3
    FLAG = 4
    INITIALIZE_TIMER = 5
    FLASH_BUTTON = 6
    WIN_GAME = 7
    LOSE_GAME = 8
    CREATE_HERO_PARTY = 9
    SET_OBJECTIVE = 10
    FLASH_ACTION_POINT = 11
    REVEAL_ACTION_POINT = 12
    SEND_TO_AP = 13
    CREATE_PORTAL_GEM = 14
    ALTER_TERRAIN_TYPE = 15
    COLLAPSE_HERO_GATE = 16
    CHANGE_ROOM_OWNER = 17
    SET_ALLIANCE = 18
    SET_CREATURE_MOODS = 19
    SET_SYSTEM_MESSAGES = 20
    SET_TIMER_SPEECH = 21
    SET_WIDESCREEN_MODE = 22
    ALTER_SPEED = 23
    SET_FIGHT_FLAG = 24
    SET_PORTAL_STATUS = 25
    SET_SLAPS_LIMIT = 26
    DISPLAY_SLAB_OWNER = 27
    DISPLAY_NEXT_ROOM_TYPE = 28
    MAKE_OBJECTIVE = 29
    ZOOM_TO_ACTION_POINT = 30
    PLAY_SPEECH = 31
    DISPLAY_TEXT_STRING = 32
    ATTACH_PORTAL_GEM = 33
    MAKE_HUNGRY = 34
    REMOVE_FROM_MAP = 35
    ZOOM_TO = 36
    FORCE_FIRST_PERSON = 37
    LOSE_SUBOBJECTIVE = 38
    WIN_SUBOBJECTIVE = 39
    SET_MUSIC_LEVEL = 40
    SHOW_HEALTH_FLOWER = 41
    SET_TIME_LIMIT = 42
    FOLLOW_CAMERA_PATH = 43
    ROTATE_AROUND_ACTION_POINT = 44
    TOGGLE_EFFECT_GENERATOR = 45
    GENERATE_CREATURE = 46
    INFORMATION = 47


class ComparisonType(IntEnum):
    NONE = 0
    LESS_THAN = 1
    LESS_OR_EQUAL_TO = 2
    EQUAL_TO = 3
    GREATER_THAN = 4
    GREATER_OR_EQUAL_TO = 5
    NOT_EQUAL_TO = 6

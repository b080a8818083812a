# kwd_decoder/parser/constants.py
from enum import Enum, IntEnum, auto


class MapDataType(IntEnum):
    """File kind tag found in every chunk header and in the level path table."""
    GLOBALS = 0
    MAP = 100
    TERRAIN = 110
    ROOMS = 120
    TRAPS = 130
    DOORS = 140
    KEEPER_SPELLS = 150
    CREATURE_SPELLS = 160
    CREATURES = 170
    PLAYERS = 180
    THINGS = 190
    TRIGGERS = 210
    LEVEL = 220
    VARIABLES = 230
    OBJECTS = 240
    EFFECT_ELEMENTS = 250
    SHOTS = 260
    EFFECTS = 270
    CAMERAS = 280


class LoadState(Enum):
    """Lifecycle of a KwdFile."""
    UNINITIALIZED = auto()    # nothing read yet
    HEADER_ONLY = auto()      # level info and path table read
    LOADED = auto()           # every companion file decoded (terminal)
    DIMENSIONS_ONLY = auto()  # only the map header dimensions read


# Header sizes including the common part, the tail and the trailing words
HEADER_SIZE_DEFAULT = 56
HEADER_SIZE_MAP = 36
HEADER_SIZE_TRIGGERS = 60

# Check words that are enforced
CREATURE_SPELLS_CHECK_ONE = 161
CREATURE_SPELLS_CHECK_TWO = 162
LEVEL_CHECK_THREE = 222

# Level info trailing fields exist only in files bigger than this
LEVEL_EXTENDED_DATA_SIZE = 25603

# Creature records at least this big carry the extended trailing block
CREATURE_EXTENDED_ITEM_SIZE = 5537

# Trigger family tags
TRIGGER_GENERIC = 213
TRIGGER_ACTION = 214

ROOM_PORTAL_ID = 3

# Paths are relative to the game root
EDITOR_FOLDER = 'Data/editor/'
DEFAULT_EXTENSION = '.kwd'
DEFAULT_EFFECTS_PATH = EDITOR_FOLDER + 'Effects.kwd'
DEFAULT_EFFECT_ELEMENTS_PATH = EDITOR_FOLDER + 'EffectElements.kwd'

STRING_ENCODING = 'cp1252'

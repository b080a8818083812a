# kwd_decoder/chunks/creatures/flags.py
from enum import Enum, IntEnum, IntFlag, auto


class CreatureFlag(IntFlag):
    IS_WORKER = 0x00000001
    CAN_BE_PICKED_UP = 0x00000002
    CAN_BE_SLAPPED = 0x00000004
    ALWAYS_FLEE = 0x00000008
    CAN_WALK_ON_LAVA = 0x00000010
    CAN_WALK_ON_WATER = 0x00000020
    IS_EVIL = 0x00000040
    IS_IMMUNE_TO_TURNCOAT = 0x00000080
    AVAILABLE_VIA_PORTAL = 0x00000100
    CAN_FLY = 0x00000200
    IS_HORNY = 0x00000400
    GENERATE_DEAD_BODY = 0x00000800
    CAN_BE_HYPNOTIZED = 0x00001000
    IS_IMMUNE_TO_CHICKEN = 0x00002000
    IS_FEARLESS = 0x00004000
    CAN_BE_ELECTROCUTED = 0x00008000
    NEED_BODY_FOR_FIGHT_IDLE = 0x00010000
    NOT_TRAINABLE = 0x00020000
    DONT_RETURN_TO_LAIR = 0x00040000
    DONT_SLEEP = 0x00080000
    IMMUNE_TO_DISEASE = 0x00100000
    IS_SPECIALIST = 0x00200000
    IMMUNE_TO_FREEZE = 0x00400000
    IS_STEALTHY = 0x00800000
    CAN_BE_GUARD = 0x01000000
    HAS_HEALTH_BAR = 0x02000000
    IS_CHICKEN_IMMUNE = 0x04000000
    IS_HERO = 0x08000000


class CreatureFlag2(IntFlag):
    IS_EGG = 0x0001
    IS_MALE = 0x0002
    IS_FEMALE = 0x0004
    CAN_CAPTURE_PRISONERS = 0x0008


class CreatureFlag3(IntFlag):
    UNK_0001 = 0x0001
    UNK_0002 = 0x0002
    UNK_0004 = 0x0004
    UNK_0008 = 0x0008


class AnimationType(Enum):
    WALK = auto()
    RUN = auto()
    DRAGGED = auto()
    RECOIL_FORWARDS = auto()
    MELEE_ATTACK = auto()
    CAST_SPELL = auto()
    DIE = auto()
    HAPPY = auto()
    ANGRY = auto()
    STUNNED = auto()
    IN_HAND = auto()
    SLEEPING = auto()
    EATING = auto()
    RESEARCHING = auto()
    NULL_2 = auto()
    NULL_1 = auto()
    TORTURED_WHEEL = auto()
    NULL_3 = auto()
    DRINKING = auto()
    IDLE_1 = auto()
    RECOIL_BACKWARDS = auto()
    MANUFACTURING = auto()
    PRAYING = auto()
    FALLBACK = auto()
    TORTURED_CHAIR = auto()
    TORTURED_CHAIR_SKELETON = auto()
    GET_UP = auto()
    DANCE = auto()
    DRUNK = auto()
    ENTRANCE = auto()
    IDLE_2 = auto()
    SPECIAL_1 = auto()
    SPECIAL_2 = auto()
    DRUNKED_WALK = auto()
    ROAR = auto()
    NULL_4 = auto()
    DRUNKED_IDLE = auto()
    SWIPE = auto()
    IDLE_3 = auto()
    IDLE_4 = auto()
    IDLE_3_1 = auto()
    IDLE_4_1 = auto()
    DIG = auto()
    BACK_OFF = auto()
    STAND_STILL = auto()
    STEALTH_WALK = auto()
    DEATH_POSE = auto()


# Stored back to back right after the raw 84 byte block
BASE_ANIMATIONS = (
    AnimationType.WALK, AnimationType.RUN, AnimationType.DRAGGED,
    AnimationType.RECOIL_FORWARDS, AnimationType.MELEE_ATTACK, AnimationType.CAST_SPELL,
    AnimationType.DIE, AnimationType.HAPPY, AnimationType.ANGRY, AnimationType.STUNNED,
    AnimationType.IN_HAND, AnimationType.SLEEPING, AnimationType.EATING,
    AnimationType.RESEARCHING, AnimationType.NULL_2, AnimationType.NULL_1,
    AnimationType.TORTURED_WHEEL, AnimationType.NULL_3, AnimationType.DRINKING,
    AnimationType.IDLE_1, AnimationType.RECOIL_BACKWARDS, AnimationType.MANUFACTURING,
    AnimationType.PRAYING, AnimationType.FALLBACK, AnimationType.TORTURED_CHAIR,
    AnimationType.TORTURED_CHAIR_SKELETON, AnimationType.GET_UP, AnimationType.DANCE,
    AnimationType.DRUNK, AnimationType.ENTRANCE, AnimationType.IDLE_2,
    AnimationType.SPECIAL_1, AnimationType.SPECIAL_2, AnimationType.DRUNKED_WALK,
    AnimationType.ROAR, AnimationType.NULL_4,
)


class OffsetType(Enum):
    PORTAL_ENTRANCE = auto()
    FALL_BACK_GET_UP = auto()
    PRAYING = auto()
    CORPSE = auto()
    OFFSET_5 = auto()
    OFFSET_6 = auto()
    OFFSET_7 = auto()
    OFFSET_8 = auto()


class GammaEffect(IntEnum):
    NORMAL = 0
    VAMPIRE_RED = 1
    DARK_ELF_PURPLE = 2
    SKELETON_BLACK_N_WHITE = 3
    SALAMANDER_INFRARED = 4
    DARK_ANGEL_BRIGHT_BLUE = 5


class AttackType(IntEnum):
    NONE = 0
    PHYSICAL = 1
    FIRE = 2
    COLD = 3
    ELECTRIC = 4
    POISON = 5
    HOLY = 6
    SPELL = 7


class JobType(IntEnum):
    NONE = 0
    SLEEP = 1
    EAT = 2
    RESEARCH = 3
    TRAIN = 4
    MANUFACTURE = 5
    GUARD = 6
    TORTURE = 7
    PRAY = 8
    DRINK = 9
    LEAVE = 10
    DIG = 11
    CLAIM = 12
    CARRY = 13
    FIGHT = 14
    EXPLORE = 15
    SCAVENGE = 16
    PRISON = 17


class JobClass(IntEnum):
    THINKER = 0
    FIGHTER = 1
    SCOUT = 2
    WORKER = 3


class FightStyle(IntEnum):
    NON_FIGHTER = 0
    MELEE_FIGHTER = 1
    RANGED_FIGHTER = 2
    SPELLCASTER = 3


class Swipe(IntEnum):
    NONE = 0
    SWIPE_1 = 1
    SWIPE_2 = 2
    SWIPE_3 = 3
    SWIPE_4 = 4
    SWIPE_5 = 5


class SpecialAbility(IntEnum):
    NONE = 0
    HYPNOTISE = 1
    TURN_TO_BAT = 2
    SNEAK = 3
    DIG = 4
    INVISIBILITY = 5
    CHANGE_FORM = 6
    TELEPORT = 7


class DeathFallDirection(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

# kwd_decoder/chunks/variables/flags.py
from enum import IntEnum

# Variable ids with a dedicated record shape
CREATURE_POOL = 1
AVAILABILITY = 2
CREATURE_STATS_ID = 65
CREATURE_FIRST_PERSON_ID = 74
SACRIFICES_ID = 75
UNKNOWN_IDS = frozenset({0, 17, 66, 77})


class AvailabilityType(IntEnum):
    ROOM = 1
    CREATURE = 2
    DOOR = 3
    TRAP = 4
    SPELL = 5


class AvailabilityValue(IntEnum):
    NOT_AVAILABLE = 0
    AVAILABLE = 1
    RESEARCHABLE = 2
    ENABLE = 3


class SacrificeType(IntEnum):
    NONE = 0
    CREATURE = 1
    GOLD = 2


class SacrificeRewardType(IntEnum):
    NONE = 0
    CREATURE = 1
    RESEARCH = 2
    SPELL = 3
    HEAL = 4
    GOLD = 5
    MANA = 6
    CURSE = 7


class StatType(IntEnum):
    """Creature statistic overridden per experience level."""
    HEIGHT_TILES = 0
    HEALTH = 1
    HEAL_REQUIREMENT = 2
    HEAL_THRESHOLD = 3
    STRENGTH = 4
    SPEED_TILES_PER_SECOND = 5
    RUN_SPEED_TILES_PER_SECOND = 6
    EXPERIENCE_POINTS_FOR_NEXT_LEVEL = 7
    EXPERIENCE_POINTS_PER_SECOND = 8
    EXPERIENCE_POINTS_FROM_TRAINING_PER_SECOND = 9
    RESEARCH_POINTS_PER_SECOND = 10
    MANUFACTURE_POINTS_PER_SECOND = 11
    DECOMPOSE_VALUE = 12
    DISTANCE_CAN_SEE_TILES = 13
    DISTANCE_CAN_HEAR_TILES = 14
    HUNGER_RATE = 15
    HUNGER_FILL_CHICKENS = 16
    THREAT = 17
    PAY = 18
    MAX_GOLD_HELD = 19
    INITIAL_GOLD_HELD = 20
    FEAR = 21
    MELEE_DAMAGE = 22
    MELEE_RECHARGE_TIME_SECONDS = 23
    MELEE_RANGE = 24
    SLAP_DAMAGE = 25
    MANA_GENERATED_BY_PRAYER_PER_SECOND = 26
    TORTURE_TIME_TO_CONVERT_SECONDS = 27
    POSSESSION_MANA_COST_PER_SECOND = 28
    OWN_LAND_HEALTH_INCREASE_PER_SECOND = 29


class MiscType(IntEnum):
    """Level wide tunable, only the ones with a known meaning are named."""
    ENTRANCE_GENERATION_SPEED_SECONDS = 3
    CLAIM_TILE_HEALTH = 4
    ATTACK_PREFERENCE_VALUE = 5
    MAX_GOLD_PER_TREASURY_TILE = 6
    TIME_BEFORE_FREE_CREATURE_PAYDAY_SECONDS = 7
    PAY_DAY_FREQUENCY_SECONDS = 8
    MAX_GOLD_PILE_OUTSIDE_TREASURY = 9
    DEAD_BODY_DIES_AFTER_SECONDS = 10
    PRISONER_HEALTH_LOST_PER_SECOND = 11
    MODIFY_HEALTH_OF_CREATURE_IN_LAIR_PER_SECOND = 12
    CREATURE_SLEEPS_WHEN_BELOW_PERCENT_HEALTH = 13
    IMP_IDLE_DELAY_BEFORE_REEVALUATION_SECONDS = 14
    TORTURE_MODIFY_HEALTH_PER_SECOND = 15
    GOLD_MINED_FROM_GEMS = 16
    MINIMUM_IMP_THRESHOLD = 18
    DIG_RATE_IMP = 19
    CLAIM_TILE_RATE = 20
    CREATURE_DYING_STATE_DURATION_SECONDS = 21
    MAX_NUMBER_OF_THINGS_IN_HAND = 22
    SPECIAL_INCREASE_GOLD_AMOUNT = 23

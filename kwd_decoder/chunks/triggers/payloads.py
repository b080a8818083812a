# kwd_decoder/chunks/triggers/payloads.py
"""Payload layouts of the 8 byte trigger body, per inner type.

A layout is a sequence of (key, width) steps read in order:
    key is the user data name, width is 1, 2 or 4 bytes (unsigned)
    key None is padding that should be zero
    key COMPARISON is the comparison byte of a generic trigger
"""
from typing import Dict, Optional, Sequence, Tuple

from ...parser.reader import ByteReader
from .flags import ActionType, ComparisonType, TargetType

COMPARISON = 'comparison'
BODY_SIZE = 8

Layout = Sequence[Tuple[Optional[str], int]]


def pad(count: int) -> Tuple[None, int]:
    return (None, count)


CMP = (COMPARISON, 1)
EMPTY: Layout = (pad(8),)


def _layouts(*groups) -> Dict[int, Layout]:
    table = {}
    for types, layout in groups:
        for t in types:
            table[t] = tuple(layout)
    return table


T = TargetType
GENERIC_LAYOUTS: Dict[int, Layout] = _layouts(
    ((T.AP_CONGREGATE_IN, T.AP_POSESSED_CREATURE_ENTERS),
     (CMP, ('player_id', 1), ('target_id', 1), ('target_type', 1), ('value', 4))),
    ((T.AP_SLAB_TYPES,),
     (CMP, ('player_id', 1), ('terrain_id', 1), pad(1), ('value', 4))),
    ((T.AP_TAG_PART_OF, T.AP_TAG_ALL_OF, T.AP_CLAIM_PART_OF, T.AP_CLAIM_ALL_OF),
     (CMP, ('player_id', 1), pad(2), ('value', 4))),
    ((T.PLAYER_DUNGEON_BREACHED, T.PLAYER_ENEMY_BREACHED),
     (('player_id', 1), pad(7))),
    ((T.PLAYER_KILLED,),
     (('player_id', 1), pad(3), ('value', 4))),
    ((T.PLAYER_CREATURE_PICKED_UP, T.PLAYER_CREATURE_SLAPPED, T.PLAYER_CREATURE_SACKED),
     (('creature_id', 1), pad(7))),
    ((T.PLAYER_CREATURE_DROPPED,),
     (('creature_id', 1), ('room_id', 1), pad(6))),
    ((T.PLAYER_CREATURES, T.PLAYER_HAPPY_CREATURES, T.PLAYER_ANGRY_CREATURES),
     (CMP, ('creature_id', 1), ('flag', 1), ('player_id', 1), ('value', 4))),
    ((T.PLAYER_CREATURES_KILLED, T.PLAYER_KILLS_CREATURES),
     (CMP, ('target_id', 1), ('flag', 1), ('player_id', 1), ('value', 4))),
    ((T.PLAYER_ROOMS, T.PLAYER_ROOM_SLABS, T.PLAYER_ROOM_SIZE, T.PLAYER_ROOM_FURNITURE),
     (CMP, ('room_id', 1), ('flag', 1), ('player_id', 1), ('value', 4))),
    ((T.PLAYER_DOORS, T.PLAYER_TRAPS, T.PLAYER_KEEPER_SPELL, T.PLAYER_DESTROYS),
     (CMP, ('target_id', 1), ('flag', 1), ('player_id', 1), ('value', 4))),
    ((T.PLAYER_SLAPS, T.PLAYER_GOLD, T.PLAYER_GOLD_MINED, T.PLAYER_MANA,
      T.PLAYER_CREATURES_GROUPED, T.PLAYER_CREATURES_DYING),
     (CMP, pad(1), ('flag', 1), ('player_id', 1), ('value', 4))),
    ((T.PLAYER_CREATURES_AT_LEVEL,),
     (CMP, ('target_id', 1), ('flag', 1), ('player_id', 1), ('value', 4))),
    ((T.LEVEL_PAY_DAY, T.CREATURE_KILLED, T.CREATURE_SLAPPED, T.CREATURE_ATTACKED,
      T.CREATURE_IMPRISONED, T.CREATURE_TORTURED, T.CREATURE_CONVERTED, T.CREATURE_CLAIMED,
      T.CREATURE_ANGRY, T.CREATURE_AFRAID, T.CREATURE_STEALS, T.CREATURE_LEAVES,
      T.CREATURE_STUNNED, T.CREATURE_DYING, T.GUI_TRANSITION_ENDS, T.CREATURE_PICKED_UP,
      T.CREATURE_SACKED, T.CREATURE_PICKS_UP_PORTAL_GEM, T.CREATURE_HUNGER_SATED,
      T.PARTY_CREATED),
     EMPTY),
    ((T.CREATURE_CREATED,),
     (pad(4), ('value', 4))),
    ((T.LEVEL_PLAYED, T.PARTY_MEMBERS_CAPTURED, T.CREATURE_EXPERIENCE_LEVEL,
      T.CREATURE_GOLD_HELD, T.CREATURE_HEALTH, T.LEVEL_TIME, T.LEVEL_CREATURES),
     (CMP, pad(3), ('value', 4))),
    ((T.PARTY_MEMBERS_KILLED, T.PARTY_MEMBERS_INCAPACITATED),
     (CMP, ('unknown', 1), pad(2), ('value', 4))),
    ((T.GUI_BUTTON_PRESSED,),
     (('target_type', 1), ('target_id', 1), pad(2), ('value', 4))),
    ((T.FLAG,),
     (CMP, ('target_id', 1), ('flag', 1), ('flag_id', 1), ('value', 4))),
    ((T.TIMER,),
     (CMP, ('target_id', 1), ('flag', 1), ('timer_id', 1), ('value', 4))),
)

A = ActionType
ACTION_LAYOUTS: Dict[int, Layout] = _layouts(
    ((A.ALTER_TERRAIN_TYPE,),
     (('terrain_id', 1), ('player_id', 1), pad(2), ('pos_x', 2), ('pos_y', 2))),
    ((A.COLLAPSE_HERO_GATE,),
     (pad(4), ('pos_x', 2), ('pos_y', 2))),
    ((A.CHANGE_ROOM_OWNER,),
     (pad(1), ('player_id', 1), pad(2), ('pos_x', 2), ('pos_y', 2))),
    ((A.SET_ALLIANCE,),
     (('player_one_id', 1), ('player_two_id', 1), ('available', 1), pad(5))),
    ((A.SET_CREATURE_MOODS, A.SET_SYSTEM_MESSAGES, A.SET_TIMER_SPEECH,
      A.SET_WIDESCREEN_MODE, A.ALTER_SPEED, A.SET_FIGHT_FLAG, A.SET_PORTAL_STATUS),
     (('available', 1), pad(7))),
    ((A.SET_SLAPS_LIMIT,),
     (pad(4), ('value', 4))),
    ((A.INITIALIZE_TIMER,),
     (('timer_id', 1), pad(3), ('value', 4))),
    ((A.FLAG,),
     (('flag_id', 1), ('flag', 1), pad(2), ('value', 4))),
    ((A.MAKE,),
     (('player_id', 1), ('type', 1), ('target_id', 1), ('available', 1), pad(4))),
    ((A.DISPLAY_SLAB_OWNER,),
     (('available', 1), pad(7))),
    ((A.DISPLAY_NEXT_ROOM_TYPE, A.MAKE_OBJECTIVE, A.ZOOM_TO_ACTION_POINT),
     (('target_id', 1), pad(7))),
    ((A.DISPLAY_OBJECTIVE,),
     (('objective_id', 4), ('action_point_id', 1), pad(3))),
    ((A.PLAY_SPEECH,),
     (('speech_id', 4), ('text', 1), ('introduction', 1), ('path_id', 2))),
    ((A.DISPLAY_TEXT_STRING,),
     (('text_id', 4), pad(4))),
    ((A.ATTACH_PORTAL_GEM, A.MAKE_HUNGRY, A.REMOVE_FROM_MAP, A.ZOOM_TO, A.WIN_GAME,
      A.LOSE_GAME, A.FORCE_FIRST_PERSON, A.LOSE_SUBOBJECTIVE, A.WIN_SUBOBJECTIVE),
     EMPTY),
    ((A.SET_MUSIC_LEVEL, A.SHOW_HEALTH_FLOWER),
     (('value', 4), pad(4))),
    ((A.SET_TIME_LIMIT,),
     (('timer_id', 1), pad(3), ('value', 4))),
    ((A.FOLLOW_CAMERA_PATH,),
     (('path_id', 1), ('action_point_id', 1), ('available', 1), pad(5))),
    ((A.FLASH_BUTTON,),
     (('type', 1), ('target_id', 1), ('available', 1), pad(1), ('value', 4))),
    ((A.FLASH_ACTION_POINT,),
     (('action_point_id', 1), ('available', 1), pad(2), ('value', 4))),
    ((A.REVEAL_ACTION_POINT,),
     (('action_point_id', 1), ('available', 1), pad(6))),
    ((A.ROTATE_AROUND_ACTION_POINT,),
     (('action_point_id', 1), ('available', 1), ('angle', 2), ('time', 4))),
    ((A.CREATE_CREATURE,),
     (('creature_id', 1), ('player_id', 1), ('level', 1), ('flag', 1),
      ('pos_x', 2), ('pos_y', 2))),
    ((A.SET_OBJECTIVE,),
     (('player_id', 1), ('type', 1), pad(2), ('action_point_id', 4))),
    ((A.CREATE_HERO_PARTY,),
     (('party_id', 1), ('type', 1), pad(2), ('action_point_id', 1), pad(3))),
    ((A.TOGGLE_EFFECT_GENERATOR,),
     (('generator_id', 1), ('available', 1), pad(6))),
    ((A.GENERATE_CREATURE,),
     (('creature_id', 1), ('level', 1), pad(6))),
    ((A.INFORMATION,),
     (('information_id', 4), ('action_point_id', 1), pad(3))),
    ((A.SEND_TO_AP,),
     (pad(4), ('action_point_id', 1), pad(3))),
    ((A.CREATE_PORTAL_GEM,),
     (('object_id', 1), ('player_id', 1), pad(2), ('pos_x', 2), ('pos_y', 2))),
)


def read_payload(reader: ByteReader, layout: Layout) -> Tuple[Optional[ComparisonType], Dict[str, int]]:
    """Read a trigger body with the given layout.

    Returns:
        The comparison (None if the layout has none) and the user data
    """
    comparison = None
    user_data = {}
    for key, width in layout:
        if key is None:
            reader.check_null(width)
        elif key == COMPARISON:
            comparison = reader.read_enum(ComparisonType)
        else:
            user_data[key] = reader.read_unsigned(width)
    return comparison, user_data

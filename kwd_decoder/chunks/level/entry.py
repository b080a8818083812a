# kwd_decoder/chunks/level/entry.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ...parser.constants import MapDataType
from ..common import DictMixin
from .flags import LevFlag, LevelReward, TextTable


@dataclass(frozen=True)
class FilePath(DictMixin):
    """Entry of the level path table, equal when kind and path match."""
    id: Optional[MapDataType]
    path: str
    unknown2: int = field(default=0, compare=False)


@dataclass
class GameLevel(DictMixin):
    """Level metadata and the table of companion files."""
    name: str = ''
    description: str = ''
    author: str = ''
    email: str = ''
    information: str = ''
    trigger_id: int = 0
    ticks_per_sec: int = 0
    x01184: List[int] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    lvl_flags: LevFlag = LevFlag(0)
    sound_category: str = ''
    talisman_pieces: int = 0
    rewards_prev: List[Optional[LevelReward]] = field(default_factory=list)
    rewards_next: List[Optional[LevelReward]] = field(default_factory=list)
    sound_track: int = 0
    text_table_id: Optional[TextTable] = None
    text_title_id: int = 0
    text_plot_id: int = 0
    text_debrief_id: int = 0
    text_objectv_id: int = 0
    x063c3: int = 0
    text_subobjctv_id1: int = 0
    text_subobjctv_id2: int = 0
    text_subobjctv_id3: int = 0
    speclvl_idx: int = 0
    introduction_override_text_ids: Dict[int, int] = field(default_factory=dict)
    terrain_path: str = ''
    one_shot_horny_lev: int = 0
    player_count: int = 0
    speech_horny_id: int = 0
    speech_prelvl_id: int = 0
    speech_postlvl_win: int = 0
    speech_postlvl_lost: int = 0
    speech_postlvl_news: int = 0
    speech_prelvl_genr: int = 0
    hero_name: str = ''
    content_size: int = 0
    paths: List[FilePath] = field(default_factory=list)
    unknown: List[int] = field(default_factory=list)
    custom_overrides: bool = False

    def file(self, kind: MapDataType) -> Optional[FilePath]:
        """First path table entry of the given kind."""
        for path in self.paths:
            if path.id == kind:
                return path
        return None

    def has_path(self, kind: Union[MapDataType, int]) -> bool:
        return self.file(kind) is not None

# kwd_decoder/chunks/players/parser.py
from ...parser.constants import MapDataType
from ..base import CatalogChunk
from .entry import Player


class PlayersChunk(CatalogChunk):
    kind = MapDataType.PLAYERS
    label = 'players'

    def read_entry(self) -> Player:
        return Player.from_reader(self.reader)

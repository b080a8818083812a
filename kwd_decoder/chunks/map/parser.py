# kwd_decoder/chunks/map/parser.py
import logging

from ...parser.constants import MapDataType
from ...parser.reader import parse_enum
from ..base import BaseChunk
from .entry import GameMap, Tile, TileStruct
from .flags import BridgeTerrainType

logger = logging.getLogger(__name__)


class MapChunk(BaseChunk):
    """Grid of 4 byte tiles, y outer and x inner, sized by the MAP header."""

    kind = MapDataType.MAP
    label = 'map'

    def parse(self) -> GameMap:
        logger.info("Reading map!")
        game_map = GameMap(self.header.width, self.header.height)
        for y in range(game_map.height):
            for x in range(game_map.width):
                raw = self.reader.read_construct(TileStruct)
                game_map.set_tile(x, y, Tile(
                    terrain_id=raw.terrain_id,
                    player_id=raw.player_id,
                    flag=parse_enum(raw.flag, BridgeTerrainType),
                    unknown=raw.unknown
                ))
        return game_map

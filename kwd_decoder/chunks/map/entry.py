# kwd_decoder/chunks/map/entry.py
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from construct import Struct, Int8ul
import numpy as np

from ..common import DictMixin
from .flags import BridgeTerrainType

TileStruct = Struct(
    "terrain_id" / Int8ul,
    "player_id" / Int8ul,
    "flag" / Int8ul,
    "unknown" / Int8ul,
)


@dataclass
class Tile(DictMixin):
    terrain_id: int
    player_id: int
    flag: Optional[BridgeTerrainType]
    unknown: int


class GameMap:
    """Row major tile grid, indexed as map.tile(x, y)."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._tiles: List[List[Optional[Tile]]] = [[None] * width for _ in range(height)]

    def tile(self, x: int, y: int) -> Optional[Tile]:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._tiles[y][x]
        return None

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self._tiles[y][x] = tile

    def __iter__(self) -> Iterator[Tuple[int, int, Tile]]:
        for y, row in enumerate(self._tiles):
            for x, tile in enumerate(row):
                yield x, y, tile

    def _grid(self, attr: str) -> np.ndarray:
        grid = np.zeros((self.height, self.width), dtype=np.uint8)
        for x, y, tile in self:
            if tile is not None:
                grid[y, x] = getattr(tile, attr)
        return grid

    def terrain_ids(self) -> np.ndarray:
        """Terrain ids shaped (height, width)."""
        return self._grid('terrain_id')

    def player_ids(self) -> np.ndarray:
        """Owning player ids shaped (height, width)."""
        return self._grid('player_id')

    def to_dict(self) -> dict:
        return {
            'width': self.width,
            'height': self.height,
            'terrain_ids': self.terrain_ids().tolist(),
            'player_ids': self.player_ids().tolist(),
        }

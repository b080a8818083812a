"""Level loader tying the level info, the map and the catalogs together."""
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
import logging

from ..chunks import CATALOG_KINDS, CHUNK_READERS
from ..chunks.creatures import Creature
from ..chunks.level import GameLevel
from ..chunks.map import BridgeTerrainType, GameMap
from ..chunks.objects import GameObject
from ..chunks.rooms import Room
from ..chunks.terrain import Terrain, TerrainFlag
from ..chunks.things import Thing
from ..chunks.triggers import Trigger
from ..chunks.variables import MiscType, VariableStore
from ..errors import ChunkParsingError, KwdError, KwdLoadError
from ..utils.diagnostics import DiagnosticKind, Diagnostics
from .catalog import Catalog
from .constants import LoadState, MapDataType, ROOM_PORTAL_ID
from .header import read_header
from .paths import resolve_real_file_name
from .reader import ByteReader

logger = logging.getLogger(__name__)


class KwdFile:
    """A Dungeon Keeper II level and every file it refers to.

    Construction reads the level info file and its path table. With load
    set the map is read first and then every other listed file in table
    order, otherwise only the map dimensions are read.

    Args:
        base_path: Game root, the path table is relative to it
        level_file: The level info file (*.kwd)
        load: Decode everything right away
        diagnostics: Sink for recoverable events, one is created if omitted

    Raises:
        KwdLoadError: If any file fails to load
    """

    def __init__(
        self,
        base_path: Union[str, Path],
        level_file: Union[str, Path],
        load: bool = True,
        diagnostics: Optional[Diagnostics] = None
    ):
        self.base_path = Path(base_path)
        self.level_file = Path(level_file)
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.state = LoadState.UNINITIALIZED
        self.level: Optional[GameLevel] = None
        self._dimensions: Optional[Tuple[int, int]] = None
        self._reset_model()

        self._read_file(self.level_file)
        if self.level is None:
            raise KwdLoadError(self.level_file)
        self.state = LoadState.HEADER_ONLY

        if load:
            self.load()
        else:
            self._read_dimensions()

    def _reset_model(self) -> None:
        self.map: Optional[GameMap] = None
        self.catalogs: Dict[MapDataType, Catalog] = {
            kind: Catalog(kind, self.diagnostics) for kind in CATALOG_KINDS
        }
        self._things: List[Thing] = []
        self._triggers: Dict[int, Trigger] = {}
        self.variables = VariableStore()
        self._rooms_by_terrain: Dict[int, Room] = {}
        self.water_terrain: Optional[Terrain] = None
        self.lava_terrain: Optional[Terrain] = None
        self._imp: Optional[Creature] = None
        self._level_gem: Optional[GameObject] = None

    # Loading

    def load(self) -> None:
        """Read the map and every companion file, a no-op once loaded.

        Raises:
            KwdLoadError: If a file fails to load, nothing is kept then
        """
        if self.state is LoadState.LOADED:
            logger.debug(f"{self.level_file} already loaded")
            return

        try:
            # The map goes first, it fixes the world size
            map_path = self.level.file(MapDataType.MAP)
            if map_path is not None:
                self._read_file(self._resolve(map_path.path))
            for file_path in self.level.paths:
                if file_path.id is MapDataType.MAP:
                    continue
                self._read_file(self._resolve(file_path.path))
        except KwdLoadError:
            self._reset_model()
            raise

        self._freeze()
        self.state = LoadState.LOADED
        logger.info(f"Loaded level {self.level.name}")

    def _read_dimensions(self) -> None:
        map_path = self.level.file(MapDataType.MAP)
        if map_path is None:
            raise KwdLoadError(self.level_file)
        path = self._resolve(map_path.path)
        try:
            reader = ByteReader.from_file(path, self.diagnostics)
            header = read_header(reader)
        except (OSError, KwdError) as e:
            raise KwdLoadError(path) from e
        self._dimensions = (header.width, header.height)
        self.state = LoadState.DIMENSIONS_ONLY

    def _resolve(self, path: str) -> Path:
        return resolve_real_file_name(self.base_path, path)

    def _read_file(self, path: Path) -> None:
        """Read every chunk of one file.

        Raises:
            KwdLoadError: Wrapping the I/O or parsing failure
        """
        logger.debug(f"Reading file {path}")
        self.diagnostics.current_file = str(path)
        try:
            reader = ByteReader.from_file(path, self.diagnostics)
            self._read_chunks(reader)
        except (OSError, KwdError, ValueError) as e:
            logger.error(f"Failed to read the file {path}: {e}")
            raise KwdLoadError(path) from e
        finally:
            self.diagnostics.current_file = None

    def _read_chunks(self, reader: ByteReader) -> None:
        while reader.tell() < len(reader):
            header = read_header(reader)
            chunk_cls = CHUNK_READERS.get(header.id)
            if chunk_cls is None:
                self.diagnostics.report(
                    DiagnosticKind.NO_READER,
                    f"File type {header.kind} have no reader!",
                    offset=header.start
                )
                # Globals wrap the override chunks, carry on at the data start
                if header.id is not MapDataType.GLOBALS:
                    reader.seek(max(header.end, reader.tell()))
                continue
            self._store(header.id, chunk_cls(header, reader).parse())

        if reader.tell() != len(reader):
            raise ChunkParsingError("Failed to parse file")

    def _store(self, kind: MapDataType, result: Any) -> None:
        if kind is MapDataType.LEVEL:
            self.level = result
        elif kind is MapDataType.MAP:
            self.map = result
        elif kind is MapDataType.THINGS:
            self._things.extend(result)
        elif kind is MapDataType.TRIGGERS:
            self._merge_triggers(result)
        elif kind is MapDataType.VARIABLES:
            self.variables.extend(result)
        else:
            self._index(kind, self.catalogs[kind].merge(result))

    def _index(self, kind: MapDataType, entries: List[Any]) -> None:
        """Derived lookups, the first match wins except for rooms by terrain."""
        for entry in entries:
            if kind is MapDataType.TERRAIN:
                if self.water_terrain is None and entry.is_water():
                    self.water_terrain = entry
                if self.lava_terrain is None and entry.is_lava():
                    self.lava_terrain = entry
            elif kind is MapDataType.ROOMS:
                self._rooms_by_terrain[entry.terrain_id] = entry
            elif kind is MapDataType.CREATURES:
                if self._imp is None and entry.is_imp:
                    self._imp = entry
            elif kind is MapDataType.OBJECTS:
                if self._level_gem is None and entry.is_level_gem():
                    self._level_gem = entry

    def _merge_triggers(self, triggers: List[Trigger]) -> None:
        for trigger in triggers:
            if trigger.id in self._triggers:
                self.diagnostics.report(
                    DiagnosticKind.TRIGGER_ID_COLLISION,
                    f"Trigger id {trigger.id} already in use, replaced by "
                    f"{type(trigger).__name__}",
                    trigger_id=trigger.id
                )
            self._triggers[trigger.id] = trigger

    def _freeze(self) -> None:
        for catalog in self.catalogs.values():
            catalog.freeze()
        self._things = tuple(self._things)
        self._triggers = MappingProxyType(self._triggers)
        self._rooms_by_terrain = MappingProxyType(self._rooms_by_terrain)
        self.variables.freeze()

    # Catalog lookups

    def catalog(self, kind: MapDataType) -> Mapping[int, Any]:
        return self.catalogs[kind].entries

    def terrain(self, terrain_id: int) -> Optional[Terrain]:
        return self.catalogs[MapDataType.TERRAIN].get(terrain_id)

    def room(self, room_id: int) -> Optional[Room]:
        return self.catalogs[MapDataType.ROOMS].get(room_id)

    def door(self, door_id: int):
        return self.catalogs[MapDataType.DOORS].get(door_id)

    def trap(self, trap_id: int):
        return self.catalogs[MapDataType.TRAPS].get(trap_id)

    def creature(self, creature_id: int) -> Optional[Creature]:
        return self.catalogs[MapDataType.CREATURES].get(creature_id)

    def object(self, object_id: int) -> Optional[GameObject]:
        return self.catalogs[MapDataType.OBJECTS].get(object_id)

    def creature_spell(self, spell_id: int):
        return self.catalogs[MapDataType.CREATURE_SPELLS].get(spell_id)

    def keeper_spell(self, spell_id: int):
        return self.catalogs[MapDataType.KEEPER_SPELLS].get(spell_id)

    def effect(self, effect_id: int):
        return self.catalogs[MapDataType.EFFECTS].get(effect_id)

    def effect_element(self, element_id: int):
        return self.catalogs[MapDataType.EFFECT_ELEMENTS].get(element_id)

    def shot(self, shot_id: int):
        return self.catalogs[MapDataType.SHOTS].get(shot_id)

    def player(self, player_id: int):
        return self.catalogs[MapDataType.PLAYERS].get(player_id)

    # Sorted lists

    def terrains(self) -> List[Terrain]:
        return self.catalogs[MapDataType.TERRAIN].sorted()

    def rooms(self) -> List[Room]:
        return self.catalogs[MapDataType.ROOMS].sorted()

    def doors(self) -> list:
        return self.catalogs[MapDataType.DOORS].sorted()

    def traps(self) -> list:
        return self.catalogs[MapDataType.TRAPS].sorted()

    def creatures(self) -> List[Creature]:
        return self.catalogs[MapDataType.CREATURES].sorted()

    def objects(self) -> List[GameObject]:
        return self.catalogs[MapDataType.OBJECTS].sorted()

    def keeper_spells(self) -> list:
        return self.catalogs[MapDataType.KEEPER_SPELLS].sorted()

    def shots(self) -> list:
        return self.catalogs[MapDataType.SHOTS].sorted()

    def players(self) -> list:
        return self.catalogs[MapDataType.PLAYERS].sorted()

    # Derived lookups

    def room_by_terrain(self, terrain_id: int) -> Optional[Room]:
        return self._rooms_by_terrain.get(terrain_id)

    def portal(self) -> Optional[Room]:
        return self.room(ROOM_PORTAL_ID)

    def imp(self) -> Optional[Creature]:
        return self._imp

    def level_gem(self) -> Optional[GameObject]:
        return self._level_gem

    def terrain_bridge(
        self,
        bridge_type: Optional[BridgeTerrainType],
        terrain_or_room: Union[Terrain, Room]
    ) -> Optional[Terrain]:
        """Terrain shown under a room built over water or lava.

        Only rooms that can not be placed on land have a bridge.
        """
        if isinstance(terrain_or_room, Room):
            room = terrain_or_room
        elif TerrainFlag.ROOM not in terrain_or_room.flags:
            return None
        else:
            room = self.room_by_terrain(terrain_or_room.terrain_id)
        if room is None or room.is_placeable_on_land():
            return None
        if bridge_type is BridgeTerrainType.WATER:
            return self.water_terrain
        if bridge_type is BridgeTerrainType.LAVA:
            return self.lava_terrain
        return None

    # Things, triggers and variables

    def things(self) -> List[Thing]:
        return list(self._things)

    def trigger(self, trigger_id: int) -> Optional[Trigger]:
        return self._triggers.get(trigger_id)

    @property
    def triggers(self) -> Mapping[int, Trigger]:
        return MappingProxyType(dict(self._triggers))

    def creature_pool(self, player_id: int):
        return self.variables.creature_pool(player_id)

    def creature_stats(self, level: int):
        return self.variables.stats(level)

    def creature_first_person_stats(self, level: int):
        return self.variables.first_person_stats(level)

    def misc_variable(self, key: Union[MiscType, int]):
        return self.variables.misc_variable(key)

    def availabilities(self) -> list:
        return list(self.variables.availabilities)

    def sacrifices(self) -> set:
        return set(self.variables.sacrifices)

    def unknown_variables(self) -> set:
        return set(self.variables.unknown)

    # Map

    @property
    def map_width(self) -> int:
        if self.map is not None:
            return self.map.width
        return self._dimensions[0] if self._dimensions else 0

    @property
    def map_height(self) -> int:
        if self.map is not None:
            return self.map.height
        return self._dimensions[1] if self._dimensions else 0

    def summary(self) -> Dict[str, Any]:
        """JSON friendly overview of the loaded level."""
        return {
            'file': str(self.level_file),
            'state': self.state.name,
            'level': self.level.to_dict() if self.level else None,
            'map': {'width': self.map_width, 'height': self.map_height},
            'catalogs': {kind.name: len(catalog) for kind, catalog in self.catalogs.items()},
            'things': len(self._things),
            'triggers': len(self._triggers),
            'variables': len(self.variables),
            'water_terrain': self.water_terrain.id if self.water_terrain else None,
            'lava_terrain': self.lava_terrain.id if self.lava_terrain else None,
            'imp': self._imp.id if self._imp else None,
            'level_gem': self._level_gem.id if self._level_gem else None,
            'diagnostics': self.diagnostics.summary(),
        }

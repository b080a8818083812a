# kwd_decoder/chunks/__init__.py
"""KWD chunk readers package."""
from ..parser.constants import MapDataType
from .base import BaseChunk, CatalogChunk, ChunkParsingError
from .map import MapChunk
from .level import LevelChunk
from .terrain import TerrainChunk
from .rooms import RoomsChunk
from .doors import DoorsChunk
from .traps import TrapsChunk
from .objects import ObjectsChunk
from .creatures import CreaturesChunk
from .creature_spells import CreatureSpellsChunk
from .effect_elements import EffectElementsChunk
from .effects import EffectsChunk
from .keeper_spells import KeeperSpellsChunk
from .shots import ShotsChunk
from .players import PlayersChunk
from .things import ThingsChunk
from .triggers import TriggersChunk
from .variables import VariablesChunk

# Chunk kind -> reader, kinds missing here are skipped
CHUNK_READERS = {
    chunk.kind: chunk for chunk in (
        MapChunk,
        LevelChunk,
        TerrainChunk,
        RoomsChunk,
        DoorsChunk,
        TrapsChunk,
        ObjectsChunk,
        CreaturesChunk,
        CreatureSpellsChunk,
        EffectElementsChunk,
        EffectsChunk,
        KeeperSpellsChunk,
        ShotsChunk,
        PlayersChunk,
        ThingsChunk,
        TriggersChunk,
        VariablesChunk,
    )
}

CATALOG_KINDS = tuple(
    kind for kind, chunk in CHUNK_READERS.items() if issubclass(chunk, CatalogChunk)
)

__all__ = [
    'BaseChunk',
    'CatalogChunk',
    'ChunkParsingError',
    'MapChunk',
    'LevelChunk',
    'TerrainChunk',
    'RoomsChunk',
    'DoorsChunk',
    'TrapsChunk',
    'ObjectsChunk',
    'CreaturesChunk',
    'CreatureSpellsChunk',
    'EffectElementsChunk',
    'EffectsChunk',
    'KeeperSpellsChunk',
    'ShotsChunk',
    'PlayersChunk',
    'ThingsChunk',
    'TriggersChunk',
    'VariablesChunk',
    'CHUNK_READERS',
    'CATALOG_KINDS',
]

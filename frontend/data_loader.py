# frontend/data_loader.py
import asyncio
from typing import Optional, Tuple

import pandas as pd
import streamlit as st

from config import settings
from evolution_engine.client import PokeAPIClient
from evolution_engine.models import EvolutionView, TreeResult
from evolution_engine.resolver import EvolutionResolver
from evolution_engine.view import assemble

STAT_COLUMNS = ['hp', 'attack', 'defense', 'special-attack', 'special-defense', 'speed']


async def _fetch_pokemon(id_or_name):
    async with PokeAPIClient() as client:
        return await client.fetch_pokemon(id_or_name)


async def _fetch_tree(creature_id: int) -> Tuple[TreeResult, int]:
    async with PokeAPIClient() as client:
        return await EvolutionResolver(client).fetch_tree(creature_id)


@st.cache_data(ttl=settings.POKEMON_CACHE_TTL)
def load_pokemon(id_or_name) -> pd.Series:
    """
    Loads one Pokémon and flattens its stats into columns, the shape the
    radar chart expects. Raises CatalogError subclasses on lookup failure.
    """
    record = asyncio.run(_fetch_pokemon(id_or_name))
    row = {
        'id': record.id, 'name': record.name, 'height': record.height, 'weight': record.weight,
        'sprite_url': record.sprite_url, 'shiny_sprite_url': record.shiny_sprite_url,
        'types': record.types,
    }
    row.update({stat: record.stats.get(stat, 0) for stat in STAT_COLUMNS})
    return pd.Series(row)


@st.cache_data(ttl=settings.EVOLUTION_CACHE_TTL)
def load_evolution(creature_id: int) -> Tuple[Optional[EvolutionView], pd.DataFrame]:
    """Resolves the evolution view of a species plus a table of every path in its chain."""
    result, chain_id = asyncio.run(_fetch_tree(creature_id))
    return assemble(result, chain_id), paths_frame(result)


def paths_frame(result: TreeResult) -> pd.DataFrame:
    """One row per (path, stage) pair of the chain's root-to-leaf paths."""
    rows = [
        {'path': path_no, 'stage': stage, 'id': evo.id, 'name': evo.name, 'condition': evo.condition_label}
        for path_no, path in enumerate(result.all_paths, start=1)
        for stage, evo in enumerate(path, start=1)
    ]
    return pd.DataFrame(rows, columns=['path', 'stage', 'id', 'name', 'condition'])


def clear_caches():
    load_pokemon.clear()
    load_evolution.clear()

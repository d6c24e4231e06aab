# evolution_engine/resolver.py

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from evolution_engine.client import PokeAPIClient
from evolution_engine.errors import CatalogError
from evolution_engine.models import EvolutionView, TreeResult
from evolution_engine.tree import build_tree
from evolution_engine.view import assemble


# --- Outcome of one resolution inside a batch ---
@dataclass
class Resolution:
    creature_id: int
    view: Optional[EvolutionView] = None
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class EvolutionResolver:
    """Creature id -> species -> evolution chain -> EvolutionView."""

    def __init__(self, client: PokeAPIClient):
        self.client = client
        self.logger = logging.getLogger(__name__)

    async def fetch_tree(self, creature_id: int) -> Tuple[TreeResult, int]:
        """Looks up the species and its chain, then walks the chain for that species."""
        species = await self.client.fetch_species(creature_id)
        chain = await self.client.fetch_chain(species.evolution_chain_url)
        result = build_tree(chain.chain, species.name)
        if result.target_path is None:
            self.logger.info(f"No evolution data for {species.name} in chain #{chain.id}")
        return result, chain.id

    async def resolve(self, creature_id: int) -> Optional[EvolutionView]:
        """
        Returns the evolution view for `creature_id`, or None when the species
        is missing from its own chain. Catalog failures propagate as CatalogError.
        """
        result, chain_id = await self.fetch_tree(creature_id)
        return assemble(result, chain_id)

    async def _resolve_one(self, creature_id: int) -> Resolution:
        try:
            return Resolution(creature_id, view=await self.resolve(creature_id))
        except CatalogError as e:
            self.logger.error(f"Could not resolve evolutions for #{creature_id}: {e}")
            return Resolution(creature_id, error=e)

    async def resolve_many(self, creature_ids: Iterable[int]) -> List[Resolution]:
        """Resolves several creatures concurrently, one Resolution per id in input order."""
        ids = list(creature_ids)
        self.logger.info(f"Resolving evolution chains for {len(ids)} Pokémon.")
        results = await asyncio.gather(*(self._resolve_one(i) for i in ids))
        failed = sum(1 for r in results if not r.ok)
        self.logger.info(f"Resolved {len(results) - failed} of {len(results)} Pokémon.")
        return list(results)

# evolution_engine/tree.py

import logging
import re
from typing import List, Optional

from config import settings
from evolution_engine.models import EvolutionPath, ProcessedEvolution, RawChainNode, TreeResult

logger = logging.getLogger(__name__)

# Returned when a species URL has no trailing numeric segment; never a real dex number.
INVALID_SPECIES_ID = 0

_TRAILING_ID = re.compile(r"/(\d+)/$")


def extract_species_id(url: str) -> int:
    """Pulls the numeric id out of a catalog URL such as `.../pokemon-species/25/`."""
    match = _TRAILING_ID.search(url or "")
    if not match:
        logger.warning(f"No numeric id in species URL {url!r}, using {INVALID_SPECIES_ID}")
        return INVALID_SPECIES_ID
    return int(match.group(1))


def sprite_urls(species_id: int):
    """Front and shiny sprite URLs for a species id."""
    return (
        f"{settings.SPRITE_BASE_URL}/{species_id}.png",
        f"{settings.SPRITE_BASE_URL}/shiny/{species_id}.png",
    )


def process_node(node: RawChainNode) -> ProcessedEvolution:
    species_id = extract_species_id(node.species.url)
    sprite, shiny_sprite = sprite_urls(species_id)
    return ProcessedEvolution(
        id=species_id,
        name=node.species.name,
        sprite=sprite,
        shiny_sprite=shiny_sprite,
        # Only the first condition on the incoming edge is shown
        evolution_detail=node.evolution_details[0] if node.evolution_details else None,
    )


def _index_of(path: EvolutionPath, name: str) -> Optional[int]:
    for i, evolution in enumerate(path):
        if evolution.name == name:
            return i
    return None


def build_tree(root: RawChainNode, target_name: str, path_so_far: EvolutionPath = ()) -> TreeResult:
    """
    Walks the chain depth-first and returns every root-to-leaf path together
    with the path and index of `target_name`.

    A match on a node's own species is checked after its children are merged
    and overrides whatever path the children reported, so a direct hit wins
    over a name that only turns up again further down a branch.
    """
    new_path = path_so_far + (process_node(root),)

    if not root.evolves_to:
        index = _index_of(new_path, target_name)
        if index is None:
            return TreeResult(all_paths=(new_path,))
        return TreeResult(all_paths=(new_path,), target_path=new_path, target_index=index)

    all_paths: List[EvolutionPath] = []
    target_path: Optional[EvolutionPath] = None
    target_index: Optional[int] = None

    for child in root.evolves_to:
        result = build_tree(child, target_name, new_path)
        all_paths.extend(result.all_paths)
        if result.target_path is not None:
            target_path, target_index = result.target_path, result.target_index

    if root.species.name == target_name:
        target_path, target_index = new_path, len(new_path) - 1

    return TreeResult(all_paths=tuple(all_paths), target_path=target_path, target_index=target_index)

# evolution_engine/view.py

from typing import List, Optional

from evolution_engine.models import EvolutionChain, EvolutionPath, EvolutionView, ProcessedEvolution, TreeResult
from evolution_engine.tree import build_tree


def _same_branch(a: EvolutionPath, b: EvolutionPath) -> bool:
    # Compared by species names only; ids and conditions are ignored
    return len(a) == len(b) and all(x.name == y.name for x, y in zip(a, b))


def assemble(result: TreeResult, chain_id: int) -> Optional[EvolutionView]:
    """
    Slices the builder output into previous / current / next.
    Returns None when the target species never occurs in the chain.
    """
    if result.target_path is None or result.target_index is None:
        return None

    target_path, target_index = result.target_path, result.target_index
    current = target_path[target_index]

    branches: List[EvolutionPath] = []
    for path in result.all_paths:
        index = next((i for i, p in enumerate(path) if p.name == current.name), None)
        if index is None or index == len(path) - 1:
            continue
        continuation = path[index + 1:]
        if not any(_same_branch(existing, continuation) for existing in branches):
            branches.append(continuation)

    return EvolutionView(
        previous=target_path[:target_index],
        current=current,
        next=tuple(branches),
        chain_id=chain_id,
    )


def resolve_view(chain: EvolutionChain, target_name: str) -> Optional[EvolutionView]:
    return assemble(build_tree(chain.chain, target_name), chain.id)


def _format_step(evolution: ProcessedEvolution) -> str:
    label = evolution.condition_label
    return f"--[{label}]--> {evolution.name}" if label else f"--> {evolution.name}"


def format_view(view: EvolutionView) -> str:
    """Plain-text rendering used by the command line runner."""
    head = " -> ".join(p.name for p in view.previous)
    line = f"{head} -> [{view.current.name}]" if head else f"[{view.current.name}]"
    lines = [f"Chain #{view.chain_id}: {line} (#{view.current.id:03d})"]
    if not view.next:
        lines.append("    (final form)")
    for branch in view.next:
        lines.append("    " + " ".join(_format_step(p) for p in branch))
    if view.has_branches:
        lines.append("    This Pokemon has multiple evolution paths")
    return "\n".join(lines)

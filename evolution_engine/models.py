# evolution_engine/models.py

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from evolution_engine.conditions import EvolutionCondition, describe_condition, parse_condition
from evolution_engine.errors import MalformedRecordError


# --- Raw catalog records (read-only input) ---
@dataclass(frozen=True)
class SpeciesRef:
    name: str
    url: str


@dataclass(frozen=True)
class RawChainNode:
    species: SpeciesRef
    evolution_details: Tuple[EvolutionCondition, ...] = ()
    evolves_to: Tuple["RawChainNode", ...] = ()

    @classmethod
    def from_api(cls, link: Dict[str, Any]) -> "RawChainNode":
        """Recursively parses one `chain` link of an evolution-chain record."""
        try:
            species = SpeciesRef(name=link["species"]["name"], url=link["species"]["url"])
            details = tuple(parse_condition(d) for d in link.get("evolution_details") or [])
            children = tuple(cls.from_api(child) for child in link.get("evolves_to") or [])
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedRecordError(f"Invalid evolution chain link: {e!r}") from e
        return cls(species=species, evolution_details=details, evolves_to=children)


@dataclass(frozen=True)
class EvolutionChain:
    id: int
    chain: RawChainNode

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "EvolutionChain":
        try:
            chain_id = data["id"]
            root = data["chain"]
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedRecordError(f"Invalid evolution chain record: {e!r}") from e
        return cls(id=chain_id, chain=RawChainNode.from_api(root))


@dataclass(frozen=True)
class SpeciesRecord:
    id: int
    name: str
    evolution_chain_url: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "SpeciesRecord":
        try:
            return cls(id=data["id"], name=data["name"], evolution_chain_url=data["evolution_chain"]["url"])
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedRecordError(f"Invalid species record: {e!r}") from e


@dataclass(frozen=True)
class PokemonRecord:
    id: int
    name: str
    height: float
    weight: float
    sprite_url: Optional[str]
    shiny_sprite_url: Optional[str]
    types: List[str] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PokemonRecord":
        try:
            return cls(
                id=data["id"], name=data["name"], height=data["height"], weight=data["weight"],
                sprite_url=data["sprites"]["front_default"],
                shiny_sprite_url=data["sprites"]["front_shiny"],
                types=[t["type"]["name"] for t in data["types"]],
                stats={s["stat"]["name"]: s["base_stat"] for s in data["stats"]},
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedRecordError(f"Invalid pokemon record: {e!r}") from e


# --- Derived structures ---
@dataclass(frozen=True)
class ProcessedEvolution:
    id: int
    name: str
    sprite: str
    shiny_sprite: str
    evolution_detail: Optional[EvolutionCondition] = None

    @property
    def condition_label(self) -> str:
        return describe_condition(self.evolution_detail)

    def to_dict(self) -> Dict[str, Any]:
        detail = None
        if self.evolution_detail is not None:
            detail = {"kind": self.evolution_detail.kind.value, **asdict(self.evolution_detail)}
        return {
            "id": self.id,
            "name": self.name,
            "sprite": self.sprite,
            "shiny_sprite": self.shiny_sprite,
            "evolution_detail": detail,
            "condition": self.condition_label,
        }


EvolutionPath = Tuple[ProcessedEvolution, ...]


@dataclass(frozen=True)
class TreeResult:
    all_paths: Tuple[EvolutionPath, ...]
    target_path: Optional[EvolutionPath] = None
    target_index: Optional[int] = None


@dataclass(frozen=True)
class EvolutionView:
    previous: EvolutionPath
    current: ProcessedEvolution
    next: Tuple[EvolutionPath, ...]
    chain_id: int

    @property
    def has_branches(self) -> bool:
        return len(self.next) > 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chain_id": self.chain_id,
            "previous": [p.to_dict() for p in self.previous],
            "current": self.current.to_dict(),
            "next": [[p.to_dict() for p in branch] for branch in self.next],
        }

"""
Shared fixtures for the test suite.
"""
import sys
from pathlib import Path

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from evolution_engine.conditions import LevelCondition, parse_condition  # noqa: E402
from evolution_engine.models import RawChainNode, SpeciesRef  # noqa: E402

SPECIES_URL = "https://pokeapi.co/api/v2/pokemon-species/{}/"


def node(name, species_id, *children, condition=None):
    """Builds a RawChainNode; `condition` is the incoming edge's first condition."""
    details = (condition,) if condition is not None else ()
    return RawChainNode(
        species=SpeciesRef(name=name, url=SPECIES_URL.format(species_id)),
        evolution_details=details,
        evolves_to=tuple(children),
    )


@pytest.fixture
def make_node():
    return node


@pytest.fixture
def linear_chain():
    """bulbasaur -> ivysaur -> venusaur"""
    return node(
        "bulbasaur", 1,
        node("ivysaur", 2,
             node("venusaur", 3, condition=LevelCondition("level-up", min_level=32)),
             condition=LevelCondition("level-up", min_level=16)),
    )


@pytest.fixture
def branching_chain():
    """oddish -> gloom -> {vileplume, bellossom}"""
    return node(
        "oddish", 43,
        node("gloom", 44,
             node("vileplume", 45, condition=parse_condition({"trigger": {"name": "use-item"}, "item": {"name": "leaf-stone"}})),
             node("bellossom", 182, condition=parse_condition({"trigger": {"name": "use-item"}, "item": {"name": "sun-stone"}})),
             condition=LevelCondition("level-up", min_level=21)),
    )


@pytest.fixture
def chain_json():
    """A trimmed PokéAPI evolution-chain record (chain #67, Eevee, three branches)."""
    def link(name, species_id, details, children=()):
        return {
            "species": {"name": name, "url": SPECIES_URL.format(species_id)},
            "evolution_details": details,
            "evolves_to": list(children),
            "is_baby": False,
        }

    return {
        "id": 67,
        "baby_trigger_item": None,
        "chain": link("eevee", 133, [], [
            link("vaporeon", 134, [{"trigger": {"name": "use-item"}, "item": {"name": "water-stone"},
                                    "min_level": None, "time_of_day": ""}]),
            link("espeon", 196, [{"trigger": {"name": "level-up"}, "min_happiness": 160,
                                  "time_of_day": "day", "item": None}]),
            link("sylveon", 700, [
                {"trigger": {"name": "level-up"}, "known_move_type": {"name": "fairy"}, "min_affection": 2},
                {"trigger": {"name": "level-up"}, "known_move_type": {"name": "fairy"}, "min_happiness": 160},
            ]),
        ]),
    }

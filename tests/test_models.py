"""Unit tests for evolution_engine.models – parsing PokéAPI records."""
import pytest
from evolution_engine.conditions import TriggerKind
from evolution_engine.errors import MalformedRecordError
from evolution_engine.models import EvolutionChain, PokemonRecord, RawChainNode, SpeciesRecord


class TestEvolutionChain:
    def test_parse(self, chain_json):
        chain = EvolutionChain.from_api(chain_json)
        assert chain.id == 67
        assert chain.chain.species.name == "eevee"
        assert chain.chain.evolution_details == ()
        assert [c.species.name for c in chain.chain.evolves_to] == ["vaporeon", "espeon", "sylveon"]

    def test_keeps_every_condition(self, chain_json):
        sylveon = EvolutionChain.from_api(chain_json).chain.evolves_to[2]
        assert len(sylveon.evolution_details) == 2
        assert sylveon.evolution_details[0].kind is TriggerKind.MOVE_TYPE_KNOWN

    def test_missing_chain(self):
        with pytest.raises(MalformedRecordError):
            EvolutionChain.from_api({"id": 1})

    def test_missing_species(self):
        with pytest.raises(MalformedRecordError):
            RawChainNode.from_api({"evolution_details": [], "evolves_to": []})

    def test_null_lists_are_empty(self):
        node = RawChainNode.from_api({
            "species": {"name": "ditto", "url": "https://pokeapi.co/api/v2/pokemon-species/132/"},
            "evolution_details": None, "evolves_to": None,
        })
        assert node.evolves_to == ()
        assert node.evolution_details == ()


class TestSpeciesRecord:
    def test_parse(self):
        record = SpeciesRecord.from_api({
            "id": 25, "name": "pikachu",
            "evolution_chain": {"url": "https://pokeapi.co/api/v2/evolution-chain/10/"},
        })
        assert record.name == "pikachu"
        assert record.evolution_chain_url.endswith("/evolution-chain/10/")

    def test_missing_chain_url(self):
        with pytest.raises(MalformedRecordError):
            SpeciesRecord.from_api({"id": 25, "name": "pikachu", "evolution_chain": None})


class TestPokemonRecord:
    def test_parse(self):
        record = PokemonRecord.from_api({
            "id": 25, "name": "pikachu", "height": 4, "weight": 60,
            "sprites": {"front_default": "front.png", "front_shiny": "shiny.png"},
            "types": [{"slot": 1, "type": {"name": "electric"}}],
            "stats": [{"base_stat": 35, "stat": {"name": "hp"}}, {"base_stat": 90, "stat": {"name": "speed"}}],
        })
        assert record.types == ["electric"]
        assert record.stats == {"hp": 35, "speed": 90}
        assert record.shiny_sprite_url == "shiny.png"


class TestNullEntries:
    def test_null_condition_is_malformed(self):
        with pytest.raises(MalformedRecordError):
            RawChainNode.from_api({
                "species": {"name": "eevee", "url": "https://pokeapi.co/api/v2/pokemon-species/133/"},
                "evolution_details": [None], "evolves_to": [],
            })

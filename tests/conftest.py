import copy

import pytest

API = "https://pokeapi.co/api/v2"

# Trimmed-down PokeAPI payloads; field names and nesting match the real API
PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
    "base_experience": 112,
    "types": [
        {"slot": 1, "type": {"name": "electric", "url": f"{API}/type/13/"}},
    ],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": f"{API}/stat/1/"}},
        {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": f"{API}/stat/2/"}},
        {"base_stat": 40, "effort": 0, "stat": {"name": "defense", "url": f"{API}/stat/3/"}},
        {"base_stat": 50, "effort": 0, "stat": {"name": "special-attack", "url": f"{API}/stat/4/"}},
        {"base_stat": 50, "effort": 0, "stat": {"name": "special-defense", "url": f"{API}/stat/5/"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": f"{API}/stat/6/"}},
    ],
    "abilities": [
        {"ability": {"name": "static", "url": f"{API}/ability/9/"}, "is_hidden": False, "slot": 1},
        {"ability": {"name": "lightning-rod", "url": f"{API}/ability/31/"}, "is_hidden": True, "slot": 3},
    ],
    "sprites": {
        "front_default": "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/25.png",
        "front_shiny": None,
        "other": {
            "official-artwork": {
                "front_default": "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/official-artwork/25.png",
                "front_shiny": None,
            },
        },
    },
    "species": {"name": "pikachu", "url": f"{API}/pokemon-species/25/"},
    "order": 35,  # not modelled, must be ignored
}

PIKACHU_SPECIES = {
    "id": 25,
    "name": "pikachu",
    "order": 35,
    "gender_rate": 4,
    "capture_rate": 190,
    "base_happiness": 50,
    "is_baby": False,
    "is_legendary": False,
    "is_mythical": False,
    "hatch_counter": 10,
    "growth_rate": {"name": "medium", "url": f"{API}/growth-rate/2/"},
    "generation": {"name": "generation-i", "url": f"{API}/generation/1/"},
    "evolution_chain": {"url": f"{API}/evolution-chain/10/"},
    "flavor_text_entries": [
        {
            "flavor_text": "Il stocke de l'électricité dans ses joues.",
            "language": {"name": "fr", "url": f"{API}/language/5/"},
            "version": {"name": "x", "url": f"{API}/version/23/"},
        },
        {
            "flavor_text": "When several of\nthese POKéMON gather,\ftheir electricity could build and cause lightning storms.",
            "language": {"name": "en", "url": f"{API}/language/9/"},
            "version": {"name": "red", "url": f"{API}/version/1/"},
        },
    ],
    "genera": [
        {"genus": "Pokémon Souris", "language": {"name": "fr", "url": f"{API}/language/5/"}},
        {"genus": "Mouse Pokémon", "language": {"name": "en", "url": f"{API}/language/9/"}},
    ],
}

PIKACHU_CHAIN = {
    "id": 10,
    "baby_trigger_item": None,
    "chain": {
        "is_baby": True,
        "species": {"name": "pichu", "url": f"{API}/pokemon-species/172/"},
        "evolution_details": [],
        "evolves_to": [
            {
                "is_baby": False,
                "species": {"name": "pikachu", "url": f"{API}/pokemon-species/25/"},
                "evolution_details": [
                    {"trigger": {"name": "level-up", "url": f"{API}/evolution-trigger/1/"}, "min_happiness": 220},
                ],
                "evolves_to": [
                    {
                        "is_baby": False,
                        "species": {"name": "raichu", "url": f"{API}/pokemon-species/26/"},
                        "evolution_details": [
                            {
                                "trigger": {"name": "use-item", "url": f"{API}/evolution-trigger/3/"},
                                "item": {"name": "thunder-stone", "url": f"{API}/item/83/"},
                            },
                        ],
                        "evolves_to": [],
                    },
                ],
            },
        ],
    },
}

POKEMON_PAGE = {
    "count": 1302,
    "next": f"{API}/pokemon?offset=20&limit=20",
    "previous": None,
    "results": [
        {"name": "bulbasaur", "url": f"{API}/pokemon/1/"},
        {"name": "ivysaur", "url": f"{API}/pokemon/2/"},
        {"name": "mr-mime", "url": f"{API}/pokemon/122/"},
    ],
}


def make_type(name: str, type_id: int) -> dict:
    return {
        "id": type_id,
        "name": name,
        "damage_relations": {
            "double_damage_to": [{"name": "water", "url": f"{API}/type/11/"}],
            "half_damage_to": [{"name": "grass", "url": f"{API}/type/12/"}],
            "no_damage_to": [],
            "double_damage_from": [{"name": "ground", "url": f"{API}/type/5/"}],
            "half_damage_from": [],
            "no_damage_from": [],
        },
        "pokemon": [
            {"slot": 1, "pokemon": {"name": "pikachu", "url": f"{API}/pokemon/25/"}},
            {"slot": 1, "pokemon": {"name": "raichu", "url": f"{API}/pokemon/26/"}},
        ],
        "generation": {"name": "generation-i", "url": f"{API}/generation/1/"},
    }


@pytest.fixture
def pikachu_payload():
    return copy.deepcopy(PIKACHU)


@pytest.fixture
def species_payload():
    return copy.deepcopy(PIKACHU_SPECIES)


@pytest.fixture
def chain_payload():
    return copy.deepcopy(PIKACHU_CHAIN)


@pytest.fixture
def page_payload():
    return copy.deepcopy(POKEMON_PAGE)


@pytest.fixture
def type_payload():
    """Factory for a type payload, so tests can build all 18."""
    return make_type

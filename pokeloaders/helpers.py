"""Pure helpers shared by the page loaders.

None of these raise on malformed input; they fall back to 0, "" or None.
The one exception to "pure" is resolve_pokemon_id, which performs a lookup.
"""
import re
from typing import TYPE_CHECKING

from pokeloaders.models import ChainLink, Pokemon, PokemonSpecies

if TYPE_CHECKING:
    from pokeloaders.clients.pokeapi_client import PokeAPIClient

SPRITE_BASE_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"

_TRAILING_ID = re.compile(r"/(\d+)/\Z")


def extract_id(url: str) -> int:
    """Returns the numeric id in a resource URL such as ``.../pokemon/25/``, or 0."""
    if not isinstance(url, str):
        return 0
    match = _TRAILING_ID.search(url)
    return int(match.group(1)) if match else 0


def title_case(name: str) -> str:
    """'mr-mime' -> 'Mr Mime'."""
    if not isinstance(name, str):
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def flatten_chain(link: ChainLink) -> list[str]:
    """Species names of an evolution tree in pre-order, children in API order."""
    names = [link.species.name]
    for evolution in link.evolves_to:
        names.extend(flatten_chain(evolution))
    return names


def total_pages(count: int, page_size: int) -> int:
    if page_size <= 0 or count <= 0:
        return 0
    return -(-count // page_size)


def pagination_window(current_page: int, total_pages: int, window_size: int = 5) -> list[int]:
    """Page numbers to show as links around ``current_page``.

    All pages when they fit in the window; otherwise the window sticks to the
    first or last pages near the edges and is centred on the current page
    everywhere else.
    """
    if total_pages <= window_size:
        return list(range(1, total_pages + 1))

    half = window_size // 2
    if current_page <= half + 1:
        start = 1
    elif current_page >= total_pages - half:
        start = total_pages - window_size + 1
    else:
        start = current_page - half
    return list(range(start, start + window_size))


def english_flavor_text(species: PokemonSpecies) -> str | None:
    """First English flavor text, with the form feeds and newlines of the raw entries flattened."""
    for entry in species.flavor_text_entries:
        if entry.language.name == "en":
            return entry.flavor_text.replace("\f", " ").replace("\n", " ")
    return None


def english_genus(species: PokemonSpecies) -> str | None:
    return next((g.genus for g in species.genera if g.language.name == "en"), None)


def sprite_url(pokemon_id: int) -> str:
    return f"{SPRITE_BASE_URL}/other/official-artwork/{pokemon_id}.png"


def main_sprite(pokemon: Pokemon) -> str | None:
    # Prefer the official artwork, fall back to the default front sprite
    other = pokemon.sprites.other
    if other is not None and other.official_artwork is not None and other.official_artwork.front_default:
        return other.official_artwork.front_default
    return pokemon.sprites.front_default


def dex_number(pokemon_id: int) -> str:
    return f"#{pokemon_id:03d}"


def stat_percentage(base_stat: int) -> float:
    # 255 is the highest base stat value the games allow
    return min(base_stat / 255 * 100, 100.0)


async def resolve_pokemon_id(client: "PokeAPIClient", name: str) -> int:
    """Looks up a Pokemon by name and returns its national dex id."""
    pokemon = await client.get_pokemon(name)
    return pokemon.id

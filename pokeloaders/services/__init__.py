from .loading import defer, load_all
from .pokemon_service import TYPE_NAMES, PokemonService

__all__ = [
    'PokemonService',
    'TYPE_NAMES',
    'defer',
    'load_all',
]

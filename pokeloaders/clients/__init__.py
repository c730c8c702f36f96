"""Client modules for external API communication."""
from .pokeapi_client import PokeAPIClient, APIClientError, PokemonNotFoundError
from .tracing import FetchObserver, LoggingObserver, trace

__all__ = [
    'PokeAPIClient',
    'APIClientError',
    'PokemonNotFoundError',
    'FetchObserver',
    'LoggingObserver',
    'trace',
]

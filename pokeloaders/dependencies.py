from pokeloaders.clients import LoggingObserver, PokeAPIClient
from pokeloaders.config import Settings, get_settings
from pokeloaders.services import PokemonService
from fastapi import Depends

_poke_client = None
_observer = None

def get_observer(settings: Settings = Depends(get_settings)) -> LoggingObserver:
    global _observer
    if _observer is None:
        _observer = LoggingObserver(colors=settings.trace_colors)
    return _observer

def get_poke_client(
    settings: Settings = Depends(get_settings),
    observer: LoggingObserver = Depends(get_observer),
) -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient(
            base_url=settings.pokeapi_base_url,
            timeout=settings.request_timeout,
            observer=observer,
        )
    return _poke_client

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    settings: Settings = Depends(get_settings),
    observer: LoggingObserver = Depends(get_observer),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, settings=settings, observer=observer)

async def close_poke_client():
    global _poke_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None

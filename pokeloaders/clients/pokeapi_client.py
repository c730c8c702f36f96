import logging

import httpx
from fastapi import HTTPException
from pydantic import BaseModel

from pokeloaders.clients.tracing import FetchObserver, trace
from pokeloaders.models import (
    EvolutionChain,
    Pokemon,
    PokemonListResponse,
    PokemonSpecies,
    TypeInfo,
)

logger = logging.getLogger(__name__)


# Define a custom exception for client errors (Used for 5xx errors and network failures)
class APIClientError(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=f"External API Error: {detail}")


class PokemonNotFoundError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 5.0,
        observer: FetchObserver | None = None,
    ):
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self.observer = observer

    async def _get_json(
        self,
        path: str,
        params: dict | None = None,
        not_found: str | None = None,
    ) -> dict:
        """Performs one GET and maps upstream failures.

        A 404 becomes PokemonNotFoundError only when ``not_found`` is given;
        every other failure becomes APIClientError (503).
        """
        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"PokeAPI returned {status} for {path}")
            if status == 404 and not_found is not None:
                raise PokemonNotFoundError(detail=not_found)
            raise APIClientError(status_code=503, detail=f"PokeAPI failed with status {status}")
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for {path}: {e}")
            raise APIClientError(status_code=503, detail=f"PokeAPI network error: {str(e)}")

    async def _fetch(self, model: type[BaseModel], operation: str, path: str, *args, **kwargs):
        with trace(self.observer, operation, *args):
            data = await self._get_json(path, **kwargs)
            return model.model_validate(data)

    async def list_pokemon(self, limit: int = 20, offset: int = 0) -> PokemonListResponse:
        """Fetches one page of the catalogue."""
        return await self._fetch(
            PokemonListResponse,
            "list_pokemon",
            "/pokemon",
            f"limit={limit}",
            f"offset={offset}",
            params={"limit": limit, "offset": offset},
        )

    async def get_pokemon(self, name_or_id: str | int) -> Pokemon:
        """Fetches full detail for a Pokemon, by name or national dex id."""
        return await self._fetch(
            Pokemon,
            "get_pokemon",
            f"/pokemon/{name_or_id}",
            name_or_id,
            not_found=f"Pokemon '{name_or_id}' not found.",
        )

    async def get_pokemon_species(self, name_or_id: str | int) -> PokemonSpecies:
        return await self._fetch(
            PokemonSpecies,
            "get_pokemon_species",
            f"/pokemon-species/{name_or_id}",
            name_or_id,
            not_found=f"Pokemon species '{name_or_id}' not found.",
        )

    async def get_evolution_chain(self, chain_id: int) -> EvolutionChain:
        return await self._fetch(
            EvolutionChain,
            "get_evolution_chain",
            f"/evolution-chain/{chain_id}",
            chain_id,
        )

    async def get_type(self, name: str) -> TypeInfo:
        # Any string is forwarded; unknown types come back as a plain upstream error
        return await self._fetch(TypeInfo, "get_type", f"/type/{name}", name)

    async def close(self):
        """Close the HTTP client (call on app shutdown)."""
        await self.client.aclose()

import asyncio
import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import RedirectResponse, StreamingResponse

from pokeloaders.config import configure_logging, get_settings
from pokeloaders.dependencies import close_poke_client, get_pokemon_service
from pokeloaders.models import (
    DemoView,
    ModularView,
    PokemonDetailView,
    PokemonListView,
    StreamingHead,
    TypesView,
    VisitorGreeting,
)
from pokeloaders.services import PokemonService, load_all

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().log_level)
    yield
    await close_poke_client()


app = FastAPI(
    title="PokeAPI Loader Patterns",
    description="Server-side loading, parallel fetches, nested routes and streaming against PokeAPI.",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_testing_actions(request: Request, call_next):
    """Wraps the form demo route only, logging on the way in and on the way out."""
    if not request.url.path.startswith("/testing-actions"):
        return await call_next(request)
    logger.info(f"entering middleware with {request.method}")
    response = await call_next(request)
    logger.info(f"exiting middleware with {request.method}")
    return response


@app.get("/", summary="Lists the demo routes")
async def home():
    return {
        "routes": {
            "/pokemon": "Paginated list (layout and list loaders in parallel)",
            "/pokemon/{name}": "Detail page (parallel fetches, then the dependent evolution chain)",
            "/modular/{name}": "Nested routes with their own loaders (stats, abilities, evolution)",
            "/streaming/{name}": "Progressive streaming (species section arrives later)",
            "/types": "All 18 types fetched in parallel",
            "/demo": "Server-loaded Pokemon stamped with where and when it was loaded",
            "/testing-actions": "Form echo (POST visitorsName)",
        }
    }


# Layout + list: the layout loader and the page loader run at the same time
@app.get("/pokemon", response_model=PokemonListView, summary="Returns one page of the catalogue")
async def list_pokemon(
    page: int = 1,
    service: PokemonService = Depends(get_pokemon_service),
):
    quick_access, list_page = await load_all(
        service.get_quick_access(),
        service.get_list_page(page),
    )
    return PokemonListView(**dict(list_page), quick_access=quick_access)


@app.get("/pokemon/{name}", response_model=PokemonDetailView, summary="Returns the detail page data")
async def pokemon_detail(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    # PokemonNotFoundError (404) and APIClientError (503) propagate as HTTPExceptions
    quick_access, detail = await load_all(
        service.get_quick_access(),
        service.get_detail(name),
    )
    return PokemonDetailView(**dict(detail), quick_access=quick_access)


@app.get("/modular/{name}", include_in_schema=False)
async def modular_index(name: str):
    return RedirectResponse(url=f"/modular/{name}/stats")


@app.get("/modular/{name}/stats", response_model=ModularView)
async def modular_stats(name: str, service: PokemonService = Depends(get_pokemon_service)):
    parent, section = await load_all(service.get_modular_parent(name), service.get_stats(name))
    return ModularView(pokemon=parent, section=section)


@app.get("/modular/{name}/abilities", response_model=ModularView)
async def modular_abilities(name: str, service: PokemonService = Depends(get_pokemon_service)):
    parent, section = await load_all(service.get_modular_parent(name), service.get_abilities(name))
    return ModularView(pokemon=parent, section=section)


@app.get("/modular/{name}/evolution", response_model=ModularView)
async def modular_evolution(name: str, service: PokemonService = Depends(get_pokemon_service)):
    parent, section = await load_all(service.get_modular_parent(name), service.get_evolution(name))
    return ModularView(pokemon=parent, section=section)


@app.get("/types", response_model=TypesView, summary="Returns all 18 types")
async def list_types(service: PokemonService = Depends(get_pokemon_service)):
    return await service.get_all_types()


@app.get("/demo", response_model=DemoView, summary="Returns a Pokemon loaded on the server")
async def demo(service: PokemonService = Depends(get_pokemon_service)):
    return await service.get_demo()


@app.get("/streaming/{name}", summary="Streams the page as newline-delimited JSON")
async def streaming(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """
    The first line is sent as soon as the Pokemon and its evolution chain are in;
    the species section follows once its pending fetch resolves.
    """
    head, pending_species = await service.start_streaming(name)
    return StreamingResponse(
        stream_page(head, pending_species, name),
        media_type="application/x-ndjson",
    )


async def stream_page(
    head: StreamingHead,
    pending_species: asyncio.Future,
    name: str,
) -> AsyncIterator[str]:
    """Yields the head line at once, then the species line (or an error line)."""
    try:
        yield head.model_dump_json(by_alias=True) + "\n"
        try:
            section = await pending_species
        except HTTPException as e:
            # The status line is already sent, so the failure goes into the stream
            logger.error(f"Streaming species for {name} failed: {e.detail}")
            yield json.dumps({"error": e.detail}) + "\n"
            return
        yield json.dumps({"species": section.model_dump()}) + "\n"
    finally:
        # Client went away before the species section was ready
        if not pending_species.done():
            pending_species.cancel()


@app.post("/testing-actions", response_model=VisitorGreeting, summary="Echoes the submitted form")
async def testing_actions(visitorsName: str = Form("")):
    return VisitorGreeting(message=f"Hello, {visitorsName}")

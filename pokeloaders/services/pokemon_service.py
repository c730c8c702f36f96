import asyncio
import logging
from datetime import datetime, timezone

from pokeloaders.clients.pokeapi_client import PokeAPIClient
from pokeloaders.clients.tracing import FetchObserver, trace
from pokeloaders.config import Settings
from pokeloaders.helpers import (
    dex_number,
    english_flavor_text,
    english_genus,
    extract_id,
    flatten_chain,
    main_sprite,
    pagination_window,
    sprite_url,
    stat_percentage,
    title_case,
    total_pages,
)
from pokeloaders.models import (
    AbilitiesSection,
    AbilityLine,
    DemoView,
    EvolutionChain,
    EvolutionSection,
    ModularPokemon,
    NamedAPIResource,
    PokemonDetail,
    PokemonListItem,
    PokemonListPage,
    PokemonSpecies,
    SpeciesSection,
    StatLine,
    StatsSection,
    StreamingHead,
    TypeSummary,
    TypesView,
)
from pokeloaders.services.loading import defer, load_all

logger = logging.getLogger(__name__)

TYPE_NAMES = (
    "normal", "fire", "water", "electric", "grass", "ice",
    "fighting", "poison", "ground", "flying", "psychic", "bug",
    "rock", "ghost", "dragon", "dark", "steel", "fairy",
)


def _loaded_at() -> str:
    return datetime.now(timezone.utc).isoformat()


def _names(resources: list[NamedAPIResource]) -> list[str]:
    return [r.name for r in resources]


class PokemonService:
    """Page loaders: each method gathers what one page of the demo needs."""

    def __init__(
        self,
        poke_client: PokeAPIClient,
        settings: Settings | None = None,
        observer: FetchObserver | None = None,
    ):
        self._poke_client = poke_client
        self._settings = settings or Settings()
        self._observer = observer

    # --- Layout ---

    async def get_quick_access(self) -> list[NamedAPIResource]:
        """Layout loader: a handful of Pokemon for the quick access bar."""
        with trace(self._observer, "layout loader"):
            data = await self._poke_client.list_pokemon(self._settings.quick_access_size, 0)
        return data.results

    # --- List and detail pages ---

    async def get_list_page(self, page: int = 1) -> PokemonListPage:
        """List loader: one catalogue page plus the pagination metadata."""
        page = max(page, 1)
        limit = self._settings.page_size
        offset = (page - 1) * limit

        with trace(self._observer, "list loader", f"page {page}"):
            data = await self._poke_client.list_pokemon(limit, offset)

        items = []
        for entry in data.results:
            pokemon_id = extract_id(entry.url)
            items.append(
                PokemonListItem(
                    id=pokemon_id,
                    name=entry.name,
                    display_name=title_case(entry.name),
                    dex_number=dex_number(pokemon_id),
                    sprite_url=sprite_url(pokemon_id),
                )
            )

        pages = total_pages(data.count, limit)
        return PokemonListPage(
            pokemon=items,
            count=data.count,
            current_page=page,
            total_pages=pages,
            has_next=data.next is not None,
            has_previous=data.previous is not None,
            page_numbers=pagination_window(page, pages),
        )

    async def get_detail(self, name: str) -> PokemonDetail:
        """
        Detail loader: Pokemon and species in parallel, then the evolution chain,
        which needs the chain id from the species response.
        """
        with trace(self._observer, "detail loader", name):
            pokemon, species = await load_all(
                self._poke_client.get_pokemon(name),
                self._poke_client.get_pokemon_species(name),
            )
            evolution_chain = await self._chain_for_species(species)

        return PokemonDetail(
            pokemon=pokemon,
            species=species,
            evolution_chain=evolution_chain,
            display_name=title_case(pokemon.name),
            dex_number=dex_number(pokemon.id),
            sprite=main_sprite(pokemon),
            flavor_text=english_flavor_text(species),
            genus=english_genus(species),
            evolution_names=flatten_chain(evolution_chain.chain),
        )

    async def _chain_for_species(self, species: PokemonSpecies) -> EvolutionChain:
        chain_url = species.evolution_chain.url if species.evolution_chain else ""
        return await self._poke_client.get_evolution_chain(extract_id(chain_url))

    async def get_evolution_for_pokemon(self, name: str) -> tuple[PokemonSpecies, EvolutionChain]:
        """Species first, then its evolution chain. The two calls cannot overlap."""
        species = await self._poke_client.get_pokemon_species(name)
        evolution_chain = await self._chain_for_species(species)
        return species, evolution_chain

    # --- Modular (nested) pages ---

    async def get_modular_parent(self, name: str) -> ModularPokemon:
        with trace(self._observer, "modular parent loader", name):
            pokemon = await self._poke_client.get_pokemon(name)
        return ModularPokemon(
            id=pokemon.id,
            name=pokemon.name,
            display_name=title_case(pokemon.name),
            dex_number=dex_number(pokemon.id),
            sprite=main_sprite(pokemon),
            types=[t.type.name for t in pokemon.types],
        )

    async def get_stats(self, name: str) -> StatsSection:
        with trace(self._observer, "stats loader", name):
            pokemon = await self._poke_client.get_pokemon(name)
        return StatsSection(
            stats_loaded_at=_loaded_at(),
            stats=[
                StatLine(
                    name=s.stat.name,
                    label=title_case(s.stat.name),
                    base_stat=s.base_stat,
                    effort=s.effort,
                    percentage=stat_percentage(s.base_stat),
                )
                for s in pokemon.stats
            ],
        )

    async def get_abilities(self, name: str) -> AbilitiesSection:
        with trace(self._observer, "abilities loader", name):
            pokemon = await self._poke_client.get_pokemon(name)
        return AbilitiesSection(
            abilities_loaded_at=_loaded_at(),
            abilities=[
                AbilityLine(
                    name=a.ability.name,
                    label=title_case(a.ability.name),
                    is_hidden=a.is_hidden,
                    slot=a.slot,
                )
                for a in pokemon.abilities
            ],
        )

    async def get_evolution(self, name: str) -> EvolutionSection:
        with trace(self._observer, "evolution loader", name):
            species, evolution_chain = await self.get_evolution_for_pokemon(name)
        return EvolutionSection(
            evolution_loaded_at=_loaded_at(),
            evolution_chain=evolution_chain,
            evolution_names=flatten_chain(evolution_chain.chain),
            species=species,
        )

    # --- Types page ---

    async def get_all_types(self) -> TypesView:
        """Fetches all 18 types at once."""
        with trace(self._observer, "types loader"):
            types = await load_all(*(self._poke_client.get_type(n) for n in TYPE_NAMES))

        return TypesView(
            types=[
                TypeSummary(
                    id=t.id,
                    name=t.name,
                    display_name=title_case(t.name),
                    double_damage_to=_names(t.damage_relations.double_damage_to),
                    half_damage_to=_names(t.damage_relations.half_damage_to),
                    no_damage_to=_names(t.damage_relations.no_damage_to),
                    double_damage_from=_names(t.damage_relations.double_damage_from),
                    half_damage_from=_names(t.damage_relations.half_damage_from),
                    no_damage_from=_names(t.damage_relations.no_damage_from),
                    pokemon_count=len(t.pokemon),
                )
                for t in types
            ]
        )

    # --- Server-loader demo page ---

    async def get_demo(self) -> DemoView:
        """Loads a fixed Pokemon on the server and stamps where and when it ran."""
        with trace(self._observer, "demo loader"):
            pokemon = await self._poke_client.get_pokemon("pikachu")
        return DemoView(pokemon=pokemon, loaded_on="server", timestamp=_loaded_at())

    # --- Streaming page ---

    async def start_streaming(self, name: str) -> tuple[StreamingHead, asyncio.Future]:
        """
        Streaming loader: the head of the page is awaited here, the species
        section is returned still pending for the caller to await later.
        """
        with trace(self._observer, "streaming loader", name):
            pokemon = await self._poke_client.get_pokemon(name)
            pending_species = defer(self._load_species_section(name))
            try:
                _, evolution_chain = await self.get_evolution_for_pokemon(name)
            except BaseException:
                pending_species.cancel()
                raise

        head = StreamingHead(
            pokemon=pokemon,
            display_name=title_case(pokemon.name),
            sprite=main_sprite(pokemon),
            evolution_names=flatten_chain(evolution_chain.chain),
        )
        return head, pending_species

    async def _load_species_section(self, name: str) -> SpeciesSection:
        species = await self._poke_client.get_pokemon_species(name)
        if self._settings.stream_delay_seconds > 0:
            await asyncio.sleep(self._settings.stream_delay_seconds)
        logger.info(f"Species description streamed in for {name}")
        return SpeciesSection(
            flavor_text=english_flavor_text(species),
            is_legendary=species.is_legendary,
            is_mythical=species.is_mythical,
        )

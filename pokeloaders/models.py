from pydantic import BaseModel, ConfigDict, Field

# --- Upstream PokeAPI payloads (internal contract) ---
# Only the fields the loaders use are declared; anything else in the JSON is ignored.

class NamedAPIResource(BaseModel):
    name: str
    url: str


class APIResource(BaseModel):
    url: str


class PokemonListResponse(BaseModel):
    count: int
    next: str | None = None
    previous: str | None = None
    results: list[NamedAPIResource] = []


class PokemonTypeSlot(BaseModel):
    slot: int
    type: NamedAPIResource


class PokemonStat(BaseModel):
    base_stat: int
    effort: int
    stat: NamedAPIResource


class PokemonAbility(BaseModel):
    ability: NamedAPIResource
    is_hidden: bool
    slot: int


class SpriteArtwork(BaseModel):
    front_default: str | None = None
    front_shiny: str | None = None
    front_female: str | None = None
    front_shiny_female: str | None = None


class OtherSprites(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    official_artwork: SpriteArtwork | None = Field(default=None, alias="official-artwork")
    home: SpriteArtwork | None = None
    dream_world: SpriteArtwork | None = None


class PokemonSprites(BaseModel):
    front_default: str | None = None
    front_shiny: str | None = None
    front_female: str | None = None
    front_shiny_female: str | None = None
    back_default: str | None = None
    back_shiny: str | None = None
    back_female: str | None = None
    back_shiny_female: str | None = None
    other: OtherSprites | None = None


class Pokemon(BaseModel):
    id: int
    name: str
    height: int
    weight: int
    base_experience: int | None = None
    types: list[PokemonTypeSlot] = []
    stats: list[PokemonStat] = []
    abilities: list[PokemonAbility] = []
    sprites: PokemonSprites = PokemonSprites()
    species: NamedAPIResource


class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: NamedAPIResource
    version: NamedAPIResource | None = None


class Genus(BaseModel):
    genus: str
    language: NamedAPIResource


class PokemonSpecies(BaseModel):
    id: int
    name: str
    order: int | None = None
    gender_rate: int | None = None
    capture_rate: int
    base_happiness: int | None = None
    is_baby: bool = False
    is_legendary: bool = False
    is_mythical: bool = False
    hatch_counter: int | None = None
    growth_rate: NamedAPIResource | None = None
    generation: NamedAPIResource | None = None
    evolution_chain: APIResource | None = None
    flavor_text_entries: list[FlavorTextEntry] = []
    genera: list[Genus] = []


class EvolutionDetail(BaseModel):
    trigger: NamedAPIResource
    min_level: int | None = None
    item: NamedAPIResource | None = None
    held_item: NamedAPIResource | None = None
    known_move: NamedAPIResource | None = None
    location: NamedAPIResource | None = None
    min_happiness: int | None = None
    min_affection: int | None = None
    time_of_day: str = ""
    trade_species: NamedAPIResource | None = None
    needs_overworld_rain: bool = False
    turn_upside_down: bool = False


class ChainLink(BaseModel):
    is_baby: bool = False
    species: NamedAPIResource
    evolution_details: list[EvolutionDetail] = []
    evolves_to: list["ChainLink"] = []


ChainLink.model_rebuild()


class EvolutionChain(BaseModel):
    id: int
    baby_trigger_item: NamedAPIResource | None = None
    chain: ChainLink


class TypeRelations(BaseModel):
    no_damage_to: list[NamedAPIResource] = []
    half_damage_to: list[NamedAPIResource] = []
    double_damage_to: list[NamedAPIResource] = []
    no_damage_from: list[NamedAPIResource] = []
    half_damage_from: list[NamedAPIResource] = []
    double_damage_from: list[NamedAPIResource] = []


class TypePokemon(BaseModel):
    slot: int
    pokemon: NamedAPIResource


class TypeInfo(BaseModel):
    id: int
    name: str
    damage_relations: TypeRelations = TypeRelations()
    pokemon: list[TypePokemon] = []
    generation: NamedAPIResource | None = None


# --- Page payloads (public API responses) ---

class PokemonListItem(BaseModel):
    id: int
    name: str
    display_name: str
    dex_number: str
    sprite_url: str


class PokemonListPage(BaseModel):
    pokemon: list[PokemonListItem]
    count: int
    current_page: int
    total_pages: int
    has_next: bool
    has_previous: bool
    page_numbers: list[int]


class PokemonListView(PokemonListPage):
    quick_access: list[NamedAPIResource]


class PokemonDetail(BaseModel):
    pokemon: Pokemon
    species: PokemonSpecies
    evolution_chain: EvolutionChain
    display_name: str
    dex_number: str
    sprite: str | None
    flavor_text: str | None
    genus: str | None
    evolution_names: list[str]


class PokemonDetailView(PokemonDetail):
    quick_access: list[NamedAPIResource]


class StatLine(BaseModel):
    name: str
    label: str
    base_stat: int
    effort: int
    percentage: float


class StatsSection(BaseModel):
    stats_loaded_at: str
    stats: list[StatLine]


class AbilityLine(BaseModel):
    name: str
    label: str
    is_hidden: bool
    slot: int


class AbilitiesSection(BaseModel):
    abilities_loaded_at: str
    abilities: list[AbilityLine]


class EvolutionSection(BaseModel):
    evolution_loaded_at: str
    evolution_chain: EvolutionChain
    evolution_names: list[str]
    species: PokemonSpecies


class ModularPokemon(BaseModel):
    id: int
    name: str
    display_name: str
    dex_number: str
    sprite: str | None
    types: list[str]


class ModularView(BaseModel):
    pokemon: ModularPokemon
    section: StatsSection | AbilitiesSection | EvolutionSection


class TypeSummary(BaseModel):
    id: int
    name: str
    display_name: str
    double_damage_to: list[str]
    half_damage_to: list[str]
    no_damage_to: list[str]
    double_damage_from: list[str]
    half_damage_from: list[str]
    no_damage_from: list[str]
    pokemon_count: int


class TypesView(BaseModel):
    types: list[TypeSummary]


class StreamingHead(BaseModel):
    pokemon: Pokemon
    display_name: str
    sprite: str | None
    evolution_names: list[str]


class SpeciesSection(BaseModel):
    flavor_text: str | None
    is_legendary: bool
    is_mythical: bool


class VisitorGreeting(BaseModel):
    message: str


class DemoView(BaseModel):
    pokemon: Pokemon
    loaded_on: str
    timestamp: str

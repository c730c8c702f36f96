import logging
import os
from functools import lru_cache

from pydantic import BaseModel


class Settings(BaseModel):
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    request_timeout: float = 5.0
    page_size: int = 20
    quick_access_size: int = 6
    # Artificial delay on the streamed species section so the second chunk is visible
    stream_delay_seconds: float = 2.0
    log_level: str = "INFO"
    trace_colors: bool = True


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@lru_cache
def get_settings() -> Settings:
    """Reads settings from environment variables, falling back to the defaults."""
    defaults = Settings()
    return Settings(
        pokeapi_base_url=os.getenv("POKEAPI_BASE_URL", defaults.pokeapi_base_url),
        request_timeout=float(os.getenv("POKEAPI_TIMEOUT", defaults.request_timeout)),
        page_size=int(os.getenv("PAGE_SIZE", defaults.page_size)),
        quick_access_size=int(os.getenv("QUICK_ACCESS_SIZE", defaults.quick_access_size)),
        stream_delay_seconds=float(os.getenv("STREAM_DELAY_SECONDS", defaults.stream_delay_seconds)),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
        trace_colors=_env_flag("TRACE_COLORS", defaults.trace_colors),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

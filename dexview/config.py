"""Application constants and configuration."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel


# Fixed presentation constants
PAGE_SIZE = 20
PAGE_WINDOW = 5
STAT_MAX = 255

APP_TITLE = "Pokémon Explorer"
PLACEHOLDER_IMAGE = "/static/placeholder.svg"

ENV_PREFIX = "DEXVIEW_"


class Settings(BaseModel):
    """Runtime settings, overridable through ``DEXVIEW_*`` environment variables."""

    api_base_url: str = "https://pokeapi.co/api/v2"
    image_base_url: str = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"
    # Seconds; applies to every request made by the PokeAPI client.
    request_timeout: float = 10.0
    user_agent: str = "DexViewer/1.0"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}
        for field in cls.model_fields:
            raw = env.get(ENV_PREFIX + field.upper())
            if raw is not None and raw.strip():
                values[field] = raw.strip()
        return cls(**values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings

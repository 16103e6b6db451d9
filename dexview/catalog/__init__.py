"""
Catalog package for the Pokémon viewer.

Pure helpers (pagination, stat bars, formatting, JSON mapping) sit
beside the PokeAPI client and the list/detail controllers.  The
``router`` module exposes both the server-rendered HTML views and a
JSON mirror of the same view state.
"""

from .router import api_router  # noqa: F401
from .router import router as catalog_router  # noqa: F401

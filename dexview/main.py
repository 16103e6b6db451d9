# dexview/main.py
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from . import __version__
from .catalog import api_router, catalog_router
from .catalog.pokeapi_service import PokeApiService
from .config import APP_TITLE, Settings, get_settings
from .logging_setup import configure_logging


STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[PokeApiService] = None,
) -> FastAPI:
    """Build the application; ``service`` lets tests inject a mocked client."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.pokeapi = service or PokeApiService(settings)
        try:
            yield
        finally:
            await app.state.pokeapi.aclose()

    app = FastAPI(
        title=APP_TITLE,
        description="Read-only browser front-end over the public PokeAPI.",
        version=__version__,
        lifespan=lifespan,
    )
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(catalog_router)
    app.include_router(api_router)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()

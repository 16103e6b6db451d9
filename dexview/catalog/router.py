"""
Route definitions for the catalog.

HTML views:
- GET  /                       : paginated list (``?page=N``)
- GET  /pokemon/{record_id}    : detail view by id or name

JSON endpoints under /api/catalog:
- GET  /entries                : list view state for a page
- GET  /entries/{record_id}    : one record with its display strings
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..config import APP_TITLE, PLACEHOLDER_IMAGE
from ..exceptions import NotFoundError
from .controllers import DetailViewController, ListViewController
from .formatting import format_display_name, format_identifier
from .pokeapi_service import PokeApiService
from .schemas import DetailView, ListView


TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    app_title=APP_TITLE,
    placeholder_image=PLACEHOLDER_IMAGE,
    format_display_name=format_display_name,
    format_identifier=format_identifier,
)

router = APIRouter(tags=["catalog"])
api_router = APIRouter(prefix="/api/catalog", tags=["catalog"])

DEFAULT_DETAIL_TITLE = f"Pokémon Details | {APP_TITLE}"
DEFAULT_DETAIL_DESCRIPTION = "View detailed information about this Pokémon."


def get_service(request: Request) -> PokeApiService:
    """The application-wide PokeAPI client created in the lifespan handler."""
    return request.app.state.pokeapi


async def _list_view(page: int, service: PokeApiService) -> ListView:
    controller = ListViewController(service)
    await controller.open_page(page)
    return controller.snapshot()


async def _detail_view(record_id: str, service: PokeApiService) -> DetailView:
    controller = DetailViewController(service)
    await controller.load(record_id)
    return controller.snapshot()


def _detail_metadata(view: DetailView) -> dict:
    if view.record is None:
        return {"title": DEFAULT_DETAIL_TITLE, "description": DEFAULT_DETAIL_DESCRIPTION}
    name = view.record.name
    return {
        "title": f"{format_display_name(name)} | {APP_TITLE}",
        "description": f"View details about {name}, including types, abilities, and stats.",
    }


@router.get("/", response_class=HTMLResponse)
async def list_page(
    request: Request,
    page: int = Query(default=1, ge=1, description="Current page (1-indexed)"),
    service: PokeApiService = Depends(get_service),
):
    view = await _list_view(page, service)
    return templates.TemplateResponse(
        request,
        "list.html",
        {"view": view, "title": APP_TITLE},
    )


@router.get("/pokemon/{record_id}", response_class=HTMLResponse)
async def detail_page(
    request: Request,
    record_id: str,
    service: PokeApiService = Depends(get_service),
):
    view = await _detail_view(record_id, service)
    meta = _detail_metadata(view)
    return templates.TemplateResponse(
        request,
        "detail.html",
        {"view": view, "title": meta["title"], "description": meta["description"]},
    )


@api_router.get("/entries", response_model=ListView)
async def list_entries(
    page: int = Query(default=1, ge=1, description="Current page (1-indexed)"),
    service: PokeApiService = Depends(get_service),
) -> ListView:
    return await _list_view(page, service)


@api_router.get("/entries/{record_id}", response_model=DetailView)
async def get_entry(
    record_id: str,
    service: PokeApiService = Depends(get_service),
) -> DetailView:
    controller = DetailViewController(service)
    await controller.load(record_id)
    error = controller.state.error
    if isinstance(error, NotFoundError):
        raise HTTPException(status_code=404, detail=controller.error_message)
    if error is not None:
        raise HTTPException(status_code=502, detail=controller.error_message)
    return controller.snapshot()

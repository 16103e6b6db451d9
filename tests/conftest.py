import asyncio

import httpx
import pytest

from dexview.catalog.pokeapi_service import PokeApiService
from dexview.config import Settings


API = "https://pokeapi.test/api/v2"
IMAGES = "https://img.test/sprites"


def list_payload(offset=0, limit=20, count=1302):
    results = [
        {"name": f"mon-{i}", "url": f"{API}/pokemon/{i}/"}
        for i in range(offset + 1, min(offset + limit, count) + 1)
    ]
    return {"count": count, "next": None, "previous": None, "results": results}


PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
    "sprites": {
        "front_default": "https://img.test/front/25.png",
        "back_default": None,
        "other": {"official-artwork": {"front_default": "https://img.test/art/25.png"}},
    },
    "types": [{"slot": 1, "type": {"name": "electric", "url": f"{API}/type/13/"}}],
    "abilities": [
        {"ability": {"name": "static"}, "is_hidden": False, "slot": 1},
        {"ability": {"name": "lightning-rod"}, "is_hidden": True, "slot": 3},
    ],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp"}},
        {"base_stat": 55, "effort": 0, "stat": {"name": "attack"}},
        {"base_stat": 40, "effort": 0, "stat": {"name": "defense"}},
        {"base_stat": 50, "effort": 0, "stat": {"name": "special-attack"}},
        {"base_stat": 50, "effort": 0, "stat": {"name": "special-defense"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed"}},
    ],
}


def pokeapi_handler(request: httpx.Request) -> httpx.Response:
    """Stand-in for PokeAPI: list pages, ``pikachu``/``25`` and 404 otherwise."""
    path = request.url.path
    if path.endswith("/pokemon"):
        limit = int(request.url.params["limit"])
        offset = int(request.url.params["offset"])
        return httpx.Response(200, json=list_payload(offset, limit))
    if path.rstrip("/").split("/")[-1] in ("25", "pikachu"):
        return httpx.Response(200, json=PIKACHU)
    return httpx.Response(404, text="Not Found")


@pytest.fixture
def settings():
    return Settings(api_base_url=API, image_base_url=IMAGES, log_level="DEBUG")


@pytest.fixture
def make_service(settings):
    clients = []

    def _make(handler=pokeapi_handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return PokeApiService(settings, client=client)

    yield _make

    for client in clients:
        asyncio.run(client.aclose())
        assert client.is_closed

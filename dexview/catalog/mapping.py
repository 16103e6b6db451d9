"""
Mapping from raw PokeAPI JSON to catalog schemas.

These functions run immediately after deserialisation and know
nothing about HTTP, so they can be tested against plain dicts.
Shape problems raise ``MalformedDataError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..config import STAT_MAX
from ..exceptions import MalformedDataError
from .schemas import CatalogEntry, Measurements, RecordDetail, Stat, Trait


def extract_numeric_id(source_url: str) -> int:
    """Return the id segment of ``.../pokemon/<id>/``.

    The id is the last-but-one segment once the URL is split on ``/``,
    which relies on the trailing slash PokeAPI always emits.
    """
    parts = source_url.split("/")
    if len(parts) < 2:
        raise MalformedDataError(f"No identifier segment in {source_url!r}")
    try:
        return int(parts[-2])
    except ValueError as exc:
        raise MalformedDataError(f"Non-numeric identifier in {source_url!r}") from exc


def build_image_url(numeric_id: int, image_base_url: str) -> str:
    return f"{image_base_url.rstrip('/')}/{numeric_id}.png"


def to_catalog_entry(raw: Any, image_base_url: str) -> CatalogEntry:
    if not isinstance(raw, dict):
        raise MalformedDataError(f"List entry is not a JSON object: {raw!r}")
    name = raw.get("name")
    url = raw.get("url")
    if not isinstance(name, str) or not isinstance(url, str):
        raise MalformedDataError(f"List entry missing name/url: {raw!r}")
    numeric_id = extract_numeric_id(url)
    return CatalogEntry(
        name=name,
        source_url=url,
        numeric_id=numeric_id,
        image_url=build_image_url(numeric_id, image_base_url),
    )


def parse_list_page(data: Any, image_base_url: str) -> tuple[int, List[CatalogEntry]]:
    """Return ``(count, entries)`` from a list endpoint body."""
    if not isinstance(data, dict):
        raise MalformedDataError("List response is not a JSON object")
    count = data.get("count")
    results = data.get("results")
    if not isinstance(count, int) or not isinstance(results, list):
        raise MalformedDataError("List response lacks count/results")
    entries = [to_catalog_entry(item, image_base_url) for item in results]
    return count, entries


def _nested(data: Dict[str, Any], *keys: str) -> Optional[Any]:
    node: Any = data
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def parse_record_detail(data: Any) -> RecordDetail:
    """Flatten a detail endpoint body into a ``RecordDetail``."""
    if not isinstance(data, dict):
        raise MalformedDataError("Detail response is not a JSON object")

    try:
        sprites = data.get("sprites") or {}
        categories = [
            name
            for name in (_nested(slot, "type", "name") for slot in data.get("types") or [])
            if isinstance(name, str)
        ]
        traits = [
            Trait(name=name, is_hidden=bool(slot.get("is_hidden")))
            for slot in data.get("abilities") or []
            for name in [_nested(slot, "ability", "name")]
            if isinstance(name, str)
        ]
        stats = [
            Stat(name=name, value=slot.get("base_stat"), max=STAT_MAX)
            for slot in data.get("stats") or []
            for name in [_nested(slot, "stat", "name")]
            if isinstance(name, str)
        ]
        return RecordDetail(
            id=data.get("id"),
            name=data.get("name"),
            front_image_url=sprites.get("front_default"),
            back_image_url=sprites.get("back_default"),
            official_artwork_url=_nested(sprites, "other", "official-artwork", "front_default"),
            categories=categories,
            traits=traits,
            measurements=Measurements(height_raw=data.get("height"), weight_raw=data.get("weight")),
            stats=stats,
        )
    except (ValidationError, AttributeError, TypeError) as exc:
        raise MalformedDataError(f"Unexpected detail response shape: {exc}") from exc

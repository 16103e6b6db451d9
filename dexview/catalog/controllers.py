"""
View controllers for the list and detail pages.

Each controller owns one ``FetchState``: a small state machine with
the states idle, loading, loaded and failed.  A fetch is tagged with
the key that started it (a page number or a record id) and its result
is only applied while that key is still current, so a slow response
for a page the user has already left cannot overwrite the newer one.

Controllers are not shared between requests or tasks; all mutation
happens on the event loop that awaits them.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Generic, Hashable, List, Optional, TypeVar

from ..config import PAGE_SIZE, PAGE_WINDOW
from ..exceptions import DexViewError, NotFoundError
from .formatting import (
    format_display_name,
    format_height,
    format_identifier,
    format_stat_name,
    format_trait_label,
    format_weight,
)
from .pagination import page_window, total_pages
from .pokeapi_service import PokeApiService
from .schemas import CatalogEntry, DetailView, ListView, PageState, RecordDetail, TraitView
from .statbar import stat_bar


logger = logging.getLogger(__name__)

T = TypeVar("T")

DETAIL_FETCH_FAILED = "Failed to fetch Pokémon details"


class FetchStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class FetchState(Generic[T]):
    """Loading/data/error triple driven by keyed transitions.

    ``data`` survives a new ``start`` and a ``fail`` so a view can keep
    showing what it had; it is only replaced by ``resolve``.
    """

    def __init__(self) -> None:
        self.status = FetchStatus.IDLE
        self.key: Optional[Hashable] = None
        self.data: Optional[T] = None
        self.error: Optional[DexViewError] = None

    @property
    def loading(self) -> bool:
        return self.status is FetchStatus.LOADING

    def start(self, key: Hashable) -> None:
        self.key = key
        self.status = FetchStatus.LOADING
        self.error = None

    def is_current(self, key: Hashable) -> bool:
        return self.status is FetchStatus.LOADING and self.key == key

    def resolve(self, key: Hashable, data: T) -> bool:
        if not self.is_current(key):
            logger.debug("Discarding stale result for %r (current key %r)", key, self.key)
            return False
        self.data = data
        self.status = FetchStatus.LOADED
        return True

    def fail(self, key: Hashable, error: DexViewError) -> bool:
        if not self.is_current(key):
            logger.debug("Discarding stale failure for %r (current key %r)", key, self.key)
            return False
        self.error = error
        self.status = FetchStatus.FAILED
        return True


class ListViewController:
    """Current page, its entries and the page selector for the list view."""

    def __init__(
        self,
        service: PokeApiService,
        page_size: int = PAGE_SIZE,
        window: int = PAGE_WINDOW,
    ) -> None:
        self.service = service
        self.window = window
        self.page = PageState(page_size=page_size)
        self.state: FetchState[List[CatalogEntry]] = FetchState()

    @property
    def entries(self) -> List[CatalogEntry]:
        return self.state.data or []

    @property
    def loading(self) -> bool:
        return self.state.loading

    async def load_page(self, page: int) -> None:
        """Fetch ``page`` and apply it if it is still the current page.

        Failures are logged and otherwise swallowed: the previous entries
        stay in place and no message reaches the list view.
        """
        self.state.start(page)
        try:
            count, entries = await self.service.fetch_page(page, self.page.page_size)
        except DexViewError as exc:
            if self.state.fail(page, exc):
                logger.error("Error fetching catalog page %s: %s", page, exc)
            return

        if self.state.resolve(page, entries):
            self.page.total_pages = total_pages(count, self.page.page_size)

    async def go_to_page(self, page: int) -> None:
        """Select ``page`` and fetch it; re-selecting the shown page is a no-op.

        Values come from ``page_numbers()`` and are not clamped again.
        """
        if page == self.page.current_page and self.state.status is not FetchStatus.IDLE:
            return
        self.page.current_page = page
        await self.load_page(page)

    async def open_page(self, page: int) -> None:
        """Load a page requested from outside the selector, e.g. ``?page=N``.

        Once the total is known, a page past the end is replaced by the
        last page so ``current_page <= max(total_pages, 1)`` holds.
        """
        await self.go_to_page(page)
        last = max(self.page.total_pages, 1)
        if self.page.current_page <= last:
            return
        if self.page.total_pages:
            await self.go_to_page(last)
        else:
            self.page.current_page = last

    async def next(self) -> None:
        target = max(1, min(self.page.current_page + 1, self.page.total_pages))
        await self.go_to_page(target)

    async def previous(self) -> None:
        await self.go_to_page(max(self.page.current_page - 1, 1))

    def page_numbers(self) -> List[int]:
        return page_window(self.page.current_page, self.page.total_pages, self.window)

    def snapshot(self) -> ListView:
        current = self.page.current_page
        return ListView(
            entries=self.entries,
            page=self.page.model_copy(),
            page_numbers=self.page_numbers(),
            loading=self.loading,
            has_previous=current > 1 and not self.loading,
            has_next=current < self.page.total_pages and not self.loading,
        )


class DetailViewController:
    """Fetch-by-id state for a single record."""

    def __init__(self, service: PokeApiService) -> None:
        self.service = service
        self.state: FetchState[RecordDetail] = FetchState()

    @property
    def record(self) -> Optional[RecordDetail]:
        return self.state.data

    @property
    def error_message(self) -> Optional[str]:
        error = self.state.error
        if error is None:
            return None
        if isinstance(error, NotFoundError):
            return str(error)
        return DETAIL_FETCH_FAILED

    async def load(self, record_id: Any) -> None:
        """Fetch ``record_id``; a failure stays terminal until the next ``load``."""
        key = str(record_id)
        self.state.start(key)
        try:
            record = await self.service.fetch_detail(key)
        except DexViewError as exc:
            if self.state.fail(key, exc):
                logger.error("Error fetching record %r: %s", key, exc)
            return
        self.state.resolve(key, record)

    def snapshot(self) -> DetailView:
        if self.state.status is FetchStatus.FAILED:
            return DetailView(error=self.error_message)

        record = self.record
        if record is None or self.state.loading:
            return DetailView(loading=self.state.loading)

        return DetailView(
            record=record,
            display_name=format_display_name(record.name),
            identifier=format_identifier(record.id),
            height=format_height(record.measurements.height_raw),
            weight=format_weight(record.measurements.weight_raw),
            traits=[
                TraitView(label=format_trait_label(t.name, t.is_hidden), is_hidden=t.is_hidden)
                for t in record.traits
            ],
            stat_bars=[stat_bar(format_stat_name(s.name), s.value, s.max) for s in record.stats],
        )

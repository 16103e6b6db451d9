"""
Pydantic schema definitions for the catalog module.

``CatalogEntry`` is what a list card needs; ``RecordDetail`` is the
flattened shape of a single PokeAPI record used by the detail view.
The ``ListView`` and ``DetailView`` models bundle records with the
display strings and pagination metadata the templates render, and
are also returned as-is by the JSON routes.
"""

from typing import List, Optional

from pydantic import BaseModel, Field
from typing_extensions import Literal

from ..config import PAGE_SIZE, STAT_MAX


StatBucket = Literal["low", "below-average", "average", "high"]


class CatalogEntry(BaseModel):
    """A single list entry with its derived identifier and sprite URL."""

    name: str
    source_url: str
    numeric_id: int
    image_url: str


class PageState(BaseModel):
    """Pagination state owned by the list controller.

    ``current_page`` stays within ``[1, max(total_pages, 1)]`` for moves
    made through ``next``/``previous``.  ``total_pages`` is 0 until the
    first successful fetch.
    """

    current_page: int = Field(default=1, ge=1)
    total_pages: int = Field(default=0, ge=0)
    page_size: int = PAGE_SIZE


class Trait(BaseModel):
    name: str
    is_hidden: bool = False


class Measurements(BaseModel):
    # API-native units: decimetres and hectograms.
    height_raw: int
    weight_raw: int


class Stat(BaseModel):
    name: str
    value: int
    max: int = STAT_MAX


class RecordDetail(BaseModel):
    """A fetched record, rebuilt from scratch on every detail load.

    Sprite URLs are ``None`` when the API has no image for that view;
    the templates substitute the placeholder asset.
    """

    id: int
    name: str
    front_image_url: Optional[str] = None
    back_image_url: Optional[str] = None
    official_artwork_url: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    traits: List[Trait] = Field(default_factory=list)
    measurements: Measurements
    stats: List[Stat] = Field(default_factory=list)


class StatBarView(BaseModel):
    label: str
    value: int
    ratio: float
    bucket: StatBucket


class TraitView(BaseModel):
    label: str
    is_hidden: bool


class ListView(BaseModel):
    """Everything the list page renders for one request."""

    entries: List[CatalogEntry]
    page: PageState
    page_numbers: List[int]
    loading: bool = False
    has_previous: bool = False
    has_next: bool = False


class DetailView(BaseModel):
    """The detail page model: either ``record`` or ``error`` is set."""

    record: Optional[RecordDetail] = None
    error: Optional[str] = None
    loading: bool = False
    display_name: str = ""
    identifier: str = ""
    height: str = ""
    weight: str = ""
    traits: List[TraitView] = Field(default_factory=list)
    stat_bars: List[StatBarView] = Field(default_factory=list)

import copy

import pytest

from dexview.catalog.mapping import (
    build_image_url,
    extract_numeric_id,
    parse_list_page,
    parse_record_detail,
    to_catalog_entry,
)
from dexview.exceptions import MalformedDataError, NetworkError

from .conftest import IMAGES, PIKACHU, list_payload


def test_numeric_id_from_url():
    assert extract_numeric_id("https://x/api/v2/pokemon/25/") == 25


def test_numeric_id_rejects_non_numeric_segment():
    with pytest.raises(MalformedDataError):
        extract_numeric_id("https://x/api/v2/pokemon/pikachu/")


def test_catalog_entry_image_url():
    entry = to_catalog_entry({"name": "pikachu", "url": "https://x/api/v2/pokemon/25/"}, IMAGES)
    assert entry.numeric_id == 25
    assert entry.image_url == f"{IMAGES}/25.png"
    assert entry.image_url.endswith("/25.png")
    assert build_image_url(25, IMAGES + "/") == entry.image_url


def test_parse_list_page():
    count, entries = parse_list_page(list_payload(offset=40, limit=20), IMAGES)
    assert count == 1302
    assert [e.numeric_id for e in entries] == list(range(41, 61))
    assert entries[0].name == "mon-41"


def test_parse_list_page_rejects_bad_shape():
    with pytest.raises(MalformedDataError):
        parse_list_page({"results": []}, IMAGES)
    with pytest.raises(MalformedDataError):
        parse_list_page([], IMAGES)


def test_parse_record_detail():
    record = parse_record_detail(PIKACHU)
    assert record.id == 25
    assert record.name == "pikachu"
    assert record.front_image_url == "https://img.test/front/25.png"
    assert record.back_image_url is None
    assert record.official_artwork_url == "https://img.test/art/25.png"
    assert record.categories == ["electric"]
    assert [(t.name, t.is_hidden) for t in record.traits] == [
        ("static", False),
        ("lightning-rod", True),
    ]
    assert record.measurements.height_raw == 4
    assert record.measurements.weight_raw == 60
    assert [(s.name, s.value, s.max) for s in record.stats][:2] == [
        ("hp", 35, 255),
        ("attack", 55, 255),
    ]


def test_parse_record_detail_missing_fields():
    broken = copy.deepcopy(PIKACHU)
    del broken["height"]
    with pytest.raises(MalformedDataError):
        parse_record_detail(broken)


def test_malformed_data_is_a_network_error():
    with pytest.raises(NetworkError):
        parse_record_detail("not an object")


def test_parse_list_page_rejects_non_object_entries():
    body = {"count": 2, "results": [
        {"name": "bulbasaur", "url": "https://x/api/v2/pokemon/1/"},
        "junk",
    ]}
    with pytest.raises(MalformedDataError):
        parse_list_page(body, IMAGES)

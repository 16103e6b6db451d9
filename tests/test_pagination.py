import pytest

from dexview.catalog.pagination import page_offset, page_window, total_pages


@pytest.mark.parametrize(
    "current, expected",
    [
        (1, [1, 2, 3, 4, 5]),
        (2, [1, 2, 3, 4, 5]),
        (5, [3, 4, 5, 6, 7]),
        (9, [6, 7, 8, 9, 10]),
        (10, [6, 7, 8, 9, 10]),
    ],
)
def test_window_examples(current, expected):
    assert page_window(current, 10) == expected


def test_window_shorter_than_size():
    assert page_window(1, 3) == [1, 2, 3]
    assert page_window(3, 3) == [1, 2, 3]
    assert page_window(1, 1) == [1]


def test_window_empty_when_no_pages():
    assert page_window(1, 0) == []


def test_window_properties_hold_for_all_small_inputs():
    for total in range(0, 30):
        for current in range(1, max(total, 1) + 1):
            window = page_window(current, total)
            assert len(window) == min(5, total)
            if window:
                assert window == list(range(window[0], window[-1] + 1))
            assert all(1 <= n <= total for n in window)
            if total >= 5 and 3 <= current <= total - 2:
                assert window == list(range(current - 2, current + 3))
            if total:
                assert current in window


def test_total_pages_rounds_up():
    assert total_pages(1302, 20) == 66
    assert total_pages(20, 20) == 1
    assert total_pages(21, 20) == 2
    assert total_pages(0, 20) == 0


def test_page_offset():
    assert page_offset(1) == 0
    assert page_offset(3) == 40
    assert page_offset(2, page_size=10) == 10

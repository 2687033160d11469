from __future__ import annotations

import pytest

from record_dashboard.utils.pagination import (
    BLANK,
    ELLIPSIS,
    clamp_page_number,
    compute_total_pages,
    go_to_page,
    is_page_number,
    navigation_state,
    next_page,
    page_labels,
    page_slice,
    previous_page,
)


@pytest.mark.parametrize(
    "total_rows, page_size, expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (100, 10, 10)],
)
def test_compute_total_pages(total_rows, page_size, expected):
    assert compute_total_pages(total_rows, page_size) == expected


def test_clamp_page_number_bounds():
    assert clamp_page_number(0, 5) == 1
    assert clamp_page_number(9, 5) == 5
    assert clamp_page_number(3, 5) == 3
    # No pages still leaves page 1 selectable.
    assert clamp_page_number(4, 0) == 1


def test_page_slice_offsets():
    assert page_slice(1, 10) == (0, 10)
    assert page_slice(3, 10) == (20, 30)


def test_short_list_is_padded_to_visible_width():
    assert page_labels(3, 1) == [1, 2, 3, BLANK, BLANK]
    assert page_labels(5, 2) == [1, 2, 3, 4, 5]


def test_zero_pages_renders_only_blanks():
    assert page_labels(0, 1) == [BLANK] * 5


def test_long_list_near_start():
    assert page_labels(20, 1) == [1, 2, 3, 4, ELLIPSIS, 19, 20]
    assert page_labels(20, 3) == [1, 2, 3, 4, ELLIPSIS, 19, 20]


def test_long_list_in_the_middle():
    assert page_labels(20, 10) == [1, ELLIPSIS, 9, 10, 11, ELLIPSIS, 20]
    assert page_labels(20, 4) == [1, ELLIPSIS, 3, 4, 5, ELLIPSIS, 20]


def test_long_list_near_end():
    assert page_labels(20, 19) == [1, 2, ELLIPSIS, 17, 18, 19, 20]
    assert page_labels(20, 18) == [1, 2, ELLIPSIS, 17, 18, 19, 20]


def test_long_lists_keep_anchors_and_bounded_width():
    for total_pages in (6, 7, 12, 50):
        for current_page in range(1, total_pages + 1):
            labels = page_labels(total_pages, current_page)
            assert len(labels) == 7
            assert labels[0] == 1
            assert labels[-1] == total_pages
            assert labels.count(ELLIPSIS) <= 2
            assert BLANK not in labels


def test_only_numbers_are_page_numbers():
    assert is_page_number(4)
    assert not is_page_number(ELLIPSIS)
    assert not is_page_number(BLANK)
    assert not is_page_number(True)


def test_previous_is_noop_on_first_page():
    assert previous_page(1) == 1
    assert previous_page(4) == 3


def test_next_is_noop_on_last_page():
    assert next_page(5, 5) == 5
    assert next_page(4, 5) == 5


def test_next_never_goes_to_page_zero():
    assert next_page(1, 0) == 1


def test_go_to_page_ignores_non_numeric_labels():
    assert go_to_page(7, 2) == 7
    assert go_to_page(ELLIPSIS, 2) == 2
    assert go_to_page(BLANK, 2) == 2


def test_navigation_disabled_at_boundaries():
    first = navigation_state(1, 5, has_records=True)
    assert first.previous_disabled
    assert not first.next_disabled
    assert not first.pages_disabled

    last = navigation_state(5, 5, has_records=True)
    assert not last.previous_disabled
    assert last.next_disabled


def test_navigation_disabled_when_result_set_is_empty():
    state = navigation_state(1, 0, has_records=False)
    assert state.previous_disabled
    assert state.next_disabled
    assert state.pages_disabled

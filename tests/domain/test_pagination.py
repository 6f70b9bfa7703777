"""
Test suite for the paginator.

Test sections:
- Windowing: page slices, total page count, out-of-range pages
- Navigation: previous / next / direct selection clamping
- Control Plan: page numbers and ellipses exposed for a given page
"""

from __future__ import annotations

import pytest

from country_info.domain.pagination import (
    Page,
    PageEllipsis,
    PageNumber,
    Paging,
    PagingValidationError,
    clamp_page,
    next_page,
    paginate,
    plan_controls,
    previous_page,
    total_pages_for,
)


# ==============================================================================
# Windowing
# ==============================================================================


def test_total_pages_rounds_up() -> None:
    assert total_pages_for(0, 12) == 0
    assert total_pages_for(1, 12) == 1
    assert total_pages_for(12, 12) == 1
    assert total_pages_for(13, 12) == 2
    assert total_pages_for(250, 12) == 21


def test_paginate_first_page() -> None:
    page = paginate(list(range(30)), page_size=12, current_page=1)

    assert page == Page(window=list(range(12)), total_pages=3)


def test_paginate_last_page_is_partial() -> None:
    page = paginate(list(range(30)), page_size=12, current_page=3)

    assert page.window == list(range(24, 30))
    assert page.total_pages == 3


def test_paginate_past_end_yields_empty_window() -> None:
    page = paginate(list(range(30)), page_size=12, current_page=7)

    assert page.window == []
    assert page.total_pages == 3


def test_paginate_empty_sequence_has_no_pages() -> None:
    page = paginate([], page_size=12, current_page=1)

    assert page.window == []
    assert page.total_pages == 0


@pytest.mark.parametrize("n", [0, 1, 11, 12, 13, 25, 36, 100])
@pytest.mark.parametrize("k", [1, 5, 12])
def test_windows_have_expected_length_and_rebuild_sequence(n: int, k: int) -> None:
    items = list(range(n))
    total = total_pages_for(n, k)

    rebuilt: list[int] = []
    for p in range(1, total + 1):
        window = paginate(items, k, p).window
        assert len(window) == min(k, n - (p - 1) * k)
        rebuilt.extend(window)

    assert rebuilt == items


def test_paginate_does_not_mutate_input() -> None:
    items = [3, 1, 2]

    paginate(items, page_size=2, current_page=2)

    assert items == [3, 1, 2]


@pytest.mark.parametrize(
    ("page", "page_size", "message"),
    [
        (0, 12, "page must be >= 1"),
        (-1, 12, "page must be >= 1"),
        (1, 0, "page_size must be > 0"),
        (1, 201, "page_size must be <= 200"),
    ],
)
def test_paging_validation(page: int, page_size: int, message: str) -> None:
    with pytest.raises(PagingValidationError, match=message):
        Paging(page=page, page_size=page_size).validate()


def test_paginate_rejects_invalid_page_size() -> None:
    with pytest.raises(PagingValidationError):
        paginate([1, 2, 3], page_size=0, current_page=1)


# ==============================================================================
# Navigation
# ==============================================================================


def test_previous_page_clamps_at_one() -> None:
    assert previous_page(3) == 2
    assert previous_page(1) == 1


def test_next_page_clamps_at_last() -> None:
    assert next_page(2, 3) == 3
    assert next_page(3, 3) == 3


def test_next_page_with_no_pages_stays_on_one() -> None:
    assert next_page(1, 0) == 1


@pytest.mark.parametrize(
    ("requested", "total", "expected"),
    [
        (5, 10, 5),
        (0, 10, 1),
        (-3, 10, 1),
        (11, 10, 10),
        (4, 0, 1),
    ],
)
def test_clamp_page(requested: int, total: int, expected: int) -> None:
    assert clamp_page(requested, total) == expected


# ==============================================================================
# Control Plan
# ==============================================================================


def test_plan_first_of_ten() -> None:
    assert plan_controls(1, 10) == [
        PageNumber(1, is_active=True),
        PageNumber(2),
        PageEllipsis((3, 4, 5, 6, 7, 8, 9)),
        PageNumber(10),
    ]


def test_plan_middle_of_ten() -> None:
    assert plan_controls(5, 10) == [
        PageNumber(1),
        PageEllipsis((2, 3)),
        PageNumber(4),
        PageNumber(5, is_active=True),
        PageNumber(6),
        PageEllipsis((7, 8, 9)),
        PageNumber(10),
    ]


def test_plan_last_of_ten() -> None:
    assert plan_controls(10, 10) == [
        PageNumber(1),
        PageEllipsis((2, 3, 4, 5, 6, 7, 8)),
        PageNumber(9),
        PageNumber(10, is_active=True),
    ]


def test_plan_no_pages_is_empty() -> None:
    assert plan_controls(1, 0) == []


def test_plan_single_page() -> None:
    assert plan_controls(1, 1) == [PageNumber(1, is_active=True)]


def test_plan_three_pages_has_no_ellipsis() -> None:
    assert plan_controls(2, 3) == [
        PageNumber(1),
        PageNumber(2, is_active=True),
        PageNumber(3),
    ]


def test_plan_clamps_out_of_range_current_page() -> None:
    assert plan_controls(99, 2) == [PageNumber(1), PageNumber(2, is_active=True)]


@pytest.mark.parametrize("total", [0, 1, 2, 3, 4, 5, 6, 10, 100])
def test_plan_has_unique_in_range_pages_and_covers_all(total: int) -> None:
    for current in range(1, max(total, 1) + 1):
        controls = plan_controls(current, total)

        numbers = [c.number for c in controls if isinstance(c, PageNumber)]
        hidden = [p for c in controls if isinstance(c, PageEllipsis) for p in c.hidden_pages]

        assert len(numbers) == len(set(numbers))
        assert all(1 <= n <= total for n in numbers)
        assert sorted(numbers + hidden) == list(range(1, total + 1))

        active = [c.number for c in controls if isinstance(c, PageNumber) and c.is_active]
        assert active == ([current] if total else [])


@pytest.mark.parametrize("total", [4, 5, 6, 10, 100])
def test_plan_ellipses_are_never_empty(total: int) -> None:
    for current in range(1, total + 1):
        for entry in plan_controls(current, total):
            if isinstance(entry, PageEllipsis):
                assert entry.hidden_pages

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from country_info.domain.errors import ValidationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 200


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def validate(self) -> None:
        """
        Validate paging parameters.

        A page past the last one is valid (it yields an empty window).

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
        if self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    window: list[T]
    total_pages: int


@dataclass(frozen=True, slots=True)
class PageNumber:
    number: int
    is_active: bool = False


@dataclass(frozen=True, slots=True)
class PageEllipsis:
    """A collapsed run of page numbers, selectable as a sub-list."""

    hidden_pages: tuple[int, ...]


ControlEntry = PageNumber | PageEllipsis


# ==============================================================================
# Windowing
# ==============================================================================


def total_pages_for(item_count: int, page_size: int) -> int:
    """ceil(item_count / page_size); 0 when there are no items."""
    return -(-item_count // page_size)


def paginate(items: Sequence[T], page_size: int, current_page: int) -> Page[T]:
    """
    Slice the window for ``current_page`` out of ``items``.

    A page past the end yields an empty window rather than failing.

    Raises:
        PagingValidationError: If page_size or current_page is below 1
    """
    Paging(page=current_page, page_size=page_size).validate()

    start = (current_page - 1) * page_size
    end = current_page * page_size

    return Page(
        window=list(items[start:end]),
        total_pages=total_pages_for(len(items), page_size),
    )


# ==============================================================================
# Navigation
# ==============================================================================


def clamp_page(page: int, total_pages: int) -> int:
    """Constrain ``page`` to ``[1, max(1, total_pages)]``."""
    return min(max(page, 1), max(total_pages, 1))


def previous_page(current_page: int) -> int:
    return max(current_page - 1, 1)


def next_page(current_page: int, total_pages: int) -> int:
    return clamp_page(current_page + 1, total_pages)


# ==============================================================================
# Page-control plan
# ==============================================================================


def plan_controls(current_page: int, total_pages: int) -> list[ControlEntry]:
    """
    Decide which page numbers and ellipses to expose.

    Layout: first page, [left ellipsis], current page and its immediate
    neighbours, [right ellipsis], last page. The first/last exclusions on the
    neighbour range keep page numbers unique; the ellipses hide exactly the
    pages that are not listed, so every page stays reachable.

    ``current_page`` is clamped into range first.
    """
    if total_pages < 1:
        return []

    current = clamp_page(current_page, total_pages)
    controls: list[ControlEntry] = [PageNumber(1, is_active=current == 1)]

    if current > 3:
        controls.append(PageEllipsis(tuple(range(2, current - 1))))

    for number in range(max(current - 1, 2), min(current + 1, total_pages - 1) + 1):
        controls.append(PageNumber(number, is_active=number == current))

    if current < total_pages - 2:
        controls.append(PageEllipsis(tuple(range(current + 2, total_pages))))

    if total_pages > 1:
        controls.append(PageNumber(total_pages, is_active=current == total_pages))

    return controls

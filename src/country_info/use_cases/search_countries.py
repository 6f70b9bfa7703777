from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from country_info.domain.country import Country
from country_info.domain.pagination import (
    DEFAULT_PAGE_SIZE,
    ControlEntry,
    Paging,
    clamp_page,
    paginate,
    plan_controls,
    total_pages_for,
)
from country_info.domain.search import filter_countries


@dataclass(frozen=True, slots=True)
class SearchCountriesRequest:
    query: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True, slots=True)
class SearchCountriesResponse:
    countries: list[Country]
    current_page: int
    total_pages: int
    total_count: int  # Matching countries before paging
    controls: list[ControlEntry]


class SearchCountries:
    """
    Country search with in-memory filtering and pagination.

    Filters by official name, then pages the filtered list. Total pages are
    always derived from the filtered list, never from the full dataset.
    The requested page is clamped into ``[1, max(1, total_pages)]``.
    """

    def __init__(self, countries: Sequence[Country]) -> None:
        self._countries = countries

    def execute(self, request: SearchCountriesRequest) -> SearchCountriesResponse:
        """
        Execute country search.

        Args:
            request: Query string and paging parameters

        Returns:
            Response containing the visible window and the page-control plan

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        Paging(page=request.page, page_size=request.page_size).validate()

        matches = filter_countries(self._countries, request.query)
        current_page = clamp_page(request.page, total_pages_for(len(matches), request.page_size))
        page = paginate(matches, request.page_size, current_page)

        return SearchCountriesResponse(
            countries=page.window,
            current_page=current_page,
            total_pages=page.total_pages,
            total_count=len(matches),
            controls=plan_controls(current_page, page.total_pages),
        )

"""Stateful country browser (view-model) use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from country_info.domain.country import Country
from country_info.domain.errors import ConflictError, FetchError
from country_info.domain.pagination import (
    DEFAULT_PAGE_SIZE,
    ControlEntry,
    Paging,
    clamp_page,
    next_page,
    previous_page,
    total_pages_for,
)
from country_info.domain.search import filter_countries
from country_info.ports.country_source import CountrySource
from country_info.use_cases.search_countries import SearchCountries, SearchCountriesRequest

logger = logging.getLogger(__name__)


class FetchStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class BrowserStateError(ConflictError):
    """Raised when the dataset is loaded more than once."""

    pass


@dataclass(frozen=True, slots=True)
class BrowserSnapshot:
    """Everything the presentation layer needs for one render."""

    status: FetchStatus
    query: str
    current_page: int
    countries: list[Country] = field(default_factory=list)
    total_pages: int = 0
    total_count: int = 0
    controls: list[ControlEntry] = field(default_factory=list)
    error: FetchError | None = None

    @property
    def loading(self) -> bool:
        return self.status is FetchStatus.LOADING

    @property
    def error_reason(self) -> str | None:
        return self.error.message if self.error is not None else None

    @property
    def error_kind(self) -> str | None:
        return self.error.kind if self.error is not None else None


class CountryBrowser:
    """
    View-model for browsing the country dataset.

    Responsibilities:
    - Own the fetch lifecycle: LOADING, then exactly one transition to
      READY or FAILED, never again
    - Own the query and the current page; changing the query resets the
      page to 1 before anything else reads it
    - Clamp navigation into ``[1, max(1, total_pages)]``
    - Derive a fresh snapshot on every read (no cached views)
    """

    def __init__(self, source: CountrySource, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """
        Initialize the browser in the LOADING state.

        Args:
            source: Where the dataset comes from (fetched once by load())
            page_size: Countries per page

        Raises:
            PagingValidationError: If page_size is invalid
        """
        Paging(page_size=page_size).validate()

        self._source = source
        self._page_size = page_size
        self._status = FetchStatus.LOADING
        self._load_started = False
        self._countries: tuple[Country, ...] = ()
        self._error: FetchError | None = None
        self._query = ""
        self._current_page = 1

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    @property
    def error(self) -> FetchError | None:
        return self._error

    @property
    def query(self) -> str:
        return self._query

    @property
    def current_page(self) -> int:
        return self._current_page

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    def load(self) -> FetchStatus:
        """
        Fetch the dataset. Must be called exactly once.

        Fetch failures are recorded, not raised: the browser moves to FAILED
        and keeps an empty dataset. There is no retry.

        Returns:
            The terminal status (READY or FAILED)

        Raises:
            BrowserStateError: If load() was already called
        """
        if self._load_started:
            raise BrowserStateError("Countries are loaded once per browser", status=self._status.value)
        self._load_started = True

        try:
            countries = self._source.fetch_all()
        except FetchError as exc:
            self._fail(exc)
            return self._status
        except Exception as exc:
            logger.exception("Unexpected error while fetching countries")
            self._fail(FetchError(f"Unexpected error: {type(exc).__name__}"))
            return self._status

        self._countries = tuple(countries)
        self._status = FetchStatus.READY

        logger.info("Country browser ready", extra={"count": len(self._countries)})
        return self._status

    def _fail(self, error: FetchError) -> None:
        self._error = error
        self._status = FetchStatus.FAILED

        logger.warning(
            "Country browser failed to load",
            extra={"kind": error.kind, "error_message": error.message},
        )

    # ==========================================================================
    # Events
    # ==========================================================================

    def set_query(self, query: str) -> None:
        self._query = query
        self._current_page = 1

    def go_to_page(self, page: int) -> None:
        self._current_page = clamp_page(page, self._total_pages())

    def go_previous(self) -> None:
        self._current_page = previous_page(self._current_page)

    def go_next(self) -> None:
        self._current_page = next_page(self._current_page, self._total_pages())

    def _total_pages(self) -> int:
        if self._status is not FetchStatus.READY:
            return 0
        matches = filter_countries(self._countries, self._query)
        return total_pages_for(len(matches), self._page_size)

    # ==========================================================================
    # Derived view
    # ==========================================================================

    def snapshot(self) -> BrowserSnapshot:
        """Compute the current view from query, page and dataset."""
        if self._status is not FetchStatus.READY:
            return BrowserSnapshot(
                status=self._status,
                query=self._query,
                current_page=self._current_page,
                error=self._error,
            )

        result = SearchCountries(self._countries).execute(
            SearchCountriesRequest(
                query=self._query,
                page=self._current_page,
                page_size=self._page_size,
            )
        )

        return BrowserSnapshot(
            status=self._status,
            query=self._query,
            current_page=result.current_page,
            countries=result.countries,
            total_pages=result.total_pages,
            total_count=result.total_count,
            controls=result.controls,
        )

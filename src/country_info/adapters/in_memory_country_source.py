from __future__ import annotations

from country_info.domain.country import Country
from country_info.domain.errors import FetchError
from country_info.ports.country_source import CountrySource


class InMemoryCountrySource(CountrySource):
    """
    Canonical contract implementation for tests.

    - Returns the configured countries in insertion order
    - Or raises the configured FetchError, every time
    - Counts calls so tests can assert the single-attempt contract
    """

    def __init__(self, countries: list[Country] | None = None, error: FetchError | None = None) -> None:
        self._countries = list(countries or [])
        self._error = error
        self.calls = 0

    def fetch_all(self) -> list[Country]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return list(self._countries)

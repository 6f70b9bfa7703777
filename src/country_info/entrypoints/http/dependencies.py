"""
Dependency injection for FastAPI routes.

Key principle: there is one CountryBrowser per application (it owns the
single fetch); use cases built on top of it are created per request.
"""

from __future__ import annotations

from fastapi import Depends, Request

from country_info.domain.errors import ServiceUnavailableError
from country_info.use_cases.country_browser import CountryBrowser, FetchStatus
from country_info.use_cases.search_countries import SearchCountries


def get_country_browser(request: Request) -> CountryBrowser:
    """
    Provides the application's CountryBrowser.

    The browser is created by build_app() and stored on ``app.state``.

    Returns:
        CountryBrowser: The single view-model instance
    """
    return request.app.state.browser


def get_search_countries_use_case(
    browser: CountryBrowser = Depends(get_country_browser),
) -> SearchCountries:
    """
    Factory function that returns a SearchCountries use case over the loaded dataset.

    Args:
        browser: Application browser (injected by FastAPI via Depends)

    Returns:
        SearchCountries: Use case over the fetched countries

    Raises:
        ServiceUnavailableError: While the dataset is still loading
        FetchError: If the single fetch attempt failed
    """
    if browser.status is FetchStatus.LOADING:
        raise ServiceUnavailableError("Countries are still loading")
    if browser.error is not None:
        raise browser.error.copy()

    return SearchCountries(browser.countries)

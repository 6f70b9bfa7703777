"""Tests for CountryMapper (domain ↔ REST DTO conversions)."""

from __future__ import annotations

from country_info.adapters.in_memory_country_source import InMemoryCountrySource
from country_info.domain.country import Country, Currency
from country_info.domain.errors import TransportError
from country_info.domain.pagination import PageEllipsis, PageNumber
from country_info.entrypoints.http.dtos.countries import (
    CountriesSearchQueryDTO,
    EllipsisControlDTO,
    PageControlDTO,
)
from country_info.entrypoints.http.mappers.country_mapper import CountryMapper
from country_info.use_cases.country_browser import CountryBrowser
from country_info.use_cases.search_countries import SearchCountriesResponse


def test_to_domain_request() -> None:
    dto = CountriesSearchQueryDTO(q="rep", page=3, page_size=24)

    request = CountryMapper.to_domain_request(dto)

    assert (request.query, request.page, request.page_size) == ("rep", 3, 24)


def test_to_card_response_formats_fields() -> None:
    country = Country(
        official_name="Kingdom of Spain",
        capital=("Madrid",),
        area=505992.0,
        population=47351567,
        continents=("Europe",),
        languages={"spa": "Spanish"},
        currencies={"EUR": Currency("Euro", "€")},
    )

    card = CountryMapper.to_card_response(country)

    assert card.model_dump() == {
        "name": "Kingdom of Spain",
        "capital": "Madrid",
        "area": "505,992 km²",
        "population": "47,351,567",
        "continents": "Europe",
        "languages": "Spanish",
        "currencies": "Euro (€)",
    }


def test_to_card_response_uses_placeholders() -> None:
    card = CountryMapper.to_card_response(Country(official_name="Antarctica", area=14000000.0))

    assert card.capital == "N/A"
    assert card.area == "14,000,000 km²"
    assert card.currencies == "N/A"


def test_to_control_response() -> None:
    assert CountryMapper.to_control_response(PageNumber(3, is_active=True)) == PageControlDTO(
        page=3, active=True
    )
    assert CountryMapper.to_control_response(PageEllipsis((4, 5))) == EllipsisControlDTO(
        hidden_pages=[4, 5]
    )


def test_control_entries_serialize_with_type_tag() -> None:
    assert CountryMapper.to_control_response(PageNumber(1)).model_dump() == {
        "type": "page",
        "page": 1,
        "active": False,
    }
    assert CountryMapper.to_control_response(PageEllipsis((2,))).model_dump() == {
        "type": "ellipsis",
        "hidden_pages": [2],
    }


def test_to_search_response() -> None:
    result = SearchCountriesResponse(
        countries=[Country(official_name="Republic of Chad")],
        current_page=2,
        total_pages=2,
        total_count=13,
        controls=[PageNumber(1), PageNumber(2, is_active=True)],
    )

    response = CountryMapper.to_search_response(result, page_size=12)

    assert response.total == 13
    assert response.page_size == 12
    assert response.current_page == 2
    assert [c.name for c in response.countries] == ["Republic of Chad"]
    assert [c.page for c in response.controls] == [1, 2]


def test_to_browser_response_ready() -> None:
    browser = CountryBrowser(InMemoryCountrySource([Country(official_name="Republic of Chad")]))
    browser.load()

    response = CountryMapper.to_browser_response(browser.snapshot())

    assert response.loading is False
    assert response.status == "ready"
    assert response.error is None
    assert response.total == 1
    assert response.total_pages == 1


def test_to_browser_response_failed_exposes_reason() -> None:
    browser = CountryBrowser(InMemoryCountrySource(error=TransportError("Connection refused")))
    browser.load()

    response = CountryMapper.to_browser_response(browser.snapshot())

    assert response.status == "failed"
    assert response.error is not None
    assert response.error.kind == "transport"
    assert response.error.detail == "Connection refused"
    assert response.countries == []

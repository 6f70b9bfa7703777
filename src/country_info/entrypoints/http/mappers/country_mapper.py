from __future__ import annotations

from country_info.domain.country import Country, CountryCard
from country_info.domain.pagination import ControlEntry, PageEllipsis, PageNumber
from country_info.entrypoints.http.dtos.countries import (
    BrowserStateDTO,
    CountriesSearchQueryDTO,
    CountriesSearchResponseDTO,
    CountryCardDTO,
    EllipsisControlDTO,
    FetchFailureDTO,
    PageControlDTO,
)
from country_info.use_cases.country_browser import BrowserSnapshot
from country_info.use_cases.search_countries import (
    SearchCountriesRequest,
    SearchCountriesResponse,
)


class CountryMapper:
    """Maps between REST DTOs and domain models for countries."""

    @staticmethod
    def to_domain_request(dto: CountriesSearchQueryDTO) -> SearchCountriesRequest:
        return SearchCountriesRequest(query=dto.q, page=dto.page, page_size=dto.page_size)

    @staticmethod
    def to_card_response(country: Country) -> CountryCardDTO:
        """
        Converts a domain Country to its display card.

        Formatting and placeholder substitution happen in CountryCard;
        the DTO only carries the strings.
        """
        card = CountryCard.from_country(country)
        return CountryCardDTO(
            name=card.name,
            capital=card.capital,
            area=card.area,
            population=card.population,
            continents=card.continents,
            languages=card.languages,
            currencies=card.currencies,
        )

    @staticmethod
    def to_control_response(entry: ControlEntry) -> PageControlDTO | EllipsisControlDTO:
        if isinstance(entry, PageNumber):
            return PageControlDTO(page=entry.number, active=entry.is_active)
        if isinstance(entry, PageEllipsis):
            return EllipsisControlDTO(hidden_pages=list(entry.hidden_pages))
        raise TypeError(f"Unknown control entry: {entry!r}")

    @staticmethod
    def to_search_response(
        result: SearchCountriesResponse,
        page_size: int,
    ) -> CountriesSearchResponseDTO:
        """
        Converts a search result to REST response with pagination metadata.

        Args:
            result: Domain search result
            page_size: Page size (echoed from request)
        """
        return CountriesSearchResponseDTO(
            countries=[CountryMapper.to_card_response(c) for c in result.countries],
            current_page=result.current_page,
            total_pages=result.total_pages,
            total=result.total_count,
            page_size=page_size,
            controls=[CountryMapper.to_control_response(e) for e in result.controls],
        )

    @staticmethod
    def to_browser_response(snapshot: BrowserSnapshot) -> BrowserStateDTO:
        error = None
        if snapshot.error is not None:
            error = FetchFailureDTO(kind=snapshot.error.kind, detail=snapshot.error.message)

        return BrowserStateDTO(
            loading=snapshot.loading,
            status=snapshot.status.value,
            error=error,
            query=snapshot.query,
            countries=[CountryMapper.to_card_response(c) for c in snapshot.countries],
            current_page=snapshot.current_page,
            total_pages=snapshot.total_pages,
            total=snapshot.total_count,
            controls=[CountryMapper.to_control_response(e) for e in snapshot.controls],
        )

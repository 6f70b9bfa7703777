from typing import Annotated

from fastapi import APIRouter, Depends, Query

from country_info.entrypoints.http.dependencies import get_search_countries_use_case
from country_info.entrypoints.http.dtos.countries import (
    CountriesSearchQueryDTO,
    CountriesSearchResponseDTO,
)
from country_info.entrypoints.http.error_responses import ErrorResponse
from country_info.entrypoints.http.mappers.country_mapper import CountryMapper
from country_info.use_cases.search_countries import SearchCountries


router = APIRouter(tags=["Countries"])


@router.get(
    "/countries",
    response_model=CountriesSearchResponseDTO,
    summary="Search countries",
    description="""
    Search the fetched country dataset by official name, with pagination.

    ## Search
    - Case-insensitive substring match on the official name
    - Empty `q` returns every country in provider order

    ## Pagination
    - Default page size: 12
    - Max page size: 200
    - Pages past the end are clamped to the last page

    ## Example
    ```
    GET /v1/countries?q=republic&page=2
    ```
    """,
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Invalid query parameters",
        },
        503: {
            "model": ErrorResponse,
            "description": "Dataset still loading, or the upstream fetch failed",
        },
    },
)
def search_countries(
    query: Annotated[CountriesSearchQueryDTO, Query()],
    use_case: SearchCountries = Depends(get_search_countries_use_case),
) -> CountriesSearchResponseDTO:
    """Search countries endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CountryMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return CountryMapper.to_search_response(result=result, page_size=query.page_size)

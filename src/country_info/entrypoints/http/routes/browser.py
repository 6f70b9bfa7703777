"""Routes exposing the stateful country browser.

Each event route applies one view-model event and returns the freshly
derived state, so clients never render from a stale snapshot. Handlers are
coroutines: every event runs on the event loop, one at a time.
"""

from fastapi import APIRouter, Depends

from country_info.entrypoints.http.dependencies import get_country_browser
from country_info.entrypoints.http.dtos.countries import (
    BrowserStateDTO,
    GoToPageDTO,
    SetQueryDTO,
)
from country_info.entrypoints.http.mappers.country_mapper import CountryMapper
from country_info.use_cases.country_browser import CountryBrowser


router = APIRouter(prefix="/browser", tags=["Browser"])


@router.get("", response_model=BrowserStateDTO, summary="Current browser state")
async def get_state(browser: CountryBrowser = Depends(get_country_browser)) -> BrowserStateDTO:
    return CountryMapper.to_browser_response(browser.snapshot())


@router.post("/query", response_model=BrowserStateDTO, summary="Set the search query")
async def set_query(
    body: SetQueryDTO,
    browser: CountryBrowser = Depends(get_country_browser),
) -> BrowserStateDTO:
    """Replace the query; the browser goes back to page 1."""
    browser.set_query(body.query)
    return CountryMapper.to_browser_response(browser.snapshot())


@router.post("/page", response_model=BrowserStateDTO, summary="Go to a page")
async def go_to_page(
    body: GoToPageDTO,
    browser: CountryBrowser = Depends(get_country_browser),
) -> BrowserStateDTO:
    """Out-of-range pages are clamped, not rejected."""
    browser.go_to_page(body.page)
    return CountryMapper.to_browser_response(browser.snapshot())


@router.post("/previous", response_model=BrowserStateDTO, summary="Go to the previous page")
async def go_previous(browser: CountryBrowser = Depends(get_country_browser)) -> BrowserStateDTO:
    browser.go_previous()
    return CountryMapper.to_browser_response(browser.snapshot())


@router.post("/next", response_model=BrowserStateDTO, summary="Go to the next page")
async def go_next(browser: CountryBrowser = Depends(get_country_browser)) -> BrowserStateDTO:
    browser.go_next()
    return CountryMapper.to_browser_response(browser.snapshot())

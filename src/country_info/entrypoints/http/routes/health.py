from fastapi import APIRouter, Depends

from country_info.entrypoints.http.dependencies import get_country_browser
from country_info.use_cases.country_browser import CountryBrowser


router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness check")
async def health(browser: CountryBrowser = Depends(get_country_browser)) -> dict[str, str]:
    """Always 200 while the process is up; reports the dataset status alongside."""
    return {"status": "ok", "browser": browser.status.value}

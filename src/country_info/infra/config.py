from __future__ import annotations

import os
from dataclasses import dataclass

from country_info.adapters.rest_countries_source import DEFAULT_BASE_URL
from country_info.domain.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


@dataclass(frozen=True, slots=True)
class Settings:
    api_base_url: str = DEFAULT_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE


def api_base_url() -> str:
    return os.getenv("COUNTRY_INFO_API_BASE_URL") or DEFAULT_BASE_URL


def page_size() -> int:
    raw = os.getenv("COUNTRY_INFO_PAGE_SIZE")

    if not raw:
        return DEFAULT_PAGE_SIZE

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"COUNTRY_INFO_PAGE_SIZE must be an integer, got {raw!r}") from None

    if not 1 <= value <= MAX_PAGE_SIZE:
        raise RuntimeError(f"COUNTRY_INFO_PAGE_SIZE must be between 1 and {MAX_PAGE_SIZE}")

    return value


def load_settings() -> Settings:
    return Settings(api_base_url=api_base_url(), page_size=page_size())

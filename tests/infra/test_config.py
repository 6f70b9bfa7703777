from __future__ import annotations

import pytest

from country_info.infra.config import Settings, api_base_url, load_settings, page_size


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COUNTRY_INFO_API_BASE_URL", raising=False)
    monkeypatch.delenv("COUNTRY_INFO_PAGE_SIZE", raising=False)


def test_defaults() -> None:
    assert load_settings() == Settings(
        api_base_url="https://restcountries.com/v3.1",
        page_size=12,
    )


def test_api_base_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COUNTRY_INFO_API_BASE_URL", "http://localhost:8080/v3.1")

    assert api_base_url() == "http://localhost:8080/v3.1"


def test_page_size_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COUNTRY_INFO_PAGE_SIZE", "24")

    assert page_size() == 24


def test_empty_page_size_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COUNTRY_INFO_PAGE_SIZE", "")

    assert page_size() == 12


@pytest.mark.parametrize("raw", ["twelve", "1.5", "0", "-3", "201"])
def test_invalid_page_size_raises(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("COUNTRY_INFO_PAGE_SIZE", raw)

    with pytest.raises(RuntimeError, match="COUNTRY_INFO_PAGE_SIZE"):
        page_size()

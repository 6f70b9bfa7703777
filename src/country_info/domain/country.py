from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

PLACEHOLDER = "N/A"


@dataclass(frozen=True, slots=True)
class Currency:
    name: str
    symbol: str | None = None


@dataclass(frozen=True)
class Country:
    """
    One country record.

    Only ``official_name`` is required. Every other field may be absent
    (``None``); absence is not an error and renders as a placeholder.

    ``languages`` and ``currencies`` are stored as read-only mappings and are
    left out of the hash, so countries can be hashed and the fetched dataset
    cannot be changed through them.
    """

    official_name: str
    capital: tuple[str, ...] | None = None
    area: float | None = None  # km²
    population: int | None = None
    continents: tuple[str, ...] | None = None
    # language code -> display name
    languages: Mapping[str, str] | None = field(default=None, hash=False)
    # currency code -> currency
    currencies: Mapping[str, Currency] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.languages is not None:
            object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))
        if self.currencies is not None:
            object.__setattr__(self, "currencies", MappingProxyType(dict(self.currencies)))


def _format_number(value: float | int) -> str:
    # Grouped thousands, at most three fraction digits
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def _format_currency(currency: Currency) -> str:
    if currency.symbol is None:
        return currency.name
    return f"{currency.name} ({currency.symbol})"


@dataclass(frozen=True, slots=True)
class CountryCard:
    """
    Display-ready view of a Country.

    Each field is checked for presence independently; a missing field
    degrades to PLACEHOLDER without affecting the others. Presence is an
    explicit ``is None`` check, so an area of ``0`` renders as ``0 km²``.
    """

    name: str
    capital: str
    area: str
    population: str
    continents: str
    languages: str
    currencies: str

    @classmethod
    def from_country(cls, country: Country) -> CountryCard:
        return cls(
            name=country.official_name,
            capital=(
                ", ".join(country.capital) if country.capital is not None else PLACEHOLDER
            ),
            area=(
                f"{_format_number(country.area)} km²"
                if country.area is not None
                else PLACEHOLDER
            ),
            population=(
                _format_number(country.population)
                if country.population is not None
                else PLACEHOLDER
            ),
            continents=(
                ", ".join(country.continents)
                if country.continents is not None
                else PLACEHOLDER
            ),
            languages=(
                ", ".join(country.languages.values())
                if country.languages is not None
                else PLACEHOLDER
            ),
            currencies=(
                ", ".join(_format_currency(c) for c in country.currencies.values())
                if country.currencies is not None
                else PLACEHOLDER
            ),
        )

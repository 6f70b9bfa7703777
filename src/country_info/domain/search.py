from __future__ import annotations

from collections.abc import Sequence

from country_info.domain.country import Country


def filter_countries(countries: Sequence[Country], query: str) -> list[Country]:
    """
    Case-insensitive substring match of ``query`` against official names.

    - Empty query means "no filtering": every country, original order
    - Otherwise a stable filter (original relative order, no re-sorting)
    - Never mutates ``countries``
    """
    if query == "":
        return list(countries)

    needle = query.casefold()
    return [country for country in countries if needle in country.official_name.casefold()]

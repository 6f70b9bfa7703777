"""REST Countries implementation of CountrySource."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from country_info.domain.country import Country, Currency
from country_info.domain.errors import DecodeError, HttpStatusError, TransportError
from country_info.ports.country_source import CountrySource

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://restcountries.com/v3.1"
FIELDS = ("languages", "capital", "area", "population", "continents", "currencies", "name")


# ==============================================================================
# Payload models (provider wire format)
# ==============================================================================


class NamePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    official: str


class CurrencyPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    symbol: str | None = None


class RestCountryPayload(BaseModel):
    """
    One element of the provider's JSON array.

    Only ``name.official`` is mandatory. An optional field holding a value of
    the wrong type is dropped (read as absent) instead of rejecting the record.
    """

    model_config = ConfigDict(extra="ignore")

    name: NamePayload
    capital: list[str] | None = None
    area: float | None = None
    population: int | None = None
    continents: list[str] | None = None
    languages: dict[str, str] | None = None
    currencies: dict[str, CurrencyPayload] | None = None

    @field_validator("area", "population")
    @classmethod
    def negative_means_unknown(cls, value: float | int | None) -> float | int | None:
        # The provider uses negative sentinels for unknown sizes
        if value is not None and value < 0:
            return None
        return value

    @field_validator(
        "capital", "area", "population", "continents", "languages", "currencies", mode="wrap"
    )
    @classmethod
    def malformed_means_unknown(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except PydanticValidationError:
            logger.debug("Dropping malformed country field", extra={"field": info.field_name})
            return None


_COUNTRY_LIST = TypeAdapter(list[RestCountryPayload])


class RestCountriesSource(CountrySource):
    """
    CountrySource backed by the public REST Countries API.

    - One GET to ``{base_url}/all`` with a fixed field selection and
      ``status=true`` (currently recognized countries only)
    - No retries and no client timeout
    - Maps provider payloads to domain Country objects
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, client: httpx.Client | None = None) -> None:
        """
        Initialize the source.

        Args:
            base_url: API root, without trailing slash
            client: Optional preconfigured httpx client (tests inject a MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._client = client

    @property
    def url(self) -> str:
        return f"{self._base_url}/all"

    def fetch_all(self) -> list[Country]:
        response = self._get()

        if not response.is_success:
            logger.warning(
                "Country fetch returned non-success status",
                extra={"url": self.url, "status_code": response.status_code},
            )
            raise HttpStatusError(response.status_code)

        countries = self._decode(response)

        logger.info("Fetched countries", extra={"url": self.url, "count": len(countries)})
        return countries

    def _get(self) -> httpx.Response:
        params = {"status": "true", "fields": ",".join(FIELDS)}

        try:
            if self._client is not None:
                return self._client.get(self.url, params=params)
            with httpx.Client(timeout=None) as client:
                return client.get(self.url, params=params)
        except httpx.RequestError as exc:
            logger.warning(
                "Country fetch failed at transport level",
                extra={"url": self.url, "error_type": type(exc).__name__},
            )
            raise TransportError(str(exc) or type(exc).__name__) from exc

    def _decode(self, response: httpx.Response) -> list[Country]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"Response body is not valid JSON: {exc}") from exc

        try:
            rows = _COUNTRY_LIST.validate_python(payload)
        except PydanticValidationError as exc:
            logger.warning(
                "Country payload has unexpected shape",
                extra={"url": self.url, "error_count": exc.error_count()},
            )
            raise DecodeError(f"Unexpected payload shape: {exc.error_count()} error(s)") from exc

        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_domain(row: RestCountryPayload) -> Country:
        return Country(
            official_name=row.name.official,
            capital=tuple(row.capital) if row.capital is not None else None,
            area=row.area,
            population=row.population,
            continents=tuple(row.continents) if row.continents is not None else None,
            languages=dict(row.languages) if row.languages is not None else None,
            currencies=(
                {
                    code: Currency(name=currency.name, symbol=currency.symbol)
                    for code, currency in row.currencies.items()
                }
                if row.currencies is not None
                else None
            ),
        )

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CountryCardDTO(BaseModel):
    """Display-ready country; absent fields hold the "N/A" placeholder."""

    name: str
    capital: str
    area: str
    population: str
    continents: str
    languages: str
    currencies: str


class PageControlDTO(BaseModel):
    type: Literal["page"] = "page"
    page: int
    active: bool


class EllipsisControlDTO(BaseModel):
    type: Literal["ellipsis"] = "ellipsis"
    hidden_pages: list[int]


ControlEntryDTO = Annotated[
    Union[PageControlDTO, EllipsisControlDTO],
    Field(discriminator="type"),
]


class FetchFailureDTO(BaseModel):
    kind: str
    detail: str


class CountriesSearchQueryDTO(BaseModel):
    """Query parameters for searching countries."""

    q: str = Field(
        default="",
        description="Case-insensitive substring of the official name (empty = all)",
        examples=["republic"],
    )
    page: int = Field(
        default=1,
        description="1-based page number (clamped to the last page)",
        examples=[1],
        ge=1,
    )
    page_size: int = Field(
        default=12,
        description="Countries per page",
        examples=[12],
        ge=1,
        le=200,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "q": "republic",
                "page": 2,
                "page_size": 12,
            }
        }
    )


class CountriesSearchResponseDTO(BaseModel):
    countries: list[CountryCardDTO]
    current_page: int
    total_pages: int
    total: int
    page_size: int
    controls: list[ControlEntryDTO]


class BrowserStateDTO(BaseModel):
    loading: bool
    status: Literal["loading", "ready", "failed"]
    error: FetchFailureDTO | None = None
    query: str
    countries: list[CountryCardDTO]
    current_page: int
    total_pages: int
    total: int
    controls: list[ControlEntryDTO]


class SetQueryDTO(BaseModel):
    query: str = Field(description="New search string; resets the browser to page 1")


class GoToPageDTO(BaseModel):
    page: int = Field(description="Requested page; clamped to [1, total_pages]")

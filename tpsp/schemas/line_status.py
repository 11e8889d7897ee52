"""
Line Status Schemas.

Wire format of the status API:

    {"status": true,
     "data": [{"listItem": [...], "dateUpdate": "...", "type": "metro"}]}

Upstream fields are decoded leniently: missing or null strings become "",
numbers are coerced to strings, unknown fields are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _UpstreamBase(BaseModel):
    """Immutable, lenient base for models decoded from the status API."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class LineItem(_UpstreamBase):
    """Status of a single line, verbatim from the API."""

    id: str = ""
    line: str = ""
    color: str = ""
    status: str = ""
    status_color: str = Field(default="", alias="statusColor")
    description: str = ""
    code: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ServiceData(_UpstreamBase):
    """One operator's batch of lines."""

    list_item: list[LineItem] = Field(default_factory=list, alias="listItem")
    date_update: str = Field(default="", alias="dateUpdate")
    type: str = ""

    @field_validator("list_item", mode="before")
    @classmethod
    def _null_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("date_update", "type", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class StatusResponse(_UpstreamBase):
    """Top-level document returned by the status API."""

    status: bool = False
    data: list[ServiceData] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _null_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value


class OutputLine(BaseModel):
    """Display projection of a line: formatted name and normalized status."""

    line: str
    status: str


class OutputResponse(BaseModel):
    """Envelope of the JSON output mode."""

    code: int = 200
    data: list[OutputLine] = Field(default_factory=list)
    message: str = "success"

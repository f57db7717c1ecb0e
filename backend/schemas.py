"""Pydantic schemas for API request/response."""

from typing import Any

from pydantic import BaseModel, field_validator


class GenerateRequest(BaseModel):
    """Request body for POST /generate."""

    url: str = ""
    keywords: str = ""
    business_info: str = ""

    @field_validator("url", "keywords", "business_info", mode="before")
    @classmethod
    def normalize_text_fields(cls, value: object) -> str:
        # Values are forwarded verbatim; only missing ones become "".
        return "" if value is None else str(value)


class SectionOut(BaseModel):
    """Single rendered output section."""

    key: str
    heading: str
    text: str | None = None
    items: list[Any] | None = None
    fallback: str | None = None


class GenerateResponse(BaseModel):
    """Response for POST /generate: the raw model JSON plus its rendered sections."""

    result: Any
    sections: list[SectionOut]

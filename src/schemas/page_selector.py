"""Pydantic schemas for page selectors."""
from pydantic import BaseModel, ConfigDict


class PageSelector(BaseModel):
    """Identity of an external page, e.g. scope="url", value="https://example.test/"."""

    scope: str
    value: str


class PageSelectorResponse(PageSelector):
    """Page selector as stored, with its id."""

    model_config = ConfigDict(from_attributes=True)

    id: int

"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of registry responses at the edge; a shape mismatch is a
  `ValidationError` instead of a `KeyError` three calls later.
- One generic envelope (`DataResponse[T]`) covers both single entities and
  collections, so each endpoint only declares the shape it expects.

Note:
- These models describe *what* the registry returns, not *how* it is fetched.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

A = TypeVar("A")
T = TypeVar("T")


class EmptyAttributes(BaseModel):
    """Attributes we do not need; anything the registry sends is ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class Links(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    self_link: str = Field(
        ...,
        alias="self",
        description="Path of the full entity, relative to the registry origin.",
    )


class Resource(BaseModel, Generic[A]):
    """A JSON:API style entity: `id`, `type`, `links` and typed `attributes`."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Opaque registry identifier.")
    type: str = Field(..., description="Entity type (providers, provider-versions, ...).")
    links: Links
    attributes: A


class DataResponse(BaseModel, Generic[T]):
    """The `{"data": ...}` envelope wrapping every registry response."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    data: T


class VersionAttributes(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    version: str = Field(..., description="Semantic version string, e.g. '5.12.0'.")
    published_at: datetime = Field(
        ...,
        alias="published-at",
        description="Publication timestamp (UTC).",
    )
    downloads: int = Field(..., ge=0, description="Download counter.")
    tag: str = Field(..., description="Git tag of the release.")
    description: str | None = Field(default=None, description="Release description.")


class DocAttributes(BaseModel):
    """Attributes of a resolved documentation page.

    Only `content` is rendered; the rest is metadata kept on the decoded shape.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    content: str = Field(..., description="Markdown body of the page.")
    category: str = Field(..., description="Doc category, e.g. 'resources'.")
    slug: str = Field(..., description="Resource slug, e.g. 'bigquery_dataset_access'.")
    subcategory: str | None = Field(default=None, description="Grouping shown in the registry UI.")
    title: str = Field(..., description="Page title.")


Provider = Resource[EmptyAttributes]
ProviderVersion = Resource[VersionAttributes]
DocEntry = Resource[EmptyAttributes]
DocContent = DocAttributes

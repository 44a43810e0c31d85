"""Terraform registry adapter.

Implements `core.interfaces.registry.DocsRegistry` over the registry's v2
JSON:API. The three lookups are chained by the pipeline; this module only
knows how to issue one request and decode its envelope.

Known limitation:
- The "latest" version is the last element of the provider-versions
  collection as the server returns it. Versions are not compared locally.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import (
    DataResponse,
    DocAttributes,
    DocContent,
    DocEntry,
    Provider,
    ProviderVersion,
    Resource,
)
from core.errors import FetchError, FetchTimeoutError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DOCS_CATEGORY = "resources"


class RegistryClient:
    """Async client for the provider, provider-versions and provider-docs endpoints.

    Use as an async context manager. An injected `httpx.AsyncClient` is
    borrowed and left open; otherwise one is built from `settings` and
    closed on exit.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "RegistryClient":
        if self._client is None:
            self._client = build_async_client(self._settings)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def resolve_provider(self, name: str) -> Provider:
        providers = await self._get_data(
            "/v2/providers",
            list[Provider],
            params={
                "filter[namespace]": self._settings.namespace,
                "filter[name]": name,
            },
        )
        if not providers:
            raise NotFoundError("provider not found", stage="provider")
        provider = providers[0]
        logger.info("Resolved provider %s/%s -> %s", self._settings.namespace, name, provider.id)
        return provider

    async def resolve_latest_version(self, provider_id: str) -> str:
        versions = await self._get_data(
            f"/v2/providers/{provider_id}/provider-versions",
            list[ProviderVersion],
        )
        if not versions:
            raise NotFoundError("no version found", stage="version")
        # Server order is ascending by publication.
        latest = versions[-1]
        logger.info("Latest version of provider %s: %s (%s)", provider_id, latest.attributes.version, latest.id)
        return latest.id

    async def fetch_docs(self, resource_slug: str, version_id: str) -> DocContent:
        entries = await self._get_data(
            "/v2/provider-docs",
            list[DocEntry],
            params={
                "filter[provider-version]": version_id,
                "filter[category]": DOCS_CATEGORY,
                "filter[slug]": resource_slug,
            },
        )
        if not entries:
            raise NotFoundError("resource not found", stage="docs")

        doc = await self._get_data(entries[0].links.self_link, Resource[DocAttributes])
        logger.info("Fetched docs for %s (%d chars)", doc.attributes.slug, len(doc.attributes.content))
        return doc.attributes

    async def _get_data(
        self,
        path: str,
        shape: type[T],
        *,
        params: dict[str, Any] | None = None,
    ) -> T:
        """GET `path` and decode its `{"data": ...}` envelope as `shape`."""

        if self._client is None:
            raise RuntimeError("RegistryClient must be used as an async context manager")

        url = f"{self._settings.registry_url}{path}"
        try:
            response = await self._client.get(path, params=params)
            logger.debug("GET %s -> HTTP %s", response.url, response.status_code)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(f"request to {url} timed out", url=url) from exc
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"registry returned HTTP {exc.response.status_code} for {url}",
                url=url,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"request to {url} failed: {exc}", url=url) from exc

        try:
            envelope = DataResponse[shape].model_validate_json(response.content)  # type: ignore[valid-type]
        except ValidationError as exc:
            raise FetchError(f"unexpected response from {url}: {exc.error_count()} decode error(s)", url=url) from exc
        return envelope.data

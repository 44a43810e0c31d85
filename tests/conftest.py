from __future__ import annotations

from typing import Any, Callable, Iterator

import httpx
import pytest
import respx

from core.config import DEFAULT_REGISTRY_URL, AppSettings

EntityFactory = Callable[..., dict[str, Any]]


def _entity(
    entity_id: str,
    entity_type: str,
    self_link: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> dict[str, Any]:
    return {
        "id": entity_id,
        "type": entity_type,
        "links": {"self": self_link or f"/v2/{entity_type}/{entity_id}"},
        "attributes": attributes or {},
    }


def _version_attributes(version: str, published_at: str) -> dict[str, Any]:
    return {
        "version": version,
        "published-at": published_at,
        "downloads": 42,
        "tag": f"v{version}",
        "description": None,
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer TFDOCS_* variables out of the tests."""

    for key in ("REGISTRY_URL", "NAMESPACE", "HTTP_TIMEOUT_SECONDS", "USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"TFDOCS_{key}", raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def make_entity() -> EntityFactory:
    return _entity


@pytest.fixture
def version_attributes() -> Callable[[str, str], dict[str, Any]]:
    return _version_attributes


@pytest.fixture
def registry() -> Iterator[respx.MockRouter]:
    with respx.mock(base_url=DEFAULT_REGISTRY_URL, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def doc_content() -> str:
    return "# Foo\n\nManages **foo** access.\n"


@pytest.fixture
def happy_registry(registry: respx.MockRouter, doc_content: str) -> respx.MockRouter:
    """One provider, one version, one doc entry, one doc page."""

    registry.get(path="/v2/providers", name="providers").mock(
        return_value=httpx.Response(200, json={"data": [_entity("323", "providers")]})
    )
    registry.get(path="/v2/providers/323/provider-versions", name="versions").mock(
        return_value=httpx.Response(
            200,
            json={
                "data": [
                    _entity("9001", "provider-versions", attributes=_version_attributes("5.0.0", "2024-01-02T00:00:00Z")),
                ]
            },
        )
    )
    registry.get(path="/v2/provider-docs", name="doc_entries").mock(
        return_value=httpx.Response(
            200,
            json={"data": [_entity("77", "provider-docs", self_link="/v2/provider-docs/77")]},
        )
    )
    registry.get(path="/v2/provider-docs/77", name="doc_page").mock(
        return_value=httpx.Response(
            200,
            json={
                "data": _entity(
                    "77",
                    "provider-docs",
                    self_link="/v2/provider-docs/77",
                    attributes={
                        "content": doc_content,
                        "category": "resources",
                        "slug": "bigquery_dataset_access",
                        "subcategory": "BigQuery",
                        "title": "google_bigquery_dataset_access",
                    },
                )
            },
        )
    )
    return registry

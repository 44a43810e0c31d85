"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and base URL for every registry call.
- Eases testing: respx can stand in for the network.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(settings: AppSettings | None = None) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` bound to the registry origin.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - Relative paths (`/v2/...`, `links.self`) resolve against `registry_url`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/vnd.api+json, application/json;q=0.9",
    }
    return httpx.AsyncClient(
        base_url=settings.registry_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )

"""Documentation registry contract.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- The pipeline depends on this, not on httpx; tests can pass a fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DocContent, Provider


@runtime_checkable
class DocsRegistry(Protocol):
    """Minimal contract for the three chained registry lookups.

    Design rules:
    - Every method is async because it performs HTTP I/O.
    - Empty results raise `NotFoundError`; transport problems raise `FetchError`.
    """

    async def resolve_provider(self, name: str) -> Provider:
        """Return the first provider called `name` in the configured namespace."""

        ...

    async def resolve_latest_version(self, provider_id: str) -> str:
        """Return the id of the most recent version of `provider_id`."""

        ...

    async def fetch_docs(self, resource_slug: str, version_id: str) -> DocContent:
        """Return the resource page published under `version_id`."""

        ...

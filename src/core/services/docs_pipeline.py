"""Documentation lookup orchestration.

The CLI delegates the whole identifier -> provider -> version -> docs chain
to `lookup_docs`, which keeps side-effects (printing, spinners) out of the
core logic and makes the flow testable with a fake registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.domain.identifier import ResourceIdentifier, split_identifier
from core.domain.models import DocContent, Provider
from core.interfaces.registry import DocsRegistry

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress)."""

    stage: Callable[[str], None] | None = None


@dataclass(frozen=True)
class DocsLookup:
    """Output of a pipeline invocation."""

    identifier: ResourceIdentifier
    provider: Provider
    version_id: str
    doc: DocContent


def _notify(hooks: PipelineHooks | None, message: str) -> None:
    logger.debug(message)
    if hooks and hooks.stage:
        hooks.stage(message)


async def lookup_docs(
    raw_identifier: str,
    registry: DocsRegistry,
    *,
    hooks: PipelineHooks | None = None,
) -> DocsLookup:
    """Resolve the documentation page for `raw_identifier`.

    Each stage feeds the next; the first failure propagates and no later
    request is issued.
    """

    identifier = split_identifier(raw_identifier)

    _notify(hooks, f"Resolving provider '{identifier.provider}'")
    provider = await registry.resolve_provider(identifier.provider)

    _notify(hooks, f"Finding latest version of '{identifier.provider}'")
    version_id = await registry.resolve_latest_version(provider.id)

    _notify(hooks, f"Fetching docs for '{identifier.resource}'")
    doc = await registry.fetch_docs(identifier.resource, version_id)

    return DocsLookup(
        identifier=identifier,
        provider=provider,
        version_id=version_id,
        doc=doc,
    )

"""Resource identifier parsing.

A Terraform resource type is written `<provider>_<resource>`, e.g.
`google_bigquery_dataset_access`. Only the first underscore separates the
provider; the rest belong to the resource slug.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import ParseError

SEPARATOR = "_"


@dataclass(frozen=True)
class ResourceIdentifier:
    """Provider name plus resource slug."""

    provider: str
    resource: str

    @property
    def raw(self) -> str:
        return f"{self.provider}{SEPARATOR}{self.resource}"


def split_identifier(raw: str) -> ResourceIdentifier:
    """Split `raw` on its first underscore.

    Raises `ParseError` when there is no underscore, when nothing precedes
    it, or when nothing follows it.
    """

    provider, *rest = raw.split(SEPARATOR)
    if not rest or not provider:
        raise ParseError("provider not found")

    resource = SEPARATOR.join(rest)
    if not resource:
        raise ParseError("resource not found")
    return ResourceIdentifier(provider=provider, resource=resource)

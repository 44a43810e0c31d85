from __future__ import annotations

import pytest

from core.domain.identifier import ResourceIdentifier, split_identifier
from core.errors import ParseError


@pytest.mark.parametrize(
    ("raw", "provider", "resource"),
    [
        ("google_bigquery_dataset_access", "google", "bigquery_dataset_access"),
        ("a_b", "a", "b"),
        ("a_b_c", "a", "b_c"),
        ("aws_s3__bucket", "aws", "s3__bucket"),
    ],
)
def test_split_on_first_underscore(raw: str, provider: str, resource: str) -> None:
    assert split_identifier(raw) == ResourceIdentifier(provider=provider, resource=resource)


@pytest.mark.parametrize(
    ("raw", "provider", "resource"),
    [
        (" google_foo ", " google", "foo "),
        ("google_foo\n", "google", "foo\n"),
    ],
)
def test_input_is_split_as_given(raw: str, provider: str, resource: str) -> None:
    identifier = split_identifier(raw)

    assert (identifier.provider, identifier.resource) == (provider, resource)


@pytest.mark.parametrize("raw", ["noUnderscoreHere", "", "_bucket"])
def test_missing_provider_fails(raw: str) -> None:
    with pytest.raises(ParseError, match="provider not found"):
        split_identifier(raw)


def test_missing_resource_fails() -> None:
    with pytest.raises(ParseError, match="resource not found"):
        split_identifier("google_")


def test_raw_round_trips_the_input() -> None:
    assert split_identifier("google_bigquery_dataset_access").raw == "google_bigquery_dataset_access"

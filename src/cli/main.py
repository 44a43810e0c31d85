"""tfdocs CLI (Typer).

Usage:
    tfdocs google_bigquery_dataset_access
"""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.registry_client import RegistryClient
from cli.logging_setup import configure_logging
from cli.ui_components import print_error, render_markdown
from core.config import AppSettings, get_package_version
from core.errors import TfDocsError
from core.services.docs_pipeline import DocsLookup, PipelineHooks, lookup_docs

DEFAULT_RESOURCE = "google_bigquery_dataset_access"

app = typer.Typer(
    add_completion=False,
    help="Show Terraform registry documentation for a resource type.",
)

_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"tfdocs {get_package_version()}", highlight=False)
        raise typer.Exit()


def _describe_config_error(exc: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return f"invalid configuration: {problems}"


async def _lookup(raw_identifier: str, settings: AppSettings) -> DocsLookup:
    with _err_console.status("Querying registry...") as status:
        hooks = PipelineHooks(stage=lambda message: status.update(f"{message}..."))
        async with RegistryClient(settings) as registry:
            return await lookup_docs(raw_identifier, registry, hooks=hooks)


@app.command()
def lookup(
    resource: str = typer.Argument(
        DEFAULT_RESOURCE,
        help="Resource type as <provider>_<resource>, e.g. aws_s3_bucket.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Fetch the latest docs for RESOURCE and render them to the terminal."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, _describe_config_error(exc))
        raise typer.Exit(code=1) from exc
    configure_logging(settings.log_level, _err_console)

    try:
        result = asyncio.run(_lookup(resource, settings))
    except TfDocsError as exc:
        print_error(_err_console, str(exc))
        raise typer.Exit(code=1) from exc

    render_markdown(result.doc.content, _console)


def run() -> None:
    app()


if __name__ == "__main__":
    run()

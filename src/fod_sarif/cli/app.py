# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from fod_sarif.ci.exit_codes import CIExitCode, error_to_exit_code
from fod_sarif.core.exceptions import FodSarifError

logger = logging.getLogger("fod_sarif.cli")

app = typer.Typer(
    name="fod-sarif",
    help="Export Fortify on Demand static findings as SARIF 2.1.0",
    no_args_is_help=True,
)


@app.command()
def export(
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", help="FoD portal URL, e.g. https://ams.fortify.com"),
    ] = None,
    release_id: Annotated[
        str | None, typer.Option("--release-id", help="FoD release id")
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="SARIF output file path"),
    ] = None,
    tenant: Annotated[
        str | None, typer.Option("--tenant", help="FoD tenant (password grant)")
    ] = None,
    user: Annotated[
        str | None, typer.Option("--user", help="FoD user (password grant)")
    ] = None,
    password: Annotated[
        str | None, typer.Option("--password", help="FoD password or PAT (password grant)")
    ] = None,
    client_id: Annotated[
        str | None, typer.Option("--client-id", help="FoD API key (client credentials grant)")
    ] = None,
    client_secret: Annotated[
        str | None,
        typer.Option("--client-secret", help="FoD API secret (client credentials grant)"),
    ] = None,
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING)")
    ] = None,
    log_format: Annotated[
        str | None, typer.Option("--log-format", help="Log format (text, json, github)")
    ] = None,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Do not print the export summary")
    ] = False,
) -> None:
    """Export the vulnerabilities of a FoD release to a SARIF file.

    Every option can also be set through a FOD_* environment variable,
    e.g. FOD_CLIENT_SECRET.
    """
    from fod_sarif.core.config import get_settings
    from fod_sarif.core.logging import setup_logging

    try:
        settings = get_settings(
            base_url=base_url,
            release_id=release_id,
            output=output,
            tenant=tenant,
            user=user,
            password=password,
            client_id=client_id,
            client_secret=client_secret,
            log_level=log_level,
            log_format=log_format,
        )
    except ValidationError as exc:
        setup_logging()
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(int(CIExitCode.CONFIGURATION_ERROR)) from exc

    setup_logging(settings.log_level, settings.log_format)

    from fod_sarif.export.pipeline import ExportPipeline

    try:
        summary = asyncio.run(ExportPipeline(settings).run())
    except FodSarifError as exc:
        logger.error("%s", exc)
        raise typer.Exit(int(error_to_exit_code(exc))) from exc

    if not quiet:
        from fod_sarif.cli.formatters.console import format_export_summary

        format_export_summary(summary)


@app.command()
def version() -> None:
    """Show version information."""
    from fod_sarif import __version__

    typer.echo(f"fod-sarif v{__version__}")

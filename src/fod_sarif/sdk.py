# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding fod-sarif in other tools.

Usage::

    from fod_sarif import export_release_sync

    summary = export_release_sync(
        base_url="https://ams.fortify.com",
        release_id="12345",
        output="out/fod.sarif",
        client_id="...",
        client_secret="...",
    )
    print(summary.results, summary.rules)
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from fod_sarif.core.config import Settings, get_settings
from fod_sarif.export.pipeline import ExportPipeline, ExportSummary


async def export_release(
    *,
    base_url: str | None = None,
    release_id: str | None = None,
    output: str | Path | None = None,
    client_id: str | None = None,
    client_secret: str | None = None,
    tenant: str | None = None,
    user: str | None = None,
    password: str | None = None,
    settings: Settings | None = None,
) -> ExportSummary:
    """Export a FoD release to a SARIF file.

    Explicit arguments override values from *settings*, which default to
    the ``FOD_*`` environment.
    """
    overrides = {
        "base_url": base_url,
        "release_id": release_id,
        "output": Path(output) if output is not None else None,
        "client_id": client_id,
        "client_secret": client_secret,
        "tenant": tenant,
        "user": user,
        "password": password,
    }
    if settings is None:
        settings = get_settings(**overrides)
    else:
        update = {k: v for k, v in overrides.items() if v is not None and v != ""}
        settings = settings.model_copy(update=update)
    return await ExportPipeline(settings).run()


def export_release_sync(**kwargs: object) -> ExportSummary:
    """Blocking wrapper around :func:`export_release`."""
    return asyncio.run(export_release(**kwargs))  # type: ignore[arg-type]

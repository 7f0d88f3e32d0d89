# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 output models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fod_sarif.core.constants import (
    DEFAULT_RESULT_LEVEL,
    DRIVER_NAME,
    SARIF_SCHEMA,
    SARIF_VERSION,
)


class SarifMessage(BaseModel):
    text: str


class SarifMultiformatMessage(BaseModel):
    text: str
    markdown: str | None = None


class SarifArtifactLocation(BaseModel):
    uri: str


class SarifRegion(BaseModel):
    startLine: int
    endLine: int | None = None
    startColumn: int | None = None
    endColumn: int | None = None


class SarifPhysicalLocation(BaseModel):
    artifactLocation: SarifArtifactLocation
    region: SarifRegion | None = None


class SarifLocation(BaseModel):
    physicalLocation: SarifPhysicalLocation


class SarifPropertyBag(BaseModel):
    tags: list[str] = Field(default_factory=list)


class SarifRule(BaseModel):
    id: str
    shortDescription: SarifMessage
    fullDescription: SarifMessage | None = None
    help: SarifMultiformatMessage | None = None
    properties: SarifPropertyBag | None = None


class SarifDriver(BaseModel):
    name: str = DRIVER_NAME
    version: str | None = None
    rules: list[SarifRule] = Field(default_factory=list)


class SarifTool(BaseModel):
    driver: SarifDriver = Field(default_factory=SarifDriver)


class SarifResult(BaseModel):
    ruleId: str
    level: str = DEFAULT_RESULT_LEVEL
    message: SarifMessage
    locations: list[SarifLocation] = Field(default_factory=list)
    partialFingerprints: dict[str, str] = Field(default_factory=dict)


class SarifRun(BaseModel):
    tool: SarifTool = Field(default_factory=SarifTool)
    results: list[SarifResult] = Field(default_factory=list)


class SarifReport(BaseModel):
    schema_uri: str = Field(default=SARIF_SCHEMA, alias="$schema")
    version: str = SARIF_VERSION
    runs: list[SarifRun] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

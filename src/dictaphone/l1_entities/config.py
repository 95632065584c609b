"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dictaphone.l1_entities.export_format import ExportFormat


class SegmentationConfig(BaseModel):
    window: float = Field(gt=0)
    tick_interval: float = Field(ge=0)


class TranslationConfig(BaseModel):
    model: str
    source_language: str
    target_language: str
    max_concurrency: int = Field(ge=1)


class ExportConfig(BaseModel):
    formats: list[ExportFormat]
    include_translated: bool


class OutputConfig(BaseModel):
    directory: str


class AppConfig(BaseModel):
    segmentation: SegmentationConfig
    translation: TranslationConfig
    export: ExportConfig
    output: OutputConfig

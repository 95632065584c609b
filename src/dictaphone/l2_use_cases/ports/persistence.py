"""Port: persistence gateway for exported timed-text files."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from dictaphone.l1_entities.export_format import ExportFormat


class ExportPersistence(Protocol):
    """Abstract sink for rendered transcripts."""

    def save_export(self, fmt: ExportFormat, content: str, *, translated: bool = False) -> Path:
        """Write one rendered document. Returns the written path."""
        ...

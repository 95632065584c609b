"""Gateway: file-based persistence — implements ExportPersistence port."""

from __future__ import annotations

import logging
from pathlib import Path

from dictaphone.l1_entities.export_format import ExportFormat

log = logging.getLogger('dph.persist')


class FileExportGateway:
    """Writes rendered transcripts into an output directory."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir
        self._output_dir.mkdir(parents=True, exist_ok=True)

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def save_export(self, fmt: ExportFormat, content: str, *, translated: bool = False) -> Path:
        path = self._output_dir / fmt.filename(translated=translated)
        # newline='' keeps the renderer's exact bytes on every platform
        with path.open('w', encoding='utf-8', newline='') as f:
            f.write(content)
        log.debug('Wrote %d chars to %s (%s)', len(content), path.name, fmt.media_type)
        return path

"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(output_dir: Path) -> Path:
    """Configure file-based debug logging into the output directory."""
    log_path = output_dir / 'dph_debug.log'
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger('dph')
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    logging.getLogger('dph.runner').info('Debug logging started → %s', log_path)
    return log_path

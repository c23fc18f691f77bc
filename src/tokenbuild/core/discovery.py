from __future__ import annotations

import logging
from pathlib import Path

from .errors import make_source_error

logger = logging.getLogger(__name__)


def discover_themes(tokens_dir: Path, extension: str = ".json") -> list[str]:
    """List theme ids: stems of the files in tokens_dir with the extension."""
    if not tokens_dir.is_dir():
        raise make_source_error("Tokens directory not found", tokens_dir)
    themes = sorted(
        p.stem for p in tokens_dir.iterdir() if p.is_file() and p.suffix == extension
    )
    logger.debug(f"Discovered {len(themes)} theme(s) in {tokens_dir}: {themes}")
    return themes

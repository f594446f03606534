from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CANDIDATES: tuple[str, ...] = ("index.html", "docs/index.html")


def locate_document(root: str | Path = ".", candidates: tuple[str, ...] = CANDIDATES) -> Path | None:
    base = Path(root)
    for candidate in candidates:
        path = base / candidate
        if path.is_file():
            return path
    logger.info("no HTML document among %s under %s", ", ".join(candidates), base.resolve())
    return None


def read_markup(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")

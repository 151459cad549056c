"""Data file discovery and loading."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable
import json
import logging
from pathlib import Path
from typing import Any

from .constants import BROWSERS_DIR_NAME
from .exceptions import DocumentLoadError
from .util.log import debug_log

LOGGER = logging.getLogger(__name__)


def discover_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand paths into JSON data files, ignoring paths that do not exist."""
    output: list[Path] = []
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            candidates = [path] if path.suffix == ".json" else []
        elif path.is_dir():
            candidates = sorted(item for item in path.rglob("*.json") if item.is_file())
        else:
            debug_log(f"skipping missing path {path}", LOGGER)
            continue
        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            output.append(candidate)
    return output


def is_browser_data(path: Path) -> bool:
    """Browser description files carry no features to check."""
    return BROWSERS_DIR_NAME in path.parent.parts


def load_document(path: Path) -> Any:
    """Read a JSON document, preserving key order."""
    debug_log(f"loading {path}", LOGGER)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(str(path), cause=exc.__class__.__name__) from exc
    try:
        return json.loads(raw, object_pairs_hook=OrderedDict)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(str(path), cause=f"line {exc.lineno}: {exc.msg}") from exc

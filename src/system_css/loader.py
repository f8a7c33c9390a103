"""Theme file loading: JSON documents or Python files defining ``theme``."""

from __future__ import annotations

import json
import logging
import runpy
from pathlib import Path
from typing import Any, Mapping

from system_css.errors import ThemeLoadError

logger = logging.getLogger(__name__)


def load_theme(path: str | Path | None) -> dict[str, Any]:
    """Load a theme from *path*, or return an empty theme when *path* is None.

    ``.py`` files are executed and must define a ``theme`` mapping; anything
    else is parsed as JSON and must contain an object.
    """
    if path is None:
        return {}

    theme_path = Path(path)
    if not theme_path.is_file():
        raise ThemeLoadError(str(path), "file not found")

    if theme_path.suffix == ".py":
        theme = _load_python(theme_path)
    else:
        theme = _load_json(theme_path)

    if not isinstance(theme, Mapping):
        raise ThemeLoadError(str(path), f"expected an object, got {type(theme).__name__}")
    logger.debug("loaded theme %s with keys %s", theme_path, ", ".join(theme))
    return dict(theme)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ThemeLoadError(str(path), f"invalid JSON at line {exc.lineno}: {exc.msg}") from exc
    except OSError as exc:
        raise ThemeLoadError(str(path), str(exc)) from exc


def _load_python(path: Path) -> Any:
    try:
        namespace = runpy.run_path(str(path))
    except Exception as exc:
        raise ThemeLoadError(str(path), f"{type(exc).__name__}: {exc}") from exc
    if "theme" not in namespace:
        raise ThemeLoadError(str(path), "module does not define 'theme'")
    return namespace["theme"]

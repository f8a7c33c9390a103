from __future__ import annotations

import logging
from dataclasses import dataclass, field

import click

from system_css.styles.registry import DEFAULT_REGISTRY, StylePropDef, parse_prop_spec

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "system_css.stderr"


@dataclass(frozen=True)
class SystemCSSConfig:
    theme_path: str | None = None
    log_level: str = "WARNING"
    props: tuple[str, ...] = ()  # e.g. ("space", "fontSize:f", "color!")
    options: dict[str, str] = field(default_factory=dict)

    def registry(self) -> tuple[StylePropDef, ...]:
        """Return the style-prop registry selected by ``props``."""
        if not self.props:
            return DEFAULT_REGISTRY
        return tuple(parse_prop_spec(spec) for spec in self.props)


class ClickEchoHandler(logging.Handler):
    """Log handler that writes records to stderr through ``click.echo``."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Route ``system_css`` log records at *level* and above to stderr.

    Safe to call repeatedly; the handler is installed once.
    """
    logger = logging.getLogger("system_css")
    logger.setLevel(level.upper())
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger

"""system-css CLI entry point."""

from __future__ import annotations

import sys

import click

from system_css import __version__
from system_css.config import SystemCSSConfig, configure_logging
from system_css.errors import SystemCSSError
from system_css.generator import generate_stylesheet
from system_css.loader import load_theme

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def split_arguments(args: tuple[str, ...] | list[str]) -> tuple[str | None, dict[str, str]]:
    """Split raw arguments into the theme path and the pass-through options.

    ``--flag value`` and ``--flag=value`` become ``{"flag": "value"}``; a flag
    with no value becomes ``"true"``. The single remaining positional argument
    is the theme path.
    """
    positional: list[str] = []
    options: dict[str, str] = {}
    tokens = list(args)
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.startswith("--") and len(token) > 2:
            name, sep, value = token[2:].partition("=")
            if not sep:
                if i + 1 < len(tokens) and not tokens[i + 1].startswith("--"):
                    value = tokens[i + 1]
                    i += 1
                else:
                    value = "true"
            options[name] = value
        else:
            positional.append(token)
        i += 1

    if len(positional) > 1:
        raise click.UsageError(f"Expected at most one theme file, got: {' '.join(positional)}")
    return (positional[0] if positional else None), options


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="system-css")
@click.option(
    "--prop",
    "props",
    multiple=True,
    metavar="NAME[:PREFIX][!]",
    help="Style prop to generate (repeatable, replaces the defaults). "
    "A trailing ! disables breakpoint variants.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostics on stderr",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(props: tuple[str, ...], log_level: str, args: tuple[str, ...]) -> None:
    """Generate utility-class CSS from a theme file.

    THEME_FILE is a JSON file (or a Python file defining ``theme``). Without
    it the default theme is used. Extra --flag value pairs are passed
    through as generator options.
    """
    theme_path, options = split_arguments(args)
    config = SystemCSSConfig(
        theme_path=theme_path,
        log_level=log_level,
        props=props,
        options=options,
    )
    configure_logging(config.log_level)

    try:
        registry = config.registry()
        theme = load_theme(config.theme_path)
        result = generate_stylesheet(theme, registry, options=config.options)
    except (SystemCSSError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(result.to_css(), nl=False)

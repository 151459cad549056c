"""Console script for compatlint."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.text import Text

from . import __version__ as _version
from .checker import check_consistency, reports_to_dicts
from .constants import DEFAULT_DATA_DIRS
from .exceptions import CompatLintError
from .loader import discover_files, is_browser_data, load_document
from .render import render_reports, render_summary
from .util.log import configure_logging, debug_log


def _display_name(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


@click.argument(
    "files",
    metavar="[FILES]...",
    nargs=-1,
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format for findings.",
)
@click.option(
    "--fail-fast",
    is_flag=True,
    default=False,
    help="Stop at the first file with problems.",
)
@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(_version, "-v", "--version")
def main(files: tuple[Path, ...], output_format: str, fail_fast: bool) -> None:
    """
    Check feature support data for parent/sub-feature consistency

    \b
    Example usages:
        compatlint
        compatlint css/properties/display.json
        compatlint --format json api
    """
    configure_logging()
    console = Console(soft_wrap=True, highlight=False)
    as_text = output_format == "text"

    targets = list(files) if files else [Path(name) for name in DEFAULT_DATA_DIRS]
    failed: list[str] = []
    results: list[dict[str, Any]] = []

    for path in discover_files(targets):
        name = _display_name(path)
        if is_browser_data(path):
            debug_log(f"skipping browser data {name}")
            continue

        try:
            reports = check_consistency(load_document(path))
        except CompatLintError as exc:
            failed.append(name)
            if as_text:
                console.print(Text(f"✖ {name}", style="bold red"))
                console.print(Text(f"  {exc}", style="red"))
            else:
                results.append({"file": name, "error": str(exc)})
        else:
            if reports:
                failed.append(name)
            if as_text:
                if reports:
                    console.print(render_reports(name, reports))
                else:
                    console.print(Text(f"✔ {name}", style="green"))
            elif reports:
                results.append({"file": name, "reports": reports_to_dicts(reports)})

        if fail_fast and failed:
            break

    if not as_text:
        click.echo(json.dumps(results, indent=2, ensure_ascii=False))
    elif failed:
        console.print(render_summary(failed))

    if failed:
        raise SystemExit(1)

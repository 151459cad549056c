"""Console rendering of consistency reports."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Group
from rich.markup import escape
from rich.text import Text

from .constants import ARRAY_PLACEHOLDER, ERROR_MESSAGES
from .model import FeatureReport, ReportedValue


def _plural(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"


def format_value(value: ReportedValue) -> str:
    """Format a version value the way it appears in the data."""
    if isinstance(value, tuple):
        return ARRAY_PLACEHOLDER
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def render_reports(title: str, reports: Sequence[FeatureReport]) -> Group:
    """Render the consistency findings of one file as a Rich renderable group."""
    total = len(reports)
    lines: list[Text] = [
        Text.from_markup(
            f"[red]  Consistency - [bold]{total}[/bold] {_plural(total, 'error')}:[/red]"
        )
    ]

    for report in reports:
        dotted = ".".join(report.path)
        lines.append(
            Text.from_markup(
                f"[red]  → [bold]{len(report.errors)}[/bold] × "
                f"[bold]{escape(report.feature)}[/bold] \\[{escape(dotted)}]:[/red]"
            )
        )
        for violation in report.errors:
            message = ERROR_MESSAGES[violation.kind].format(
                browser=escape(violation.browser),
                parent_value=escape(format_value(violation.parent_value)),
            )
            lines.append(Text.from_markup(f"[red]    → {message}[/red]"))
            for offender in violation.offenders:
                lines.append(
                    Text(
                        f"      → {dotted}.{offender.subfeature}: {format_value(offender.value)}",
                        style="red",
                    )
                )

    return Group(Text(f"✖ {title}", style="bold red"), *lines)


def render_summary(failed: Sequence[str]) -> Group:
    """Render the closing list of files with problems."""
    count = len(failed)
    lines = [
        Text(""),
        Text.from_markup(f"[red]Problems in [bold]{count}[/bold] {_plural(count, 'file')}:[/red]"),
    ]
    lines.extend(Text(f"✖ {name}", style="bold red") for name in failed)
    return Group(*lines)

"""Entry points for the consistency check and its report structure."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .exceptions import NotATreeError
from .model import FeatureReport, ReportedValue
from .walker import walk


def check_consistency(document: object) -> tuple[FeatureReport, ...]:
    """Check every parent/sub-feature pair of a deserialized document.

    Returns an empty tuple for consistent data. Raises ``NotATreeError`` if
    the document root is not a mapping, so a failed run is never mistaken for
    a clean one.
    """
    if not isinstance(document, Mapping):
        raise NotATreeError(type(document).__name__)
    return walk(document)


def count_errors(reports: Iterable[FeatureReport]) -> int:
    return sum(len(report.errors) for report in reports)


def _json_value(value: ReportedValue) -> Any:
    return list(value) if isinstance(value, tuple) else value


def reports_to_dicts(reports: Iterable[FeatureReport]) -> list[dict[str, Any]]:
    """Convert reports to JSON-ready dicts for external tooling."""
    return [
        {
            "feature": report.feature,
            "path": list(report.path),
            "errors": [
                {
                    "errortype": violation.kind,
                    "browser": violation.browser,
                    "parent_value": _json_value(violation.parent_value),
                    "subfeatures": [
                        [offender.subfeature, _json_value(offender.value)]
                        for offender in violation.offenders
                    ],
                }
                for violation in report.errors
            ],
        }
        for report in reports
    ]

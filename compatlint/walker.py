"""Depth-first traversal of a feature tree."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from .constants import ROOT_FEATURE_NAME, SUPPORT_KEY
from .model import FeatureReport, Violation
from .rules import NamedRecord, run_rules
from .support import parse_support_record
from .util.log import debug_log

LOGGER = logging.getLogger(__name__)


def is_feature(node: object) -> bool:
    """A node is a feature iff it carries a compat block."""
    return isinstance(node, Mapping) and SUPPORT_KEY in node


def subfeatures(node: Mapping[str, Any]) -> tuple[tuple[str, Mapping[str, Any]], ...]:
    """Return the immediate children of ``node`` that are features, in key order."""
    return tuple(
        (key, child)
        for key, child in node.items()
        if key != SUPPORT_KEY and is_feature(child)
    )


def check_feature(node: Mapping[str, Any]) -> tuple[Violation, ...]:
    """Check one feature against each of its sub-features."""
    children: list[NamedRecord] = [
        (name, parse_support_record(child[SUPPORT_KEY])) for name, child in subfeatures(node)
    ]
    if not children:
        return ()
    return run_rules(parse_support_record(node[SUPPORT_KEY]), children)


def walk(node: Mapping[str, Any], path: tuple[str, ...] = ()) -> tuple[FeatureReport, ...]:
    """Collect reports for every inconsistent feature at or below ``node``."""
    reports: list[FeatureReport] = []

    if is_feature(node):
        feature = path[-1] if path else ROOT_FEATURE_NAME
        debug_log(f"checking {'.'.join(path) or feature}", LOGGER)
        errors = check_feature(node)
        if errors:
            reports.append(FeatureReport(feature=feature, path=path, errors=errors))

    for key, child in node.items():
        if key == SUPPORT_KEY or not isinstance(child, Mapping):
            continue
        reports.extend(walk(child, (*path, key)))

    return tuple(reports)

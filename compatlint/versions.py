"""Version ordering for support data."""

from __future__ import annotations

from .constants import APPROXIMATE_MARKER
from .model import Multiple, Single, SupportEntry, VersionValue


def is_approximate(value: VersionValue) -> bool:
    """Return True for version strings carrying the approximate marker."""
    return isinstance(value, str) and value.startswith(APPROXIMATE_MARKER)


def strip_marker(value: str) -> str:
    return value.removeprefix(APPROXIMATE_MARKER)


def _compare_component(left: str, right: str) -> int:
    if left.isdecimal() and right.isdecimal():
        left_num, right_num = int(left), int(right)
        return (left_num > right_num) - (left_num < right_num)
    return (left > right) - (left < right)


def compare_versions(a: str, b: str) -> int:
    """Compare dotted version strings, returning -1, 0 or 1.

    Components are compared numerically when both sides are digits and
    lexicographically otherwise. The shorter version is padded with zeros,
    so "10" and "10.0" are equal.
    """
    left = a.strip().split(".")
    right = b.strip().split(".")
    width = max(len(left), len(right))
    left += ["0"] * (width - len(left))
    right += ["0"] * (width - len(right))

    for left_part, right_part in zip(left, right):
        result = _compare_component(left_part.strip(), right_part.strip())
        if result:
            return result
    return 0


def earliest_version(entry: SupportEntry | None) -> VersionValue:
    """Reduce a support entry to its earliest ``version_added``."""
    match entry:
        case Single(statement=statement):
            return statement.version_added
        case Multiple(statements=statements):
            earliest: str | None = None
            # Later entries win ties.
            for statement in reversed(statements):
                candidate = statement.version_added
                if not isinstance(candidate, str):
                    continue
                if earliest is None or compare_versions(
                    strip_marker(earliest), strip_marker(candidate)
                ) > 0:
                    earliest = candidate
            return earliest
        case _:
            return None


def is_strictly_earlier(a: VersionValue, b: VersionValue) -> bool:
    """Return True only when ``a`` is a definite version strictly before ``b``."""
    if not isinstance(a, str) or not isinstance(b, str):
        return False
    if is_approximate(a) or is_approximate(b):
        return False
    return compare_versions(a, b) < 0

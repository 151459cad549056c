"""Support entry parsing and classification."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .constants import SUPPORT_RECORD_FIELD
from .model import Multiple, ReportedValue, Single, SupportEntry, SupportStatement

SupportRecord = Mapping[str, SupportEntry | None]
Predicate = Callable[[SupportStatement], bool]


def _parse_statement(raw: Mapping[str, Any]) -> SupportStatement:
    return SupportStatement(
        version_added=raw.get("version_added"),
        version_removed=raw.get("version_removed", False),
    )


def parse_support_entry(raw: object) -> SupportEntry | None:
    """Build a tagged support entry from raw JSON, or None when malformed."""
    if isinstance(raw, Mapping):
        return Single(_parse_statement(raw))
    if isinstance(raw, list):
        if not raw or not all(isinstance(item, Mapping) for item in raw):
            return None
        return Multiple(tuple(_parse_statement(item) for item in raw))
    return None


def parse_support_record(compat: object) -> dict[str, SupportEntry | None]:
    """Parse the ``support`` mapping of a feature's compat block."""
    if not isinstance(compat, Mapping):
        return {}
    support = compat.get(SUPPORT_RECORD_FIELD)
    if not isinstance(support, Mapping):
        return {}
    return {browser: parse_support_entry(raw) for browser, raw in support.items()}


def is_unsupported(statement: SupportStatement) -> bool:
    """Never added, or added and later removed."""
    return statement.version_added is False or statement.version_removed is not False


def is_unknown(statement: SupportStatement) -> bool:
    return statement.version_added is None


def is_support_unclear(statement: SupportStatement) -> bool:
    return is_unsupported(statement) or is_unknown(statement)


def has_known_version(statement: SupportStatement) -> bool:
    return isinstance(statement.version_added, str)


def matches(entry: SupportEntry | None, predicate: Predicate) -> bool:
    """Apply a predicate to an entry; every statement of a list must match."""
    match entry:
        case Single(statement=statement):
            return predicate(statement)
        case Multiple(statements=statements):
            return all(predicate(statement) for statement in statements)
        case _:
            return False


def browsers_matching(record: SupportRecord, predicate: Predicate) -> tuple[str, ...]:
    """Return browsers of a record whose entry satisfies the predicate."""
    return tuple(browser for browser, entry in record.items() if matches(entry, predicate))


def version_value(entry: SupportEntry | None) -> ReportedValue:
    """Return the literal ``version_added`` value used in reports."""
    match entry:
        case Single(statement=statement):
            return statement.version_added
        case Multiple(statements=statements):
            return tuple(statement.version_added for statement in statements)
        case _:
            return None

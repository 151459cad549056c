"""Parent/sub-feature consistency rules."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .model import Offender, ReportedValue, SupportEntry, Violation, ViolationKind
from .support import (
    Predicate,
    SupportRecord,
    browsers_matching,
    has_known_version,
    is_support_unclear,
    is_unknown,
    is_unsupported,
    matches,
    version_value,
)
from .versions import earliest_version, is_strictly_earlier

NamedRecord = tuple[str, SupportRecord]
Conflict = Callable[[SupportEntry | None, SupportEntry | None], bool]


def _group_by_browser(
    kind: ViolationKind,
    parent: SupportRecord,
    subfeatures: Sequence[NamedRecord],
    browsers: Sequence[str],
    conflicts: Conflict,
    *,
    reduce_versions: bool = False,
) -> tuple[Violation, ...]:
    value_of: Callable[[SupportEntry | None], ReportedValue] = (
        earliest_version if reduce_versions else version_value
    )
    offenders: dict[str, list[Offender]] = {}

    for name, child in subfeatures:
        for browser in browsers:
            if browser not in child:
                continue
            if conflicts(parent[browser], child[browser]):
                offenders.setdefault(browser, []).append(
                    Offender(subfeature=name, value=value_of(child[browser]))
                )

    return tuple(
        Violation(
            kind=kind,
            browser=browser,
            parent_value=value_of(parent[browser]),
            offenders=tuple(found),
        )
        for browser, found in offenders.items()
    )


def _status_leak(
    kind: ViolationKind,
    parent: SupportRecord,
    subfeatures: Sequence[NamedRecord],
    parent_predicate: Predicate,
    child_predicate: Predicate,
) -> tuple[Violation, ...]:
    def _conflicts(_parent_entry: SupportEntry | None, child_entry: SupportEntry | None) -> bool:
        # Malformed child entries never count as offenders.
        return child_entry is not None and not matches(child_entry, child_predicate)

    return _group_by_browser(
        kind,
        parent,
        subfeatures,
        browsers_matching(parent, parent_predicate),
        _conflicts,
    )


def check_unsupported(
    parent: SupportRecord, subfeatures: Sequence[NamedRecord]
) -> tuple[Violation, ...]:
    """Sub-features must stay unsupported where the parent is unsupported."""
    return _status_leak("unsupported", parent, subfeatures, is_unsupported, is_unsupported)


def check_support_unknown(
    parent: SupportRecord, subfeatures: Sequence[NamedRecord]
) -> tuple[Violation, ...]:
    """Sub-features must not claim definite support where the parent is unknown."""
    return _status_leak(
        "support_unknown", parent, subfeatures, is_unknown, is_support_unclear
    )


def check_earlier_implementation(
    parent: SupportRecord, subfeatures: Sequence[NamedRecord]
) -> tuple[Violation, ...]:
    """Sub-features must not be implemented before their parent."""

    def _conflicts(parent_entry: SupportEntry | None, child_entry: SupportEntry | None) -> bool:
        return is_strictly_earlier(earliest_version(child_entry), earliest_version(parent_entry))

    return _group_by_browser(
        "subfeature_earlier_implementation",
        parent,
        subfeatures,
        browsers_matching(parent, has_known_version),
        _conflicts,
        reduce_versions=True,
    )


RULES: tuple[Callable[[SupportRecord, Sequence[NamedRecord]], tuple[Violation, ...]], ...] = (
    check_unsupported,
    check_support_unknown,
    check_earlier_implementation,
)


def run_rules(
    parent: SupportRecord, subfeatures: Sequence[NamedRecord]
) -> tuple[Violation, ...]:
    """Run every rule and return the union of their violations."""
    violations: tuple[Violation, ...] = ()
    for rule in RULES:
        violations += rule(parent, subfeatures)
    return violations

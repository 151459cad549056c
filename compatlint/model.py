"""Data models for support entries and consistency reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

VersionValue = str | bool | None
ReportedValue = VersionValue | tuple[VersionValue, ...]
ViolationKind = Literal["unsupported", "support_unknown", "subfeature_earlier_implementation"]


@dataclass(frozen=True)
class SupportStatement:
    """One historical support claim for one browser.

    ``version_removed`` is ``False`` when the key is absent. A present ``null``
    is kept as ``None`` and counts as removed.
    """

    version_added: VersionValue
    version_removed: VersionValue = False


@dataclass(frozen=True)
class Single:
    statement: SupportStatement


@dataclass(frozen=True)
class Multiple:
    statements: tuple[SupportStatement, ...]


SupportEntry = Single | Multiple


@dataclass(frozen=True)
class Offender:
    subfeature: str
    value: ReportedValue


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    browser: str
    parent_value: ReportedValue
    offenders: tuple[Offender, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FeatureReport:
    feature: str
    path: tuple[str, ...]
    errors: tuple[Violation, ...]

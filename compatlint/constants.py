"""Constants used across pycompatlint."""

from __future__ import annotations

from typing import Final

SUPPORT_KEY: Final[str] = "__compat"
SUPPORT_RECORD_FIELD: Final[str] = "support"
APPROXIMATE_MARKER: Final[str] = "≤"
ROOT_FEATURE_NAME: Final[str] = "ROOT"

DEFAULT_DATA_DIRS: Final[tuple[str, ...]] = (
    "api",
    "browsers",
    "css",
    "html",
    "http",
    "svg",
    "javascript",
    "mathml",
    "webdriver",
    "webextensions",
    "xpath",
    "xslt",
)
BROWSERS_DIR_NAME: Final[str] = "browsers"

ERROR_MESSAGES: Final[dict[str, str]] = {
    "unsupported": "No support in [bold]{browser}[/bold], "
    "but support is declared in the following sub-feature(s):",
    "support_unknown": "Unknown support in parent for [bold]{browser}[/bold], "
    "but support is declared in the following sub-feature(s):",
    "subfeature_earlier_implementation": "Basic support in [bold]{browser}[/bold] was declared "
    "implemented in a later version ([bold]{parent_value}[/bold]) than the following sub-feature(s):",
}
ARRAY_PLACEHOLDER: Final[str] = "[Array]"

DEBUG_ENV_VAR: Final[str] = "PYCOMPATLINT_DEBUG"

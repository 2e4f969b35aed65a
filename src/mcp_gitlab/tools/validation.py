"""Tool parameter validation — ordered, fail-fast predicate checks.

Pure logic, no I/O. Each :class:`FieldCheck` pairs a field name with a
boolean predicate and a human-readable message. :func:`validate` walks the
list in order and stops at the first predicate returning ``False``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

MISSING = object()


@dataclass(frozen=True)
class FieldCheck:
    """A single named check on one parameter.

    ``predicate`` receives the field value (or :data:`MISSING` when absent).
    ``message`` may reference ``{field}`` and ``{value}``.
    """

    field: str
    predicate: Callable[[Any], bool]
    message: str

    def passes(self, params: Mapping[str, Any]) -> bool:
        try:
            return bool(self.predicate(params.get(self.field, MISSING)))
        except Exception:  # noqa: BLE001
            return False

    def describe(self, params: Mapping[str, Any]) -> str:
        value = params.get(self.field, "")
        return self.message.format(field=self.field, value=value)


@dataclass(frozen=True)
class ValidationFailure:
    """The first failing check for a set of parameters."""

    field: str
    message: str


def validate(
    checks: Sequence[FieldCheck], params: Mapping[str, Any]
) -> ValidationFailure | dict[str, Any]:
    """Return the first failure, or the params unchanged when all checks pass."""
    for check in checks:
        if not check.passes(params):
            return ValidationFailure(field=check.field, message=check.describe(params))
    return dict(params)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

_BRANCH_INVALID_PATTERNS = (
    re.compile(r"\s"),  # whitespace
    re.compile(r"\.\."),  # consecutive dots
    re.compile(r"^\."),
    re.compile(r"\.$"),
    re.compile(r"[~^:?*\[\\\]]"),
    re.compile(r"@\{"),
    re.compile(r"//"),
    re.compile(r"\.lock$"),
)

_NUMERIC_ID_RE = re.compile(r"[0-9]+")
_NAMESPACED_ID_RE = re.compile(r"[a-zA-Z0-9_.-]+/[a-zA-Z0-9_.-]+")

MAX_BRANCH_LENGTH = 255


def is_present(value: Any) -> bool:
    """Present and non-empty."""
    return value is not MISSING and value is not None and value != ""


def is_non_blank_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_optional_string(value: Any) -> bool:
    return value is MISSING or value is None or isinstance(value, str)


def is_valid_branch_name(value: Any) -> bool:
    """Check a GitLab branch name against git ref naming rules."""
    if not isinstance(value, str) or not value:
        return False
    if len(value) > MAX_BRANCH_LENGTH:
        return False
    return not any(pattern.search(value) for pattern in _BRANCH_INVALID_PATTERNS)


def is_valid_project_id(value: Any) -> bool:
    """A numeric id or a ``namespace/project`` path."""
    if not isinstance(value, str) or not value:
        return False
    return bool(_NUMERIC_ID_RE.fullmatch(value) or _NAMESPACED_ID_RE.fullmatch(value))


def required(*fields: str) -> list[FieldCheck]:
    """One presence check per field, in the given order."""
    return [
        FieldCheck(name, is_present, "Missing required field: {field}") for name in fields
    ]

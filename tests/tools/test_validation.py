"""Tests for the validation layer and its predicates."""

from __future__ import annotations

from typing import Any

import pytest

from mcp_gitlab.tools.merge_request import CHECKS
from mcp_gitlab.tools.validation import (
    MISSING,
    FieldCheck,
    ValidationFailure,
    is_non_blank_string,
    is_optional_string,
    is_present,
    is_valid_branch_name,
    is_valid_project_id,
    required,
    validate,
)

VALID: dict[str, Any] = {
    "project_id": "group/app",
    "source_branch": "feature/login",
    "target_branch": "main",
    "title": "Add login",
}


class TestBranchName:
    @pytest.mark.parametrize(
        "name",
        ["main", "feature/login", "release-1.2", "fix_bug", "a", "v1.0.0-rc1", "x" * 255],
    )
    def test_valid(self, name: str) -> None:
        assert is_valid_branch_name(name)

    @pytest.mark.parametrize(
        "name",
        [
            "a b",
            "tab\there",
            "double..dot",
            ".hidden",
            "trailing.",
            "tilde~1",
            "caret^",
            "colon:x",
            "what?",
            "star*",
            "open[",
            "close]",
            "back\\slash",
            "at@{x}",
            "double//slash",
            "branch.lock",
            "",
            "x" * 256,
        ],
    )
    def test_invalid(self, name: str) -> None:
        assert not is_valid_branch_name(name)

    @pytest.mark.parametrize("value", [None, 42, ["main"], MISSING])
    def test_non_string(self, value: Any) -> None:
        assert not is_valid_branch_name(value)


class TestProjectId:
    @pytest.mark.parametrize("value", ["42", "0", "group/app", "my.group/my-app_2"])
    def test_valid(self, value: str) -> None:
        assert is_valid_project_id(value)

    @pytest.mark.parametrize(
        "value",
        ["", "group", "a/b/c", "group/", "/app", "gr oup/app", "42\n", "١٢", 42, None],
    )
    def test_invalid(self, value: Any) -> None:
        assert not is_valid_project_id(value)


class TestSimplePredicates:
    def test_is_present(self) -> None:
        assert is_present("x")
        assert is_present(0)
        assert not is_present("")
        assert not is_present(None)
        assert not is_present(MISSING)

    def test_is_non_blank_string(self) -> None:
        assert is_non_blank_string("t")
        assert not is_non_blank_string("   ")
        assert not is_non_blank_string(5)

    def test_is_optional_string(self) -> None:
        assert is_optional_string(MISSING)
        assert is_optional_string(None)
        assert is_optional_string("")
        assert not is_optional_string(3)


class TestValidate:
    def test_success_returns_params_unchanged(self) -> None:
        params = {**VALID, "description": "body", "extra": 1}
        result = validate(CHECKS, params)
        assert result == params

    def test_first_failure_wins(self) -> None:
        params = {**VALID, "source_branch": "a b", "target_branch": "c d", "title": " "}
        result = validate(CHECKS, params)
        assert isinstance(result, ValidationFailure)
        assert result.field == "source_branch"
        assert "source_branch" in result.message
        assert "a b" in result.message

    def test_required_checked_before_format(self) -> None:
        params = {"project_id": "bad id", "source_branch": "main", "target_branch": "dev"}
        result = validate(CHECKS, params)
        assert isinstance(result, ValidationFailure)
        assert result.field == "title"
        assert "Missing required field" in result.message

    @pytest.mark.parametrize("field", ["project_id", "source_branch", "target_branch", "title"])
    def test_each_required_field(self, field: str) -> None:
        params = {k: v for k, v in VALID.items() if k != field}
        result = validate(CHECKS, params)
        assert isinstance(result, ValidationFailure)
        assert result.field == field
        assert field in result.message

    def test_invalid_project_id(self) -> None:
        result = validate(CHECKS, {**VALID, "project_id": "a/b/c"})
        assert isinstance(result, ValidationFailure)
        assert result.field == "project_id"

    def test_blank_title(self) -> None:
        result = validate(CHECKS, {**VALID, "title": "   "})
        assert isinstance(result, ValidationFailure)
        assert result.field == "title"

    def test_description_must_be_string(self) -> None:
        result = validate(CHECKS, {**VALID, "description": 12})
        assert isinstance(result, ValidationFailure)
        assert result.field == "description"

    def test_later_checks_not_run(self) -> None:
        calls: list[str] = []

        def tracking(name: str, outcome: bool) -> FieldCheck:
            def predicate(value: Any) -> bool:
                calls.append(name)
                return outcome

            return FieldCheck(name, predicate, "{field} failed")

        checks = [tracking("a", True), tracking("b", False), tracking("c", False)]
        result = validate(checks, {})
        assert isinstance(result, ValidationFailure)
        assert result.message == "b failed"
        assert calls == ["a", "b"]

    def test_raising_predicate_counts_as_failure(self) -> None:
        def explode(value: Any) -> bool:
            raise RuntimeError("boom")

        result = validate([FieldCheck("x", explode, "bad {field}")], {"x": 1})
        assert isinstance(result, ValidationFailure)
        assert result.message == "bad x"

    def test_required_helper_order(self) -> None:
        checks = required("b", "a")
        assert [c.field for c in checks] == ["b", "a"]

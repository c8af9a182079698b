"""Tests for ServiceResult and ServiceError."""

import pytest

from pagesize.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_helper(self) -> None:
        result = ServiceResult.success("show_preset", {"name": "iso_a4"})
        assert result.ok is True
        assert result.op == "show_preset"
        assert result.data == {"name": "iso_a4"}
        assert result.warnings == []
        assert result.error is None

    def test_success_keeps_warnings(self) -> None:
        result = ServiceResult.success("list_presets", {}, ["shadowed"])
        assert result.warnings == ["shadowed"]

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure(
            "show_preset", "UNKNOWN_PRESET", "nope", detail={"known": ["iso_a4"]}
        )
        assert result.ok is False
        assert result.data == {}
        assert result.error == ServiceError(
            code="UNKNOWN_PRESET", message="nope", detail={"known": ["iso_a4"]}
        )

    def test_failure_default_detail(self) -> None:
        result = ServiceResult.failure("custom_size", "INVALID_PAGE_SIZE", "bad")
        assert result.error is not None
        assert result.error.detail == {}

    def test_frozen(self) -> None:
        result = ServiceResult.success("show_preset", {})
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_json_serialization(self) -> None:
        result = ServiceResult.success("show_preset", {"height": 29.7, "width": 21.0})
        restored = ServiceResult.model_validate_json(result.model_dump_json())
        assert restored == result

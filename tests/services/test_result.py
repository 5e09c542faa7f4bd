"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from tenurectl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="measure_period", data={"label": "0 years"})
        assert result.ok is True
        assert result.op == "measure_period"
        assert result.data == {"label": "0 years"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVERTED_RANGE", message="End before start")
        result = ServiceResult(ok=False, op="measure_period", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVERTED_RANGE"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="total_experience",
            data={"total": {"years": 1, "months": 2, "days": 5}},
            warnings=["Period per_x counted as zero"],
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["total"]["months"] == 2
        assert parsed["warnings"] == ["Period per_x counted as zero"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="INVALID_FILE",
            message="bad",
            detail={"path": "periods.toml"},
        )
        assert error.detail["path"] == "periods.toml"

    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}

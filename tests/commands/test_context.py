"""Tests for AppContext result delivery."""

from __future__ import annotations

from pathlib import Path

import pytest

from gratuityctl.commands._context import AppContext
from gratuityctl.config.settings import GratuitySettings
from gratuityctl.services.result import ServiceError, ServiceResult
from tests.conftest import gratuity_result


@pytest.fixture
def app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AppContext:
    monkeypatch.delenv("GRATUITYCTL_CONFIG", raising=False)
    return AppContext(GratuitySettings.from_cli(cwd=tmp_path, quiet=True))


class TestDeliver:
    def test_consumers_run_in_order_after_emit(
        self, app: AppContext, capsys: pytest.CaptureFixture[str]
    ) -> None:
        seen: list[str] = []
        app.deliver(
            gratuity_result(10000, 3),
            [lambda r: seen.append("first"), lambda r: seen.append("second")],
        )
        assert seen == ["first", "second"]
        assert capsys.readouterr().out.strip() == "AED 21,000.00"

    def test_failure_stops_before_consumers(self, app: AppContext) -> None:
        seen: list[str] = []
        failed = ServiceResult(
            ok=False,
            op="calculate_gratuity",
            error=ServiceError(code="INVALID_INPUT", message="bad"),
        )
        with pytest.raises(SystemExit) as exc_info:
            app.deliver(failed, [lambda r: seen.append("never")])
        assert exc_info.value.code == 1
        assert seen == []

    def test_no_consumers(self, app: AppContext, capsys: pytest.CaptureFixture[str]) -> None:
        app.deliver(gratuity_result(10000, 3))
        assert "AED 21,000.00" in capsys.readouterr().out

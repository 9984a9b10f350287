"""Shared pytest fixtures and test helpers for gratuityctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from gratuityctl.config.settings import GratuitySettings
from gratuityctl.domain.gratuity import GratuityInput, compute
from gratuityctl.services.result import ServiceResult


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler changes made by configure_logging during a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("gratuityctl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no gratuityctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.delenv("GRATUITYCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> GratuitySettings:
    """Default settings with no TOML file in play."""
    monkeypatch.delenv("GRATUITYCTL_CONFIG", raising=False)
    return GratuitySettings.from_cli(cwd=tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_input(salary: Any, years: Any, months: int = 0, **kwargs: Any) -> GratuityInput:
    """Build a GratuityInput from loose numeric values."""
    return GratuityInput(
        basic_salary=Decimal(str(salary)),
        years_worked=Decimal(str(years)),
        months_worked=months,
        **kwargs,
    )


def gratuity_result(salary: Any, years: Any, months: int = 0, **kwargs: Any) -> ServiceResult:
    """Wrap a direct compute() call the way GratuityService does."""
    data = compute(make_input(salary, years, months, **kwargs))
    return ServiceResult(
        ok=True,
        op="calculate_gratuity",
        data=data.model_dump(mode="json"),
        meta={"currency": "AED"},
    )

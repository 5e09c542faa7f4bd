"""Shared pytest fixtures for tenurectl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from tenurectl.config.settings import TenureSettings
from tenurectl.services.experience import ExperienceService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary working directory with no config file above it.

    Clears TENURECTL_* env vars so the host environment never leaks in.
    """
    monkeypatch.delenv("TENURECTL_CONFIG", raising=False)
    monkeypatch.delenv("TENURECTL_DISPLAY__LOCALE", raising=False)
    monkeypatch.delenv("TENURECTL_DISPLAY__DATE_FORMAT", raising=False)
    return tmp_path


@pytest.fixture
def settings(work_dir: Path) -> TenureSettings:
    """Default settings resolved from an empty directory."""
    return TenureSettings.from_cli(search_root=work_dir)


@pytest.fixture
def service(settings: TenureSettings) -> ExperienceService:
    return ExperienceService(settings)


@pytest.fixture
def _isolated_cwd(work_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI finds no stray config.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(work_dir)


@pytest.fixture
def periods_file(work_dir: Path) -> Callable[..., Path]:
    """Factory writing a ``[[period]]`` TOML file of quoted date strings."""

    def _write(*pairs: tuple[str, str], name: str = "periods.toml") -> Path:
        blocks = [f'[[period]]\nstart = "{start}"\nend = "{end}"\n' for start, end in pairs]
        path = work_dir / name
        path.write_text("\n".join(blocks), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    CLI invocations install a handler bound to the runner's stderr; it must
    not outlive the test.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tenure = logging.getLogger("tenurectl")
    tenure_level = tenure.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tenure.setLevel(tenure_level)

"""
Shared test fixtures: isolated properties, a fake Playwright package
directory, and a recorder in place of ``subprocess.run``.
"""

import subprocess
from pathlib import Path

import pytest

from playwright_install_args import driver as driver_module
from playwright_install_args import properties
from playwright_install_args.extra_install import ExtraInstallArgumentsDriver

PLAYWRIGHT_ENV_KEYS = (
    "PLAYWRIGHT_SKIP_BROWSER_DOWNLOAD",
    "PLAYWRIGHT_DRIVER_IMPL",
    "PLAYWRIGHT_INSTALL_TIMEOUT",
    "PLAYWRIGHT_EXTRA_INSTALL_ARGUMENTS",
    "EXTRA_INSTALL_ARGUMENTS",
)


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch, tmp_path: Path):
    """Reset process-wide driver selection and point Playwright at a temp dir."""
    for key in PLAYWRIGHT_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    package_dir = tmp_path / "playwright"
    (package_dir / "driver").mkdir(parents=True)
    monkeypatch.setattr(driver_module, "PLAYWRIGHT_PACKAGE_DIR", package_dir)

    monkeypatch.setattr(properties, "_properties", {})
    monkeypatch.setattr(driver_module, "_registry", dict(driver_module._registry))
    monkeypatch.setattr(ExtraInstallArgumentsDriver, "_previous_driver_impl", None)
    yield


class RunRecorder:
    """Stands in for ``subprocess.run`` and remembers each call."""

    def __init__(self, returncode: int = 0):
        self.returncode = returncode
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append({"args": list(args), **kwargs})
        return subprocess.CompletedProcess(args, self.returncode)

    @property
    def last_args(self):
        return self.calls[-1]["args"]

    @property
    def last_env(self):
        return self.calls[-1]["env"]


@pytest.fixture
def run_recorder(monkeypatch) -> RunRecorder:
    recorder = RunRecorder()
    monkeypatch.setattr(driver_module.subprocess, "run", recorder)
    return recorder

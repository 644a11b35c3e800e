"""Driver abstraction that locates Playwright and runs its browser install."""

from __future__ import annotations

import abc
import importlib
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, MutableSequence, Optional, Type

import playwright
from playwright.sync_api import Error as PlaywrightError

from .arguments import INSTALL_COMMAND
from .options import CreateOptions
from .properties import DRIVER_IMPL_PROPERTY, get_property

logger = logging.getLogger(__name__)

PLAYWRIGHT_PACKAGE_DIR = Path(playwright.__file__).parent

SKIP_BROWSER_DOWNLOAD_ENV = "PLAYWRIGHT_SKIP_BROWSER_DOWNLOAD"
DRIVER_IMPL_ENV = "PLAYWRIGHT_DRIVER_IMPL"
INSTALL_TIMEOUT_ENV = "PLAYWRIGHT_INSTALL_TIMEOUT"

DEFAULT_INSTALL_TIMEOUT_S = 10 * 60.0


class DriverError(PlaywrightError):
    """Raised when a driver implementation cannot be resolved or constructed."""


class Driver(abc.ABC):
    """
    Locates the Playwright runtime and launches its helper processes.

    Implementations are constructed with no arguments by :func:`new_instance`;
    ``env`` is assigned afterwards.
    """

    def __init__(self) -> None:
        self.env: Dict[str, str] = {}

    @abc.abstractmethod
    def create_command(self) -> MutableSequence[str]:
        """Return the base command line; callers append a subcommand to it."""

    def process_env(self) -> Dict[str, str]:
        env = os.environ.copy()
        env.update(self.env)
        return env

    def install_timeout(self, timeout: Optional[float] = None) -> float:
        if timeout is not None:
            return timeout
        raw = self.process_env().get(INSTALL_TIMEOUT_ENV)
        if not raw:
            return DEFAULT_INSTALL_TIMEOUT_S
        try:
            return float(raw)
        except ValueError as err:
            raise ValueError(f"{INSTALL_TIMEOUT_ENV} must be a number of seconds, got {raw!r}") from err

    def skip_browser_download(self) -> bool:
        value = self.process_env().get(SKIP_BROWSER_DOWNLOAD_ENV)
        return value is not None and value not in ("0", "false")

    def initialize(self, install_browsers: bool = True, timeout: Optional[float] = None) -> None:
        if not install_browsers:
            return
        if self.skip_browser_download():
            logger.info("Skipping browser download because %s is set", SKIP_BROWSER_DOWNLOAD_ENV)
            return
        self.install_browsers(timeout=timeout)

    def install_browsers(self, timeout: Optional[float] = None) -> List[str]:
        """Run ``<command> install`` and return the command that was executed."""
        command = self.create_command()
        command.append(INSTALL_COMMAND)
        args = list(command)

        logger.info("Installing browsers: %s", " ".join(args))
        try:
            completed = subprocess.run(
                args,
                env=self.process_env(),
                timeout=self.install_timeout(timeout),
            )
        except subprocess.TimeoutExpired as err:
            raise PlaywrightError(
                f"Timed out after {err.timeout:g}s waiting for browsers to install."
            ) from err

        if completed.returncode != 0:
            raise PlaywrightError(
                f"Failed to install browsers, exit code: {completed.returncode}"
            )
        return args


class PlaywrightDriver(Driver):
    """Default driver: runs the ``playwright`` package's own CLI."""

    def __init__(self) -> None:
        super().__init__()
        self.locate_driver_dir()

    @staticmethod
    def locate_driver_dir() -> Path:
        driver_dir = PLAYWRIGHT_PACKAGE_DIR / "driver"
        if not driver_dir.is_dir():
            raise FileNotFoundError(f"Playwright driver not found at {driver_dir}")
        return driver_dir

    def create_command(self) -> MutableSequence[str]:
        return [sys.executable, "-m", "playwright"]


_registry: Dict[str, Type[Driver]] = {}


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def register_driver(cls: Type[Driver], name: Optional[str] = None) -> Type[Driver]:
    """Register ``cls`` under ``name`` (its dotted path by default). Usable as a decorator."""
    if not (isinstance(cls, type) and issubclass(cls, Driver)):
        raise TypeError(f"{cls!r} is not a Driver subclass")
    _registry[name or _qualified_name(cls)] = cls
    return cls


def _import_driver_class(name: str) -> Type[Driver]:
    module_name, _, class_name = name.rpartition(".")
    if not module_name:
        raise DriverError(f"Unknown driver implementation: {name!r}")
    try:
        module = importlib.import_module(module_name)
        cls = getattr(module, class_name)
    except (ImportError, AttributeError) as err:
        raise DriverError(f"Cannot load driver implementation {name!r}: {err}") from err

    if not (isinstance(cls, type) and issubclass(cls, Driver)):
        raise DriverError(f"{name!r} is not a Driver implementation")
    return cls


def resolve_driver_class(name: Optional[str] = None) -> Type[Driver]:
    """
    Look up the driver class to use.

    The name comes from the argument, then the ``playwright.driver.impl``
    property, then the ``PLAYWRIGHT_DRIVER_IMPL`` environment variable. With
    none of those set, :class:`PlaywrightDriver` is used.
    """
    name = name or get_property(DRIVER_IMPL_PROPERTY) or os.environ.get(DRIVER_IMPL_ENV)
    if not name:
        return PlaywrightDriver
    if name in _registry:
        return _registry[name]
    return _import_driver_class(name)


def new_instance(env: Optional[Dict[str, str]] = None) -> Driver:
    cls = resolve_driver_class()
    logger.debug("Using driver implementation %s", _qualified_name(cls))
    driver = cls()
    driver.env = dict(env or {})
    return driver


def ensure_driver_installed(options: Optional[CreateOptions] = None) -> Driver:
    """Create the active driver and install browsers unless disabled by ``options``."""
    options = options or CreateOptions()
    driver = new_instance(options.env)
    driver.initialize(options.install_browsers, timeout=options.timeout)
    return driver


register_driver(PlaywrightDriver)

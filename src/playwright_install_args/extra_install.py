"""
Driver that lets callers choose what Playwright's ``install`` step downloads.

Usage::

    options = ExtraInstallArgumentsDriver.set_extra_install_arguments(
        "chromium --with-deps --no-shell"
    )
    ensure_driver_installed(options)

This installs Chromium and its system dependencies but not Firefox or WebKit.
``set_extra_install_arguments`` also activates the driver; to select it
without touching options, call :meth:`ExtraInstallArgumentsDriver.activate`
or set the ``playwright.driver.impl`` property to
``playwright_install_args.extra_install.ExtraInstallArgumentsDriver``.
"""

from __future__ import annotations

import contextlib
import logging
from typing import Dict, Iterator, List, MutableSequence, Optional

from .arguments import DEFAULT_DELIMITER, ExtraInstallArgumentsList, parse_extra_install_arguments
from .driver import PlaywrightDriver, register_driver
from .options import CreateOptions
from .properties import DRIVER_IMPL_PROPERTY, get_property, lock, swap_property

logger = logging.getLogger(__name__)

EXTRA_INSTALL_ARGUMENTS = "PLAYWRIGHT_EXTRA_INSTALL_ARGUMENTS"
LEGACY_EXTRA_INSTALL_ARGUMENTS = "EXTRA_INSTALL_ARGUMENTS"


@register_driver
class ExtraInstallArgumentsDriver(PlaywrightDriver):
    """
    :class:`PlaywrightDriver` whose install command carries the arguments
    stored under ``PLAYWRIGHT_EXTRA_INSTALL_ARGUMENTS`` (or the older
    ``EXTRA_INSTALL_ARGUMENTS`` key) right after ``install``.

    Activation is a single-slot toggle, not a stack: only the value seen by
    the first :meth:`activate` is restored by :meth:`deactivate`.
    """

    delimiter = DEFAULT_DELIMITER

    _previous_driver_impl: Optional[str] = None

    @classmethod
    def driver_name(cls) -> str:
        return f"{cls.__module__}.{cls.__qualname__}"

    @classmethod
    def activate(cls) -> None:
        """Make this class the driver that :func:`new_instance` resolves to."""
        name = cls.driver_name()
        with lock:
            previous = swap_property(DRIVER_IMPL_PROPERTY, name)
            if previous != name:
                cls._previous_driver_impl = previous
        logger.debug("Activated %s (previous driver: %s)", name, previous)

    @classmethod
    def deactivate(cls) -> None:
        """Restore the driver selection saved by :meth:`activate`."""
        with lock:
            previous = cls._previous_driver_impl
            cls._previous_driver_impl = None
            swap_property(DRIVER_IMPL_PROPERTY, previous)
        logger.debug("Deactivated %s (restored driver: %s)", cls.driver_name(), previous)

    @classmethod
    def is_active(cls) -> bool:
        return get_property(DRIVER_IMPL_PROPERTY) == cls.driver_name()

    @classmethod
    @contextlib.contextmanager
    def activated(cls) -> Iterator[None]:
        cls.activate()
        try:
            yield
        finally:
            cls.deactivate()

    @classmethod
    def set_extra_install_arguments(
        cls, args: Optional[str], options: Optional[CreateOptions] = None
    ) -> CreateOptions:
        """
        Store ``args`` in the env of ``options`` (a new instance when None) and
        activate this driver.

        ``args`` holds zero or more arguments for ``playwright install``, such
        as browser names, delimited by spaces, commas or vertical pipes. Passing
        None removes any previously stored arguments.
        """
        if options is None:
            options = CreateOptions()
        env = options.ensure_env()

        if args is None:
            env.pop(EXTRA_INSTALL_ARGUMENTS, None)
            env.pop(LEGACY_EXTRA_INSTALL_ARGUMENTS, None)
        else:
            env[EXTRA_INSTALL_ARGUMENTS] = args

        cls.activate()
        return options

    def raw_extra_install_arguments(self) -> Optional[str]:
        env = self.env
        if EXTRA_INSTALL_ARGUMENTS in env:
            return env[EXTRA_INSTALL_ARGUMENTS]
        return env.get(LEGACY_EXTRA_INSTALL_ARGUMENTS)

    def extra_install_arguments(self) -> Optional[List[str]]:
        return parse_extra_install_arguments(self.raw_extra_install_arguments(), self.delimiter)

    def create_command(self) -> MutableSequence[str]:
        return ExtraInstallArgumentsList(super().create_command(), self.extra_install_arguments())

    def process_env(self) -> Dict[str, str]:
        # Configuration for this driver only; not passed to the install process.
        env = super().process_env()
        env.pop(EXTRA_INSTALL_ARGUMENTS, None)
        env.pop(LEGACY_EXTRA_INSTALL_ARGUMENTS, None)
        return env

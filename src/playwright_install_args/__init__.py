"""Pass extra arguments to Playwright's browser ``install`` step."""

from .arguments import (
    DEFAULT_DELIMITER,
    INSTALL_COMMAND,
    INSTALL_INDEX,
    MULTI_DELIMITER,
    SPACE_DELIMITER,
    ExtraInstallArgumentsList,
    parse_extra_install_arguments,
)
from .driver import (
    Driver,
    DriverError,
    PlaywrightDriver,
    ensure_driver_installed,
    new_instance,
    register_driver,
    resolve_driver_class,
)
from .extra_install import (
    EXTRA_INSTALL_ARGUMENTS,
    LEGACY_EXTRA_INSTALL_ARGUMENTS,
    ExtraInstallArgumentsDriver,
)
from .options import CreateOptions
from .properties import DRIVER_IMPL_PROPERTY

__all__ = [
    "CreateOptions",
    "DEFAULT_DELIMITER",
    "DRIVER_IMPL_PROPERTY",
    "Driver",
    "DriverError",
    "EXTRA_INSTALL_ARGUMENTS",
    "ExtraInstallArgumentsDriver",
    "ExtraInstallArgumentsList",
    "INSTALL_COMMAND",
    "INSTALL_INDEX",
    "LEGACY_EXTRA_INSTALL_ARGUMENTS",
    "MULTI_DELIMITER",
    "PlaywrightDriver",
    "SPACE_DELIMITER",
    "ensure_driver_installed",
    "new_instance",
    "parse_extra_install_arguments",
    "register_driver",
    "resolve_driver_class",
]

"""Command-line sequence that splices extra arguments after ``install``."""

from __future__ import annotations

import re
from collections.abc import MutableSequence
from typing import Iterable, List, Optional, Sequence

INSTALL_COMMAND = "install"

# Host command shape: [python, "-m", "playwright", "install", ...]
INSTALL_INDEX = 3

SPACE_DELIMITER = r" "
MULTI_DELIMITER = r"[ ,|]"
DEFAULT_DELIMITER = MULTI_DELIMITER


def parse_extra_install_arguments(
    raw: Optional[str], delimiter: str = DEFAULT_DELIMITER
) -> Optional[List[str]]:
    """
    Split ``raw`` into install arguments.

    Returns None when ``raw`` is None. Empty tokens produced by leading,
    trailing or repeated delimiters are dropped, so a blank string yields an
    empty list.
    """
    if raw is None:
        return None
    return [token for token in re.split(delimiter, raw) if token]


class ExtraInstallArgumentsList(MutableSequence):
    """
    Mutable sequence of command tokens that inserts ``extra_install_arguments``
    right after ``"install"`` when it is appended at ``install_index``.

    Only :meth:`append` (and therefore ``extend`` and ``+=``) can fire the
    insertion. Since the sequence only grows through appends, it fires at most
    once.
    """

    def __init__(
        self,
        commands: Iterable[str] = (),
        extra_install_arguments: Optional[Sequence[str]] = None,
        *,
        install_index: int = INSTALL_INDEX,
    ) -> None:
        self._commands: List[str] = list(commands)
        self.extra_install_arguments = (
            list(extra_install_arguments) if extra_install_arguments is not None else None
        )
        self.install_index = install_index

    def append(self, value: str) -> None:
        self._commands.append(value)

        if (
            len(self._commands) == self.install_index + 1
            and value == INSTALL_COMMAND
            and self.extra_install_arguments is not None
        ):
            self._commands.extend(self.extra_install_arguments)

    def insert(self, index: int, value: str) -> None:
        self._commands.insert(index, value)

    def __getitem__(self, index):
        return self._commands[index]

    def __setitem__(self, index, value) -> None:
        self._commands[index] = value

    def __delitem__(self, index) -> None:
        del self._commands[index]

    def __len__(self) -> int:
        return len(self._commands)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExtraInstallArgumentsList):
            return self._commands == other._commands
        if isinstance(other, (list, tuple)):
            return self._commands == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._commands!r})"

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class CreateOptions:
    """Settings handed to :func:`ensure_driver_installed`."""

    env: Optional[Dict[str, str]] = None
    install_browsers: bool = True
    timeout: Optional[float] = None

    def set_env(self, env: Optional[Dict[str, str]]) -> "CreateOptions":
        self.env = env
        return self

    def ensure_env(self) -> Dict[str, str]:
        if self.env is None:
            self.env = {}
        return self.env

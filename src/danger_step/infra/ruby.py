"""Detection of how the active Ruby was installed."""

from __future__ import annotations

import os
import shutil
from enum import Enum
from typing import Callable, Optional


class RubyInstallType(str, Enum):
    UNKNOWN = "unknown"
    SYSTEM = "system"
    BREW = "brew"
    RBENV = "rbenv"
    RVM = "rvm"


def classify_ruby_path(path: Optional[str]) -> RubyInstallType:
    """Classify a ``ruby`` executable path by installation method."""
    if not path:
        return RubyInstallType.UNKNOWN
    if path == "/usr/bin/ruby":
        return RubyInstallType.SYSTEM
    if "Cellar" in path or path.startswith(("/usr/local/bin/", "/opt/homebrew/")):
        return RubyInstallType.BREW
    if ".rbenv" in path:
        return RubyInstallType.RBENV
    if ".rvm" in path:
        return RubyInstallType.RVM
    return RubyInstallType.UNKNOWN


class RubyInstallation:
    """Answers install-shape questions about the Ruby found on PATH.

    System Ruby gems need sudo unless we already run as root; rbenv shims
    need ``rbenv rehash`` after a gem adds executables.
    """

    def __init__(
        self,
        *,
        which: Callable[[str], Optional[str]] = shutil.which,
        is_root: Optional[bool] = None,
    ) -> None:
        self._which = which
        self._is_root = is_root
        self._install_type: Optional[RubyInstallType] = None

    @property
    def install_type(self) -> RubyInstallType:
        if self._install_type is None:
            self._install_type = classify_ruby_path(self._which("ruby"))
        return self._install_type

    def _running_as_root(self) -> bool:
        if self._is_root is not None:
            return self._is_root
        return hasattr(os, "geteuid") and os.geteuid() == 0

    def needs_sudo(self) -> bool:
        return self.install_type is RubyInstallType.SYSTEM and not self._running_as_root()

    def needs_rehash(self) -> bool:
        return self.install_type is RubyInstallType.RBENV

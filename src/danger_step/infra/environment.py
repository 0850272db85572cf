from __future__ import annotations

from typing import Mapping

from ..core.domain.exceptions import EnvError


class OverlayEnvironment:
    """Variables layered over ``os.environ`` for child processes.

    The parent's own environment is left untouched.
    """

    def __init__(self) -> None:
        self._vars: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        # Same rejections os.putenv applies.
        if not key:
            raise EnvError(key, "empty variable name")
        if "=" in key:
            raise EnvError(key, "illegal '=' in variable name")
        if "\x00" in key or "\x00" in value:
            raise EnvError(key, "embedded null byte")
        self._vars[key] = value

    def overlay(self) -> Mapping[str, str]:
        return dict(self._vars)

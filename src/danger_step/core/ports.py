from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .domain.models import CommandResult, StreamMode


class ProcessRunnerPort(Protocol):
    """Port for running external commands.

    Implementations never raise for command failures; the failure kind is
    reported through ``CommandResult.error`` so callers can pick log wording.
    """

    def run(
        self,
        args: Sequence[str],
        *,
        mode: StreamMode = StreamMode.PASS_THROUGH,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        ...


class ProcessEnvironmentPort(Protocol):
    """Port for the environment overlay inherited by every child process."""

    def set(self, key: str, value: str) -> None:
        """Raises EnvError when the platform would reject the variable."""
        ...

    def overlay(self) -> Mapping[str, str]:
        ...


class LockfileReaderPort(Protocol):
    def read(self) -> Optional[str]:
        """Return lockfile content, or None when it cannot be read."""
        ...


class RubyInstallationPort(Protocol):
    """Port describing how the active Ruby was installed."""

    def needs_sudo(self) -> bool:
        """True when gem installs must be run through sudo."""
        ...

    def needs_rehash(self) -> bool:
        """True when rbenv shims must be refreshed after a gem install."""
        ...


class LoggerPort(Protocol):
    """Port for structured logging.

    Extra keyword arguments are attached to the record as structured fields.
    """

    def debug(self, message: str, **kwargs) -> None:
        ...

    def info(self, message: str, **kwargs) -> None:
        ...

    def warning(self, message: str, **kwargs) -> None:
        ...

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        ...

    def exception(self, message: str, **kwargs) -> None:
        ...

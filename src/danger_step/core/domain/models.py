from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .exceptions import CommandError


@dataclass(frozen=True)
class StepInputs:
    """Validated-once, read-only step configuration.

    Populated from the host-provided inputs at process start. Token fields are
    secrets and must never be logged in cleartext.
    """
    repository_url: str
    additional_options: str = ""

    github_api_token: str = field(default="", repr=False)
    github_host: str = ""
    github_api_base_url: str = ""

    gitlab_api_token: str = field(default="", repr=False)
    gitlab_host: str = ""
    gitlab_api_base_url: str = ""

    def with_repository_url(self, url: str) -> "StepInputs":
        return replace(self, repository_url=url)

    @property
    def secrets(self) -> list[str]:
        return [s for s in (self.github_api_token, self.gitlab_api_token) if s]


@dataclass(frozen=True)
class GemVersion:
    """Version pin for a gem, as read from a lockfile.

    ``found=False`` means no constraint: any installed version is acceptable.
    """
    version: str = ""
    found: bool = False


class StreamMode(str, Enum):
    PASS_THROUGH = "pass_through"  # child writes straight to our stdout/stderr
    CAPTURED = "captured"  # combined output buffered and returned


@dataclass
class CommandResult:
    """Outcome of one external process invocation."""
    args: list[str]
    returncode: int
    output: str = ""
    error: CommandError | None = None

    @property
    def success(self) -> bool:
        return self.error is None and self.returncode == 0


# Ordered, closed set of variables exported to child processes.
EnvironmentMap = dict[str, str]


MASK = "***"


def masked_inputs(inputs: StepInputs) -> dict[str, str]:
    """Field-name to display-value mapping with secrets replaced by ``***``."""
    secret_fields = {"github_api_token", "gitlab_api_token"}
    shown: dict[str, str] = {}
    for name in StepInputs.__dataclass_fields__:
        value = getattr(inputs, name)
        if name in secret_fields and value:
            value = MASK
        shown[name] = value
    return shown

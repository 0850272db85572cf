"""Domain exceptions for danger_step."""

from __future__ import annotations


class StepError(Exception):
    """Base class for every failure that aborts the step."""


class ConfigError(StepError):
    """Step inputs violate the configuration contract."""


class MissingRepositoryURLError(ConfigError):
    def __init__(self) -> None:
        super().__init__("repository_url is required but was empty")


class MissingCredentialsError(ConfigError):
    """Raised when neither a GitHub nor a GitLab token is configured."""

    def __init__(self) -> None:
        super().__init__(
            "None of the API tokens have been set. "
            "If you want to use GitHub you need to set github_api_token. "
            "If you want to use GitLab you need to set gitlab_api_token"
        )


class IncompleteEnterpriseConfigError(ConfigError):
    """Raised when only one of host / API base URL is set for a provider."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        key = provider.lower()
        super().__init__(
            f"If you want to use {provider} Enterprise you need to set both of "
            f"the {key}_host and the {key}_api_base_url"
        )


class VersionProbeError(StepError):
    """The installed review tool version could not be determined.

    Recoverable: callers fall back to leaving the repository URL untouched.
    """


class EnvError(StepError):
    """A variable could not be exported to the child process environment."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Failed to set env {key}, error: {reason}")


class CommandError(StepError):
    """An external command failed."""

    def __init__(self, args: list[str], message: str) -> None:
        self.command = list(args)
        super().__init__(message)


class SpawnError(CommandError):
    """The command could not be started (binary missing, no permission, ...)."""

    def __init__(self, args: list[str], cause: OSError) -> None:
        self.cause = cause
        super().__init__(args, f"failed to start {args[0]!r}: {cause}")


class NonZeroExitError(CommandError):
    """The command ran but exited with a failure status."""

    def __init__(self, args: list[str], returncode: int, output: str = "") -> None:
        self.returncode = returncode
        self.output = output
        super().__init__(args, f"exit status {returncode}")


class CommandTimeoutError(CommandError):
    def __init__(self, args: list[str], timeout: float) -> None:
        self.timeout = timeout
        super().__init__(args, f"timed out after {timeout}s")


class InstallError(StepError):
    """Installing the package manager failed.

    ``cause`` is the underlying :class:`CommandError` when a command failed;
    ``output`` holds the captured output of a failing ``gem list``
    check; streamed install steps leave it empty.
    """

    def __init__(self, message: str, cause: CommandError | None = None) -> None:
        self.cause = cause
        self.output = cause.output if isinstance(cause, NonZeroExitError) else ""
        super().__init__(message)

    @property
    def spawn_failed(self) -> bool:
        return isinstance(self.cause, SpawnError)


class ExecutionError(StepError):
    """One of the main pipeline commands failed."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message if cause is None else f"{message}, error: {cause}")

from __future__ import annotations

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.domain.models import StepInputs


APP_NAME = "danger_step"


class StepConfig(BaseSettings):
    """Step inputs as provided by the CI host.

    The host exports every input as an environment variable named after the
    input key (``repository_url``, ``github_api_token``, ...). Names are
    matched case-insensitively.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        case_sensitive=False,
    )

    repository_url: str = Field(description="URL of the repository Danger reports on")
    additional_options: str = Field(
        default="",
        description="Extra options for `danger`, split with shell quoting rules",
    )

    github_api_token: SecretStr = Field(default=SecretStr(""), description="GitHub API token")
    github_host: str = Field(default="", description="GitHub Enterprise host")
    github_api_base_url: str = Field(default="", description="GitHub Enterprise API base URL")

    gitlab_api_token: SecretStr = Field(default=SecretStr(""), description="GitLab API token")
    gitlab_host: str = Field(default="", description="Self-hosted GitLab host")
    gitlab_api_base_url: str = Field(default="", description="Self-hosted GitLab API base URL")

    def to_inputs(self) -> StepInputs:
        return StepInputs(
            repository_url=self.repository_url,
            additional_options=self.additional_options,
            github_api_token=self.github_api_token.get_secret_value(),
            github_host=self.github_host,
            github_api_base_url=self.github_api_base_url,
            gitlab_api_token=self.gitlab_api_token.get_secret_value(),
            gitlab_host=self.gitlab_host,
            gitlab_api_base_url=self.gitlab_api_base_url,
        )


class RuntimeConfig(BaseSettings):
    """Settings for the step itself rather than for Danger."""

    model_config = SettingsConfigDict(env_prefix="DANGER_STEP_", frozen=True, extra="ignore")

    gemfile_lock: Path = Field(
        default=Path("Gemfile.lock"),
        description="Lockfile that pins the Bundler version",
    )
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Path | None = Field(default=None, description="Optional JSON-lines log file")
    command_timeout: float | None = Field(
        default=None,
        description="Seconds before an external command is killed (unset = no limit)",
    )

    danger_bin: str = Field(default="danger", description="Danger executable")
    bundle_bin: str = Field(default="bundle", description="Bundler executable")
    gem_bin: str = Field(default="gem", description="RubyGems executable")


class AppConfig(BaseSettings):
    """Root application configuration.

    Step inputs are read from the unprefixed input variables; runtime
    settings use the DANGER_STEP_ prefix.

    Example env vars:
        # Required
        export repository_url=https://github.com/org/repo.git
        export github_api_token=ghp_xxxxxxxxxxxxx

        # Optional
        export additional_options="--fail-on-errors=true"
        export DANGER_STEP_GEMFILE_LOCK=Gemfile.lock
        export DANGER_STEP_LOG_LEVEL=DEBUG
        export DANGER_STEP_COMMAND_TIMEOUT=1800
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra="forbid",
    )

    step: StepConfig = Field(default_factory=StepConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

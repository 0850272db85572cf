from __future__ import annotations

from ..domain.models import EnvironmentMap, StepInputs
from ..ports import LoggerPort, ProcessEnvironmentPort


def build_environment_map(inputs: StepInputs) -> EnvironmentMap:
    """Map step inputs onto the variables Danger reads, omitting empty values."""
    candidates = [
        ("GIT_REPOSITORY_URL", inputs.repository_url),
        ("DANGER_GITHUB_API_TOKEN", inputs.github_api_token),
        ("DANGER_GITHUB_HOST", inputs.github_host),
        ("DANGER_GITHUB_API_BASE_URL", inputs.github_api_base_url),
        ("DANGER_GITLAB_API_TOKEN", inputs.gitlab_api_token),
        ("DANGER_GITLAB_HOST", inputs.gitlab_host),
        ("DANGER_GITLAB_API_BASE_URL", inputs.gitlab_api_base_url),
    ]
    return {key: value for key, value in candidates if value != ""}


class EnvironmentPublisher:
    """Exports step inputs to every subsequently spawned child process."""

    def __init__(self, *, environment: ProcessEnvironmentPort, logger: LoggerPort) -> None:
        self._environment = environment
        self._logger = logger

    def publish(self, inputs: StepInputs) -> EnvironmentMap:
        """Raises EnvError if a variable cannot be set."""
        env_map = build_environment_map(inputs)
        for key, value in env_map.items():
            self._environment.set(key, value)
        self._logger.debug("Exported environment", keys=list(env_map))
        return env_map

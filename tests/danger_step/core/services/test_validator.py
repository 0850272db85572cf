import pytest

from danger_step.core.domain.exceptions import (
    ConfigError,
    IncompleteEnterpriseConfigError,
    MissingCredentialsError,
    MissingRepositoryURLError,
)
from danger_step.core.domain.models import StepInputs
from danger_step.core.services import validate_inputs


def make(**kwargs) -> StepInputs:
    kwargs.setdefault("repository_url", "https://github.com/org/repo.git")
    return StepInputs(**kwargs)


def test_missing_credentials():
    with pytest.raises(MissingCredentialsError):
        validate_inputs(make(github_api_token="", gitlab_api_token=""))


def test_github_token_only_is_valid():
    validate_inputs(make(github_api_token="x"))


def test_gitlab_token_only_is_valid():
    validate_inputs(make(gitlab_api_token="x"))


def test_github_host_without_base_url():
    with pytest.raises(IncompleteEnterpriseConfigError) as exc:
        validate_inputs(make(github_api_token="x", github_host="h", github_api_base_url=""))
    assert exc.value.provider == "GitHub"


def test_github_base_url_without_host():
    with pytest.raises(IncompleteEnterpriseConfigError):
        validate_inputs(make(github_api_token="x", github_api_base_url="u"))


def test_github_enterprise_complete_is_valid():
    validate_inputs(make(github_api_token="x", github_host="h", github_api_base_url="u"))


def test_gitlab_checked_independently():
    with pytest.raises(IncompleteEnterpriseConfigError) as exc:
        validate_inputs(
            make(
                github_api_token="x",
                github_host="h",
                github_api_base_url="u",
                gitlab_host="gl.example.com",
            )
        )
    assert exc.value.provider == "GitLab"


def test_blank_repository_url():
    with pytest.raises(MissingRepositoryURLError):
        validate_inputs(make(repository_url="  ", github_api_token="x"))


def test_all_config_errors_share_base():
    with pytest.raises(ConfigError):
        validate_inputs(make())

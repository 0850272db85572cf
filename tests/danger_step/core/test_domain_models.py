import dataclasses

import pytest

from danger_step.core.domain.exceptions import (
    IncompleteEnterpriseConfigError,
    InstallError,
    NonZeroExitError,
    SpawnError,
)
from danger_step.core.domain.models import CommandResult, StepInputs, masked_inputs


def test_step_inputs_is_immutable():
    inputs = StepInputs(repository_url="https://example.com/repo.git")
    with pytest.raises(dataclasses.FrozenInstanceError):
        inputs.repository_url = "x"  # type: ignore[misc]


def test_with_repository_url_returns_copy():
    inputs = StepInputs(repository_url="https://example.com/repo.git", github_api_token="t")
    updated = inputs.with_repository_url("example.com/repo.git")

    assert updated.repository_url == "example.com/repo.git"
    assert updated.github_api_token == "t"
    assert inputs.repository_url == "https://example.com/repo.git"


def test_repr_hides_tokens():
    inputs = StepInputs(repository_url="u", github_api_token="ghp_secret", gitlab_api_token="glpat_secret")
    assert "ghp_secret" not in repr(inputs)
    assert "glpat_secret" not in repr(inputs)


def test_masked_inputs_masks_only_set_tokens():
    inputs = StepInputs(repository_url="u", github_api_token="ghp_secret")
    shown = masked_inputs(inputs)

    assert shown["github_api_token"] == "***"
    assert shown["gitlab_api_token"] == ""
    assert shown["repository_url"] == "u"
    assert list(shown)[0] == "repository_url"


def test_secrets_lists_non_empty_tokens():
    assert StepInputs(repository_url="u", gitlab_api_token="g").secrets == ["g"]


def test_command_result_success():
    assert CommandResult(args=["x"], returncode=0).success is True
    err = NonZeroExitError(["x"], 2)
    assert CommandResult(args=["x"], returncode=2, error=err).success is False


def test_install_error_distinguishes_failure_shapes():
    spawn = InstallError("boom", cause=SpawnError(["gem"], FileNotFoundError("gem")))
    exit_ = InstallError("boom", cause=NonZeroExitError(["gem"], 1, "ERROR: could not find"))

    assert spawn.spawn_failed is True
    assert spawn.output == ""
    assert exit_.spawn_failed is False
    assert exit_.output == "ERROR: could not find"


def test_enterprise_error_names_provider_keys():
    assert "gitlab_host" in str(IncompleteEnterpriseConfigError("GitLab"))
    assert "github_api_base_url" in str(IncompleteEnterpriseConfigError("GitHub"))

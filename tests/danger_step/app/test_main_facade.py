"""Tests for the library facade in danger_step.app.main."""
import pytest

import danger_step
from danger_step.app.config import AppConfig, RuntimeConfig, StepConfig
from danger_step.core.domain.exceptions import ExecutionError, MissingCredentialsError


def make_config(toolchain, **step) -> AppConfig:
    step.setdefault("repository_url", "https://github.com/org/repo.git")
    return AppConfig(
        step=StepConfig(**step),
        runtime=RuntimeConfig(
            danger_bin=str(toolchain.danger),
            gem_bin=str(toolchain.gem),
            bundle_bin=str(toolchain.bundle),
            gemfile_lock=toolchain.lockfile,
            log_level="WARNING",
        ),
    )


def test_run_returns_inputs_as_used(toolchain, monkeypatch):
    monkeypatch.setenv("FAKE_DANGER_VERSION", "8.0.0")

    used = danger_step.run(make_config(toolchain, github_api_token="t"))

    assert used.repository_url == "github.com/org/repo.git"
    assert toolchain.calls()[0] == "args: install"


def test_run_raises_config_error(toolchain):
    with pytest.raises(MissingCredentialsError):
        danger_step.run(make_config(toolchain))


def test_run_raises_execution_error(toolchain, monkeypatch):
    monkeypatch.setenv("FAKE_BUNDLE_FAIL_ON", "install")

    with pytest.raises(ExecutionError):
        danger_step.run(make_config(toolchain, gitlab_api_token="g"))


def test_show_config(toolchain):
    report = danger_step.show_config(make_config(toolchain, github_api_token="ghp_secret"))

    assert report["inputs"]["github_api_token"] == "***"
    assert report["error"] is None

from __future__ import annotations

from ..domain.exceptions import (
    IncompleteEnterpriseConfigError,
    MissingCredentialsError,
    MissingRepositoryURLError,
)
from ..domain.models import StepInputs


def _partially_set(host: str, api_base_url: str) -> bool:
    return bool(host) != bool(api_base_url)


def validate_inputs(inputs: StepInputs) -> None:
    """Check cross-field consistency of the step inputs.

    Raises:
        MissingRepositoryURLError: repository_url is blank
        MissingCredentialsError: neither GitHub nor GitLab token is set
        IncompleteEnterpriseConfigError: only one of host / api_base_url is set
            for a provider
    """
    if not inputs.repository_url.strip():
        raise MissingRepositoryURLError()

    if not inputs.github_api_token and not inputs.gitlab_api_token:
        raise MissingCredentialsError()

    if _partially_set(inputs.github_host, inputs.github_api_base_url):
        raise IncompleteEnterpriseConfigError("GitHub")

    if _partially_set(inputs.gitlab_host, inputs.gitlab_api_base_url):
        raise IncompleteEnterpriseConfigError("GitLab")

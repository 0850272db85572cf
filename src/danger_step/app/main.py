from __future__ import annotations

from .config import AppConfig
from .container import Container
from ..core.domain.models import StepInputs


def create_container(config: AppConfig | None = None) -> tuple[Container, StepInputs]:
    """Create and initialize a container.

    Args:
        config: Optional config. If None, loads from environment variables.

    Returns:
        Initialized container and the step inputs it was built for

    Raises:
        pydantic.ValidationError: If required inputs are missing
    """
    if config is None:
        config = AppConfig()

    inputs = config.step.to_inputs()

    container = Container()
    container.config.from_pydantic(config)
    container.secrets.override(tuple(inputs.secrets))
    container.init_resources()

    return container, inputs


def run(config: AppConfig | None = None) -> StepInputs:
    """Run the full step: bootstrap Bundler, install gems, run Danger.

    Args:
        config: Optional config for testing. If None, loads from env vars.

    Returns:
        The step inputs as used (repository URL possibly normalized)

    Raises:
        StepError: If any stage fails
    """
    container, inputs = create_container(config)
    try:
        uc = container.run_step_uc()
        return uc.execute(inputs=inputs)
    finally:
        container.shutdown_resources()


def show_config(config: AppConfig | None = None) -> dict[str, object]:
    """Describe parsed inputs (secrets masked) and what would be exported.

    Args:
        config: Optional config for testing. If None, loads from env vars.
    """
    container, inputs = create_container(config)
    try:
        uc = container.show_config_uc()
        return uc.execute(inputs=inputs)
    finally:
        container.shutdown_resources()

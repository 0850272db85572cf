from __future__ import annotations

from ..domain.exceptions import ConfigError
from ..domain.models import StepInputs, masked_inputs
from ..services import build_environment_map, validate_inputs


class ShowConfigUseCase:
    """Report parsed inputs and the environment they would export.

    Runs no external commands, so the repository URL is shown as configured.
    """

    def execute(self, *, inputs: StepInputs) -> dict[str, object]:
        error: str | None = None
        try:
            validate_inputs(inputs)
        except ConfigError as e:
            error = str(e)

        return {
            "inputs": masked_inputs(inputs),
            "exported": list(build_environment_map(inputs)),
            "error": error,
        }

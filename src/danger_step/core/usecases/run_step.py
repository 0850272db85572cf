from __future__ import annotations

from ..domain.models import StepInputs
from ..services import StepPipeline


class RunStepUseCase:
    """Use case for running the Danger step.

    Thin orchestration layer that delegates to StepPipeline.
    """

    def __init__(self, *, pipeline: StepPipeline) -> None:
        self._pipeline = pipeline

    def execute(self, *, inputs: StepInputs) -> StepInputs:
        return self._pipeline.run(inputs)

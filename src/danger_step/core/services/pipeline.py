from __future__ import annotations

import shlex
from typing import Optional

from ..domain.exceptions import ExecutionError
from ..domain.models import StepInputs, StreamMode, masked_inputs
from ..ports import LoggerPort, ProcessRunnerPort
from .dependency_resolver import DependencyResolver
from .environment_publisher import EnvironmentPublisher
from .url_normalizer import URLNormalizer
from .validator import validate_inputs


class StepPipeline:
    """Runs the step stages strictly in order.

    normalize URL -> validate -> publish env -> resolve Bundler ->
    bundle install -> bundle exec danger

    The first failing stage raises a StepError; nothing is rolled back.
    """

    def __init__(
        self,
        *,
        url_normalizer: URLNormalizer,
        publisher: EnvironmentPublisher,
        resolver: DependencyResolver,
        runner: ProcessRunnerPort,
        logger: LoggerPort,
        bundle_bin: str = "bundle",
        danger_bin: str = "danger",
        package_manager: str = "bundler",
        command_timeout: Optional[float] = None,
    ) -> None:
        self._url_normalizer = url_normalizer
        self._publisher = publisher
        self._resolver = resolver
        self._runner = runner
        self._logger = logger
        self._bundle_bin = bundle_bin
        self._danger_bin = danger_bin
        self._package_manager = package_manager
        self._timeout = command_timeout

    def run(self, inputs: StepInputs) -> StepInputs:
        """Execute every stage and return the inputs as actually used.

        Raises:
            ConfigError, EnvError, InstallError, ExecutionError
        """
        # 1) URL compatibility with the installed danger
        inputs = inputs.with_repository_url(self._url_normalizer.normalize(inputs.repository_url))
        self._log_inputs(inputs)

        # 2) Inputs
        validate_inputs(inputs)

        # 3) Environment for child processes
        self._publisher.publish(inputs)

        # 4) Bundler
        self._logger.info("Checking dependencies")
        self._resolver.ensure_installed(self._package_manager)

        # 5) Gemfile dependencies
        self._logger.info("Installing dependencies from your gem file")
        self._run_main([self._bundle_bin, "install"], f"Failed to run {self._bundle_bin} install")

        # 6) Danger
        self._logger.info("Running danger")
        try:
            options = shlex.split(inputs.additional_options)
        except ValueError as e:
            raise ExecutionError(
                f"Failed to shell-quote additional options ({inputs.additional_options})", cause=e
            ) from e
        self._run_main(
            [self._bundle_bin, "exec", self._danger_bin, *options],
            f"Failed to run {self._bundle_bin} exec {self._danger_bin}",
        )

        self._logger.info("Done")
        return inputs

    def _run_main(self, args: list[str], failure_message: str) -> None:
        result = self._runner.run(args, mode=StreamMode.PASS_THROUGH, timeout=self._timeout)
        if not result.success:
            raise ExecutionError(failure_message, cause=result.error)

    def _log_inputs(self, inputs: StepInputs) -> None:
        self._logger.info("Configs:")
        for name, value in masked_inputs(inputs).items():
            self._logger.info(f"- {name}: {value}")

from __future__ import annotations

from typing import Optional

from ..domain.exceptions import VersionProbeError
from ..domain.models import StreamMode
from ..domain.versions import parse_version, should_trim_scheme, trim_scheme
from ..ports import LoggerPort, ProcessRunnerPort


class URLNormalizer:
    """Adapts the repository URL to what the installed Danger expects.

    Danger releases before 8.0.5 want GIT_REPOSITORY_URL without the scheme.
    Every failure here is non-fatal: the URL is returned unchanged.
    """

    def __init__(
        self,
        *,
        runner: ProcessRunnerPort,
        logger: LoggerPort,
        danger_bin: str = "danger",
        timeout: Optional[float] = None,
    ) -> None:
        self._runner = runner
        self._logger = logger
        self._danger_bin = danger_bin
        self._timeout = timeout

    def probe_version(self) -> str:
        """Run ``danger --version`` and return its trimmed output.

        Raises:
            VersionProbeError: the command could not be run or failed
        """
        result = self._runner.run(
            [self._danger_bin, "--version"],
            mode=StreamMode.CAPTURED,
            timeout=self._timeout,
        )
        if not result.success:
            raise VersionProbeError(f"Could not determine danger version: {result.error}")
        return result.output

    def normalize(self, url: str) -> str:
        try:
            raw_version = self.probe_version()
        except VersionProbeError as e:
            self._logger.warning(str(e))
            return url

        self._logger.info(f"Found danger version: {raw_version}", danger_version=raw_version)

        if parse_version(raw_version) is None:
            self._logger.warning(f"Could not parse danger version: {raw_version!r}")
            return url

        if should_trim_scheme(raw_version):
            trimmed = trim_scheme(url)
            self._logger.debug("Trimmed repository URL scheme", url=trimmed)
            return trimmed
        return url

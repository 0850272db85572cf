from __future__ import annotations

from typing import Optional

from ..domain.exceptions import InstallError, SpawnError
from ..domain.gems import find_gem_in_list, install_gem_args, parse_bundler_version
from ..domain.models import GemVersion, StreamMode
from ..ports import LockfileReaderPort, LoggerPort, ProcessRunnerPort, RubyInstallationPort


class DependencyResolver:
    """Makes sure a gem (Bundler) is installed at the lockfile-pinned version.

    Follows an install-then-recheck pattern; there are no blind retries.
    """

    def __init__(
        self,
        *,
        runner: ProcessRunnerPort,
        lockfile: LockfileReaderPort,
        ruby: RubyInstallationPort,
        logger: LoggerPort,
        gem_bin: str = "gem",
        timeout: Optional[float] = None,
    ) -> None:
        self._runner = runner
        self._lockfile = lockfile
        self._ruby = ruby
        self._logger = logger
        self._gem_bin = gem_bin
        self._timeout = timeout

    def read_version_spec(self) -> GemVersion:
        """Read the pinned Bundler version; a missing lockfile means no pin."""
        content = self._lockfile.read()
        if content is None:
            self._logger.info("Using unspecified bundler version")
            return GemVersion()

        version = parse_bundler_version(content)
        if version.found:
            self._logger.info(f"Bundler version from lockfile: {version.version}", bundler_version=version.version)
        else:
            self._logger.info("Lockfile does not pin a bundler version")
        return version

    def is_installed(self, tool: str, version: GemVersion) -> bool:
        args = [self._gem_bin, "list"]
        result = self._runner.run(args, mode=StreamMode.CAPTURED, timeout=self._timeout)
        if not result.success:
            raise InstallError(f"Failed to check {tool}, error: {result.error}", cause=result.error)
        return find_gem_in_list(result.output, tool, version.version if version.found else "")

    def install_steps(self, tool: str, version: GemVersion) -> list[list[str]]:
        """Build the command sequence that installs ``tool``."""
        install = install_gem_args(self._gem_bin, tool, version)
        if self._ruby.needs_sudo():
            install = ["sudo"] + install

        steps = [install]
        if self._ruby.needs_rehash():
            steps.append(["rbenv", "rehash"])
        return steps

    def ensure_installed(self, tool: str = "bundler", version_spec: Optional[GemVersion] = None) -> bool:
        """Install ``tool`` unless it is already present.

        Args:
            tool: Gem name
            version_spec: Version pin; read from the lockfile when omitted

        Returns:
            True if an install was performed, False if it was already installed

        Raises:
            InstallError: the check or any install step failed
        """
        version = version_spec if version_spec is not None else self.read_version_spec()

        if self.is_installed(tool, version):
            self._logger.info(f"{tool} installed")
            return False

        self._logger.warning(f"{tool} is not installed")
        self._logger.info(f"Installing {tool}")

        for args in self.install_steps(tool, version):
            result = self._runner.run(args, mode=StreamMode.PASS_THROUGH, timeout=self._timeout)
            if result.success:
                continue

            if isinstance(result.error, SpawnError):
                raise InstallError(f"Failed to run {args[0]}, error: {result.error}", cause=result.error)
            raise InstallError(f"Command failed, error: {result.error}", cause=result.error)

        if not self.is_installed(tool, version):
            raise InstallError(f"{tool} is still not installed after running the install command")

        self._logger.info(f"{tool} installed")
        return True

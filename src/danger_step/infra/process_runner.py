"""External command runner with streaming modes and timeout handling."""

from __future__ import annotations

import os
import shlex
import subprocess
from typing import Optional, Sequence

from ..core.domain.exceptions import CommandTimeoutError, NonZeroExitError, SpawnError
from ..core.domain.models import CommandResult, StreamMode
from ..core.ports import LoggerPort, ProcessEnvironmentPort


class SubprocessRunner:
    """Runs commands with ``subprocess.run``.

    Every child gets ``os.environ`` merged with the published overlay. Failures
    are returned in ``CommandResult.error``, never raised.
    """

    def __init__(self, *, environment: ProcessEnvironmentPort, logger: LoggerPort) -> None:
        self._environment = environment
        self._logger = logger

    def child_env(self) -> dict[str, str]:
        env = dict(os.environ)
        env.update(self._environment.overlay())
        return env

    def run(
        self,
        args: Sequence[str],
        *,
        mode: StreamMode = StreamMode.PASS_THROUGH,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        """Run a command and report how it ended.

        Args:
            args: Program and arguments
            mode: PASS_THROUGH streams to our stdout/stderr, CAPTURED buffers
                combined output and returns it trimmed
            timeout: Seconds before the child is killed (None = wait forever)

        Returns:
            CommandResult; ``error`` is a SpawnError, NonZeroExitError or
            CommandTimeoutError on failure
        """
        args = [str(a) for a in args]
        self._logger.info(f"$ {shlex.join(args)}", command=args)

        captured = mode is StreamMode.CAPTURED
        try:
            proc = subprocess.run(
                args,
                env=self.child_env(),
                stdout=subprocess.PIPE if captured else None,
                stderr=subprocess.STDOUT if captured else None,
                text=True,
                errors="replace",
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            output = _decode(e.output).strip() if captured else ""
            return CommandResult(
                args=args,
                returncode=-1,
                output=output,
                error=CommandTimeoutError(args, timeout or 0),
            )
        except OSError as e:
            return CommandResult(args=args, returncode=-1, error=SpawnError(args, e))

        output = (proc.stdout or "").strip() if captured else ""
        if proc.returncode != 0:
            return CommandResult(
                args=args,
                returncode=proc.returncode,
                output=output,
                error=NonZeroExitError(args, proc.returncode, output),
            )
        return CommandResult(args=args, returncode=0, output=output)


def _decode(data: bytes | str | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data

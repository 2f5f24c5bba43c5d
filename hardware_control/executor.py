"""External command executor."""

import asyncio
import sys
from datetime import datetime
from typing import Optional, Sequence, Set

from hardware_control.domain.errors import CommandTimeout, ExecutionError
from hardware_control.domain.models import ExternalCommand


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)


async def _spawn(command: ExternalCommand):
    """Start the process for ``command`` with pipes matching its options."""
    detached = not command.wait_for_exit
    return await asyncio.create_subprocess_exec(
        *command.argv(),
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE if command.capture_output else asyncio.subprocess.DEVNULL,
        stderr=asyncio.subprocess.DEVNULL if detached else asyncio.subprocess.PIPE,
        start_new_session=detached,
    )


class CommandExecutor:
    """Runs ExternalCommands through asyncio subprocesses.

    Every failure (missing program, non-zero exit, timeout) is raised as
    ExecutionError so callers can turn it into a failure message.
    """

    def __init__(self, timeout: Optional[float] = 30.0, log_commands: bool = False):
        self.timeout = timeout
        self.log_commands = log_commands
        self._reapers: Set[asyncio.Task] = set()

    async def run(self, command: ExternalCommand) -> str:
        """Run one command and return its stripped stdout ("" unless captured)."""
        if self.log_commands:
            _log(f"exec: {command}")

        try:
            proc = await _spawn(command)
        except OSError as e:
            raise ExecutionError(
                f"cannot launch {command.program!r}: {e.strerror or e}",
                command=str(command),
            ) from e

        if not command.wait_for_exit:
            self._reap_later(proc)
            return ""

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            try:
                proc.kill()
            except ProcessLookupError:
                pass  # exited between the timeout and the kill
            await proc.wait()
            raise CommandTimeout(str(command), self.timeout)

        out_text = (stdout or b"").decode("utf-8", errors="replace").strip()
        if proc.returncode != 0:
            err_text = (stderr or b"").decode("utf-8", errors="replace").strip() or out_text
            message = f"{command.program} exited with code {proc.returncode}"
            if err_text:
                message = f"{message}: {err_text}"
            raise ExecutionError(
                message,
                command=str(command),
                returncode=proc.returncode,
            )
        return out_text if command.capture_output else ""

    async def run_chain(self, commands: Sequence[ExternalCommand]) -> str:
        """Try each command in order; return the first success.

        A command is only attempted after the previous one failed. If all
        fail, the last error is re-raised.
        """
        if not commands:
            raise ExecutionError("no command to run")

        last_error: Optional[ExecutionError] = None
        for command in commands:
            try:
                return await self.run(command)
            except ExecutionError as e:
                if self.log_commands:
                    _log(f"failed: {e}")
                last_error = e
        raise last_error

    def _reap_later(self, proc):
        """Collect a detached child's exit status without blocking the caller."""
        task = asyncio.ensure_future(proc.wait())
        self._reapers.add(task)
        task.add_done_callback(self._reapers.discard)

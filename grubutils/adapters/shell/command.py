"""
Foreground command adapter — launch a program and wait for it.

This is the only place grubutils calls ``subprocess``. The child
inherits stdin, stdout and stderr so interactive programs (editors,
sudo password prompts) work as if started from the shell. Nothing is
captured and there is no timeout.
"""

from __future__ import annotations

import logging
import signal
import subprocess
import time

from grubutils.adapters.base import Adapter, ExecutionContext
from grubutils.core.models.action import Receipt

logger = logging.getLogger(__name__)


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


class ForegroundCommandAdapter(Adapter):
    """Run an action's argv as a blocking foreground child process.

    Receipt mapping:
        exits with code N      -> ok, return_code=N
        killed by a signal     -> ok, return_code=None
        cannot be started      -> failed, error=<OS error text>
        context.dry_run        -> skipped
    """

    @property
    def name(self) -> str:
        return "process"

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        command = action.command_line()

        if context.dry_run:
            return Receipt.skip(
                adapter=self.name,
                action_id=action.id,
                reason=f"[dry-run] {command}",
                metadata={"command": command, "dry_run": True},
            )

        if not action.argv:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error="Empty command",
            )

        logger.debug("Executing: %s", command)
        start = time.monotonic()

        try:
            result = subprocess.run(action.argv, env=context.env, check=False)
        except (OSError, ValueError) as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=str(e),
                metadata={"command": command},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        metadata: dict[str, object] = {"command": command}

        return_code: int | None = result.returncode
        if result.returncode < 0:
            # POSIX reports death-by-signal as a negative return code
            metadata["signal"] = _signal_name(-result.returncode)
            return_code = None

        logger.info(
            "%s finished in %dms (return code %s)",
            action.program,
            elapsed_ms,
            return_code,
        )
        return Receipt.success(
            adapter=self.name,
            action_id=action.id,
            return_code=return_code,
            duration_ms=elapsed_ms,
            metadata=metadata,
        )

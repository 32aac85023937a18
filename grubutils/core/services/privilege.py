"""
Privilege service — root check and self re-execution under sudo.

grubutils never elevates in-process. When it is not running as root it
runs ``<elevation-tool> -E <self> <original args...>``, waits for that
child and exits with the child's code. The environment is kept (``-E``)
so ``EDITOR`` and the ``GRUBUTILS_*`` variables reach the elevated run.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from grubutils.adapters.base import Adapter, ExecutionContext
from grubutils.core.context import ROOT_UID, Host
from grubutils.core.errors import LaunchError
from grubutils.core.models.action import Action

logger = logging.getLogger(__name__)

# Exit code when the elevated child left no exit status (killed by a signal)
ELEVATION_FALLBACK_CODE = 1

PRESERVE_ENV_FLAG = "-E"


def check_privilege(host: Host) -> bool:
    """Whether the process runs with the superuser's effective uid."""
    return host.geteuid() == ROOT_UID


def build_elevation_action(host: Host, tool: str) -> Action:
    """The action that re-runs this program, with its original arguments, as root."""
    return Action(
        id="elevate",
        name=tool,
        argv=[tool, PRESERVE_ENV_FLAG, *host.self_command, *host.args],
    )


def elevate_and_reexec(host: Host, adapter: Adapter, tool: str) -> NoReturn:
    """Re-run this program under ``tool`` and exit with the child's status.

    Raises:
        LaunchError: ``tool`` could not be started.
        SystemExit: always, otherwise, carrying the child's exit code
            (``ELEVATION_FALLBACK_CODE`` when it has none).
    """
    action = build_elevation_action(host, tool)
    logger.debug("Re-executing with elevated privileges: %s", action.command_line())

    receipt = adapter.execute(ExecutionContext(action=action, env=dict(host.environ)))
    if receipt.failed:
        raise LaunchError(action.command_line(), receipt.error or "unknown error")

    code = receipt.exit_code(ELEVATION_FALLBACK_CODE)
    logger.info("Elevated run exited with code %d", code)
    raise SystemExit(code)

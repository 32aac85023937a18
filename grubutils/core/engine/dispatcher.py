"""
Command dispatcher — turns an InvocationRequest into program launches.

Flow for one run:

    check_privilege ──no──▶ elevate_and_reexec  (exits with the child's code)
          │ yes
          ▼
    dispatch ──edit──────▶ run_edit ──(unless --no-generate)──▶ run_generate
             └─generate──▶ run_generate

Every launch goes through ``_launch``: the adapter runs the program in
the foreground and returns a Receipt. A program that cannot be started
raises LaunchError; a nonzero exit is only reported.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import PurePath
from typing import NoReturn

from grubutils.adapters.base import Adapter, ExecutionContext
from grubutils.core.context import Host
from grubutils.core.errors import LaunchError
from grubutils.core.models.action import Action, Receipt
from grubutils.core.models.invocation import InvocationRequest
from grubutils.core.models.settings import Settings
from grubutils.core.services.editor import resolve_editor
from grubutils.core.services.privilege import check_privilege, elevate_and_reexec

logger = logging.getLogger(__name__)

# Printed in place of an exit code when the child left none
UNAVAILABLE_EXIT_CODE = -127


class Dispatcher:
    """Runs the edit and generate steps against injected collaborators.

    Args:
        host: Process facts (uid, environment, argv).
        adapter: Launches programs; ForegroundCommandAdapter in production.
        settings: Defaults and tool names.
        echo: Sink for user-facing progress lines.
        dry_run: Report the commands instead of launching them.
    """

    def __init__(
        self,
        host: Host,
        adapter: Adapter,
        echo: Callable[[str], None],
        settings: Settings | None = None,
        dry_run: bool = False,
    ):
        self.host = host
        self.adapter = adapter
        self.settings = settings or Settings()
        self.echo = echo
        self.dry_run = dry_run

    # ── Privilege ───────────────────────────────────────────────

    def check_privilege(self) -> bool:
        return check_privilege(self.host)

    def elevate_and_reexec(self) -> NoReturn:
        elevate_and_reexec(self.host, self.adapter, self.settings.elevation_tool)

    # ── Commands ────────────────────────────────────────────────

    def resolve_editor(self, explicit: str | None) -> str:
        return resolve_editor(explicit, self.host.environ, self.settings)

    def dispatch(self, request: InvocationRequest) -> None:
        """Run the operation selected on the command line."""
        logger.debug("Dispatching %s", request)
        if request.command == "edit":
            self.run_edit(
                no_generate=request.no_generate,
                file=request.file,
                output=request.output,
                editor=request.editor,
            )
        else:
            self.run_generate(output=request.output)

    def run_edit(
        self,
        no_generate: bool = False,
        file: str | None = None,
        output: str | None = None,
        editor: str | None = None,
    ) -> None:
        """Open the grub defaults file in an editor, then regenerate unless told not to.

        The editor's exit code does not gate regeneration.
        """
        path = file if file is not None else self.settings.default_file
        self.echo(f"Using grub file: {path}")

        true_editor = self.resolve_editor(editor)
        self.echo(f"Using editor: {true_editor}")

        self._launch(Action(id="edit", name="Editor", argv=[true_editor, path]))

        if not no_generate:
            self.run_generate(output)

    def run_generate(self, output: str | None = None) -> None:
        """Regenerate the grub configuration into ``output``."""
        outfile = output if output is not None else self.settings.default_output
        tool = self.settings.generator_tool
        self._launch(
            Action(
                id="generate",
                name=PurePath(tool).name,
                argv=[tool, "-o", outfile],
            )
        )

    # ── Internal ────────────────────────────────────────────────

    def _launch(self, action: Action) -> Receipt:
        context = ExecutionContext(action=action, dry_run=self.dry_run)
        receipt = self.adapter.execute(context)

        if receipt.failed:
            raise LaunchError(action.command_line(), receipt.error or "unknown error")

        if receipt.skipped:
            self.echo(receipt.output or f"[dry-run] {action.command_line()}")
            return receipt

        code = receipt.exit_code(UNAVAILABLE_EXIT_CODE)
        if receipt.return_code is None:
            logger.warning(
                "%s terminated without an exit code (%s)",
                action.label,
                receipt.metadata.get("signal", "signal"),
            )
        self.echo(f"{action.label} exited with code {code}")
        return receipt

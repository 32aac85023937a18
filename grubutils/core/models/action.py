"""
Action and Receipt models — the execution contract.

Actions describe an external program to launch. Receipts describe how
that launch went. Adapters take Actions and hand back Receipts, never
exceptions: a program that could not be started at all is a failed
Receipt, a program that ran and exited nonzero is still an ok one.
"""

from __future__ import annotations

import shlex
from typing import Any, Literal

from pydantic import BaseModel, Field


class Action(BaseModel):
    """An external program to run in the foreground.

    ``argv[0]`` is the program, the rest are its arguments. No shell is
    involved, so paths with spaces are passed through untouched.
    """

    id: str                         # step identifier ("edit", "generate", "elevate")
    name: str = ""                  # label used in "<name> exited with code N"
    argv: list[str] = Field(default_factory=list)

    @property
    def program(self) -> str:
        return self.argv[0] if self.argv else ""

    @property
    def label(self) -> str:
        return self.name or self.program

    def command_line(self) -> str:
        """The command as a copy-pasteable shell string (for display only)."""
        return shlex.join(self.argv)


class Receipt(BaseModel):
    """Result of launching an action.

    ``status`` reflects whether the program could be launched, not its
    exit code:

        ok      — launched and waited for; ``return_code`` is its exit
                  code, or None when it died from a signal
        failed  — could not be launched; ``error`` says why
        skipped — not launched (dry run)
    """

    adapter: str
    action_id: str
    status: Literal["ok", "skipped", "failed"] = "ok"

    duration_ms: int = 0

    return_code: int | None = None
    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the program was launched and ran to completion."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the program could not be launched."""
        return self.status == "failed"

    @property
    def skipped(self) -> bool:
        return self.status == "skipped"

    def exit_code(self, fallback: int) -> int:
        """The child's exit code, or ``fallback`` when none is available."""
        return self.return_code if self.return_code is not None else fallback

    @classmethod
    def success(
        cls,
        adapter: str,
        action_id: str,
        return_code: int | None = 0,
        **kwargs: Any,
    ) -> Receipt:
        """Create a receipt for a program that ran to completion."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="ok",
            return_code=return_code,
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        adapter: str,
        action_id: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a receipt for a program that could not be launched."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="failed",
            error=error,
            **kwargs,
        )

    @classmethod
    def skip(
        cls,
        adapter: str,
        action_id: str,
        reason: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a skip receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="skipped",
            output=reason,
            **kwargs,
        )

"""
Mock adapter — recording test double for the foreground adapter.

Never launches anything. By default every action "exits" with code 0;
individual actions can be configured to exit with another code, to die
from a signal, or to fail to launch.
"""

from __future__ import annotations

from grubutils.adapters.base import Adapter, ExecutionContext
from grubutils.core.models.action import Receipt


class MockAdapter(Adapter):
    """Universal mock adapter for testing.

    Responses are keyed by action ID ("edit", "generate", "elevate").
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        default_return_code: int = 0,
    ):
        self._name = adapter_name
        self._default_return_code = default_return_code
        self._responses: dict[str, Receipt] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    @property
    def commands(self) -> list[list[str]]:
        """The argv of every action received, in call order."""
        return [ctx.action.argv for ctx in self._call_log]

    @property
    def action_ids(self) -> list[str]:
        return [ctx.action.id for ctx in self._call_log]

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        """Set a custom response for a specific action ID."""
        self._responses[action_id] = receipt

    def set_return_code(self, action_id: str, return_code: int | None) -> None:
        """Make an action exit with ``return_code`` (None = killed by a signal)."""
        self._responses[action_id] = Receipt.success(
            adapter=self._name,
            action_id=action_id,
            return_code=return_code,
        )

    def set_launch_failure(
        self,
        action_id: str,
        error: str = "[Errno 2] No such file or directory",
    ) -> None:
        """Make an action fail to launch."""
        self._responses[action_id] = Receipt.failure(
            adapter=self._name,
            action_id=action_id,
            error=error,
        )

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)

        if context.dry_run:
            return Receipt.skip(
                adapter=self._name,
                action_id=context.action.id,
                reason=f"[dry-run] {context.action.command_line()}",
            )

        if context.action.id in self._responses:
            return self._responses[context.action.id]

        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            return_code=self._default_return_code,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        """Clear call log and custom responses."""
        self._call_log.clear()
        self._responses.clear()

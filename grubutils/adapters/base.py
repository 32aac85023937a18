"""
Adapter base — the protocol contract between the dispatcher and programs.

The dispatcher never calls ``subprocess`` itself. It hands an Action to
an adapter and gets a Receipt back, which keeps the editor, the
generator and the elevation tool on exactly the same code path and lets
tests swap in a recording double.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from grubutils.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to launch an action.

    ``env`` is the environment handed to the child; None means inherit
    the current process environment unchanged.
    """

    action: Action
    dry_run: bool = False
    env: dict[str, str] | None = None


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters launch external programs and return receipts.
    They NEVER raise exceptions — launch failures are captured in the
    Receipt with status='failed'.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'process', 'mock')."""

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Launch the action, wait for it, and return a receipt.

        MUST never raise exceptions.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

"""
Invocation request — what the user asked for on the command line.

Built once by the CLI after argument parsing and never mutated.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class InvocationRequest(BaseModel):
    """A parsed ``edit`` or ``generate`` invocation.

    Path fields are None when the option was not given; the dispatcher
    substitutes the configured defaults.
    """

    model_config = ConfigDict(frozen=True)

    command: Literal["edit", "generate"]
    file: str | None = None
    output: str | None = None
    editor: str | None = None
    no_generate: bool = False

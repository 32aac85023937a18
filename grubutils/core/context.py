"""
Host context — the process facts the dispatcher depends on.

Everything grubutils reads from the running process goes through a
``Host``: the effective uid, the environment, the command line and the
command that re-runs this program. ``Host.from_system()`` is used by the
real entry point; tests build a Host with fixed values instead.
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

ROOT_UID = 0


def self_command(argv0: str, executable: str | None = None) -> list[str]:
    """Build the command that re-runs the current program.

    A console script or other executable is re-run by its absolute path.
    When started as ``python -m grubutils`` (argv[0] is a ``.py`` file),
    the interpreter is re-run with ``-m grubutils``.
    """
    if Path(argv0).suffix == ".py":
        return [executable or sys.executable, "-m", "grubutils"]
    found = shutil.which(argv0) if os.sep not in argv0 else None
    return [os.path.abspath(found or argv0)]


@dataclass(frozen=True)
class Host:
    """Facts about the current process.

    Attributes:
        geteuid: Returns the effective user id.
        environ: Environment variables visible to the program.
        argv: The full command line, program name first.
        self_command: Command prefix that re-runs this program.
    """

    geteuid: Callable[[], int] = os.geteuid
    environ: Mapping[str, str] = field(default_factory=dict)
    argv: Sequence[str] = ("grubutils",)
    self_command: Sequence[str] = ("grubutils",)

    @classmethod
    def from_system(cls, argv: Sequence[str] | None = None) -> Host:
        """Capture the real process: ``os.geteuid``, ``os.environ`` and ``sys.argv``."""
        argv = list(argv if argv is not None else sys.argv)
        return cls(
            geteuid=os.geteuid,
            environ=os.environ,
            argv=argv,
            self_command=self_command(argv[0] if argv else "grubutils"),
        )

    @property
    def args(self) -> list[str]:
        """Command-line arguments without the program name."""
        return list(self.argv[1:])

    def getenv(self, name: str) -> str | None:
        return self.environ.get(name)

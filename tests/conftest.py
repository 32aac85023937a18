"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from grubutils.adapters.mock import MockAdapter
from grubutils.core.config.loader import CONFIG_ENV_VAR
from grubutils.core.context import Host


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def empty_config(tmp_path: Path) -> Path:
    """An empty grubutils.yml, so tests never read /etc/grubutils.yml."""
    path = tmp_path / "grubutils.yml"
    path.write_text("")
    return path


@pytest.fixture
def mock_adapter() -> MockAdapter:
    return MockAdapter()


@pytest.fixture
def make_host(empty_config: Path):
    """Build a Host with a fixed uid, environment and command line."""

    def _make(
        uid: int = 0,
        args: list[str] | None = None,
        env: dict[str, str] | None = None,
    ) -> Host:
        environ = {CONFIG_ENV_VAR: str(empty_config)}
        environ.update(env or {})
        return Host(
            geteuid=lambda: uid,
            environ=environ,
            argv=["grubutils", *(args or [])],
            self_command=["/usr/local/bin/grubutils"],
        )

    return _make


@pytest.fixture
def root_host(make_host) -> Host:
    return make_host(uid=0)


@pytest.fixture
def user_host(make_host) -> Host:
    return make_host(uid=1000)

"""Editor lookup: ``--editor`` argument, then ``$EDITOR``, then the configured default."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from grubutils.core.models.settings import Settings

logger = logging.getLogger(__name__)


def resolve_editor(
    explicit: str | None,
    environ: Mapping[str, str],
    settings: Settings | None = None,
) -> str:
    """Pick the editor program to launch.

    Empty strings count as absent at both the argument and the
    environment level.
    """
    settings = settings or Settings()

    if explicit:
        logger.debug("Editor from --editor: %s", explicit)
        return explicit

    from_env = environ.get(settings.editor_env_var, "")
    if from_env:
        logger.debug("Editor from $%s: %s", settings.editor_env_var, from_env)
        return from_env

    logger.debug("Editor from default: %s", settings.default_editor)
    return settings.default_editor

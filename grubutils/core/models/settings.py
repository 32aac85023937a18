"""
Settings model — defaults and external tool names.

Every field has a built-in default, so an empty or missing config file
gives the stock behaviour. A config file only moves the defaults; the
editor lookup order (argument, then environment, then default) is fixed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FILE = "/etc/default/grub"
DEFAULT_OUTPUT = "/boot/grub/grub.cfg"
DEFAULT_EDITOR = "/usr/bin/nano"
DEFAULT_EDITOR_ENV_VAR = "EDITOR"
DEFAULT_ELEVATION_TOOL = "sudo"
DEFAULT_GENERATOR_TOOL = "grub-mkconfig"


class Settings(BaseModel):
    """Resolved runtime settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_file: str = Field(default=DEFAULT_FILE, min_length=1)
    default_output: str = Field(default=DEFAULT_OUTPUT, min_length=1)
    default_editor: str = Field(default=DEFAULT_EDITOR, min_length=1)
    editor_env_var: str = Field(default=DEFAULT_EDITOR_ENV_VAR, min_length=1)
    elevation_tool: str = Field(default=DEFAULT_ELEVATION_TOOL, min_length=1)
    generator_tool: str = Field(default=DEFAULT_GENERATOR_TOOL, min_length=1)

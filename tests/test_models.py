"""
Tests for domain models — actions, receipts, invocation requests, settings.
"""

import pytest
from pydantic import ValidationError

from grubutils.core.models import Action, InvocationRequest, Receipt, Settings


class TestAction:
    def test_program_and_label(self):
        action = Action(id="generate", name="grub-mkconfig", argv=["grub-mkconfig", "-o", "/tmp/x"])
        assert action.program == "grub-mkconfig"
        assert action.label == "grub-mkconfig"

    def test_label_falls_back_to_program(self):
        action = Action(id="edit", argv=["/usr/bin/vim", "/etc/default/grub"])
        assert action.label == "/usr/bin/vim"

    def test_command_line_quotes_spaces(self):
        action = Action(id="edit", argv=["nano", "/tmp/my grub"])
        assert action.command_line() == "nano '/tmp/my grub'"

    def test_empty_argv(self):
        action = Action(id="edit")
        assert action.program == ""
        assert action.command_line() == ""


class TestReceipt:
    def test_success(self):
        r = Receipt.success(adapter="process", action_id="edit", return_code=3)
        assert r.ok
        assert not r.failed
        assert r.return_code == 3

    def test_nonzero_exit_is_still_ok(self):
        r = Receipt.success(adapter="process", action_id="edit", return_code=1)
        assert r.ok

    def test_failure(self):
        r = Receipt.failure(adapter="process", action_id="edit", error="not found")
        assert r.failed
        assert r.error == "not found"

    def test_skip(self):
        r = Receipt.skip(adapter="process", action_id="edit", reason="[dry-run] nano x")
        assert r.skipped
        assert r.output == "[dry-run] nano x"

    def test_exit_code_present(self):
        r = Receipt.success(adapter="process", action_id="edit", return_code=0)
        assert r.exit_code(-127) == 0

    def test_exit_code_fallback(self):
        r = Receipt.success(adapter="process", action_id="edit", return_code=None)
        assert r.exit_code(-127) == -127
        assert r.exit_code(1) == 1


class TestInvocationRequest:
    def test_defaults(self):
        req = InvocationRequest(command="edit")
        assert req.file is None
        assert req.output is None
        assert req.editor is None
        assert req.no_generate is False

    def test_frozen(self):
        req = InvocationRequest(command="generate")
        with pytest.raises(ValidationError):
            req.output = "/tmp/grub.cfg"

    def test_unknown_command_rejected(self):
        with pytest.raises(ValidationError):
            InvocationRequest(command="install")


class TestSettings:
    def test_builtin_defaults(self):
        s = Settings()
        assert s.default_file == "/etc/default/grub"
        assert s.default_output == "/boot/grub/grub.cfg"
        assert s.default_editor == "/usr/bin/nano"
        assert s.editor_env_var == "EDITOR"
        assert s.elevation_tool == "sudo"
        assert s.generator_tool == "grub-mkconfig"

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            Settings.model_validate({"colour": "red"})

    def test_empty_value_rejected(self):
        with pytest.raises(ValidationError):
            Settings(generator_tool="")

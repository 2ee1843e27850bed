"""Tests for command selection by verb."""

import pytest

from credential_sapiens.commands import (
    EraseCommand,
    GetCommand,
    StoreCommand,
    create_commands,
    select_command,
)
from credential_sapiens.enums import CommandVerb
from credential_sapiens.exceptions import UnknownCommandError


class TestSelectCommand:
    """Test verb dispatch across the command family."""

    @pytest.fixture
    def commands(self, registry):
        return create_commands(registry)

    @pytest.mark.parametrize(
        ("args", "expected_type"),
        [
            (["get"], GetCommand),
            (["STORE"], StoreCommand),
            (["Erase"], EraseCommand),
        ],
    )
    def test_selects_matching_command(self, commands, args, expected_type):
        """Each verb maps to exactly one command."""
        assert isinstance(select_command(commands, args), expected_type)

    def test_commands_share_registry(self, commands, registry):
        """All commands resolve providers through the same registry."""
        assert all(command.registry is registry for command in commands)

    def test_unknown_verb_raises(self, commands):
        """Unrecognized verbs are reported with the verb."""
        with pytest.raises(UnknownCommandError) as exc_info:
            select_command(commands, ["approve"])

        assert exc_info.value.verb == "approve"
        assert "Unknown command: approve" in str(exc_info.value)

    @pytest.mark.parametrize("args", [None, []])
    def test_missing_verb_raises(self, commands, args):
        """No tokens means no command."""
        with pytest.raises(UnknownCommandError, match="No command given"):
            select_command(commands, args)


class TestCommandVerb:
    """Test CommandVerb matching."""

    def test_matches_case_insensitively(self):
        assert CommandVerb.ERASE.matches("eRaSe")

    @pytest.mark.parametrize("token", [None, "", "erased", " erase"])
    def test_rejects_other_tokens(self, token):
        assert not CommandVerb.ERASE.matches(token)

    def test_str_is_value(self):
        assert str(CommandVerb.GET) == "get"

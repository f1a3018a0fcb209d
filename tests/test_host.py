"""Tests for host adapters."""

from unittest.mock import patch

import pytest

from envswitch.host import ConsoleHost, Host, PickItem


class TestHostInterface:
    """Test the host interface contract."""

    def test_incomplete_host_cannot_be_created(self):
        class MessagesOnlyHost(Host):
            def show_info(self, message):
                pass

            def show_error(self, message, suggestions=None):
                pass

        with pytest.raises(TypeError):
            MessagesOnlyHost()

    def test_host_itself_is_abstract(self):
        with pytest.raises(TypeError):
            Host()

    def test_console_host_is_complete(self):
        assert isinstance(ConsoleHost(), Host)


class TestConsoleHost:
    """Test the click console host."""

    def setup_method(self):
        self.host = ConsoleHost()

    def test_show_error_with_suggestions(self):
        with patch("click.echo") as mock_echo:
            self.host.show_error("Switch failed: unknown environment 'qa'", suggestions=["Available: dev, prod"])

        lines = [call.args[0] for call in mock_echo.call_args_list]
        assert lines == ["✗ Switch failed: unknown environment 'qa'", "  • Available: dev, prod"]

    def test_pick_by_number(self):
        items = [PickItem(".env.dev", "Activate this environment"), PickItem(".env.prod")]

        with patch("click.echo"), patch("click.prompt", return_value="2"):
            assert self.host.pick(items, "Select") is items[1]

    def test_pick_cancelled(self):
        with patch("click.echo"), patch("click.prompt", return_value="q"):
            assert self.host.pick([PickItem(".env.dev")], "Select") is None

"""Tests for the blocking prompt helper."""

from unittest.mock import Mock

from task_clock.console import ask


class TestAsk:
    def test_strips_answer(self):
        con = Mock()
        con.input.return_value = "  Design  \n"
        assert ask("What? ", con) == "Design"
        con.input.assert_called_once_with("What? ")

    def test_eof_is_empty(self):
        con = Mock()
        con.input.side_effect = EOFError
        assert ask("What? ", con) == ""

    def test_os_error_is_empty(self):
        con = Mock()
        con.input.side_effect = OSError("bad fd")
        assert ask("What? ", con) == ""

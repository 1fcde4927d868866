"""Tests for the command-line entry point."""

from datetime import timedelta
from unittest.mock import Mock, patch

import pytest

from task_clock.cli import DEFAULT_PROJECT, build_parser, main
from task_clock.timer import SessionResult, TaskEntry


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.project == DEFAULT_PROJECT == "League"
        assert args.log_dir is None
        assert args.tick == 1.0
        assert args.no_color is False

    def test_options(self):
        args = build_parser().parse_args(
            ["--project", "Work", "--log-dir", "/tmp/logs", "--tick", "0.5", "--no-color"]
        )
        assert args.project == "Work"
        assert args.log_dir == "/tmp/logs"
        assert args.tick == 0.5
        assert args.no_color is True

    @pytest.mark.parametrize("tick", ["0", "-1", "soon"])
    def test_tick_must_be_positive(self, tick):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--tick", tick])


class TestMain:
    @patch("task_clock.cli.SessionOrchestrator")
    def test_wires_project_and_log_dir(self, mock_orchestrator, tmp_path):
        main(["--project", "Work", "--log-dir", str(tmp_path), "--no-color", "--tick", "2"])

        kwargs = mock_orchestrator.call_args.kwargs
        assert kwargs["project"] == "Work"
        assert kwargs["writer"].log_dir == tmp_path
        assert kwargs["timer"].tick_interval == 2.0
        assert kwargs["timer"].renderer.use_colors is False
        mock_orchestrator.return_value.run.assert_called_once()

    @patch("task_clock.cli.SessionOrchestrator")
    def test_ctrl_c_outside_a_session_exits_130(self, mock_orchestrator):
        mock_orchestrator.return_value.run.side_effect = KeyboardInterrupt
        mock_orchestrator.return_value.entries = []

        with pytest.raises(SystemExit) as exc:
            main([])

        assert exc.value.code == 130


class TestInterruptedDay:
    """Ctrl+C at a prompt still saves the entries tracked so far."""

    @pytest.fixture
    def timer(self):
        timer = Mock()
        timer.run.return_value = SessionResult(TaskEntry("Design", timedelta(hours=1)), False)
        return timer

    @patch("task_clock.cli.SessionTimer")
    @patch("task_clock.orchestrator.console_ask", side_effect=KeyboardInterrupt)
    def test_interrupt_at_done_prompt_writes_log(self, mock_ask, mock_timer, timer, tmp_path):
        mock_timer.return_value = timer

        with pytest.raises(SystemExit) as exc:
            main(["--log-dir", str(tmp_path)])

        assert exc.value.code == 130
        written = list(tmp_path.glob("*_League.md"))
        assert len(written) == 1
        text = written[0].read_text(encoding="utf-8")
        assert "- **Task**: Design" in text
        assert "Duration: 1h0m0s" in text

    @patch("task_clock.cli.SessionOrchestrator")
    def test_interrupt_before_any_entry_writes_nothing(self, mock_orchestrator):
        mock_orchestrator.return_value.run.side_effect = KeyboardInterrupt
        mock_orchestrator.return_value.entries = []

        with pytest.raises(SystemExit):
            main([])

        mock_orchestrator.return_value.save_unfinished.assert_not_called()

"""
Day loop: run one timed session after another, collect the entries, and write
the markdown log once the user is done for the day.
"""

import threading
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console

from task_clock.console import ask as console_ask
from task_clock.console import console as default_console
from task_clock.timer import TaskEntry

DONE_PROMPT = "✅ Done for the day? (yes/no): "
AFFIRMATIVE = ("yes", "y")


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE


class SessionOrchestrator:
    def __init__(
        self,
        project: str,
        timer,
        writer,
        ask: Optional[Callable[[str], str]] = None,
        console: Optional[Console] = None,
    ):
        self.project = project
        self.timer = timer
        self.writer = writer
        self.ask = ask or console_ask
        self.console = console or default_console
        self.entries: List[TaskEntry] = []

    def run_session(self) -> bool:
        """Run one timer session and record its entry; True if 'q' asked to quit"""
        result = self.timer.run(threading.Event())
        self.entries.append(result.entry)
        if result.quit_requested:
            self.console.print("👋 Quit early with 'q'. See you next time!")
        return result.quit_requested

    def finish_day(self) -> Optional[Path]:
        """
        Ask whether the day is over and write the log if so.

        A failed write keeps the entries and asks again, so answering yes
        retries and anything else goes back to tracking.
        """
        while is_affirmative(self.ask(DONE_PROMPT)):
            path = self.writer.write(self.project, self.entries)
            if path is not None:
                self.console.print("👋 Session complete. See you next time!")
                return path
            self.console.print(
                f"[yellow]Nothing was saved; {len(self.entries)} entries are kept. "
                "Answer yes to retry.[/yellow]"
            )
        return None

    def save_unfinished(self) -> Optional[Path]:
        """Write whatever was tracked so far, e.g. when the day is cut short"""
        if not self.entries:
            return None
        return self.writer.write(self.project, self.entries)

    def run(self) -> Path:
        while True:
            self.run_session()
            path = self.finish_day()
            if path is not None:
                return path

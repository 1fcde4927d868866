"""
Markdown work log writer
Turns the day's task entries into a dated markdown file with front matter.
"""

import os
from datetime import date, timedelta
from pathlib import Path
from typing import Callable, Iterable, Optional

from rich.console import Console
from rich.markup import escape

from task_clock.console import console as default_console

ENV_LOG_DIR = "TASK_CLOCK_LOG_DIR"


def default_log_dir() -> Path:
    """~/Desktop/rohan/league-rohan unless TASK_CLOCK_LOG_DIR says otherwise"""
    env = os.environ.get(ENV_LOG_DIR)
    if env:
        return Path(env).expanduser()
    return Path.home() / "Desktop" / "rohan" / "league-rohan"


def format_duration(duration: timedelta) -> str:
    """Round to the nearest second and render as e.g. 1h2m5s, 1m5s or 5s"""
    total = max(0, int(duration.total_seconds() + 0.5))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"


def log_filename(project: str, day: date) -> str:
    return f"{day.isoformat()}_{project}.md"


def build_document(project: str, entries: Iterable, day: date) -> str:
    stamp = day.isoformat()
    lines = [
        "---",
        f"tags: [work-log, {project.lower()}]",
        f"date: {stamp}",
        f"project: {project}",
        "---",
        "",
        f"# Work Log for {project} ({stamp})",
        "",
    ]
    for entry in entries:
        lines.append(f"- **Task**: {entry.task}")
        lines.append(f"  - Duration: {format_duration(entry.duration)}")

    return "\n".join(lines) + "\n"


class LogWriter:
    """Persists a day's entries; failures are reported, never raised."""

    def __init__(
        self,
        log_dir: Optional[Path] = None,
        console: Optional[Console] = None,
        today: Callable[[], date] = date.today,
    ):
        self.log_dir = Path(log_dir).expanduser() if log_dir else None
        self.console = console or default_console
        self.today = today

    def resolve_dir(self) -> Optional[Path]:
        if self.log_dir is not None:
            return self.log_dir
        try:
            return default_log_dir()
        except (RuntimeError, KeyError) as e:
            self.console.print(f"[red]❌ Could not determine home directory: {escape(str(e))}[/red]")
            return None

    def write(self, project: str, entries) -> Optional[Path]:
        """Write the markdown log and return its path, or None if nothing was saved"""
        save_dir = self.resolve_dir()
        if save_dir is None:
            return None

        try:
            save_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.console.print(f"[red]❌ Could not create directory: {escape(str(e))}[/red]")
            return None

        day = self.today()
        full_path = save_dir / log_filename(project, day)
        try:
            with open(full_path, 'w', encoding='utf-8') as f:
                f.write(build_document(project, entries, day))
        except OSError as e:
            self.console.print(f"[red]❌ Error writing Markdown: {escape(str(e))}[/red]")
            return None

        self.console.print(f"[green]✅ Markdown log saved to {escape(str(full_path))}[/green]")
        return full_path

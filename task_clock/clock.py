"""
Elapsed-time clock display
Renders an HH:MM:SS duration with the block ASCII digits and repaints the terminal.
"""

import sys
from datetime import timedelta
from typing import List

from colorama import Fore, Style
from colorama.ansi import Cursor, clear_screen

from task_clock.digits import DIGITS, GLYPH_HEIGHT

DIGIT_SPACING = "  "

PAUSED_STATUS = "⏸️  Paused - Press 'p' to resume | 'q' to end task"
TRACKING_STATUS = "▶️  Tracking - Press 'p' to pause | 'q' to end task"


def format_clock(elapsed: timedelta) -> str:
    """Format elapsed time as zero-padded HH:MM:SS (hours are not wrapped at 24)"""
    total = max(0, int(elapsed.total_seconds()))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def render_time_display(time_str: str) -> List[str]:
    """Render the time string using ASCII art digits"""
    lines = [""] * GLYPH_HEIGHT

    for char in time_str:
        glyph = DIGITS[char]
        for i in range(GLYPH_HEIGHT):
            lines[i] += glyph[i] + DIGIT_SPACING

    return lines


def status_line(paused: bool) -> str:
    return PAUSED_STATUS if paused else TRACKING_STATUS


class ClockRenderer:
    """Full-screen repaint of the elapsed clock plus a one-line status."""

    def __init__(self, stream=None, use_colors: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.use_colors = use_colors

    def frame(self, elapsed: timedelta, paused: bool) -> str:
        """Build the complete screen contents for one tick"""
        rows = render_time_display(format_clock(elapsed))

        status = status_line(paused)
        if self.use_colors:
            color = Fore.YELLOW if paused else Fore.GREEN
            status = color + status + Style.RESET_ALL

        return clear_screen() + Cursor.POS() + "\n".join(rows) + "\n\n" + status + "\n"

    def render(self, elapsed: timedelta, paused: bool) -> None:
        self.stream.write(self.frame(elapsed, paused))
        self.stream.flush()

    def finish(self) -> None:
        """End the clock display so the next prompt starts on a fresh line"""
        self.stream.write("\n")
        self.stream.flush()

"""
Shared rich console and the blocking prompt used between sessions.
"""

from rich.console import Console

console = Console(highlight=False)


def ask(message: str, con: Console = None) -> str:
    """Prompt for one line of input; a failed read counts as an empty answer"""
    con = con or console
    try:
        return con.input(message).strip()
    except (EOFError, OSError):
        con.print()
        return ""

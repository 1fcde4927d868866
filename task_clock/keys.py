"""
Background keyboard reader for a running session.
Single keypresses are translated into session events and put on a queue; the
timer loop is the only consumer.
"""

import os
import sys
import time
import queue
import select
import threading

if os.name == 'nt':
    import msvcrt
else:
    import termios
    import tty


class SessionEvent:
    TOGGLE_PAUSE = "toggle_pause"
    PAUSE = "pause"
    RESUME = "resume"
    QUIT = "quit"


KEY_EVENTS = {
    'p': SessionEvent.TOGGLE_PAUSE,
    'q': SessionEvent.QUIT,
}

POLL_INTERVAL = 0.1


def event_for_key(key):
    """Map a keypress to its session event, or None for unbound keys"""
    return KEY_EVENTS.get(key.lower())


class KeyListener:
    """
    Reads keys on a daemon thread while used as a context manager.

    Leaving the context stops and joins the reader and restores the terminal,
    so stdin is free for the next blocking prompt.
    """

    def __init__(self, events: queue.Queue, fd=None):
        self.events = events
        self.fd = fd if fd is not None else sys.stdin.fileno()
        self.old_settings = None
        self.input_thread = None
        self._stop = threading.Event()

    def __enter__(self):
        self.setup_input_handling()
        self._stop.clear()
        self.input_thread = threading.Thread(target=self.input_handler, daemon=True)
        self.input_thread.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def stop(self):
        self._stop.set()
        if self.input_thread is not None:
            self.input_thread.join(timeout=2 * POLL_INTERVAL + 1)
            self.input_thread = None
        self.restore_input_handling()

    def setup_input_handling(self):
        """Put a Unix terminal into cbreak mode so keys arrive without Enter"""
        if os.name != 'nt' and os.isatty(self.fd):
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)

    def restore_input_handling(self):
        """Restore terminal input settings"""
        if self.old_settings:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def read_key(self):
        """Return one pending key, or None if nothing arrived within the poll interval"""
        if os.name == 'nt':
            if msvcrt.kbhit():
                return msvcrt.getwch()
            time.sleep(POLL_INTERVAL)
            return None

        ready, _, _ = select.select([self.fd], [], [], POLL_INTERVAL)
        if not ready:
            return None
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("input stream closed")
        return data.decode('utf-8', errors='ignore')

    def input_handler(self):
        """Handle keyboard input in a separate thread"""
        while not self._stop.is_set():
            try:
                key = self.read_key()
            except (EOFError, OSError, ValueError):
                break

            if not key:
                continue

            event = event_for_key(key)
            if event is None:
                continue

            self.events.put(event)
            if event == SessionEvent.QUIT:
                break

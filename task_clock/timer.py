"""
Session timer: the elapsed-time state machine behind one tracked task.

SessionState is a pure engine driven by explicit `now` values. SessionTimer runs
the tick/render loop around it, feeding key events from the listener queue and
watching a cancellation token that is set on interrupt.
"""

import queue
import signal
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Optional

from task_clock.console import ask as console_ask
from task_clock.keys import KeyListener, SessionEvent

TASK_PROMPT = "📝 What task did you just finish? "


class TimerState:
    RUNNING = "running"
    PAUSED = "paused"
    ENDED_BY_USER = "ended_by_user"
    ENDED_BY_SIGNAL = "ended_by_signal"

    TERMINAL = (ENDED_BY_USER, ENDED_BY_SIGNAL)


@dataclass(frozen=True)
class TaskEntry:
    task: str
    duration: timedelta


@dataclass(frozen=True)
class SessionResult:
    entry: TaskEntry
    quit_requested: bool


class SessionState:
    def __init__(self, now: float):
        self.start = now
        self.elapsed = 0.0
        self.state = TimerState.RUNNING
        self.quit_requested = False

    @property
    def paused(self) -> bool:
        return self.state == TimerState.PAUSED

    @property
    def ended(self) -> bool:
        return self.state in TimerState.TERMINAL

    @property
    def elapsed_delta(self) -> timedelta:
        return timedelta(seconds=self.elapsed)

    def tick(self, now: float) -> None:
        if self.state == TimerState.RUNNING:
            # monotonic clocks never go back, but elapsed must not either
            self.elapsed = max(self.elapsed, now - self.start)

    def pause(self, now: float) -> None:
        if self.state != TimerState.RUNNING:
            return
        self.tick(now)
        self.state = TimerState.PAUSED

    def resume(self, now: float) -> None:
        if self.state != TimerState.PAUSED:
            return
        self.start = now - self.elapsed
        self.state = TimerState.RUNNING

    def toggle_pause(self, now: float) -> None:
        if self.state == TimerState.RUNNING:
            self.pause(now)
        elif self.state == TimerState.PAUSED:
            self.resume(now)

    def end_by_user(self, now: float) -> None:
        if self.ended:
            return
        self.tick(now)
        self.state = TimerState.ENDED_BY_USER
        self.quit_requested = True

    def interrupt(self) -> None:
        """Stop on an external signal, keeping the last computed elapsed value"""
        if self.ended:
            return
        self.state = TimerState.ENDED_BY_SIGNAL

    def apply(self, event: str, now: float) -> None:
        if event == SessionEvent.TOGGLE_PAUSE:
            self.toggle_pause(now)
        elif event == SessionEvent.PAUSE:
            self.pause(now)
        elif event == SessionEvent.RESUME:
            self.resume(now)
        elif event == SessionEvent.QUIT:
            self.end_by_user(now)


@contextmanager
def interrupt_token(token: threading.Event):
    """Route SIGINT to `token` for the duration of the block (main thread only)"""
    if threading.current_thread() is not threading.main_thread():
        yield token
        return

    def _handler(signum, frame):
        token.set()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)


class SessionTimer:
    def __init__(
        self,
        renderer,
        ask: Callable[[str], str] = console_ask,
        listener_factory: Callable[[queue.Queue], KeyListener] = KeyListener,
        clock: Callable[[], float] = time.monotonic,
        tick_interval: float = 1.0,
    ):
        self.renderer = renderer
        self.ask = ask
        self.listener_factory = listener_factory
        self.clock = clock
        self.tick_interval = tick_interval
        self.session: Optional[SessionState] = None

    def run(self, cancel: Optional[threading.Event] = None) -> SessionResult:
        """Track one task until it is ended by 'q' or by an interrupt"""
        cancel = cancel if cancel is not None else threading.Event()
        events = queue.Queue()
        self.session = SessionState(self.clock())

        with interrupt_token(cancel), self.listener_factory(events):
            self._loop(events, cancel)

        # listener is stopped; stdin belongs to the prompt now
        self.renderer.finish()
        task = self.ask(TASK_PROMPT)
        entry = TaskEntry(task=task, duration=self.session.elapsed_delta)
        return SessionResult(entry=entry, quit_requested=self.session.quit_requested)

    def _loop(self, events: queue.Queue, cancel: threading.Event) -> None:
        session = self.session
        while not session.ended:
            if cancel.is_set():
                session.interrupt()
                break

            session.tick(self.clock())
            self.renderer.render(session.elapsed_delta, session.paused)

            try:
                event = events.get(timeout=self.tick_interval)
            except queue.Empty:
                continue
            session.apply(event, self.clock())

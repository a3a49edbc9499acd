"""Running a no-argument function on a background thread."""

from __future__ import annotations

import threading
from collections.abc import Callable


class Initializer:
    """Mixin that records whether an object has been initialised."""

    _initialized: bool = False

    def _set_initialized(self, flag: bool) -> None:
        self._initialized = flag

    def is_initialized(self) -> bool:
        return self._initialized

    def __bool__(self) -> bool:
        return self._initialized


class MultiThread(Initializer):
    """Runs a function on a thread and can run it again once it has finished."""

    def __init__(self, func: Callable[[], None] | None = None) -> None:
        self._finished = threading.Event()
        self._finished.set()
        self._thread: threading.Thread | None = None
        self._func: Callable[[], None] | None = None
        if func is not None:
            self.start(func)

    def start(self, func: Callable[[], None]) -> None:
        """Set the function and run it; ignored while a run is in progress."""
        if not self._finished.is_set():
            return
        self._thread = None
        self._func = func
        self.rerun()
        self._set_initialized(True)

    def rerun(self) -> None:
        """Run the same function again if the previous run has finished."""
        if not self._finished.is_set() or self._func is None:
            return
        self._finished.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            if self._func is not None:
                self._func()
        finally:
            self._finished.set()

    def release(self) -> None:
        """Wait for the running function and mark the object uninitialised."""
        if not self.is_initialized():
            return
        if self._thread is None:
            return
        self._thread.join()
        self._thread = None
        self._set_initialized(False)

    def join(self) -> None:
        """Wait for the running function to end."""
        if self._thread is None:
            raise RuntimeError("no thread to join")
        self._thread.join()
        self._thread = None

    def is_finished(self) -> bool:
        return self._finished.is_set()

    def __enter__(self) -> MultiThread:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
"""
Run-once guard for side-effecting setup such as schema creation and seeding.

The first call executes the wrapped function while holding a lock; concurrent
first callers wait for it and then observe the same outcome. The result (or
the raised exception) is memoized, so a failed initialization is reported to
every caller and never retried.
"""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Once(Generic[T]):
    """
    Thread-safe single-execution cell with result/error memoization.

    Example
    -------
        init = Once(create_schema)
        init()  # runs create_schema
        init()  # returns the memoized result
    """

    def __init__(self, func: Callable[[], T]) -> None:
        self._func = func
        self._lock = threading.Lock()
        self._done = False
        self._result: Optional[T] = None
        self._error: Optional[BaseException] = None
        self._traceback: Optional[TracebackType] = None

    @property
    def done(self) -> bool:
        return self._done

    def __call__(self) -> T:
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        self._result = self._func()
                    except Exception as exc:
                        self._error = exc
                        self._traceback = exc.__traceback__
                    self._done = True
        if self._error is not None:
            # restore the original traceback so repeated raises do not grow it
            raise self._error.with_traceback(self._traceback)
        return self._result  # type: ignore[return-value]


__all__ = ["Once"]

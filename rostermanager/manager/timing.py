"""Execution time measurement for manager operations."""

import functools
import time
from typing import Any, Callable, TypeVar

from ..utils.logging import log

F = TypeVar("F", bound=Callable[..., Any])


def timed(operation_name: str) -> Callable[[F], F]:
    """Log how long a manager method took, in milliseconds.

    The wrapped method's instance must expose ``timing_enabled``; when it is
    false the call goes straight through. Calls that raise are not measured.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args: Any, **kwargs: Any) -> Any:
            if not getattr(self, "timing_enabled", False):
                return func(self, *args, **kwargs)

            started = time.perf_counter()
            result = func(self, *args, **kwargs)
            elapsed_ms = (time.perf_counter() - started) * 1000
            log(f"[Medición] Tiempo {operation_name}: {elapsed_ms:.4f} ms")
            return result

        return wrapper  # type: ignore[return-value]

    return decorator

"""Fire-and-forget execution of background work.

run_detached() hands a unit of work to a worker thread and returns at once.
There is no join point: the caller gets no handle, cannot wait for the work
and cannot cancel it. Callers that need completion guarantees must use an
executor future directly.

Failures never reach the caller. They are passed to the on_error handler,
or written as one line to a diagnostic stream when no handler is given.
Every BaseException except asyncio.CancelledError is a failure, SystemExit
and KeyboardInterrupt included: on a worker thread they cannot stop the
process and would otherwise vanish into an unread future.
The handler runs on the worker thread that ran the work, never on the
caller's thread, so anything it touches must be safe to use from there.

Detached tasks run in no particular order, and nothing guarantees that a
task finishes before the process exits.
"""

import asyncio
import inspect
import logging
import sys
import threading
from collections.abc import Callable, Coroutine
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, TextIO

logger = logging.getLogger(__name__)

Work = Callable[[], Any] | Coroutine[Any, Any, Any]
ErrorHandler = Callable[[BaseException], None]

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    """Get the shared worker pool, creating it on first use."""
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(thread_name_prefix="updir-detached")
        return _executor


def effective_error(exc: BaseException) -> BaseException:
    """Unwrap a single layer of exception grouping.

    Args:
        exc: Exception raised by the work.

    Returns:
        The only member of a one-element exception group, otherwise exc.
    """
    if isinstance(exc, BaseExceptionGroup) and len(exc.exceptions) == 1:
        return exc.exceptions[0]
    return exc


def _message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _write_diagnostic(sink: TextIO | None, line: str) -> None:
    stream = sys.stderr if sink is None else sink
    stream.write(line + "\n")
    stream.flush()


def _report(error: BaseException, on_error: ErrorHandler | None, sink: TextIO | None) -> None:
    if on_error is None:
        logger.debug("Detached task failed", exc_info=error)
        _write_diagnostic(sink, f"Unhandled task exception: {_message(error)}")
        return

    try:
        on_error(error)
    except Exception as handler_exc:
        logger.debug("Error handler failed", exc_info=handler_exc)
        _write_diagnostic(sink, f"Task error handler failed: {_message(handler_exc)}")


def _run(work: Work, on_error: ErrorHandler | None, sink: TextIO | None) -> None:
    try:
        result = work if inspect.iscoroutine(work) else work()
        if inspect.iscoroutine(result):
            asyncio.run(result)
    except asyncio.CancelledError:
        # Neither a success nor a fault; nothing to report
        logger.debug("Detached task was cancelled")
    except BaseException as exc:
        _report(effective_error(exc), on_error, sink)


def run_detached(
    work: Work,
    on_error: ErrorHandler | None = None,
    *,
    executor: Executor | None = None,
    sink: TextIO | None = None,
) -> None:
    """Run work in the background without waiting for it.

    Args:
        work: Zero-argument callable, coroutine function or coroutine object.
            Coroutines are driven to completion with asyncio.run() on the
            worker thread.
        on_error: Called once with the failure if the work raises. Runs on
            the worker thread.
        executor: Executor to schedule on. Defaults to a shared thread pool.
        sink: Stream for the default failure message. Defaults to sys.stderr.

    Raises:
        ValueError: If work is None.
        TypeError: If work is neither callable nor a coroutine.
        RuntimeError: If the executor is shut down, which for the shared pool
            happens once interpreter shutdown has begun.
    """
    if work is None:
        msg = "work cannot be None"
        raise ValueError(msg)
    if not (callable(work) or inspect.iscoroutine(work)):
        msg = f"work must be callable or a coroutine, got {type(work).__name__}"
        raise TypeError(msg)

    pool = executor if executor is not None else _get_executor()
    pool.submit(_run, work, on_error, sink)

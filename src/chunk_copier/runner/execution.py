"""Execution policy and executor selection utilities."""

import os
import sys
from concurrent.futures import ThreadPoolExecutor

ExecutorClass = type[ThreadPoolExecutor] | None

# Environment variable to override executor selection.
CC_EXECUTOR_ENV = "CHUNK_COPIER_EXECUTOR"


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def get_executor_class() -> ExecutorClass:
    """
    Select the executor used to run chunk workers.

    CHUNK_COPIER_EXECUTOR may be "threads" (default) or "serial".
    "serial" runs every chunk in index order in the calling thread - useful
    for debugging with breakpoints. Workers share an in-process lock and
    output handle, so there is no process-pool mode.
    """
    executor_override = os.environ.get(CC_EXECUTOR_ENV, "").lower()

    if executor_override == "serial":
        return None
    if executor_override not in ("", "threads"):
        raise ValueError(
            f"{CC_EXECUTOR_ENV} must be 'threads' or 'serial', got {executor_override!r}"
        )
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    return "threads"

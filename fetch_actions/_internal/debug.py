"""Diagnostics for request pipelines, written to stderr."""

import os
import sys

DEBUG_ENV_VAR = "FETCH_ACTIONS_DEBUG"
LOG_PREFIX = "[fetch-actions]"


def debug_enabled() -> bool:
    """Check if debug output is enabled via FETCH_ACTIONS_DEBUG=1."""
    return os.environ.get(DEBUG_ENV_VAR, "") == "1"


def log_debug(message: str) -> None:
    """Log a debug message to stderr if debug mode is enabled."""
    if debug_enabled():
        print(f"{LOG_PREFIX} {message}", file=sys.stderr)


def log_error(message: str) -> None:
    """Log a failed request to stderr."""
    print(f"{LOG_PREFIX} {message}", file=sys.stderr)

"""Library configuration: FailableConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_failable._logging import configure_logging

__all__ = [
    'FailableConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


@dataclass(frozen=True)
class FailableConfig:
    """Configuration for klaw-failable.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render configured logs as JSON (True) or console text (False).
        trace_wrapping: Emit a debug ``failure_wrapped`` event whenever a strict
            adaptation wraps a new failure.
    """

    log_level: str | None = None
    json_output: bool = True
    trace_wrapping: bool = True


_config: FailableConfig = FailableConfig()


def _detect_log_level() -> str | None:
    """Read KLAW_FAILABLE_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('KLAW_FAILABLE_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read KLAW_FAILABLE_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    fmt = os.environ.get('KLAW_FAILABLE_LOG_FORMAT', '').strip().lower()
    if fmt in ('', 'json'):
        return True
    if fmt == 'console':
        return False
    logging.getLogger('klaw_failable').warning(
        "Unknown KLAW_FAILABLE_LOG_FORMAT value '%s', defaulting to json", fmt
    )
    return True


def _detect_trace_wrapping() -> bool:
    """Read KLAW_FAILABLE_TRACE; unset keeps tracing on."""
    value = os.environ.get('KLAW_FAILABLE_TRACE')
    if value is None:
        return True
    return value.strip().lower() in _TRUTHY


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
    trace_wrapping: bool | None = None,
) -> FailableConfig:
    """Initialize klaw-failable with the given configuration.

    Arguments left as None are resolved from the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON (True) or console (False) log rendering.
        trace_wrapping: Whether strict adaptations log each wrapped failure.

    Returns:
        The FailableConfig that was set.

    Example:
        ```python
        from klaw_failable import init

        init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()
    resolved_trace = trace_wrapping if trace_wrapping is not None else _detect_trace_wrapping()

    _config = FailableConfig(
        log_level=resolved_level,
        json_output=resolved_json,
        trace_wrapping=resolved_trace,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> FailableConfig:
    """Get the current configuration.

    Defaults apply until init() is called.
    """
    return _config

"""Failable base struct and the two adaptation modes shared by every shape."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec
import wrapt

from klaw_failable._config import get_config
from klaw_failable._logging import get_logger
from klaw_failable.errors import FailureWrapper
from klaw_failable.result import Err, Ok, Result

__all__ = ['Failable', 'strict_callable', 'suppressing_callable']

_log = get_logger(__name__)


class Failable(msgspec.Struct, frozen=True):
    """A callable paired with the exception type it declares it may raise.

    Failable is the common base of Action, Producer, Receiver, Transformer and
    BiTransformer. Instances are immutable behavioral values: two shapes are
    equal when they wrap the same callable and declare the same failure.

    Attributes:
        fn: The wrapped plain callable.
        failure: The declared failure type. Informational at runtime: every
            ``Exception`` is handled by the adaptations, whatever is declared.
    """

    fn: Callable[..., Any]
    failure: type[BaseException] = Exception

    def __post_init__(self) -> None:
        if not callable(self.fn):
            msg = f'{type(self).__name__} requires a callable, got {type(self.fn).__name__}'
            raise TypeError(msg)
        if not (isinstance(self.failure, type) and issubclass(self.failure, BaseException)):
            msg = f'failure must be an exception type, got {self.failure!r}'
            raise TypeError(msg)

    def invoke(self, *args: Any) -> Any:
        """Run the wrapped callable, letting any failure propagate as raised."""
        return self.fn(*args)

    def __call__(self, *args: Any) -> Any:
        """Same as invoke()."""
        return self.invoke(*args)

    def attempt(self, *args: Any) -> Result[Any, Exception]:
        """Run once and report the outcome as Ok(result) or Err(exception)."""
        try:
            return Ok(self.invoke(*args))
        except Exception as e:  # noqa: BLE001
            return Err(e)

    def strict(self) -> Callable[..., Any]:
        """Ordinary callable raising FailureWrapper on failure."""
        return strict_callable(self)

    def suppressing(self) -> Callable[..., Any]:
        """Ordinary callable that never raises; None on failure."""
        return suppressing_callable(self)

    def to_callable(self) -> Callable[..., Any]:
        """Alias for strict(), the default conversion to a plain callable."""
        return self.strict()


def strict_callable(shape: Failable) -> Callable[..., Any]:
    """Adapt shape into a plain callable whose only failure is FailureWrapper.

    A FailureWrapper raised by the body is re-raised as the same object; any
    other Exception is raised as a new FailureWrapper chained to it. The
    returned callable carries the name, docstring and signature of shape.fn.
    """
    shape_name = type(shape).__name__

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            return shape.invoke(*args, **kwargs)
        except FailureWrapper:
            raise
        except Exception as e:
            if get_config().trace_wrapping:
                _log.debug(
                    'failure_wrapped',
                    shape=shape_name,
                    cause=type(e).__qualname__,
                    declared=shape.failure.__qualname__,
                )
            raise FailureWrapper(e) from e

    return wrapper(shape.fn)


def suppressing_callable(shape: Failable) -> Callable[..., Any]:
    """Adapt shape into a plain callable that swallows every Exception.

    Best-effort mode: on failure the call returns None and nothing about the
    failure is kept. BaseExceptions that are not Exceptions (KeyboardInterrupt,
    SystemExit) still propagate.
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return shape.attempt(*args, **kwargs).ok()

    return wrapper(shape.fn)

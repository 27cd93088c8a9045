"""Action: a no-argument, no-result failable callable."""

from __future__ import annotations

from collections.abc import Callable

from klaw_failable.result import Err, Ok
from klaw_failable.shapes._base import Failable, strict_callable, suppressing_callable

__all__ = ['Action']


class Action[E: BaseException](Failable, frozen=True):
    """A side effect with no arguments that may fail with E.

    Example:
        ```python
        flush = Action(buffer.flush, OSError)
        atexit.register(flush.suppressing())
        ```
    """

    def invoke(self) -> None:
        """Run the action.

        Raises:
            E: Whatever the wrapped callable raises, unchanged.
        """
        self.fn()

    def run(self) -> None:
        """Alias for invoke()."""
        self.invoke()

    def attempt(self) -> Ok[None] | Err[Exception]:
        """Run the action, returning Ok(None) or Err(exception)."""
        try:
            self.fn()
        except Exception as e:  # noqa: BLE001
            return Err(e)
        return Ok(None)

    def strict(self) -> Callable[[], None]:
        """Convert to a plain callable that raises FailureWrapper on failure.

        Returns:
            A zero-argument callable. A failure already wrapped in a
            FailureWrapper is re-raised as is, never wrapped twice.
        """
        return strict_callable(self)

    def suppressing(self) -> Callable[[], None]:
        """Convert to a plain callable that ignores any failure.

        Returns:
            A zero-argument callable that never raises an Exception.
        """
        return suppressing_callable(self)

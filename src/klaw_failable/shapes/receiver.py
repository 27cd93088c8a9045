"""Receiver: a one-argument, no-result failable callable."""

from __future__ import annotations

import functools
from collections.abc import Callable

from klaw_failable.result import Err, Ok
from klaw_failable.shapes._base import Failable, strict_callable, suppressing_callable
from klaw_failable.shapes.action import Action

__all__ = ['Receiver']


class Receiver[V, E: BaseException](Failable, frozen=True):
    """Consumes one value of type V and may fail with E.

    Example:
        ```python
        save = Receiver(store.put, OSError)
        for record in records:
            save.suppressing()(record)
        save.curry(record).strict()()  # bind the argument, run later
        ```
    """

    def invoke(self, value: V) -> None:
        """Consume value.

        Raises:
            E: Whatever the wrapped callable raises, unchanged.
        """
        self.fn(value)

    def accept(self, value: V) -> None:
        """Alias for invoke()."""
        self.invoke(value)

    def attempt(self, value: V) -> Ok[None] | Err[Exception]:
        """Consume value, returning Ok(None) or Err(exception)."""
        try:
            self.fn(value)
        except Exception as e:  # noqa: BLE001
            return Err(e)
        return Ok(None)

    def strict(self) -> Callable[[V], None]:
        """Convert to a plain one-argument callable raising FailureWrapper on failure."""
        return strict_callable(self)

    def suppressing(self) -> Callable[[V], None]:
        """Convert to a plain one-argument callable that ignores any failure."""
        return suppressing_callable(self)

    def curry(self, value: V) -> Action[E]:
        """Bind the argument to a fixed value.

        Args:
            value: The value every invocation of the returned Action passes on.

        Returns:
            An Action with the same declared failure.
        """
        return Action(functools.partial(self.invoke, value), self.failure)

    def curry_from(self, supplier: Callable[[], V]) -> Action[E]:
        """Bind the argument to whatever supplier returns at call time.

        The supplier is a plain callable, called once per invocation of the
        returned Action, right before this receiver runs. If it raises, the
        Action fails with that exception.

        Args:
            supplier: Zero-argument callable producing the value.

        Returns:
            An Action with the same declared failure.
        """
        receive = self.invoke

        def curried() -> None:
            receive(supplier())

        return Action(curried, self.failure)

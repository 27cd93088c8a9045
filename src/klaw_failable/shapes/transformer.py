"""Transformer: a one-argument failable callable returning a value."""

from __future__ import annotations

import functools
from collections.abc import Callable

from klaw_failable.result import Err, Ok
from klaw_failable.shapes._base import Failable, strict_callable, suppressing_callable
from klaw_failable.shapes.producer import Producer
from klaw_failable.shapes.receiver import Receiver

__all__ = ['Transformer']


class Transformer[V, R, E: BaseException](Failable, frozen=True):
    """Maps one value of type V to a result of type R and may fail with E.

    Example:
        ```python
        parse = Transformer(int, ValueError)
        list(map(parse.suppressing(), ['1', 'x', '3']))  # [1, None, 3]
        parse.curry('42').strict()()  # 42
        ```
    """

    def invoke(self, value: V) -> R:
        """Transform value.

        Raises:
            E: Whatever the wrapped callable raises, unchanged.
        """
        return self.fn(value)

    def apply(self, value: V) -> R:
        """Alias for invoke()."""
        return self.invoke(value)

    def attempt(self, value: V) -> Ok[R] | Err[Exception]:
        """Transform value into Ok(result), or Err(exception) on failure."""
        try:
            return Ok(self.fn(value))
        except Exception as e:  # noqa: BLE001
            return Err(e)

    def strict(self) -> Callable[[V], R]:
        """Convert to a plain one-argument callable raising FailureWrapper on failure."""
        return strict_callable(self)

    def suppressing(self) -> Callable[[V], R | None]:
        """Convert to a plain one-argument callable returning None on failure."""
        return suppressing_callable(self)

    def curry(self, value: V) -> Producer[R, E]:
        """Bind the input to a fixed value, giving a Producer of R."""
        return Producer(functools.partial(self.invoke, value), self.failure)

    def curry_from(self, supplier: Callable[[], V]) -> Producer[R, E]:
        """Bind the input to supplier's result, re-evaluated on every invocation.

        Args:
            supplier: Plain zero-argument callable producing the input.

        Returns:
            A Producer of R with the same declared failure.
        """
        transform = self.invoke

        def curried() -> R:
            return transform(supplier())

        return Producer(curried, self.failure)

    def as_receiver(self) -> Receiver[V, E]:
        """Discard the output, keeping only the side effect."""
        return Receiver(self.invoke, self.failure)

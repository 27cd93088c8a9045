"""BiTransformer: a two-argument failable callable returning a value."""

from __future__ import annotations

import functools
from collections.abc import Callable

from klaw_failable.result import Err, Ok
from klaw_failable.shapes._base import Failable, strict_callable, suppressing_callable
from klaw_failable.shapes.transformer import Transformer

__all__ = ['BiTransformer']


class BiTransformer[V1, V2, R, E: BaseException](Failable, frozen=True):
    """Combines values of types V1 and V2 into a result of type R, may fail with E.

    Currying binds the first argument; flip first to bind the second one.

    Examples:
        >>> divide = BiTransformer(lambda a, b: a // b, ZeroDivisionError)
        >>> divide.curry(10).invoke(2)
        5
        >>> divide.flip().curry(2).invoke(10)
        5
    """

    def invoke(self, value1: V1, value2: V2) -> R:
        """Combine value1 and value2.

        Raises:
            E: Whatever the wrapped callable raises, unchanged.
        """
        return self.fn(value1, value2)

    def apply(self, value1: V1, value2: V2) -> R:
        """Alias for invoke()."""
        return self.invoke(value1, value2)

    def attempt(self, value1: V1, value2: V2) -> Ok[R] | Err[Exception]:
        """Combine the values into Ok(result), or Err(exception) on failure."""
        try:
            return Ok(self.fn(value1, value2))
        except Exception as e:  # noqa: BLE001
            return Err(e)

    def strict(self) -> Callable[[V1, V2], R]:
        """Convert to a plain two-argument callable raising FailureWrapper on failure."""
        return strict_callable(self)

    def suppressing(self) -> Callable[[V1, V2], R | None]:
        """Convert to a plain two-argument callable returning None on failure."""
        return suppressing_callable(self)

    def flip(self) -> BiTransformer[V2, V1, R, E]:
        """Swap the argument order.

        ``f.flip().invoke(b, a)`` is ``f.invoke(a, b)``. The original is left
        untouched.
        """
        combine = self.invoke

        def flipped(value2: V2, value1: V1) -> R:
            return combine(value1, value2)

        return BiTransformer(flipped, self.failure)

    def curry(self, value1: V1) -> Transformer[V2, R, E]:
        """Bind the first argument to a fixed value."""
        return Transformer(functools.partial(self.invoke, value1), self.failure)

    def curry_from(self, supplier1: Callable[[], V1]) -> Transformer[V2, R, E]:
        """Bind the first argument to supplier1's result at call time.

        The supplier runs once per invocation of the returned Transformer,
        before this BiTransformer is invoked.
        """
        combine = self.invoke

        def curried(value2: V2) -> R:
            return combine(supplier1(), value2)

        return Transformer(curried, self.failure)

    def bind_first(self, value1: V1) -> Transformer[V2, R, E]:
        """Alias for curry()."""
        return self.curry(value1)

    def bind_second(self, value2: V2) -> Transformer[V1, R, E]:
        """Bind the second argument; same as ``flip().curry(value2)``."""
        return self.flip().curry(value2)

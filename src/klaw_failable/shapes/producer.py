"""Producer: a no-argument failable callable returning a value."""

from __future__ import annotations

from collections.abc import Callable

from klaw_failable.result import Err, Ok
from klaw_failable.shapes._base import Failable, strict_callable, suppressing_callable
from klaw_failable.shapes.action import Action

__all__ = ['Producer']


class Producer[V, E: BaseException](Failable, frozen=True):
    """Produces a value of type V and may fail with E.

    Example:
        ```python
        load = Producer(lambda: Path('app.toml').read_text(), OSError)
        text = load.suppressing()()  # None if the file can't be read
        ```
    """

    def invoke(self) -> V:
        """Produce the value.

        Raises:
            E: Whatever the wrapped callable raises, unchanged.
        """
        return self.fn()

    def get(self) -> V:
        """Alias for invoke()."""
        return self.invoke()

    def attempt(self) -> Ok[V] | Err[Exception]:
        """Produce the value as Ok(value), or Err(exception) on failure."""
        try:
            return Ok(self.fn())
        except Exception as e:  # noqa: BLE001
            return Err(e)

    def strict(self) -> Callable[[], V]:
        """Convert to a plain callable returning V or raising FailureWrapper."""
        return strict_callable(self)

    def suppressing(self) -> Callable[[], V | None]:
        """Convert to a plain callable returning V, or None on any failure."""
        return suppressing_callable(self)

    def as_action(self) -> Action[E]:
        """Discard the produced value, keeping the side effect and the failure."""
        return Action(self.invoke, self.failure)

"""FailureWrapper: the single unchecked failure raised by strict adaptations."""

from __future__ import annotations

__all__ = ['FailureWrapper']


class FailureWrapper(Exception):  # noqa: N818
    """Carries a failure out of a failable callable as one uniform exception type.

    Code that receives a ``strict()`` callable only has to be prepared for
    ``FailureWrapper``; the original exception is available as ``cause`` (and
    as ``__cause__`` once raised, so tracebacks still point at the raise site).

    A wrapper never wraps another wrapper. ``FailureWrapper.wrap()`` hands
    back an existing wrapper unchanged, and constructing a wrapper around a
    wrapper flattens to the inner cause.

    The name intentionally doesn't end with "Error": it is a carrier for some
    other error, not an error of its own.

    Example:
        ```python
        try:
            read_config.strict()()
        except FailureWrapper as e:
            isinstance(e.cause, OSError)  # True
        ```
    """

    __slots__ = ('_cause',)

    def __init__(self, cause: BaseException) -> None:
        """Initialize FailureWrapper around the underlying failure.

        Args:
            cause: The exception being carried.

        Raises:
            TypeError: If cause is None or not an exception instance.
        """
        if cause is None:
            msg = 'FailureWrapper requires a cause, got None'
            raise TypeError(msg)
        if not isinstance(cause, BaseException):
            msg = f'FailureWrapper cause must be an exception, got {type(cause).__name__}'
            raise TypeError(msg)
        if isinstance(cause, FailureWrapper):
            cause = cause.cause
        self._cause = cause
        super().__init__(str(cause))
        self.__cause__ = cause

    @classmethod
    def wrap(cls, error: BaseException) -> FailureWrapper:
        """Return error if it already is a wrapper, otherwise a new wrapper around it."""
        if isinstance(error, FailureWrapper):
            return error
        return cls(error)

    @property
    def cause(self) -> BaseException:
        """The wrapped failure, exactly as it was raised."""
        return self._cause

    @property
    def message(self) -> str:
        """The cause's message."""
        return str(self._cause)

    def __reduce__(self) -> tuple[type[FailureWrapper], tuple[BaseException]]:
        # args holds the message, so rebuild from the cause instead
        return (type(self), (self._cause,))

    def __str__(self) -> str:
        return str(self._cause)

    def __repr__(self) -> str:
        return f'FailureWrapper({self._cause!r})'

"""Result type: Ok[T] | Err[E], the may-fail view of a failable call.

``Failable.attempt()`` reports the outcome of one invocation as a Result
instead of raising, so the failure can be inspected or routed like any other
value.

Example:
    ```python
    from klaw_failable import transformer

    parse = transformer(int, failure=ValueError)
    parse.attempt('42')  # Ok(value=42)
    parse.attempt('x')   # Err(error=ValueError(...))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[BaseException]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F: BaseException](self, _f: Callable[[BaseException], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E: BaseException](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[F: BaseException](self, _f: Callable[[BaseException], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> T | None:
        """Return the value."""
        return self.value

    def err(self) -> None:
        """Return None since this is Ok."""
        return None


class Err[E: BaseException](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing the exception raised by a call.

    Examples:
        >>> err = Err(ValueError('bad input'))
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            RuntimeError: Always, chained to the contained error.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}') from self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Err."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        raise RuntimeError(f'{msg}: {self.error!r}') from self.error

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F: BaseException](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F: BaseException](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def ok(self) -> None:
        """Return None, the absence marker, since this is Err."""
        return None

    def err(self) -> E:
        """Return the contained error."""
        return self.error


type Result[T, E: BaseException = Exception] = Ok[T] | Err[E]

"""Construction helpers for the failable shapes, usable as decorators.

Each helper takes a plain callable and an optional declared failure type:

    parse = transformer(int, failure=ValueError)

    @action
    def flush() -> None: ...

    @producer(failure=OSError)
    def read_config() -> str: ...

The helpers only build the shape; they add no behavior of their own.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from klaw_failable.shapes import (
    Action,
    BiTransformer,
    Failable,
    Producer,
    Receiver,
    Transformer,
)

__all__ = ['action', 'bi_transformer', 'producer', 'receiver', 'transformer']


def _make[S: Failable](
    kind: type[S],
    func: Callable[..., Any],
    failure: type[BaseException] | None,
) -> S:
    if isinstance(func, kind) and (failure is None or failure is func.failure):
        return func
    if isinstance(func, Failable):
        # another shape: reuse its callable and, unless overridden, its failure
        if failure is None:
            failure = func.failure
        func = func.fn if isinstance(func, kind) else func.invoke
    return kind(func, failure if failure is not None else Exception)


def _build[S: Failable](
    kind: type[S],
    func: Callable[..., Any] | None,
    failure: type[BaseException] | None,
) -> S | Callable[[Callable[..., Any]], S]:
    if func is not None:
        return _make(kind, func, failure)

    def decorate(f: Callable[..., Any]) -> S:
        return _make(kind, f, failure)

    return decorate


@overload
def action(func: Callable[[], Any], /) -> Action[Exception]: ...


@overload
def action[E: BaseException](
    func: Callable[[], Any], /, *, failure: type[E]
) -> Action[E]: ...


@overload
def action[E: BaseException](
    func: None = None, /, *, failure: type[E] | None = None
) -> Callable[[Callable[[], Any]], Action[E]]: ...


def action(
    func: Callable[[], Any] | None = None,
    /,
    *,
    failure: type[BaseException] | None = None,
) -> Any:
    """Build an Action from a zero-argument callable.

    Args:
        func: The callable (when used without parentheses).
        failure: Declared failure type. Defaults to Exception.

    Returns:
        An Action, or a decorator producing one.
    """
    return _build(Action, func, failure)


@overload
def producer[V](func: Callable[[], V], /) -> Producer[V, Exception]: ...


@overload
def producer[V, E: BaseException](
    func: Callable[[], V], /, *, failure: type[E]
) -> Producer[V, E]: ...


@overload
def producer[V, E: BaseException](
    func: None = None, /, *, failure: type[E] | None = None
) -> Callable[[Callable[[], V]], Producer[V, E]]: ...


def producer(
    func: Callable[[], Any] | None = None,
    /,
    *,
    failure: type[BaseException] | None = None,
) -> Any:
    """Build a Producer from a zero-argument callable returning a value.

    Example:
        ```python
        @producer(failure=OSError)
        def read_config() -> str:
            return Path('app.toml').read_text()

        read_config.suppressing()()  # str or None
        ```
    """
    return _build(Producer, func, failure)


@overload
def receiver[V](func: Callable[[V], Any], /) -> Receiver[V, Exception]: ...


@overload
def receiver[V, E: BaseException](
    func: Callable[[V], Any], /, *, failure: type[E]
) -> Receiver[V, E]: ...


@overload
def receiver[V, E: BaseException](
    func: None = None, /, *, failure: type[E] | None = None
) -> Callable[[Callable[[V], Any]], Receiver[V, E]]: ...


def receiver(
    func: Callable[[Any], Any] | None = None,
    /,
    *,
    failure: type[BaseException] | None = None,
) -> Any:
    """Build a Receiver from a one-argument callable."""
    return _build(Receiver, func, failure)


@overload
def transformer[V, R](func: Callable[[V], R], /) -> Transformer[V, R, Exception]: ...


@overload
def transformer[V, R, E: BaseException](
    func: Callable[[V], R], /, *, failure: type[E]
) -> Transformer[V, R, E]: ...


@overload
def transformer[V, R, E: BaseException](
    func: None = None, /, *, failure: type[E] | None = None
) -> Callable[[Callable[[V], R]], Transformer[V, R, E]]: ...


def transformer(
    func: Callable[[Any], Any] | None = None,
    /,
    *,
    failure: type[BaseException] | None = None,
) -> Any:
    """Build a Transformer from a one-argument callable returning a value."""
    return _build(Transformer, func, failure)


@overload
def bi_transformer[V1, V2, R](
    func: Callable[[V1, V2], R], /
) -> BiTransformer[V1, V2, R, Exception]: ...


@overload
def bi_transformer[V1, V2, R, E: BaseException](
    func: Callable[[V1, V2], R], /, *, failure: type[E]
) -> BiTransformer[V1, V2, R, E]: ...


@overload
def bi_transformer[V1, V2, R, E: BaseException](
    func: None = None, /, *, failure: type[E] | None = None
) -> Callable[[Callable[[V1, V2], R]], BiTransformer[V1, V2, R, E]]: ...


def bi_transformer(
    func: Callable[[Any, Any], Any] | None = None,
    /,
    *,
    failure: type[BaseException] | None = None,
) -> Any:
    """Build a BiTransformer from a two-argument callable returning a value.

    Example:
        ```python
        divide = bi_transformer(operator.floordiv, failure=ZeroDivisionError)
        divide.curry(10).invoke(2)  # 5
        ```
    """
    return _build(BiTransformer, func, failure)

"""Tests for Transformer and its conversions to Producer and Receiver."""

import pytest

from klaw_failable import Err, FailureWrapper, Ok, Producer, Receiver, Transformer, transformer


class TestTransformer:
    """Tests for invoke, strict and suppressing on a one-argument function."""

    def test_invoke(self):
        parse = Transformer(int, ValueError)
        assert parse.invoke('12') == 12
        assert parse.apply('13') == 13
        assert parse('14') == 14

    def test_invoke_propagates_raw_failure(self):
        with pytest.raises(ValueError):
            Transformer(int, ValueError).invoke('x')

    def test_attempt(self):
        parse = Transformer(int, ValueError)
        assert parse.attempt('42') == Ok(42)
        outcome = parse.attempt('x')
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, ValueError)

    def test_strict_returns_result(self):
        assert Transformer(str.upper).strict()('abc') == 'ABC'

    def test_strict_wraps_failure(self):
        with pytest.raises(FailureWrapper, match='invalid literal') as exc_info:
            Transformer(int, ValueError).strict()('x')
        assert isinstance(exc_info.value.cause, ValueError)

    def test_strict_in_map(self):
        """The strict form drops into map() like any function."""
        parse = Transformer(int, ValueError).strict()
        assert list(map(parse, ['1', '2'])) == [1, 2]
        with pytest.raises(FailureWrapper):
            list(map(parse, ['1', 'x']))

    def test_suppressing_in_map(self):
        parse = Transformer(int, ValueError).suppressing()
        assert list(map(parse, ['1', 'x', '3'])) == [1, None, 3]

    def test_suppressing_swallows_wrapper(self, wrapped_failure, raiser):
        assert Transformer(raiser(wrapped_failure)).suppressing()(1) is None


class TestTransformerCurry:
    """Tests for curry(), curry_from() and as_receiver()."""

    def test_curry_gives_producer(self):
        double = Transformer(lambda v: v * 2, ArithmeticError)
        prod = double.curry(21)
        assert isinstance(prod, Producer)
        assert prod.invoke() == double.invoke(21) == 42
        assert prod.failure is ArithmeticError

    def test_curry_failure_behavior(self):
        prod = Transformer(int, ValueError).curry('x')
        with pytest.raises(ValueError):
            prod.invoke()
        with pytest.raises(FailureWrapper):
            prod.strict()()
        assert prod.suppressing()() is None

    def test_curry_from_re_evaluates_supplier(self):
        inputs = iter(['1', '2', '3'])
        prod = Transformer(int, ValueError).curry_from(lambda: next(inputs))
        assert [prod.invoke(), prod.invoke(), prod.invoke()] == [1, 2, 3]

    def test_curry_from_keeps_failure_type(self):
        assert Transformer(int, ValueError).curry_from(lambda: '1').failure is ValueError

    def test_as_receiver_discards_output(self):
        seen = []

        def record(value):
            seen.append(value)
            return value * 10

        rec = Transformer(record, OSError).as_receiver()
        assert isinstance(rec, Receiver)
        assert rec.invoke(4) is None
        assert seen == [4]
        assert rec.failure is OSError

    def test_as_receiver_keeps_failure_behavior(self):
        rec = Transformer(int, ValueError).as_receiver()
        with pytest.raises(FailureWrapper):
            rec.strict()('x')
        assert rec.suppressing()('x') is None


class TestTransformerHelper:
    """Tests for the @transformer helper."""

    def test_decorator_with_failure(self):
        @transformer(failure=KeyError)
        def lookup(key):
            return {'a': 1}[key]

        assert isinstance(lookup, Transformer)
        assert lookup.invoke('a') == 1
        assert lookup.suppressing()('b') is None

    def test_helper_converts_other_shape(self):
        """Another shape is adapted through its invoke() and keeps its failure."""
        rec = Receiver(print, OSError)
        converted = transformer(rec)
        assert isinstance(converted, Transformer)
        assert converted.failure is OSError

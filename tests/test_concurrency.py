"""Tests for sharing shapes and their adaptations across threads."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from klaw_failable import FailureWrapper, Receiver, Transformer


def _parse_even(value):
    if value % 2:
        raise ValueError(f'{value} is odd')
    return value // 2


class TestConcurrentInvocation:
    """Tests for invoking one shape from many threads at once."""

    def test_suppressing_from_many_threads(self):
        halve = Transformer(_parse_even, ValueError).suppressing()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(halve, range(200)))
        assert results == [v // 2 if v % 2 == 0 else None for v in range(200)]

    def test_strict_from_many_threads(self):
        """Each thread sees its own wrapper around its own failure."""
        halve = Transformer(_parse_even, ValueError).strict()

        def run(value):
            try:
                return halve(value)
            except FailureWrapper as e:
                return e

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, range(100)))

        for value, result in enumerate(results):
            if value % 2:
                assert isinstance(result, FailureWrapper)
                assert result.message == f'{value} is odd'
            else:
                assert result == value // 2

    def test_curry_from_supplier_called_once_per_invocation(self):
        calls = []
        seen = []
        act = Receiver(seen.append).curry_from(lambda: calls.append(1) or len(calls))
        with ThreadPoolExecutor(max_workers=4) as pool:
            for future in [pool.submit(act.invoke) for _ in range(50)]:
                future.result()
        assert len(calls) == 50
        assert len(seen) == 50

    def test_failure_in_one_thread_does_not_leak(self):
        parse = Transformer(int, ValueError)
        with ThreadPoolExecutor(max_workers=4) as pool:
            bad = pool.submit(parse.strict(), 'x')
            good = pool.submit(parse.strict(), '7')
        assert good.result() == 7
        with pytest.raises(FailureWrapper):
            bad.result()

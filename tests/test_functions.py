"""Tests for the free-function encodings of Option and Writer."""

from hypothesis import given
from monadkit import (
    Nothing,
    Option,
    Some,
    Writer,
    filter_opt,
    flat_map_opt,
    flat_map_w,
    fold_opt,
    fold_w,
    from_nullable,
    get_log,
    get_or_else,
    get_value,
    is_none,
    is_some,
    map_opt,
    map_w,
    none,
    tell,
    to_nullable,
    writer_of,
)
from strategies import options, writers


class TestOptionFunctions:
    """Option free functions mirror the methods."""

    def test_predicates(self):
        assert is_some(Some(1)) is True
        assert is_none(none()) is True

    def test_nullable_round_trip(self):
        assert to_nullable(from_nullable(None)) is None
        assert to_nullable(from_nullable('x')) == 'x'

    def test_pipeline(self):
        """Functions compose into the same pipeline as method chaining."""
        m = from_nullable(10)
        m = filter_opt(m, lambda x: x > 5)
        m = map_opt(m, lambda x: x * 2)
        m = flat_map_opt(m, lambda x: Some(x + 1))
        assert get_or_else(m, 0) == 21

    def test_fold(self):
        assert fold_opt(Nothing, lambda: 'default', str) == 'default'
        assert fold_opt(Some(10), lambda: 'default', lambda x: x * 2) == 20

    @given(options)
    def test_agree_with_methods(self, m: Option[int]):
        assert map_opt(m, abs) == m.map(abs)
        assert filter_opt(m, lambda x: x > 0) == m.filter(lambda x: x > 0)
        assert get_or_else(m, -1) == m.get_or_else(-1)


class TestWriterFunctions:
    """Writer free functions mirror the methods."""

    def test_writer_of(self):
        w = writer_of(42)
        assert get_value(w) == 42
        assert get_log(w) == ()

    def test_tell(self):
        w = tell('m')
        assert get_value(w) is None
        assert get_log(w) == ('m',)

    def test_pipeline(self):
        w = writer_of(5, ['log 1'])
        w = flat_map_w(w, lambda v: writer_of(v + 3, ['log 2']))
        w = map_w(w, lambda v: v * 2)
        assert fold_w(w, lambda v: v) == 16
        assert get_log(w) == ('log 1', 'log 2')

    def test_fold_with_log_callback(self):
        seen: list[tuple[str, ...]] = []
        assert fold_w(writer_of(1, ['a']), str, seen.append) == '1'
        assert seen == [('a',)]

    @given(writers())
    def test_agree_with_methods(self, w: Writer[int, str]):
        assert map_w(w, abs) == w.map(abs)
        assert flat_map_w(w, lambda v: tell(str(v))) == w.flat_map(lambda v: tell(str(v)))

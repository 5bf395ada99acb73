"""Writer type: a value paired with an append-only log.

A Writer carries the result of a computation together with the entries
(diagnostics, trace messages) produced while computing it. Binding two
Writers concatenates their logs, earlier computation first, so the log reads
in the order the steps ran.

Logs are stored as tuples. No Writer can observe changes made through
another one, and a list passed to ``Writer.of`` may be reused by the caller.

Examples:
    >>> w = (
    ...     Writer.of(5, ['log 1'])
    ...     .flat_map(lambda v: Writer.of(v + 3, ['log 2']))
    ...     .flat_map(lambda v: Writer.of(v * 2, ['log 3']))
    ... )
    >>> w.get_value(), w.get_log()
    (16, ('log 1', 'log 2', 'log 3'))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import msgspec

from monadkit._logging import WRITER_LOGGER, get_logger

__all__ = [
    'Writer',
    'flat_map_w',
    'fold_w',
    'get_log',
    'get_value',
    'map_w',
    'tell',
    'writer_of',
]


def _noop(_log: tuple[Any, ...]) -> None:
    return None


def _as_log[E](entries: Iterable[E]) -> tuple[E, ...]:
    """Copy entries into an immutable log tuple.

    Raises:
        TypeError: If entries is a str or bytes; use Writer.tell() for a
            single text entry.
    """
    if isinstance(entries, tuple):
        return entries
    if isinstance(entries, str | bytes | bytearray):
        msg = f'log must be an iterable of entries, not {type(entries).__name__}; use Writer.tell() for one entry'
        raise TypeError(msg)
    return tuple(entries)


class Writer[T, W](msgspec.Struct, frozen=True):
    """Writer monad: value of type T plus a log of W entries.

    Monadic laws:
    - Left identity: Writer.of(a).flat_map(f) == f(a)
    - Right identity: w.flat_map(Writer.of) == w
    - Associativity: w.flat_map(f).flat_map(g) == w.flat_map(lambda x: f(x).flat_map(g))

    Raises:
        TypeError: If constructed with a str or bytes log.
    """

    value: T
    log: tuple[W, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.log, tuple):
            msgspec.structs.force_setattr(self, 'log', _as_log(self.log))

    @staticmethod
    def of[V, E](value: V, log: Iterable[E] = ()) -> Writer[V, E]:
        """Lift a value into a Writer with the given (or empty) log.

        The log is copied, so the caller may keep mutating what it passed in.
        """
        return Writer(value, _as_log(log))

    @staticmethod
    def tell[E](*entries: E) -> Writer[None, E]:
        """Write entries to the log without producing a value.

        Typically the start of a flat_map chain:

            Writer.tell('loading').flat_map(lambda _: Writer.of(load(), ['loaded']))
        """
        return Writer(None, entries)

    @staticmethod
    def emit_log(
        logger: Any = None,
        event: str = 'writer.entry',
        level: str = 'info',
    ) -> Callable[[tuple[Any, ...]], None]:
        """Build a fold() on_log callback that forwards entries to a logger.

        Each entry becomes one log event carrying ``entry``, its ``index``
        and the log ``size``, emitted in log order.

        Args:
            logger: A structlog logger. Defaults to the monadkit.writer logger.
            event: Event name for every forwarded entry.
            level: Logger method to call ("debug", "info", "warning", ...).
        """
        target = logger if logger is not None else get_logger(WRITER_LOGGER)
        emit = getattr(target, level.lower())

        def on_log(log: tuple[Any, ...]) -> None:
            for index, entry in enumerate(log):
                emit(event, entry=entry, index=index, size=len(log))

        return on_log

    # Functor / monad operations

    def map[U](self, f: Callable[[T], U]) -> Writer[U, W]:
        """Apply f to the value; the log is carried forward unchanged."""
        return Writer(f(self.value), self.log)

    def flat_map[U](self, f: Callable[[T], Writer[U, W]]) -> Writer[U, W]:
        """Monadic bind.

        Runs f on the value and returns a Writer holding f's value and the
        concatenation of this log followed by f's log.
        """
        next_writer = f(self.value)
        return Writer(next_writer.value, self.log + next_writer.log)

    def fold[U](
        self,
        on_value: Callable[[T], U],
        on_log: Callable[[tuple[W, ...]], object] = _noop,
    ) -> U:
        """Hand the log to on_log, then return on_value(value).

        Both callbacks run on every call, on_log first. Whatever on_log
        returns is discarded.
        """
        on_log(self.log)
        return on_value(self.value)

    # Writer operations

    def with_log(self, *entries: W) -> Writer[T, W]:
        """Append entries to the log without changing the value."""
        return Writer(self.value, self.log + entries)

    def map_log[V](self, f: Callable[[tuple[W, ...]], Iterable[V]]) -> Writer[T, V]:
        """Transform the whole log."""
        return Writer(self.value, tuple(f(self.log)))

    def censor(self, f: Callable[[tuple[W, ...]], Iterable[W]]) -> Writer[T, W]:
        """Modify the log after computation, keeping the entry type."""
        return Writer(self.value, tuple(f(self.log)))

    def listen(self) -> Writer[tuple[T, tuple[W, ...]], W]:
        """Expose the log alongside the value."""
        return Writer((self.value, self.log), self.log)

    # Accessors

    def get_value(self) -> T:
        return self.value

    def get_log(self) -> tuple[W, ...]:
        """Return the log. It is a tuple, so callers cannot mutate it."""
        return self.log

    def to_tuple(self) -> tuple[T, tuple[W, ...]]:
        return (self.value, self.log)


# ---------------------------------------------------------------------
# Free-function encoding
# ---------------------------------------------------------------------


def writer_of[T, W](value: T, log: Iterable[W] = ()) -> Writer[T, W]:
    return Writer.of(value, log)


def tell[W](*entries: W) -> Writer[None, W]:
    return Writer.tell(*entries)


def map_w[T, U, W](w: Writer[T, W], f: Callable[[T], U]) -> Writer[U, W]:
    return w.map(f)


def flat_map_w[T, U, W](w: Writer[T, W], f: Callable[[T], Writer[U, W]]) -> Writer[U, W]:
    return w.flat_map(f)


def fold_w[T, U, W](
    w: Writer[T, W],
    on_value: Callable[[T], U],
    on_log: Callable[[tuple[W, ...]], object] = _noop,
) -> U:
    return w.fold(on_value, on_log)


def get_value[T, W](w: Writer[T, W]) -> T:
    return w.get_value()


def get_log[T, W](w: Writer[T, W]) -> tuple[W, ...]:
    return w.get_log()

"""Option type: Some[T] | Nothing for optional values.

Two encodings share one implementation. The method surface lives on the
``Some`` and ``NothingType`` variants; the free functions at the bottom of the
module are thin wrappers for callers that prefer plain function composition.

Examples:
    >>> some(5).map(lambda x: x * 2).get_or_else(0)
    10
    >>> none().map(lambda x: x * 2).get_or_else(0)
    0
    >>> fold_opt(from_nullable(None), lambda: 'default', str)
    'default'
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeIs

import msgspec

from monadkit.errors import NoneValueError

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'filter_opt',
    'flat_map_opt',
    'fold_opt',
    'from_nullable',
    'get_or_else',
    'is_none',
    'is_some',
    'map_opt',
    'none',
    'some',
    'to_nullable',
]


class Some[T](msgspec.Struct, frozen=True):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The value is never ``None``:
    ``None`` is the absence marker of the nullable encoding, so wrapping it
    would make ``Some(None)`` and ``Nothing`` indistinguishable once bridged
    through ``to_nullable``.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42).filter(lambda x: x < 0)
        NothingType()

    Raises:
        NoneValueError: If constructed with ``None``.
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NoneValueError()

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __bool__(self) -> bool:
        return True

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_else_get(self, factory: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the factory."""
        return self.value

    def to_nullable(self) -> T:
        """Return the contained value."""
        return self.value

    def map[U](self, f: Callable[[T], U | None]) -> Option[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result, or Nothing if f returned None.
        """
        return from_nullable(f(self.value))

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as bind. The returned Option is passed through as-is,
        never wrapped a second time.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate holds, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            This same instance if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def fold[U, V](self, if_none: Callable[[], U], on_some: Callable[[T], V]) -> U | V:  # noqa: ARG002
        """Apply on_some to the contained value; if_none is not called."""
        return on_some(self.value)

    def or_else(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        """Flatten a nested Option."""
        return self.value

    def inspect(self, f: Callable[[T], object]) -> Some[T]:
        """Call f with the contained value and return self."""
        f(self.value)
        return self


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing never call the function they are given, except
    for the explicit fallbacks (``fold``'s if_none, ``or_else``,
    ``get_or_else_get``).

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.get_or_else(0)
        0
    """

    def __iter__(self) -> Iterator[object]:
        return iter(())

    def __bool__(self) -> bool:
        return False

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def get_or_else[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def get_or_else_get[T](self, factory: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return factory()

    def to_nullable(self) -> None:
        """Return None since this is Nothing."""
        return None

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Option[U]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def fold[T, U, V](self, if_none: Callable[[], U], on_some: Callable[[T], V]) -> U | V:  # noqa: ARG002
        """Call if_none with no arguments; on_some is not called."""
        return if_none()

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def zip[U](self, _other: Option[U]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def inspect[T](self, _f: Callable[[T], object]) -> NothingType:
        """Return Nothing without calling the function."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


# ---------------------------------------------------------------------
# Free-function encoding
# ---------------------------------------------------------------------


def some[T](value: T) -> Some[T]:
    """Wrap a present value.

    Raises:
        NoneValueError: If value is None. Use from_nullable() for values
            that may be absent.
    """
    return Some(value)


def none[T]() -> Option[T]:
    """Return Nothing; the type parameter is for static typing only."""
    return Nothing


def from_nullable[T](value: T | None) -> Option[T]:
    """Nothing if value is None, otherwise Some(value)."""
    if value is None:
        return Nothing
    return Some(value)


def to_nullable[T](m: Option[T]) -> T | None:
    return m.to_nullable()


def is_some[T](m: Option[T]) -> TypeIs[Some[T]]:
    return m.is_some()


def is_none[T](m: Option[T]) -> TypeIs[NothingType]:
    return m.is_none()


def map_opt[T, U](m: Option[T], f: Callable[[T], U | None]) -> Option[U]:
    return m.map(f)


def flat_map_opt[T, U](m: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    return m.flat_map(f)


def get_or_else[T](m: Option[T], default: T) -> T:
    return m.get_or_else(default)


def filter_opt[T](m: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    return m.filter(predicate)


def fold_opt[T, U, V](m: Option[T], if_none: Callable[[], U], on_some: Callable[[T], V]) -> U | V:
    """Fold an Option into a plain value; exactly one branch is called."""
    return m.fold(if_none, on_some)

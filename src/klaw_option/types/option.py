"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, NoReturn, TypeIs, overload

from klaw_option._logging import get_logger
from klaw_option.errors import AbsentValueError, CombinatorArityError

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'collect',
    'is_option',
    'lift',
    'option',
]

_log = get_logger(__name__)


class Some[T]:
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The wrapped value is never
    ``None``: use `option()` to convert a nullable value, which returns
    `Nothing` for ``None`` instead of raising.

    Some must stay a plain class, not a msgspec Struct or dataclass: the
    codec's ``enc_hook`` only sees types msgspec does not encode natively.

    Examples:
        >>> some = Some(42)
        >>> some.get()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> str(some)
        'Some(42)'
        >>> match some:
        ...     case Some(value):
        ...         print(value)
        42
    """

    __slots__ = ('value',)
    __match_args__ = ('value',)

    value: T

    def __init__(self, value: T) -> None:
        """Wrap ``value``.

        Raises:
            AbsentValueError: If ``value`` is None.
        """
        if value is None:
            _log.debug('option.absent_value')
            raise AbsentValueError
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name: str, _value: object) -> NoReturn:
        msg = f"'Some' object is immutable, cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = f"'Some' object is immutable, cannot delete {name!r}"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type[Some[T]], tuple[T]]:
        return (Some, (self.value,))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Some):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Some, self.value))

    def __repr__(self) -> str:
        return f'Some(value={self.value!r})'

    def __str__(self) -> str:
        return f'Some({self.value})'

    def is_defined(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_defined(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_else_get(self, factory: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the factory."""
        return self.value

    def map[U](self, f: Callable[[T], U | None]) -> Some[U] | NothingType:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of f, or Nothing if f returned None.
        """
        return option(f(self.value))

    def flat_map[U](
        self, f: Callable[[T], Some[U] | NothingType]
    ) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as and_then or bind. The result of f is returned as is.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def for_each(self, f: Callable[[T], object]) -> None:
        """Call f with the contained value for its side effect."""
        f(self.value)

    def or_else(self, _alternative: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def match[R1, R2](
        self, *, some: Callable[[T], R1], none: Callable[[], R2]
    ) -> R1 | R2:
        """Call ``some`` with the contained value and return its result.

        Args:
            some: Handler for the Some variant.
            none: Handler for the Nothing variant (not called).

        Returns:
            The result of some(value).
        """
        return some(self.value)


class NothingType:
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. ``NothingType()`` returns that same instance.
    Its string form is ``"None"`` and it serializes to ``null``.

    Examples:
        >>> Nothing.is_defined()
        False
        >>> Nothing.get_or_else(0)
        0
        >>> str(Nothing)
        'None'
    """

    __slots__ = ()

    _instance: NothingType | None = None

    def __new__(cls) -> NothingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __setattr__(self, name: str, _value: object) -> NoReturn:
        msg = f"'NothingType' object is immutable, cannot set {name!r}"
        raise AttributeError(msg)

    def __reduce__(self) -> str:
        return 'Nothing'

    def __repr__(self) -> str:
        return 'Nothing'

    def __str__(self) -> str:
        return 'None'

    def is_defined(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def get(self) -> None:
        """Return None; absence is reported through the value, never raised."""
        return None

    def get_or_else[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def get_or_else_get[T](self, factory: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return factory()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def for_each[T](self, _f: Callable[[T], object]) -> None:
        """Do nothing since there's no value."""

    def or_else[T](
        self, alternative: Callable[[], Some[T] | NothingType]
    ) -> Some[T] | NothingType:
        """Return the Option produced by ``alternative``.

        Args:
            alternative: Function that returns a new Option.

        Returns:
            The Option returned by alternative.
        """
        return alternative()

    def match[T, R1, R2](
        self, *, some: Callable[[T], R1], none: Callable[[], R2]
    ) -> R1 | R2:
        """Call ``none`` and return its result."""
        return none()


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def option[T](value: T | None) -> Some[T] | NothingType:
    """Create an Option from a nullable value.

    Args:
        value: Any value. Existing Options are wrapped, not unwrapped.

    Returns:
        Nothing if value is None, else Some(value).

    Examples:
        >>> option(10)
        Some(value=10)
        >>> option('')
        Some(value='')
        >>> option(None)
        Nothing
    """
    if value is None:
        return Nothing
    return Some(value)


def is_option(value: object) -> TypeIs[Some[Any] | NothingType]:
    """Return True if value is a Some or Nothing.

    The check is nominal: objects that merely look like an Option are not
    Options.

    Examples:
        >>> is_option(Some(33)), is_option(Nothing), is_option(33)
        (True, True, False)
    """
    return isinstance(value, Some | NothingType)


def _unwrap[T](value: Some[T] | NothingType | T | None) -> T | None:
    if isinstance(value, Some):
        return value.value
    if isinstance(value, NothingType):
        return None
    return value


def _unwrap_all(values: tuple[Any, ...]) -> tuple[Any, ...] | None:
    """Normalize values, stopping at the first absent one."""
    unwrapped = []
    for position, value in enumerate(values):
        raw = _unwrap(value)
        if raw is None:
            _log.debug('option.short_circuit', position=position, arity=len(values))
            return None
        unwrapped.append(raw)
    return tuple(unwrapped)


def _check_combine(combine: Any, arity: int) -> None:
    """Raise CombinatorArityError unless combine accepts arity positional arguments."""
    if not callable(combine):
        raise CombinatorArityError(combine)
    try:
        signature = inspect.signature(combine)
    except (TypeError, ValueError):
        return  # no introspectable signature, e.g. some builtins
    try:
        signature.bind(*range(arity))
    except TypeError:
        raise CombinatorArityError(combine, arity) from None


type _OptionLike[T] = Some[T] | NothingType | T | None


@overload
def collect[T1, T2](
    v1: _OptionLike[T1], v2: _OptionLike[T2], /
) -> Some[tuple[T1, T2]] | NothingType: ...


@overload
def collect[T1, T2, T3](
    v1: _OptionLike[T1], v2: _OptionLike[T2], v3: _OptionLike[T3], /
) -> Some[tuple[T1, T2, T3]] | NothingType: ...


@overload
def collect[T1, T2, T3, T4](
    v1: _OptionLike[T1], v2: _OptionLike[T2], v3: _OptionLike[T3], v4: _OptionLike[T4], /
) -> Some[tuple[T1, T2, T3, T4]] | NothingType: ...


@overload
def collect[T1, T2, T3, T4, T5](
    v1: _OptionLike[T1],
    v2: _OptionLike[T2],
    v3: _OptionLike[T3],
    v4: _OptionLike[T4],
    v5: _OptionLike[T5],
    /,
) -> Some[tuple[T1, T2, T3, T4, T5]] | NothingType: ...


@overload
def collect(*values: Any) -> Some[tuple[Any, ...]] | NothingType: ...


def collect(*values: Any) -> Some[tuple[Any, ...]] | NothingType:
    """Combine several Options or plain values into an Option of a tuple.

    Option arguments are unwrapped and plain values pass through. If any of
    them is Nothing or None the result is Nothing, and later arguments are
    not inspected.

    Args:
        *values: Options or plain (possibly None) values.

    Returns:
        Some(tuple of unwrapped values, in argument order), or Nothing.

    Examples:
        >>> collect(Some('a'), 'b')
        Some(value=('a', 'b'))
        >>> collect(Some('a'), Nothing)
        Nothing
    """
    unwrapped = _unwrap_all(values)
    if unwrapped is None:
        return Nothing
    return Some(unwrapped)


@overload
def lift[T1, T2, R](
    v1: _OptionLike[T1], v2: _OptionLike[T2], /, *, combine: Callable[[T1, T2], R | None]
) -> Some[R] | NothingType: ...


@overload
def lift[T1, T2, T3, R](
    v1: _OptionLike[T1],
    v2: _OptionLike[T2],
    v3: _OptionLike[T3],
    /,
    *,
    combine: Callable[[T1, T2, T3], R | None],
) -> Some[R] | NothingType: ...


@overload
def lift[T1, T2, T3, T4, R](
    v1: _OptionLike[T1],
    v2: _OptionLike[T2],
    v3: _OptionLike[T3],
    v4: _OptionLike[T4],
    /,
    *,
    combine: Callable[[T1, T2, T3, T4], R | None],
) -> Some[R] | NothingType: ...


@overload
def lift[T1, T2, T3, T4, T5, R](
    v1: _OptionLike[T1],
    v2: _OptionLike[T2],
    v3: _OptionLike[T3],
    v4: _OptionLike[T4],
    v5: _OptionLike[T5],
    /,
    *,
    combine: Callable[[T1, T2, T3, T4, T5], R | None],
) -> Some[R] | NothingType: ...


@overload
def lift[R](*values: Any, combine: Callable[..., R | None]) -> Some[R] | NothingType: ...


def lift[R](*values: Any, combine: Callable[..., R | None]) -> Some[R] | NothingType:
    """Apply ``combine`` to several Options or plain values if all are present.

    Values are normalized like `collect()`. The combiner's result goes through
    `option()` again, so a combiner returning None yields Nothing.

    Args:
        *values: Options or plain (possibly None) values.
        combine: Function receiving the unwrapped values positionally.

    Returns:
        Some(combine(*values)) or Nothing.

    Raises:
        CombinatorArityError: If combine is not callable or cannot take
            len(values) positional arguments.

    Examples:
        >>> lift(Some('a'), Some('b'), combine=lambda a, b: a + b)
        Some(value='ab')
        >>> lift(Some('a'), None, combine=lambda a, b: a + b)
        Nothing
    """
    _check_combine(combine, len(values))
    unwrapped = _unwrap_all(values)
    if unwrapped is None:
        return Nothing
    return option(combine(*unwrapped))

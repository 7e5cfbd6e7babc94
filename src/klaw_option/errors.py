"""Error types for programmer mistakes when building Option and OneMany values.

Absence is never an error: it is modeled as `Nothing`. The exceptions here
only report precondition violations such as wrapping ``None`` in `Some`.
"""

from __future__ import annotations

__all__ = [
    'AbsentValueError',
    'CombinatorArityError',
    'KlawOptionError',
]


class KlawOptionError(Exception):
    """Base exception class for klaw-option errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from klaw_option import KlawOptionError, Some

        try:
            Some(None)
        except KlawOptionError as e:
            print(e)
        # [absent_value] Some() requires a value, got None
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class AbsentValueError(KlawOptionError, ValueError):
    """Raised when `Some` is constructed with ``None``.

    Use `option()` to turn a nullable value into an Option instead.
    """

    def __init__(self, message: str = 'Some() requires a value, got None') -> None:
        super().__init__(message, code='absent_value')


class CombinatorArityError(KlawOptionError, TypeError):
    """Raised when `lift()` gets a combiner it cannot call with its values.

    Either ``combine`` is not callable, or its signature does not accept
    ``arity`` positional arguments. Errors raised inside a valid combiner are
    not wrapped.
    """

    def __init__(self, combine: object, arity: int | None = None) -> None:
        self.combine = combine
        self.arity = arity
        if arity is None:
            message = f'lift() requires a callable combine, got {type(combine).__name__}'
        else:
            name = getattr(combine, '__qualname__', type(combine).__name__)
            message = f'combine {name} cannot take {arity} positional argument(s)'
        super().__init__(message, code='combinator')

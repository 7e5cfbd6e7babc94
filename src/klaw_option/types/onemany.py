"""OneMany type: One[E] | Many[A], a single value or its plural alternative.

Each combinator acts on one branch and hands the other back untouched, the
same instance rather than a copy.

Both variants are msgspec tagged structs (``tag_field="type"``), so encoding
gives ``{"type": "one", "value": ...}`` and decoding against
``One[E] | Many[A]`` picks the variant from the tag.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

__all__ = ['Many', 'One', 'OneMany', 'is_one_many']


class One[E](msgspec.Struct, frozen=True, gc=False, tag_field='type', tag='one'):
    """One variant of OneMany holding a single value.

    Examples:
        >>> One(10).map(lambda x: x * 2)
        One(value=20)
        >>> str(One(10))
        'One(10)'
    """

    value: E

    def __str__(self) -> str:
        """Render the payload with str(); unlike Many, no JSON encoding."""
        return f'One({self.value})'

    def is_one(self) -> TypeIs[One[E]]:
        """Return True since this is One."""
        return True

    def is_many(self) -> TypeIs[Many[Any]]:
        """Return False since this is One."""
        return False

    def get(self) -> E:
        """Return the contained value."""
        return self.value

    def map[B](self, f: Callable[[E], B]) -> One[B]:
        """Apply f to the contained value."""
        return One(f(self.value))

    def map_many[B](self, _f: Callable[[Any], B]) -> One[E]:
        """Return self unchanged since this is One."""
        return self

    def flat_map_one[E2, B](self, f: Callable[[E], One[E2] | Many[B]]) -> One[E2] | Many[B]:
        """Return the OneMany produced by f, whose One type may differ."""
        return f(self.value)

    def flat_map_many[E2, B](self, _f: Callable[[Any], One[E2] | Many[B]]) -> One[E]:
        """Return self unchanged since this is One."""
        return self

    def fold[B, C](self, if_many: Callable[[Any], B], if_one: Callable[[E], C]) -> B | C:  # noqa: ARG002
        """Call ``if_one`` with the contained value and return its result."""
        return if_one(self.value)


class Many[A](msgspec.Struct, frozen=True, gc=False, tag_field='type', tag='many'):
    """Many variant of OneMany holding the plural value, usually a list.

    Examples:
        >>> Many([1, 2, 3]).map_many(lambda xs: [x * 2 for x in xs])
        Many(value=[2, 4, 6])
        >>> str(Many([10, 20, 30]))
        'Many([10,20,30])'
    """

    value: A

    def __str__(self) -> str:
        """Render the payload as compact JSON, falling back to str()."""
        from klaw_option.codec import encode

        try:
            rendered = encode(self.value).decode()
        except (NotImplementedError, TypeError, msgspec.EncodeError):
            rendered = str(self.value)
        return f'Many({rendered})'

    def is_one(self) -> TypeIs[One[Any]]:
        """Return False since this is Many."""
        return False

    def is_many(self) -> TypeIs[Many[A]]:
        """Return True since this is Many."""
        return True

    def get(self) -> A:
        """Return the contained value."""
        return self.value

    def map[B](self, _f: Callable[[Any], B]) -> Many[A]:
        """Return self unchanged since this is Many."""
        return self

    def map_many[B](self, f: Callable[[A], B]) -> Many[B]:
        """Apply f to the contained value."""
        return Many(f(self.value))

    def flat_map_one[E2, B](self, _f: Callable[[Any], One[E2] | Many[B]]) -> Many[A]:
        """Return self unchanged since this is Many."""
        return self

    def flat_map_many[E2, B](self, f: Callable[[A], One[E2] | Many[B]]) -> One[E2] | Many[B]:
        """Return the OneMany produced by f."""
        return f(self.value)

    def fold[B, C](self, if_many: Callable[[A], B], if_one: Callable[[Any], C]) -> B | C:  # noqa: ARG002
        """Call ``if_many`` with the contained value and return its result."""
        return if_many(self.value)


type OneMany[E, A] = One[E] | Many[A]


def is_one_many(value: object) -> TypeIs[One[Any] | Many[Any]]:
    """Return True if value is a One or a Many."""
    return isinstance(value, One | Many)

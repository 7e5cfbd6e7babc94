"""JSON serialization for structures holding Option and OneMany values.

Options serialize exactly like ordinary nullable fields: ``Some`` contributes
its bare value and ``Nothing`` contributes ``null``. OneMany variants are
msgspec tagged structs and encode as ``{"type": "one" | "many", "value": ...}``.

Usage:
    >>> from klaw_option import Nothing, Some
    >>> from klaw_option.codec import encode, to_builtins
    >>> encode({'x': Some(10), 'y': Nothing})
    b'{"x":10,"y":null}'
    >>> to_builtins([Some('a'), Nothing])
    ['a', None]

Custom encoders can reuse `enc_hook`:
    >>> import msgspec
    >>> msgspec.msgpack.encode({'x': Some(1)}, enc_hook=enc_hook)
    b'\\x81\\xa1x\\x01'
"""

from __future__ import annotations

from typing import Any

import msgspec

from klaw_option.types.option import NothingType, Some

__all__ = [
    'decode',
    'enc_hook',
    'encode',
    'to_builtins',
]


def enc_hook(obj: Any) -> Any:
    """Erase Option wrappers for msgspec.

    Args:
        obj: An object msgspec cannot encode natively.

    Returns:
        The contained value for Some, None for Nothing.

    Raises:
        NotImplementedError: For any other type, as msgspec expects.
    """
    if isinstance(obj, Some):
        return obj.value
    if isinstance(obj, NothingType):
        return None
    msg = f'Objects of type {type(obj).__name__} are not supported'
    raise NotImplementedError(msg)


_encoder = msgspec.json.Encoder(enc_hook=enc_hook)


def encode(obj: Any) -> bytes:
    """Encode obj to compact JSON bytes, erasing Option wrappers.

    Example:
        >>> encode({'x': Some(10)})
        b'{"x":10}'
    """
    return _encoder.encode(obj)


def to_builtins(obj: Any) -> Any:
    """Convert obj to plain builtins (dict, list, str, ...), erasing Options.

    Example:
        >>> to_builtins({'x': Nothing})
        {'x': None}
    """
    return msgspec.to_builtins(obj, enc_hook=enc_hook)


def decode(data: bytes | str, type: Any = Any) -> Any:
    """Decode JSON, optionally into a typed structure.

    OneMany unions such as ``One[int] | Many[list[int]]`` are resolved from
    their ``"type"`` tag. Option fields come back as plain nullable values;
    wrap them with `klaw_option.option()`.

    Args:
        data: JSON bytes or string.
        type: Target type for msgspec validation (default: Any).

    Returns:
        The decoded object.

    Raises:
        msgspec.ValidationError: If data does not match ``type``.
        msgspec.DecodeError: If data is not valid JSON.
    """
    return msgspec.json.decode(data, type=type)

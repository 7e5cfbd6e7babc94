"""Core types: Option (Some, Nothing) and OneMany (One, Many)."""

from klaw_option.types.onemany import Many, One, OneMany, is_one_many
from klaw_option.types.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    collect,
    is_option,
    lift,
    option,
)

__all__ = [
    'Many',
    'Nothing',
    'NothingType',
    'One',
    'OneMany',
    'Option',
    'Some',
    'collect',
    'is_one_many',
    'is_option',
    'lift',
    'option',
]

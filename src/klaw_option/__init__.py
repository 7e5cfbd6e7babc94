"""klaw-option: Option and OneMany value types for Python 3.13+.

Flat imports (preferred):
    from klaw_option import Option, Some, Nothing, option, collect, lift
    from klaw_option import OneMany, One, Many

Submodule imports (for organization):
    from klaw_option.types import Option, OneMany
    from klaw_option.codec import encode, to_builtins
"""

# Codec
from klaw_option.codec import decode, enc_hook, encode, to_builtins

# Configuration
from klaw_option._config import OptionConfig, get_config, init

# Errors
from klaw_option.errors import AbsentValueError, CombinatorArityError, KlawOptionError

# Types
from klaw_option.types import (
    Many,
    Nothing,
    NothingType,
    One,
    OneMany,
    Option,
    Some,
    collect,
    is_one_many,
    is_option,
    lift,
    option,
)

__all__ = [
    # Errors
    'AbsentValueError',
    'CombinatorArityError',
    'KlawOptionError',
    # OneMany types
    'Many',
    # Option types
    'Nothing',
    'NothingType',
    'One',
    'OneMany',
    'Option',
    # Configuration
    'OptionConfig',
    'Some',
    'collect',
    # Codec
    'decode',
    'enc_hook',
    'encode',
    'get_config',
    'init',
    'is_one_many',
    'is_option',
    'lift',
    'option',
    'to_builtins',
]

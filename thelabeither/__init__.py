from .exceptions import AbsentValueError
from .result import (
    Either,
    Left,
    Right,
    either,
    from_optional,
    from_optional_or_else,
    left,
    right,
    values,
)

__all__ = [
    "AbsentValueError",
    "Either",
    "Left",
    "Right",
    "either",
    "from_optional",
    "from_optional_or_else",
    "left",
    "right",
    "values",
]

from .extensions import (
    filter_value,
    is_none,
    is_some,
    map_none,
    maybe,
    on_none,
    on_some,
    replace_none,
    then,
)
from .optional import Option, as_option, flatten

__all__ = [
    "Option",
    "as_option",
    "flatten",
    "filter_value",
    "is_none",
    "is_some",
    "map_none",
    "maybe",
    "on_none",
    "on_some",
    "replace_none",
    "then",
]

"""Python utilities

Small helpers shared by the other subpackages. They are not part of the public API.
"""

from .convert_case import camel_to_snake
from .inspect import inspect
from .frozen_error import FrozenError
from .frozen_list import FrozenList
from .frozen_dict import FrozenDict
from .undefined import Undefined, UndefinedType

__all__ = [
    "camel_to_snake",
    "inspect",
    "FrozenError",
    "FrozenList",
    "FrozenDict",
    "Undefined",
    "UndefinedType",
]

from typing import Optional

__all__ = ["Undefined", "UndefinedType"]


class UndefinedType:
    """Type of the :data:`Undefined` marker, which has only one instance."""

    __slots__ = ()

    _instance: Optional["UndefinedType"] = None

    def __new__(cls) -> "UndefinedType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    __str__ = __repr__

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Undefined"


# Marks argument and input field definitions without a default value.
Undefined = UndefinedType()

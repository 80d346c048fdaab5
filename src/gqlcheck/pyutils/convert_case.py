import re

__all__ = ["camel_to_snake"]

_re_camel_to_snake = re.compile(r"([a-z]|[A-Z0-9]+)(?=[A-Z])")


def camel_to_snake(s: str) -> str:
    """Convert from CamelCase to snake_case"""
    return _re_camel_to_snake.sub(r"\1_", s).lower()

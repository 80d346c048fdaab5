__all__ = ["FrozenError"]


class FrozenError(TypeError):
    """Error when trying to change an AST node or a read only collection."""

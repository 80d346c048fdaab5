"""Definitions of the GraphQL type system as seen by the validator

Only the parts of a schema which validation looks at are modelled here: names,
fields and their arguments, input fields, default values, the interfaces of object
types and the members of unions. Resolvers, serializers and documentation belong to
other layers.
"""

from __future__ import annotations  # Python < 3.10

from functools import cached_property
from typing import Any, Callable, Collection, Dict, Generic, Mapping, Optional
from typing import Tuple, TypeVar, Union, cast

from ..pyutils import FrozenDict, Undefined, inspect
from .assert_name import assert_name

try:
    from typing import TypeAlias, TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeAlias, TypeGuard

__all__ = [
    "is_object_type",
    "is_input_object_type",
    "is_list_type",
    "is_non_null_type",
    "is_wrapping_type",
    "is_input_type",
    "is_output_type",
    "is_composite_type",
    "get_nullable_type",
    "get_named_type",
    "get_argument_map",
    "define_arguments",
    "GraphQLArgument",
    "GraphQLArgumentMap",
    "GraphQLCompositeType",
    "GraphQLEnumType",
    "GraphQLField",
    "GraphQLFieldMap",
    "GraphQLFieldsType",
    "GraphQLInputField",
    "GraphQLInputFieldMap",
    "GraphQLInputObjectType",
    "GraphQLInputType",
    "GraphQLInputValue",
    "GraphQLInterfaceType",
    "GraphQLList",
    "GraphQLNamedType",
    "GraphQLNonNull",
    "GraphQLObjectType",
    "GraphQLOutputType",
    "GraphQLScalarType",
    "GraphQLType",
    "GraphQLUnionType",
    "GraphQLWrappingType",
    "Thunk",
]

T = TypeVar("T")

Thunk: TypeAlias = Union[Callable[[], T], T]


class GraphQLType:
    """Base class for all GraphQL types"""


class GraphQLNamedType(GraphQLType):
    """Base class for all GraphQL named types"""

    name: str

    def __init__(self, name: str) -> None:
        self.name = assert_name(name)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"

    def __str__(self) -> str:
        return self.name

    def _resolve(self, what: str, thunk: Thunk[T]) -> T:
        # Thunks allow types to refer to each other, or to themselves.
        try:
            return thunk() if callable(thunk) else thunk
        except Exception as error:
            raise TypeError(
                f"{self.name} {what} cannot be resolved. {error}"
            ) from error


class GraphQLScalarType(GraphQLNamedType):
    """Scalar Type Definition

    Only the name of a scalar matters for validation, coercing its values is left to
    the executor.

    Example::

        odd_type = GraphQLScalarType('Odd')
    """


class GraphQLEnumType(GraphQLNamedType):
    """Enum Type Definition

    Example::

        RGBType = GraphQLEnumType('RGB', ['RED', 'GREEN', 'BLUE'])
    """

    values: Tuple[str, ...]

    def __init__(self, name: str, values: Collection[str] = ()) -> None:
        super().__init__(name)
        if isinstance(values, str) or not isinstance(values, Collection):
            raise TypeError(f"{name} values must be a collection of value names.")
        self.values = tuple(assert_name(value) for value in values)


class GraphQLInputValue:
    """Base class for values which can be supplied in a document

    Arguments of fields and directives and fields of input objects are input values.
    An input value is required when its type is non-null and it has no default.
    Since ``None`` is a valid default value, "no default" is spelled ``Undefined``.
    """

    type: GraphQLInputType
    default_value: Any

    def __init__(self, type_: GraphQLInputType, default_value: Any = Undefined) -> None:
        self.type = type_
        self.default_value = default_value

    @property
    def required(self) -> bool:
        return isinstance(self.type, GraphQLNonNull) and self.default_value is Undefined

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.type!r}>"

    def __eq__(self, other: Any) -> bool:
        return self is other or (
            other.__class__ is self.__class__
            and self.type == other.type
            and self.default_value == other.default_value
        )

    __hash__ = object.__hash__


class GraphQLArgument(GraphQLInputValue):
    """Argument of a field or a directive"""


class GraphQLInputField(GraphQLInputValue):
    """Field of an input object type"""


GraphQLArgumentMap: TypeAlias = Mapping[str, GraphQLArgument]
GraphQLInputFieldMap: TypeAlias = Mapping[str, GraphQLInputField]


def define_arguments(args: Optional[Mapping[str, Any]]) -> GraphQLArgumentMap:
    """Freeze the given arguments, wrapping plain input types as GraphQLArgument."""
    if not args:
        return FrozenDict()
    if not isinstance(args, Mapping):
        raise TypeError("Arguments must be a mapping with argument names as keys.")
    return FrozenDict(
        {
            assert_name(name): arg
            if isinstance(arg, GraphQLArgument)
            else GraphQLArgument(arg)
            for name, arg in args.items()
        }
    )


class GraphQLField:
    """Field of an object or interface type"""

    type: GraphQLOutputType
    args: GraphQLArgumentMap

    def __init__(
        self, type_: GraphQLOutputType, args: Optional[Mapping[str, Any]] = None
    ) -> None:
        self.type = type_
        self.args = define_arguments(args)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.type!r}>"

    def __eq__(self, other: Any) -> bool:
        return self is other or (
            isinstance(other, GraphQLField)
            and self.type == other.type
            and self.args == other.args
        )

    __hash__ = object.__hash__


GraphQLFieldMap: TypeAlias = Mapping[str, GraphQLField]


class GraphQLFieldsType(GraphQLNamedType):
    """Base class for object and interface types

    Fields and interfaces can be passed as thunks, i.e. functions without arguments,
    so that types can refer to each other::

        PersonType = GraphQLObjectType('Person', lambda: {
            'name': GraphQLField(GraphQLString),
            'bestFriend': GraphQLField(PersonType),
        })
    """

    def __init__(
        self,
        name: str,
        fields: Thunk[Mapping[str, Any]],
        interfaces: Optional[Thunk[Collection[GraphQLInterfaceType]]] = None,
    ) -> None:
        super().__init__(name)
        self._fields = fields
        self._interfaces = interfaces

    @cached_property
    def fields(self) -> GraphQLFieldMap:
        fields = self._resolve("fields", self._fields)
        return FrozenDict(
            {
                assert_name(name): field
                if isinstance(field, GraphQLField)
                else GraphQLField(field)
                for name, field in fields.items()
            }
        )

    @cached_property
    def interfaces(self) -> Tuple[GraphQLInterfaceType, ...]:
        return tuple(self._resolve("interfaces", self._interfaces) or ())


class GraphQLObjectType(GraphQLFieldsType):
    """Object Type Definition"""


class GraphQLInterfaceType(GraphQLFieldsType):
    """Interface Type Definition"""


class GraphQLUnionType(GraphQLNamedType):
    """Union Type Definition

    Unions have no fields of their own. Only ``__typename`` can be selected on them
    directly, everything else needs a fragment on one of the member types.
    """

    def __init__(self, name: str, types: Thunk[Collection[GraphQLObjectType]]) -> None:
        super().__init__(name)
        self._types = types

    @cached_property
    def types(self) -> Tuple[GraphQLObjectType, ...]:
        return tuple(self._resolve("types", self._types) or ())


class GraphQLInputObjectType(GraphQLNamedType):
    """Input Object Type Definition

    Example::

        GeoPoint = GraphQLInputObjectType('GeoPoint', {
            'lat': GraphQLInputField(GraphQLNonNull(GraphQLFloat)),
            'lon': GraphQLInputField(GraphQLNonNull(GraphQLFloat)),
            'alt': GraphQLInputField(GraphQLFloat, default_value=0),
        })
    """

    def __init__(self, name: str, fields: Thunk[Mapping[str, Any]]) -> None:
        super().__init__(name)
        self._fields = fields

    @cached_property
    def fields(self) -> GraphQLInputFieldMap:
        fields = self._resolve("fields", self._fields)
        return FrozenDict(
            {
                assert_name(name): field
                if isinstance(field, GraphQLInputField)
                else GraphQLInputField(field)
                for name, field in fields.items()
            }
        )


GT = TypeVar("GT", bound=GraphQLType, covariant=True)


class GraphQLWrappingType(GraphQLType, Generic[GT]):
    """Base class for list and non-null types"""

    of_type: GT

    def __init__(self, type_: GT) -> None:
        if not isinstance(type_, GraphQLType):
            raise TypeError(
                f"Can only create a wrapper for a GraphQLType, but got: {type_}."
            )
        self.of_type = type_

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.of_type!r}>"

    def __eq__(self, other: Any) -> bool:
        return self is other or (
            other.__class__ is self.__class__ and self.of_type == other.of_type
        )

    def __hash__(self) -> int:
        return hash((self.__class__, self.of_type))


class GraphQLList(GraphQLWrappingType[GT]):
    """List Type Wrapper"""

    def __str__(self) -> str:
        return f"[{self.of_type}]"


class GraphQLNonNull(GraphQLWrappingType[GT]):
    """Non-Null Type Wrapper

    For arguments and input fields, a non-null type without a default value makes
    the value required.
    """

    def __init__(self, type_: GT) -> None:
        if isinstance(type_, GraphQLNonNull):
            raise TypeError(
                f"Can only create NonNull of a Nullable GraphQLType but got: {type_}."
            )
        super().__init__(type_)

    def __str__(self) -> str:
        return f"{self.of_type}!"


GraphQLInputType: TypeAlias = Union[
    GraphQLScalarType,
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNonNull,
]

GraphQLOutputType: TypeAlias = Union[
    GraphQLScalarType,
    GraphQLObjectType,
    GraphQLInterfaceType,
    GraphQLUnionType,
    GraphQLEnumType,
    GraphQLList,
    GraphQLNonNull,
]

# Types which can be the parent of a selection set
GraphQLCompositeType: TypeAlias = Union[
    GraphQLObjectType, GraphQLInterfaceType, GraphQLUnionType
]

_input_types = (GraphQLScalarType, GraphQLEnumType, GraphQLInputObjectType)
_output_types = (
    GraphQLScalarType,
    GraphQLEnumType,
    GraphQLFieldsType,
    GraphQLUnionType,
)


def is_object_type(type_: Any) -> TypeGuard[GraphQLObjectType]:
    return isinstance(type_, GraphQLObjectType)


def is_input_object_type(type_: Any) -> TypeGuard[GraphQLInputObjectType]:
    return isinstance(type_, GraphQLInputObjectType)


def is_list_type(type_: Any) -> TypeGuard[GraphQLList]:
    return isinstance(type_, GraphQLList)


def is_non_null_type(type_: Any) -> TypeGuard[GraphQLNonNull]:
    return isinstance(type_, GraphQLNonNull)


def is_wrapping_type(type_: Any) -> TypeGuard[GraphQLWrappingType]:
    return isinstance(type_, GraphQLWrappingType)


def is_input_type(type_: Any) -> TypeGuard[GraphQLInputType]:
    return isinstance(get_named_type(type_), _input_types)


def is_output_type(type_: Any) -> TypeGuard[GraphQLOutputType]:
    return isinstance(get_named_type(type_), _output_types)


def is_composite_type(type_: Any) -> TypeGuard[GraphQLCompositeType]:
    return isinstance(type_, (GraphQLFieldsType, GraphQLUnionType))


def get_nullable_type(type_: Optional[GraphQLType]) -> Optional[GraphQLType]:
    """Strip a non-null wrapper, if any."""
    return type_.of_type if isinstance(type_, GraphQLNonNull) else type_


def get_named_type(type_: Any) -> Optional[GraphQLNamedType]:
    """Strip all list and non-null wrappers."""
    while isinstance(type_, GraphQLWrappingType):
        type_ = type_.of_type
    return cast(Optional[GraphQLNamedType], type_ or None)


def get_argument_map(defn: Any) -> Mapping[str, GraphQLInputValue]:
    """Get the declared arguments of a definition which may carry arguments.

    For field and directive definitions, these are their arguments. For input object
    types, these are their input fields. Names that have not been declared are simply
    not contained in the returned mapping.
    """
    if isinstance(defn, GraphQLInputObjectType):
        return defn.fields
    args: Optional[Dict[str, GraphQLInputValue]] = getattr(defn, "args", None)
    if not isinstance(args, Mapping):
        raise TypeError(f"Expected {inspect(defn)} to be able to carry arguments.")
    return args

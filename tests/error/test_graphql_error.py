from gqlcheck.error import (
    GraphQLError,
    GraphQLValidationError,
    format_error,
    print_error,
)
from gqlcheck.language import Location, Source, SourceLocation

from pytest import raises

from ..utils.ast_builders import arg, field, query

body = "{\n  user(uid: 4) {\n    name\n  }\n}"
source = Source(body)

argument_node = arg("uid", 4, loc=Location(body.index("uid"), body.index(")"), source))
field_node = field(
    "user",
    field("name"),
    arguments=[argument_node],
    loc=Location(body.index("user"), body.rindex("}") - 1, source),
)
operation_node = query(field_node)


def describe_graphql_error():
    def is_a_class_and_is_a_subclass_of_exception():
        assert type(GraphQLError) is type
        assert issubclass(GraphQLError, Exception)
        assert isinstance(GraphQLError("str"), Exception)
        assert isinstance(GraphQLError("str"), GraphQLError)

    def may_have_only_a_message():
        e = GraphQLError("msg")
        assert e.message == "msg"
        assert e.nodes is None
        assert e.source is None
        assert e.positions is None
        assert e.locations is None
        assert e.path is None
        assert str(e) == "msg"

    def converts_nodes_to_positions_and_locations():
        e = GraphQLError("msg", [field_node])
        assert e.nodes == [field_node]
        assert e.source is source
        assert e.positions == [4]
        assert e.locations == [(2, 3)]

    def converts_single_node_to_positions_and_locations():
        e = GraphQLError("msg", argument_node)
        assert e.nodes == [argument_node]
        assert e.source is source
        assert e.positions == [9]
        assert e.locations == [(2, 8)]

    def converts_node_without_location_to_locations_as_none():
        node = field("user")
        e = GraphQLError("msg", node)
        assert e.nodes == [node]
        assert e.source is None
        assert e.positions is None
        assert e.locations is None

    def uses_the_source_of_the_first_located_node():
        e = GraphQLError("msg", [field("user"), argument_node, field_node])
        assert e.source is source
        assert e.positions == [9, 4]
        assert e.locations == [(2, 8), (2, 3)]

    def serializes_to_include_message_and_locations():
        e = GraphQLError("msg", argument_node)
        assert str(e) == (
            "msg\n\nGraphQL request:2:8\n"
            "1 | {\n"
            "2 |   user(uid: 4) {\n"
            "  |        ^\n"
            "3 |     name"
        )
        assert repr(e) == (
            "GraphQLError('msg', locations=[SourceLocation(line=2, column=8)])"
        )

    def serializes_to_include_path():
        e = GraphQLError("msg", path=["path", 3, "to", "field"])
        assert e.path == ["path", 3, "to", "field"]
        assert str(e) == "msg"
        assert repr(e) == "GraphQLError('msg', path=['path', 3, 'to', 'field'])"

    def always_stores_path_as_list():
        e = GraphQLError("msg", path=("user", "name"))
        assert e.path == ["user", "name"]
        assert isinstance(e.path, list)

    def is_comparable():
        e1 = GraphQLError("msg", argument_node, path=["user"])
        assert e1 == e1
        assert e1 == GraphQLError("msg", argument_node, path=["user"])
        assert not e1 != GraphQLError("msg", argument_node, path=["user"])
        assert e1 != GraphQLError("msg", argument_node, path=["me"])
        assert e1 != GraphQLError("other", argument_node, path=["user"])
        assert e1 != GraphQLError("msg", field_node, path=["user"])

    def is_comparable_with_dicts():
        e = GraphQLError("msg", argument_node, path=["user"])
        assert e == {"message": "msg"}
        assert e == {"message": "msg", "path": ["user"]}
        assert e == {"message": "msg", "locations": [{"line": 2, "column": 8}]}
        assert e == {"message": "msg", "locations": [(2, 8)], "path": ["user"]}
        assert e != {"message": "other"}
        assert e != {"message": "msg", "path": ["me"]}
        assert e != {"message": "msg", "unknown": None}
        assert e != {"path": ["user"]}

    def is_hashable():
        hash(GraphQLError("msg"))

    def shows_path_and_locations():
        e = GraphQLError("msg", argument_node, path=["user"])
        assert repr(e) == (
            "GraphQLError('msg', locations=[SourceLocation(line=2, column=8)],"
            " path=['user'])"
        )


def describe_format_error():
    def formats_graphql_error():
        e = GraphQLError(
            "test message",
            argument_node,
            path=["user"],
        )
        assert format_error(e) == {
            "message": "test message",
            "locations": [{"line": 2, "column": 8}],
            "path": ["user"],
        }
        assert e.formatted == format_error(e)

    def formats_error_without_locations_and_path():
        e = GraphQLError("msg")
        assert e.formatted == {"message": "msg", "locations": None, "path": None}

    def uses_default_message():
        e = GraphQLError("")
        assert e.formatted["message"] == "An unknown error occurred."

    def rejects_none_and_non_errors():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            format_error(None)  # type: ignore
        assert str(exc_info.value) == "Expected a GraphQLError."

        with raises(TypeError):
            # noinspection PyTypeChecker
            format_error(Exception("msg"))  # type: ignore


def describe_print_error():
    def prints_an_error_without_location():
        assert print_error(GraphQLError("Error without location")) == (
            "Error without location"
        )

    def prints_an_error_using_node_without_location():
        e = GraphQLError("Error attached to node without location", field("user"))
        assert print_error(e) == "Error attached to node without location"

    def prints_an_error_with_nodes_from_different_sources():
        source_a = Source("{ a(x: 1) }", "SourceA")
        source_b = Source("query Q {\n  b(y: 2)\n}", "SourceB")
        node_a = arg("x", 1, loc=Location(4, 8, source_a))
        node_b = arg("y", 2, loc=Location(14, 18, source_b))
        e = GraphQLError("Example error with two nodes", [node_a, node_b])
        assert print_error(e) == (
            "Example error with two nodes\n\n"
            "SourceA:1:5\n"
            "1 | { a(x: 1) }\n"
            "  |     ^\n\n"
            "SourceB:2:5\n"
            "1 | query Q {\n"
            "2 |   b(y: 2)\n"
            "  |     ^\n"
            "3 | }"
        )

    def prints_source_locations_with_offset():
        offset_source = Source("{ a(x: 1) }", "Offset", SourceLocation(10, 4))
        e = GraphQLError("msg", arg("x", 1, loc=Location(4, 8, offset_source)))
        assert print_error(e) == (
            "msg\n\nOffset:10:8\n10 |    { a(x: 1) }\n   |        ^"
        )


def describe_graphql_validation_error():
    def collects_all_errors():
        errors = [GraphQLError("first"), GraphQLError("second")]
        e = GraphQLValidationError(errors)
        assert isinstance(e, Exception)
        assert e.errors == errors
        assert e.errors is not errors
        assert str(e) == "first\n\nsecond"

    def can_be_raised_and_caught():
        with raises(GraphQLValidationError) as exc_info:
            raise GraphQLValidationError([GraphQLError("msg")])
        assert exc_info.value.errors == [{"message": "msg"}]

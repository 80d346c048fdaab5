from pytest import raises

from gqlcheck.language import Visitor, visit
from gqlcheck.type import (
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    TypeNameMetaFieldDef,
)
from gqlcheck.utilities import TypeInfo, TypeInfoVisitor, get_field_def

from ..utils.ast_builders import (
    directive,
    doc,
    enum,
    field,
    fragment,
    inline,
    list_type,
    mutation,
    named_type,
    query,
    var_def,
)
from ..validation.harness import test_schema as schema


def describe_type_info():
    def rejects_non_schemas():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            TypeInfo(None)  # type: ignore
        assert str(exc_info.value) == "Expected None to be a GraphQL schema."

    def is_empty_before_visiting():
        type_info = TypeInfo(schema)
        assert type_info.schema is schema
        assert type_info.get_type() is None
        assert type_info.get_parent_type() is None
        assert type_info.get_input_type() is None
        assert type_info.get_parent_input_type() is None
        assert type_info.get_field_def() is None
        assert type_info.get_directive() is None
        assert type_info.get_argument() is None

    def allow_a_custom_field_def_lookup():
        some_field = GraphQLField(GraphQLString)

        def get_custom_field_def(_schema, _parent_type, field_node):
            return some_field if field_node.name.value == "anything" else None

        type_info = TypeInfo(schema, get_custom_field_def)
        visited = []

        class TestVisitor(Visitor):
            @staticmethod
            def enter_field(node, *_args):
                visited.append((node.name.value, type_info.get_field_def()))

        visit(
            doc(query(field("anything"), field("dog"))),
            TypeInfoVisitor(type_info, TestVisitor()),
        )
        assert visited == [("anything", some_field), ("dog", None)]


def describe_type_info_visitor():
    def rejects_invalid_type_info():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            TypeInfoVisitor(None, Visitor())  # type: ignore
        assert str(exc_info.value) == "Not a TypeInfo: None."

    def provides_exact_same_arguments_to_wrapped_visitor():
        ast = doc(query(field("dog", field("name"))))
        visited = []

        class TestVisitor(Visitor):
            @staticmethod
            def enter(*args):
                visited.append(["enter", *args])

            @staticmethod
            def leave(*args):
                visited.append(["leave", *args])

        visit(ast, TestVisitor())
        expected = visited[:]
        visited.clear()

        visit(ast, TypeInfoVisitor(TypeInfo(schema), TestVisitor()))
        assert len(visited) == len(expected)
        for entry, expected_entry in zip(visited, expected):
            assert entry[:3] == expected_entry[:3]

    def maintains_type_info_during_visit():
        visited = []
        type_info = TypeInfo(schema)

        ast = doc(
            query(
                field(
                    "human",
                    field("name"),
                    field("pets", inline("Dog", field("barkVolume"))),
                    args={"id": 4},
                )
            )
        )

        class TestVisitor(Visitor):
            @staticmethod
            def enter(node, *_args):
                parent_type = type_info.get_parent_type()
                type_ = type_info.get_type()
                input_type = type_info.get_input_type()
                visited.append(
                    [
                        "enter",
                        node.kind,
                        node.value if node.kind == "name" else None,
                        str(parent_type) if parent_type else None,
                        str(type_) if type_ else None,
                        str(input_type) if input_type else None,
                    ]
                )

            @staticmethod
            def leave(node, *_args):
                parent_type = type_info.get_parent_type()
                type_ = type_info.get_type()
                input_type = type_info.get_input_type()
                visited.append(
                    [
                        "leave",
                        node.kind,
                        node.value if node.kind == "name" else None,
                        str(parent_type) if parent_type else None,
                        str(type_) if type_ else None,
                        str(input_type) if input_type else None,
                    ]
                )

        visit(ast, TypeInfoVisitor(type_info, TestVisitor()))

        assert visited == [
            ["enter", "document", None, None, None, None],
            ["enter", "operation_definition", None, None, "QueryRoot", None],
            ["enter", "selection_set", None, "QueryRoot", "QueryRoot", None],
            ["enter", "field", None, "QueryRoot", "Human", None],
            ["enter", "name", "human", "QueryRoot", "Human", None],
            ["leave", "name", "human", "QueryRoot", "Human", None],
            ["enter", "argument", None, "QueryRoot", "Human", "ID"],
            ["enter", "name", "id", "QueryRoot", "Human", "ID"],
            ["leave", "name", "id", "QueryRoot", "Human", "ID"],
            ["enter", "int_value", None, "QueryRoot", "Human", "ID"],
            ["leave", "int_value", None, "QueryRoot", "Human", "ID"],
            ["leave", "argument", None, "QueryRoot", "Human", "ID"],
            ["enter", "selection_set", None, "Human", "Human", None],
            ["enter", "field", None, "Human", "String", None],
            ["enter", "name", "name", "Human", "String", None],
            ["leave", "name", "name", "Human", "String", None],
            ["leave", "field", None, "Human", "String", None],
            ["enter", "field", None, "Human", "[Pet]", None],
            ["enter", "name", "pets", "Human", "[Pet]", None],
            ["leave", "name", "pets", "Human", "[Pet]", None],
            ["enter", "selection_set", None, "Pet", "[Pet]", None],
            ["enter", "inline_fragment", None, "Pet", "Dog", None],
            ["enter", "named_type", None, "Pet", "Dog", None],
            ["enter", "name", "Dog", "Pet", "Dog", None],
            ["leave", "name", "Dog", "Pet", "Dog", None],
            ["leave", "named_type", None, "Pet", "Dog", None],
            ["enter", "selection_set", None, "Dog", "Dog", None],
            ["enter", "field", None, "Dog", "Int", None],
            ["enter", "name", "barkVolume", "Dog", "Int", None],
            ["leave", "name", "barkVolume", "Dog", "Int", None],
            ["leave", "field", None, "Dog", "Int", None],
            ["leave", "selection_set", None, "Dog", "Dog", None],
            ["leave", "inline_fragment", None, "Pet", "Dog", None],
            ["leave", "selection_set", None, "Pet", "[Pet]", None],
            ["leave", "field", None, "Human", "[Pet]", None],
            ["leave", "selection_set", None, "Human", "Human", None],
            ["leave", "field", None, "QueryRoot", "Human", None],
            ["leave", "selection_set", None, "QueryRoot", "QueryRoot", None],
            ["leave", "operation_definition", None, None, "QueryRoot", None],
            ["leave", "document", None, None, None, None],
        ]

    def tracks_input_types_of_arguments_and_values():
        visited = []
        type_info = TypeInfo(schema)

        ast = doc(
            query(
                field(
                    "complicatedArgs",
                    field(
                        "complexListArgField",
                        args={
                            "complexListArg": [
                                {"requiredField": True, "nested": {"intField": 1}}
                            ]
                        },
                    ),
                    field("multipleOpts", args={"opt1": 2}),
                )
            )
        )

        class TestVisitor(Visitor):
            @staticmethod
            def enter(node, *_args):
                if node.kind in ("argument", "object_field", "list_value"):
                    input_type = type_info.get_input_type()
                    parent_input_type = type_info.get_parent_input_type()
                    visited.append(
                        [
                            node.kind,
                            str(input_type) if input_type else None,
                            str(parent_input_type) if parent_input_type else None,
                        ]
                    )

        visit(ast, TypeInfoVisitor(type_info, TestVisitor()))

        assert visited == [
            ["argument", "[ComplexInput!]", None],
            ["list_value", "ComplexInput!", "[ComplexInput!]"],
            ["object_field", "Boolean!", "ComplexInput!"],
            ["object_field", "ComplexInput", "ComplexInput!"],
            ["object_field", "Int", "ComplexInput"],
            ["argument", "Int", None],
        ]

    def tracks_directives_and_their_arguments():
        visited = []
        type_info = TypeInfo(schema)

        ast = doc(
            query(
                field(
                    "dog",
                    field("name"),
                    directives=[
                        directive("include", {"if": True}),
                        directive("unknown", {"if": True}),
                    ],
                )
            )
        )

        class TestVisitor(Visitor):
            @staticmethod
            def enter_argument(node, *_args):
                directive_def = type_info.get_directive()
                arg_def = type_info.get_argument()
                visited.append(
                    [
                        node.name.value,
                        str(directive_def) if directive_def else None,
                        str(arg_def.type) if arg_def else None,
                    ]
                )

            @staticmethod
            def leave_directive(*_args):
                visited.append(["left", str(type_info.get_directive())])

        visit(ast, TypeInfoVisitor(type_info, TestVisitor()))

        assert visited == [
            ["if", "@include", "Boolean!"],
            ["left", "@include"],
            ["if", None, None],
            ["left", "None"],
        ]
        assert type_info.get_directive() is None

    def tracks_fragments_variables_and_mutations():
        visited = []
        type_info = TypeInfo(schema)

        ast = doc(
            mutation(
                field("updateUser", field("id")),
                variable_definitions=[var_def("ids", list_type(named_type("ID")))],
            ),
            fragment(
                "dogFields",
                "Dog",
                field("doesKnowCommand", args={"dogCommand": enum("SIT")}),
            ),
        )

        class TestVisitor(Visitor):
            @staticmethod
            def enter(node, *_args):
                if node.kind in (
                    "variable_definition",
                    "fragment_definition",
                    "operation_definition",
                    "enum_value",
                ):
                    type_ = type_info.get_type()
                    input_type = type_info.get_input_type()
                    visited.append(
                        [
                            node.kind,
                            str(type_) if type_ else None,
                            str(input_type) if input_type else None,
                        ]
                    )

        visit(ast, TypeInfoVisitor(type_info, TestVisitor()))

        assert visited == [
            ["operation_definition", "MutationRoot", None],
            ["variable_definition", "MutationRoot", "[ID]"],
            ["fragment_definition", "Dog", None],
            ["enum_value", "Boolean", "DogCommand"],
        ]

    def unwinds_type_info_for_skipped_subtrees():
        type_info = TypeInfo(schema)
        visited = []

        class TestVisitor(Visitor):
            @staticmethod
            def enter_field(node, *_args):
                if node.name.value == "human":
                    return Visitor.SKIP

            @staticmethod
            def enter_selection_set(*_args):
                parent_type = type_info.get_parent_type()
                visited.append(str(parent_type) if parent_type else None)

        ast = doc(
            query(field("human", field("name")), field("dog", field("name")))
        )
        visit(ast, TypeInfoVisitor(type_info, TestVisitor()))

        assert visited == ["QueryRoot", "Dog"]
        assert type_info.get_type() is None
        assert type_info.get_parent_type() is None
        assert type_info.get_field_def() is None


def describe_get_field_def():
    def gets_fields_of_object_and_interface_types():
        dog = schema.get_type("Dog")
        pet = schema.get_type("Pet")
        assert get_field_def(schema, dog, field("name")) is dog.fields["name"]
        assert get_field_def(schema, pet, field("name")) is pet.fields["name"]
        assert get_field_def(schema, dog, field("unknown")) is None

    def gets_typename_on_composite_types():
        for type_name in ("Dog", "Pet", "CatOrDog"):
            parent_type = schema.get_type(type_name)
            assert get_field_def(schema, parent_type, field("__typename")) is (
                TypeNameMetaFieldDef
            )

    def has_no_other_fields_on_unions():
        cat_or_dog = schema.get_type("CatOrDog")
        assert get_field_def(schema, cat_or_dog, field("name")) is None

    def has_no_fields_on_leaf_types():
        assert get_field_def(schema, GraphQLString, field("__typename")) is None

    def supports_schemas_with_only_a_query_type():
        query_type = GraphQLObjectType("Query", {"f": GraphQLField(GraphQLString)})
        some_schema = GraphQLSchema(query_type)
        assert get_field_def(some_schema, query_type, field("f")) is (
            query_type.fields["f"]
        )

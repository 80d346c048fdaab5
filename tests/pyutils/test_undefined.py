import pickle

from gqlcheck.pyutils import Undefined, UndefinedType


def describe_undefined():
    def has_repr_and_str():
        assert repr(Undefined) == "Undefined"
        assert str(Undefined) == "Undefined"

    def is_falsy():
        assert bool(Undefined) is False

    def is_only_equal_to_itself():
        assert Undefined == Undefined
        assert Undefined != None  # noqa: E711
        assert Undefined != False  # noqa: E712
        assert hash(Undefined) == hash(Undefined)

    def is_a_singleton():
        assert UndefinedType() is Undefined

    def can_be_pickled():
        assert pickle.loads(pickle.dumps(Undefined)) is Undefined

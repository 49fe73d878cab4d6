import pytest

from bprog.operations import CATALOG, OPERATIONS, find_operator, operator
from bprog.operations.operator import register
from bprog.types.signature import Signature, nullary, unary
from bprog.types.value_type import Constraint as C

NAMES = """
() print read parseInteger parseFloat words
+ - * / div % < > == && || not
head tail empty length cons append
each map foldl if loop times exec
:= fun ' eval dup swap pop err
""".split()


def test_catalog_covers_every_builtin():
    assert sorted(OPERATIONS) == sorted(NAMES)
    assert len(CATALOG) == len(NAMES)
    assert [row[0] for row in CATALOG] == [op.name for op in OPERATIONS.values()]


def test_operators_are_singletons():
    assert operator("map") is OPERATIONS["map"]
    assert find_operator("map") is operator("map")
    assert find_operator("nope") is None
    with pytest.raises(KeyError):
        operator("nope")


def test_register_rejects_duplicates():
    with pytest.raises(ValueError):
        register("+", nullary(C.VOID), lambda env, args, mods: None)


@pytest.mark.parametrize(
    "name,text",
    [
        ("+", "(Addable, Addable -> Addable)"),
        ("read", "( -> String)"),
        ("if", "(Boolean -> Any) {Any Any}"),
        ("foldl", "(List, Any -> Any) {Executable}"),
    ],
)
def test_signature_text(name, text):
    assert str(operator(name).signature) == text


def test_modifier_arity():
    assert len(operator("loop").signature.modifiers) == 2
    assert len(operator("'").signature.modifiers) == 1
    assert operator("==").signature.homogeneous
    assert not operator("cons").signature.homogeneous


def test_three_operand_signature():
    sig = Signature((C.INTEGER, C.INTEGER, C.LIST), (), C.LIST)
    assert sig.stack_args == (C.INTEGER, C.INTEGER, C.LIST)
    assert sig.with_modifiers(C.EXECUTABLE).modifiers == (C.EXECUTABLE,)


def test_signature_arity_limit():
    with pytest.raises(ValueError):
        Signature((C.ANY,) * 4)
    assert unary(C.ANY, C.VOID) == Signature((C.ANY,), (), C.VOID)

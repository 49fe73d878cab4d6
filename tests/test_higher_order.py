import pytest

from bprog.operations import operator
from bprog.types.quotation import Quotation


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ 1 2 3 ] map { 1 + }", [2, 3, 4]),
        ("[ 1 2 3 ] { 10 * } map", [10, 20, 30]),
        ("[ 1 2 3 ] map { dup * }", [1, 4, 9]),
        ("[ ] map { 1 + }", []),
        ("[ [ 1 ] [ 2 3 ] ] map length", [1, 2]),
        ('[ 1 2 ] map { 0 > if { "pos" } { "neg" } }', ["pos", "pos"]),
        ("[ { 1 } { 2 } ] map { exec }", [1, 2]),
        ("[ { 1 } { 2 } ] map { }", [Quotation([1]), Quotation([2])]),
    ],
)
def test_map(run, source, expected):
    assert run(source) == [expected]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ 1 2 3 ] 0 foldl { + }", 6),
        ("[ 1 2 3 ] 0 { + } foldl", 6),
        ("[ 1 2 3 ] 10 foldl { - }", 4),
        ("[ ] 5 foldl { + }", 5),
        ("[ 2 3 4 ] 1 foldl *", 24),
        ('[ "a" "b" ] "" foldl { + }', "ab"),
        ("[ 1 2 3 ] [ ] foldl { swap cons }", [3, 2, 1]),
    ],
)
def test_foldl(run, source, expected):
    assert run(source) == [expected]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ 1 2 3 ] each { 10 * }", [10, 20, 30]),
        ("[ 1 2 3 ] { } each", [1, 2, 3]),
        ("[ ] each { 1 }", []),
        ("0 [ 1 2 3 ] each { + }", [6]),
    ],
)
def test_each(run, source, expected):
    assert run(source) == expected


def test_each_print(run, capsys):
    assert run("[ 1 2 3 ] each print") == []
    assert capsys.readouterr().out == "1\n2\n3\n"


def test_map_passes_operator_elements_as_data(run):
    assert run("[ + - ] map { }") == [[operator("+"), operator("-")]]


def test_foldl_operator_accumulator_is_data(run):
    assert run("[ ] [ + ] head foldl { }") == [operator("+")]


def test_map_long_list(interp):
    interp.stack.push(list(range(2000)))
    interp.run("map { 1 + }")
    assert interp.stack.to_list() == [list(range(1, 2001))]


@pytest.mark.parametrize(
    "source,expected",
    [
        # argument mismatch: the block is left behind as data
        ("5 map { 1 + }", [5, Quotation([1, operator("+")])]),
        # modifier mismatch
        ("[ 1 2 ] map 5", [[1, 2], 5]),
        ("5 0 foldl { + }", [5, 0, Quotation([operator("+")])]),
    ],
)
def test_higher_order_mismatch(interp, source, expected):
    interp.run(source)
    assert interp.stack.to_list() == expected
    assert len(interp.diagnostics) == 1


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ 1 2 3 ] 0 { + } foldl 10 *", [60]),
        ("[ 1 2 ] { 10 * } each 5", [10, 20, 5]),
        ("[ 1 2 ] { 1 + } map length", [2]),
    ],
)
def test_block_first_with_trailing_tokens(interp, source, expected):
    interp.run(source)
    assert interp.stack.to_list() == expected
    assert interp.diagnostics == []


def test_block_first_map_then_print(run, capsys):
    assert run("[ 1 2 3 ] { 1 + } map print") == []
    assert capsys.readouterr().out == "[2,3,4]\n"

import pytest

from bprog.operations import operator
from bprog.types.errors import InputExhausted
from bprog.types.quotation import Quotation


@pytest.mark.parametrize(
    "source,expected",
    [
        # block-first form
        ("true { 1 } { 2 } if", [1]),
        ("false { 1 } { 2 } if", [2]),
        # trailing-block form
        ("true if { 1 } { 2 }", [1]),
        ("false if { 1 } { 2 }", [2]),
        ("1 2 < if { 10 } { 20 }", [10]),
        ("true if 5 6", [5]),
        ("false if { } { 7 }", [7]),
        ("true if { 1 } { 2 } 3 +", [4]),
        ("true if { false if { 1 } { 2 } } { 3 }", [2]),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("3 { 1 } times", [1, 1, 1]),
        ("3 times { 1 }", [1, 1, 1]),
        ("0 times { 1 }", []),
        ("-2 times { 1 }", []),
        ("1 4 times { 2 * }", [16]),
        ("0 5 times { 1 + } 1 +", [6]),
        ("2 times { 2 times { 7 } }", [7, 7, 7, 7]),
    ],
)
def test_times(run, source, expected):
    assert run(source) == expected


def test_times_leaves_nothing_pending(interp):
    interp.run("3 { 1 } times")
    assert interp.stack.to_list() == [1, 1, 1]
    assert interp.diagnostics == []


def test_times_scales_without_python_recursion(run):
    assert run("0 5000 times { 1 + }") == [5000]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 loop { dup 4 > } { dup 1 + }", [1, 2, 3, 4, 5]),
        ("10 loop { dup 0 == } { 1 - }", [0]),
        ("1 { dup 3 > } { dup 1 + } loop", [1, 2, 3, 4]),
    ],
)
def test_loop(run, source, expected):
    assert run(source) == expected


def test_loop_runs_condition_first(run):
    # the condition holds immediately, so the body never runs
    assert run("5 loop { true } { 99 }") == [5]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("{ 1 2 + } exec", [3]),
        ("{ } exec", []),
        ("{ { 1 } exec } exec", [1]),
    ],
)
def test_exec(run, source, expected):
    assert run(source) == expected


def test_exec_rejects_list(interp):
    # a List is data; only Quotations and Operators are executable
    interp.run("[ 1 2 + ] exec")
    assert interp.stack.to_list() == [[1, 2, operator("+")]]
    assert len(interp.diagnostics) == 1


def test_exec_on_operator_value(run):
    # head of a list holding an operator yields the operator as data
    assert run("[ + ] head") == [operator("+")]


def test_exec_runs_operator_value(run):
    assert run("2 3 [ + ] head exec") == [5]


def test_literal_quotation_is_data(run):
    assert run("{ 1 2 }") == [Quotation([1, 2])]


def test_missing_branches(interp):
    with pytest.raises(InputExhausted):
        interp.run("true if { 1 }")


def test_times_needs_integer(interp):
    interp.run("1.5 times { 1 }")
    assert len(interp.diagnostics) == 1


@pytest.mark.parametrize(
    "source,expected",
    [
        ("true { 1 } { 2 } if 5 6", [1, 5, 6]),
        ("false { 1 } { 2 } if 5 6", [2, 5, 6]),
        ("3 { 1 } times 4", [1, 1, 1, 4]),
        ("2 { 7 } times { 8 }", [7, 7, Quotation([8])]),
        ("1 { dup 3 > } { dup 1 + } loop 0", [1, 2, 3, 4, 0]),
    ],
)
def test_block_first_with_trailing_tokens(interp, source, expected):
    interp.run(source)
    assert interp.stack.to_list() == expected
    assert interp.diagnostics == []

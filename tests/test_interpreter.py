import io

import pytest

from bprog.__main__ import main
from bprog.interpreter import Interpreter
from bprog.types.errors import StackUnderflow
from bprog.types.symbol import Symbol
from bprog.types.void import Void


def test_eval_returns_top(interp):
    assert interp.eval("1 2 +") == 3


def test_eval_of_empty_program(interp):
    assert interp.eval("") is Void


def test_session_state_is_kept(interp):
    interp.eval("1")
    interp.eval("x 10 :=")
    assert interp.eval("2 + x eval *") == 30


def test_diagnostics_and_reset(interp):
    interp.run('x 1 := 1 "a" +')
    assert len(interp.diagnostics) == 1
    interp.reset()
    assert interp.stack.is_empty()
    assert interp.diagnostics == []
    # bindings survive a reset
    assert interp.eval("x eval") == 1


def test_fatal_error_keeps_session(interp):
    with pytest.raises(StackUnderflow):
        interp.eval("7 pop pop")
    assert interp.eval("1") == 1


def test_prelude_string():
    interp = Interpreter(prelude="two 2 := 99")
    assert interp.stack.is_empty()
    assert interp.eval("two eval") == 2


def test_prelude_file(tmp_path, monkeypatch):
    prelude = tmp_path / "std.bprog"
    prelude.write_text("sq { dup * } fun\n", encoding="utf-8")
    monkeypatch.setenv("BPROG_PRELUDE_PATH", str(prelude))
    assert Interpreter().eval("3 sq eval") == 9


def test_prelude_directory_loads_in_order(tmp_path, monkeypatch):
    (tmp_path / "a.bprog").write_text("one 1 :=", encoding="utf-8")
    (tmp_path / "b.bprog").write_text("two one eval 1 + :=", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("oops :=", encoding="utf-8")
    monkeypatch.setenv("BPROG_PRELUDE_PATH", str(tmp_path))
    interp = Interpreter()
    assert interp.eval("two eval") == 2
    assert interp.diagnostics == []
    assert interp.env.find(Symbol("oops")) is None


def test_no_prelude_by_default():
    interp = Interpreter()
    assert len(interp.env) == 0


def test_main_runs_file(tmp_path, capsys):
    program = tmp_path / "prog.bprog"
    program.write_text("1 2 + 4\n", encoding="utf-8")
    assert main([str(program), "--no-prelude"]) == 0
    assert capsys.readouterr().out == "4 3\n"


def test_main_reports_fatal_error(tmp_path, capsys):
    program = tmp_path / "prog.bprog"
    program.write_text("+", encoding="utf-8")
    assert main([str(program)]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_repl(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 +\npop pop\n:q\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("bprog> 3\n")
    assert "error:" in out
    assert out.endswith("bprog> ")


def test_repl_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["--no-prelude"]) == 0
    assert capsys.readouterr().out == "bprog> 1\nbprog> \n"

import pytest

from sprig import repl as repl_module
from sprig.interpreter import Interpreter, evaluate_one
from sprig.repl import repl, run_line
from sprig.types.errors import SprigSyntaxError, SprigUnboundSymbol
from sprig.types.nil import Nil
from sprig.types.number import Fraction
from sprig.types.symbol import Symbol


def test_evaluate_one(env):
    assert evaluate_one("(+ 1 2)", env) == Fraction(3)
    assert evaluate_one("  (define z 4) ; trailing comment", env) == Symbol("z")
    assert evaluate_one("z", env) == Fraction(4)


@pytest.mark.parametrize("source", ["", "   ", "; only a comment", "1 2", "(+ 1"])
def test_evaluate_one_requires_exactly_one_form(env, source):
    with pytest.raises(SprigSyntaxError):
        evaluate_one(source, env)


def test_interpreter_keeps_global_state():
    interp = Interpreter()
    assert interp.eval("(define x 2) (* x x)") == Fraction(4)
    assert interp.eval("x") == Fraction(2)
    assert interp.eval("") is Nil
    assert interp.eval_one("(list x)").car == Fraction(2)


def test_interpreters_are_independent():
    a = Interpreter()
    b = Interpreter()
    a.eval("(define only-a 1)")
    with pytest.raises(SprigUnboundSymbol):
        b.eval("only-a")


def test_interpreter_prelude():
    interp = Interpreter(prelude="(define square (lambda (x) (* x x)))")
    assert interp.eval("(square 12)") == Fraction(144)


def test_eval_each_yields_values_in_order():
    interp = Interpreter()
    assert list(interp.eval_each("1 2.5 'a")) == [Fraction(1), 2.5, Symbol("a")]


def test_run_line_prints_each_result(capsys):
    interp = Interpreter()
    assert run_line(interp, "(define x 3) (+ x 1) '(a \"b\")")
    out = capsys.readouterr().out
    assert out == 'x\n4\n(a "b")\n'


def test_run_line_reports_errors_and_continues(capsys):
    interp = Interpreter()
    assert not run_line(interp, "(car 1)")
    captured = capsys.readouterr()
    assert captured.err.startswith("SprigTypeError: ")
    assert run_line(interp, "(+ 1 1)")
    assert capsys.readouterr().out == "2\n"


def test_run_line_reports_syntax_errors(capsys):
    interp = Interpreter()
    assert not run_line(interp, "(+ 1")
    assert capsys.readouterr().err.startswith("SprigSyntaxError: ")


def test_run_line_reports_deep_recursion(capsys):
    interp = Interpreter()
    interp.eval("(define loop (lambda (n) (loop (+ n 1))))")
    assert not run_line(interp, "(loop 0)")
    assert capsys.readouterr().err.startswith("RecursionError: ")


def test_repl_runs_script_file(tmp_path, capsys):
    script = tmp_path / "prog.lisp"
    script.write_text("(define sq (lambda (x) (* x x)))\n(sq 5)\n")
    with pytest.raises(SystemExit) as exc:
        repl([str(script)])
    assert exc.value.code == 0
    assert capsys.readouterr().out == "sq\n25\n"


def test_repl_script_error_exit_status(tmp_path, capsys):
    script = tmp_path / "bad.lisp"
    script.write_text("(car 1)\n")
    with pytest.raises(SystemExit) as exc:
        repl([str(script)])
    assert exc.value.code == 1


def test_interactive_loop(monkeypatch, capsys):
    lines = iter(["(define x 1)", "", "(+ x 41)", "nope"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    monkeypatch.setattr(repl_module, "_setup_history", lambda: None)
    monkeypatch.setenv("SPRIG_PROMPT", "sprig> ")
    repl([])
    captured = capsys.readouterr()
    assert "x\n42\n" in captured.out
    assert "SprigUnboundSymbol: Symbol 'nope' not found" in captured.err


def test_quit_from_repl_exits(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "(quit)")
    monkeypatch.setattr(repl_module, "_setup_history", lambda: None)
    with pytest.raises(SystemExit) as exc:
        repl([])
    assert exc.value.code == 0

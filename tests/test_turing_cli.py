import io

import pytest

from cyatools.turing import TuringMachine
from cyatools.turing_cli import main

ACCEPTING = "2\n0\n1\n2\n0 a b R 0\n0 $ $ L 1\n"
REJECTING = "2\n0\n1\n1\n0 a b R 0\n"


@pytest.fixture
def files(tmp_path):
    def make(machine_text, tape_text="aa"):
        machine = tmp_path / "input.tm"
        tape = tmp_path / "input.tape"
        machine.write_text(machine_text, encoding="utf-8")
        tape.write_text(tape_text + "\n", encoding="utf-8")
        return str(machine), str(tape)

    return make


def _stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_rejecting_run(files, monkeypatch, capsys):
    machine_path, tape_path = files(REJECTING)
    _stdin(monkeypatch, "n\n")
    assert main([machine_path, tape_path]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "String REJECTED"


@pytest.mark.parametrize("answer", ["s\n", "S\n", "\n\ny\n"])
def test_shows_machine_when_asked(files, monkeypatch, capsys, answer):
    machine_path, tape_path = files(ACCEPTING)
    _stdin(monkeypatch, answer)
    main([machine_path, tape_path])
    out = capsys.readouterr().out
    description = str(TuringMachine.from_files(machine_path, tape_path))
    assert description in out


def test_hides_machine_otherwise(files, monkeypatch, capsys):
    machine_path, tape_path = files(ACCEPTING)
    _stdin(monkeypatch, "")
    main([machine_path, tape_path])
    out = capsys.readouterr().out
    description = str(TuringMachine.from_files(machine_path, tape_path))
    assert description not in out


def test_missing_machine_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.tm"), str(tmp_path / "nope.tape")]) == 1
    assert "Error" in capsys.readouterr().err


def test_zero_states_is_an_error(files, capsys):
    machine_path, tape_path = files("0\n0\n\n0\n")
    assert main([machine_path, tape_path]) == 1
    assert "0" in capsys.readouterr().err


def test_usage_without_arguments(capsys):
    assert main([]) == 0
    assert "Usage" in capsys.readouterr().out


def test_help(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "Usage" in out
    assert "Line 1" in out


def test_wrong_argument_count(capsys):
    assert main(["only-one", "two", "three"]) == 1
    assert "--help" in capsys.readouterr().out
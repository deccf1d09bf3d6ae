import pytest

from cyatools.alphabet import Alphabet
from cyatools.strings import Symbol, Word
from cyatools.turing import BLANK, State, Tape, TuringMachine

SWAP = """2
0
1
3
0 a b R 0
0 b a R 0
0 $ $ S 1
"""

NO_FINALS = """2
0

1
0 a a R 0
"""


def test_state_compares_by_identifier():
    assert State(1, True) == State(1, False)
    assert sorted([State(3), State(1), State(2)]) == [State(1), State(2), State(3)]
    assert len({State(4, True), State(4, False)}) == 1


def test_tape_from_text_places_head_on_first_symbol():
    tape = Tape.from_text("ab")
    assert tape.read() == Symbol("a")
    assert tape.cells[0] == BLANK
    assert tape.cells[-1] == BLANK
    assert tape.cells[1:-1] == tuple(Word.from_text("ab"))


def test_tape_moves():
    tape = Tape.from_text("ab")
    tape.move("R")
    assert tape.read() == Symbol("b")
    tape.move("L")
    assert tape.read() == Symbol("a")
    tape.move("S")
    assert tape.read() == Symbol("a")


def test_tape_grows_when_head_leaves_it():
    tape = Tape.from_text("a")
    size = len(tape.cells)
    tape.move("L")
    tape.move("L")
    assert tape.read() == BLANK
    assert tape.head == 0
    assert len(tape.cells) == size + 1
    for _ in range(4):
        tape.move("R")
    assert tape.read() == BLANK
    assert len(tape.cells) == size + 2


def test_tape_write():
    tape = Tape.from_text("ab")
    tape.write(Symbol("x"))
    assert tape.read() == Symbol("x")
    assert tape.cells[1:-1] == tuple(Word.from_text("xb"))


def test_tape_render_marks_head():
    tape = Tape.from_text("ab")
    line = tape.render(State(3))
    assert line.replace(" q3 ", "") == "".join(str(s) for s in tape.cells)
    assert line.index(" q3 ") == 1


def test_tape_str():
    assert str(Tape.from_text("ab")) == " | $ | a | b | $"


def test_tape_alphabet():
    assert Tape.from_text("abba").alphabet == Alphabet.from_word(Word.from_text("ab"))


def test_empty_tape_holds_blanks():
    tape = Tape()
    assert tape.cells == (BLANK, BLANK)
    assert tape.read() == BLANK


def test_parse_and_has_transition():
    machine = TuringMachine.from_text(SWAP, "ab")
    assert machine.number_of_states == 2
    assert machine.initial == State(0)
    assert machine.final_states == (State(1),)
    assert machine.final_states[0].accepting
    assert machine.has_transition(State(0), Symbol("a"), Symbol("b"))
    assert not machine.has_transition(State(0), Symbol("a"), Symbol("a"))
    assert not machine.has_transition(State(1), Symbol("a"), Symbol("b"))


def test_run_accepts_and_rewrites_tape():
    machine = TuringMachine.from_text(SWAP, "ab")
    result = machine.run()
    assert result.accepted
    assert result.final_state == State(1)
    assert machine.tape.cells == Tape.from_text("ba").cells
    assert result.trace[0] == Tape.from_text("ab").render(State(0))
    assert result.trace[-1] == machine.tape.render(State(1))
    assert len(result.trace) == len("ab") + 2


def test_run_rejects_without_accepting_state():
    machine = TuringMachine.from_text(NO_FINALS, "aa")
    result = machine.run()
    assert not result.accepted
    assert result.final_state == State(0)
    assert machine.tape.read() == BLANK


def test_run_on_empty_tape_halts_immediately():
    machine = TuringMachine.from_text(NO_FINALS, "")
    result = machine.run()
    assert result.trace == (Tape().render(State(0)),)


def test_smallest_write_symbol_is_chosen():
    text = "2\n0\n1\n2\n0 a z R 1\n0 a b R 1\n"
    machine = TuringMachine.from_text(text, "a")
    result = machine.run()
    assert result.accepted
    assert machine.tape.cells[1] == Symbol("b")


def test_str_round_trip():
    machine = TuringMachine.from_text(SWAP, "ab")
    text = str(machine)
    assert text.splitlines()[0] == "2"
    again = TuringMachine.from_text(text, "ab")
    assert str(again) == text
    assert again.transitions == machine.transitions


def test_zero_states_is_an_error():
    with pytest.raises(ValueError):
        TuringMachine.from_text("0\n0\n\n0\n", "a")


def test_unknown_state_is_an_error():
    with pytest.raises(ValueError):
        TuringMachine.from_text("1\n0\n\n1\n0 a a R 7\n", "a")


def test_missing_transition_line_is_an_error():
    with pytest.raises(ValueError):
        TuringMachine.from_text("1\n0\n\n2\n0 a a R 0\n", "a")


def test_malformed_transition_is_an_error():
    with pytest.raises(ValueError):
        TuringMachine.from_text("1\n0\n\n1\n0 a a\n", "a")


def test_non_numeric_header_is_an_error():
    with pytest.raises(ValueError):
        TuringMachine.from_text("two\n0\n\n0\n", "a")


def test_from_files(tmp_path):
    machine_file = tmp_path / "swap.tm"
    tape_file = tmp_path / "input.tape"
    machine_file.write_text(SWAP, encoding="utf-8")
    tape_file.write_text("ab\nignored\n", encoding="utf-8")
    machine = TuringMachine.from_files(machine_file, tape_file)
    assert machine.tape.cells == Tape.from_text("ab").cells
    assert machine.run().accepted


def test_from_files_missing_tape_gives_empty_tape(tmp_path):
    machine_file = tmp_path / "swap.tm"
    machine_file.write_text(SWAP, encoding="utf-8")
    machine = TuringMachine.from_files(machine_file, tmp_path / "absent.tape")
    assert machine.tape.cells == Tape().cells


def test_from_files_missing_machine_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TuringMachine.from_files(tmp_path / "absent.tm", tmp_path / "absent.tape")
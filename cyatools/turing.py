"""Deterministic single-tape Turing machines read from a text description."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from cyatools.alphabet import Alphabet
from cyatools.strings import Symbol

BLANK = Symbol("$")

_RIGHT = "R"
_LEFT = "L"


@dataclass(frozen=True, order=True)
class State:
    """A machine state; states compare and hash by identifier only."""

    identifier: int
    accepting: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return str(self.identifier)


class Tape:
    """A tape of symbols bounded by blanks, with a read/write head.

    The tape grows with a blank whenever the head moves past either end.
    """

    def __init__(self, symbols: Iterable[Symbol] = ()) -> None:
        content = list(symbols)
        self._alphabet = Alphabet(content)
        self._cells: list[Symbol] = [BLANK, *content, BLANK]
        self._head = 1 if content else 0

    @classmethod
    def from_text(cls, line: str) -> "Tape":
        """Build a tape with one symbol per character of ``line``."""
        return cls(Symbol(char) for char in line)

    @property
    def cells(self) -> tuple[Symbol, ...]:
        """Every cell of the tape, blanks included."""
        return tuple(self._cells)

    @property
    def head(self) -> int:
        """Index of the cell under the head."""
        return self._head

    @property
    def alphabet(self) -> Alphabet:
        """The symbols found on the tape's input."""
        return Alphabet(self._alphabet)

    def read(self) -> Symbol:
        """The symbol under the head."""
        return self._cells[self._head]

    def write(self, symbol: Symbol) -> None:
        """Replace the symbol under the head."""
        self._cells[self._head] = symbol

    def move(self, direction: str) -> None:
        """Move the head: "R" right, "L" left, anything else stays put."""
        if direction == _RIGHT:
            self._head += 1
            if self._head == len(self._cells):
                self._cells.append(BLANK)
        elif direction == _LEFT:
            if self._head == 0:
                self._cells.insert(0, BLANK)
            else:
                self._head -= 1

    def render(self, state: State) -> str:
        """The tape as one line, with `` q<state> `` just before the head."""
        parts: list[str] = []
        for index, symbol in enumerate(self._cells):
            if index == self._head:
                parts.append(f" q{state.identifier} ")
            parts.append(str(symbol))
        return "".join(parts)

    def __str__(self) -> str:
        return "".join(f" | {symbol}" for symbol in self._cells)

    def __repr__(self) -> str:
        return f"Tape(cells={self.cells!r}, head={self._head})"


@dataclass(frozen=True)
class RunResult:
    """Outcome of a run: acceptance, the final state and the tape trace."""

    accepted: bool
    final_state: State
    trace: tuple[str, ...]


Transitions = dict[tuple[State, Symbol], dict[Symbol, tuple[str, State]]]


def _integer(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"expected an integer, got {text!r}") from None


class TuringMachine:
    """A Turing machine together with the tape it runs on."""

    def __init__(
        self,
        number_of_states: int,
        initial: State,
        final_states: Iterable[State],
        transitions: Transitions,
        declared_transitions: int,
        tape: Tape,
    ) -> None:
        self.number_of_states = number_of_states
        self.initial = initial
        self.final_states = tuple(sorted(set(final_states)))
        self._transitions: Transitions = {
            key: dict(options) for key, options in transitions.items()
        }
        self.declared_transitions = declared_transitions
        self.tape = tape

    @classmethod
    def from_text(cls, text: str, tape_line: str) -> "TuringMachine":
        """Parse a machine description and load ``tape_line`` onto its tape.

        The description holds the number of states, the initial state, the
        accepting states, the number of transitions and then one transition
        per line as ``state read write move next``.
        """
        lines = text.splitlines()

        def line(index: int, what: str) -> str:
            if index >= len(lines):
                raise ValueError(f"missing {what}")
            return lines[index]

        number_of_states = _integer(line(0, "number of states"))
        if number_of_states == 0:
            raise ValueError("the number of states cannot be 0")
        initial_id = _integer(line(1, "initial state"))
        final_ids = [_integer(token) for token in line(2, "accepting states").split()]

        states: dict[int, State] = {}
        for identifier in final_ids:
            states.setdefault(identifier, State(identifier, True))
        for identifier in range(number_of_states):
            states.setdefault(identifier, State(identifier, False))

        def find(token: str) -> State:
            identifier = _integer(token)
            try:
                return states[identifier]
            except KeyError:
                raise ValueError(f"unknown state {identifier}") from None

        initial = find(str(initial_id))
        declared = _integer(line(3, "number of transitions"))

        transitions: Transitions = {}
        for number in range(declared):
            tokens = line(4 + number, f"transition {number + 1}").split()
            if len(tokens) < 5:
                raise ValueError(f"malformed transition: {lines[4 + number]!r}")
            current = find(tokens[0])
            read, write, move = Symbol(tokens[1]), Symbol(tokens[2]), tokens[3]
            following = find(tokens[4])
            transitions.setdefault((current, read), {})[write] = (move, following)

        finals = [states[identifier] for identifier in final_ids]
        return cls(
            number_of_states,
            initial,
            finals,
            transitions,
            declared,
            Tape.from_text(tape_line),
        )

    @classmethod
    def from_files(cls, machine_path, tape_path) -> "TuringMachine":
        """Read a machine file and the first line of a tape file.

        An unreadable tape file leaves the tape empty.
        """
        with open(machine_path, encoding="utf-8") as source:
            text = source.read()
        try:
            with open(tape_path, encoding="utf-8") as source:
                tape_lines = source.read().splitlines()
        except OSError:
            tape_lines = []
        return cls.from_text(text, tape_lines[0] if tape_lines else "")

    @property
    def transitions(self) -> Transitions:
        """A copy of the transition table."""
        return {key: dict(options) for key, options in self._transitions.items()}

    def has_transition(self, state: State, symbol: Symbol, write: Symbol) -> bool:
        """Whether a transition reads ``symbol`` in ``state`` and writes ``write``."""
        return write in self._transitions.get((state, symbol), {})

    def run(self) -> RunResult:
        """Run until no transition applies, recording the tape at each step.

        Where several transitions share a state and a read symbol, the one
        with the smallest write symbol is taken.
        """
        state = self.initial
        trace: list[str] = []
        while True:
            options = self._transitions.get((state, self.tape.read()))
            if not options:
                break
            write = min(options)
            move, following = options[write]
            trace.append(self.tape.render(state))
            self.tape.write(write)
            self.tape.move(move)
            state = following
        trace.append(self.tape.render(state))
        return RunResult(state.accepting, state, tuple(trace))

    def __str__(self) -> str:
        lines = [
            str(self.number_of_states),
            str(self.initial.identifier),
            "".join(f"{state.identifier} " for state in self.final_states),
            str(self.declared_transitions),
        ]
        for (state, read), options in sorted(self._transitions.items()):
            for write, (move, following) in sorted(options.items()):
                lines.append(
                    f"{state.identifier} {read} {write} {move} {following.identifier}"
                )
        return "\n".join(lines) + "\n"
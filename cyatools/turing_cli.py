"""Command that loads a Turing machine and a tape, then runs the machine."""

from __future__ import annotations

import sys
from typing import TextIO

from cyatools.turing import TuringMachine

PROG = "cyatools-turing"

_HELP = """\
Program features:
 Reads the specification of a Turing machine from a file and simulates
 the behaviour of the machine on the tape given in a second file.

The program takes the names of two files as arguments.
Line 1: integer giving the number of states of the machine.
Line 2: integer giving the initial state.
Line 3: whitespace-separated integers naming the accepting states.
Line 4: integer giving the number of transitions of the machine.
Following lines: one transition per line, its fields separated by whitespace."""

_YES = frozenset("sSyY")


def _read_answer(stream: TextIO) -> str:
    """The first non-blank character of ``stream``, or "" at end of input."""
    for line in stream:
        stripped = line.strip()
        if stripped:
            return stripped[0]
    return ""


def main(argv: list[str] | None = None) -> int:
    """Load the machine and tape named on the command line and run it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or (len(args) == 1 and args[0] == "--help"):
        print(f"Usage: {PROG} input.tm input.tape")
        if not args:
            print(f"Try '{PROG} --help' for more information")
        else:
            print(_HELP)
        return 0
    if len(args) != 2:
        print(f"Try '{PROG} --help' for more information")
        return 1

    machine_path, tape_path = args
    try:
        machine = TuringMachine.from_files(machine_path, tape_path)
    except OSError:
        print("Error opening the file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print("Do you want to see the Turing machine? (s/n) ", end="", flush=True)
    if _read_answer(sys.stdin) in _YES:
        print(machine)

    result = machine.run()
    for line in result.trace:
        print(line)
    print("String ACCEPTED" if result.accepted else "String REJECTED")
    return 0


if __name__ == "__main__":
    sys.exit(main())
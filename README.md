# cyatools

Small command-line tools and a Python library for exercises in
computability and algorithms:

- words over an alphabet, their prefixes, suffixes, reversals and cubes,
  and the finite languages they form (`cyatools.strings`,
  `cyatools.alphabet`, `cyatools.wordpower`);
- a deterministic single-tape Turing machine simulator that records the
  tape at every step (`cyatools.turing`);
- grade books that keep one or many grades per student
  (`cyatools.grades`);
- the Euclidean minimum spanning tree of a set of points in the plane,
  built with Kruskal's algorithm (`cyatools.emst`).

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Words and languages

```
cyatools-strings input.txt output.txt OPCODE
```

Each line of `input.txt` is a word, for example `abbab`. For each line one
line is written to `output.txt`, chosen by `OPCODE`:

| opcode | output                                   |
|--------|------------------------------------------|
| 1      | the alphabet of the word, e.g. `{ a, b}` |
| 2      | the length of the word                   |
| 3      | the reversed word                        |
| 4      | the language of its prefixes             |
| 5      | the language of its suffixes             |

Any other opcode writes an empty output file. The input is split on
newlines, so a trailing newline gives one more, empty, word. The empty word
is written `&` and the empty language `{}`. `cyatools-strings --help`
describes the options.

From Python:

```python
from cyatools.strings import Word
from cyatools.alphabet import Alphabet
from cyatools.wordpower import cube

word = Word.from_text("abb")
print(word.length())            # 3
print(word.reversed())          # bba
print(word.prefixes())          # {&, a, ab, abb}
print(word.suffixes())          # {&, abb, b, bb}
print(Alphabet.from_word(word)) # { a, b}
print(cube(word))               # {abbabbabb}
```

`Word`, `Symbol` and `Language` are immutable and ordered; a `Language`
iterates and prints its words in sorted order, and `cardinal()` gives its
number of words.

## Turing machines

```
cyatools-turing machine.tm input.tape
```

The machine file has:

1. the number of states (it may not be 0);
2. the start state;
3. the accepting states, separated by spaces;
4. the number of transitions;
5. one transition per line: `state read write move next`, where `move` is
   `L` or `R`; any other move leaves the head where it is.

The first line of the tape file is the input, one symbol per character; the
blank symbol is `$`, and the tape grows with blanks when the head moves past
either end. An unreadable tape file leaves the tape empty.

The command asks `Do you want to see the Turing machine? (s/n)`; answering
`s` or `y` prints the machine. It then prints the tape at each step, with
` q<state> ` placed just before the head, and finally `String ACCEPTED` or
`String REJECTED`. A malformed machine file is reported as an error.

From Python:

```python
from cyatools.turing import TuringMachine

machine = TuringMachine.from_files("machine.tm", "input.tape")
# or: TuringMachine.from_text(description, "abba")
result = machine.run()
print(result.accepted, result.final_state)
for line in result.trace:
    print(line)
```

When several transitions share a state and a read symbol, the one with the
smallest write symbol is taken. `TuringMachine.from_text` raises
`ValueError` on a malformed description.

## Grade books

```
cyatools-grades grades.txt
cyatools-grades-multi grades.txt
```

Each line of `grades.txt` holds a student identifier and a grade; blank
lines are skipped. Both commands open an interactive menu, read from
standard input, to show the grades or insert a new one.

- `cyatools-grades` (`SingleGrades`) keeps a single grade per student: the
  highest one read from the file. Inserting drops leading zeros from the
  identifier and replaces the stored grade, saying so when the student
  already existed. Its menu also has a "show final state" entry; option 4
  exits.
- `cyatools-grades-multi` (`MultipleGrades`) keeps every grade and lists
  them together per student as `student: g1 g2 ...`; option 3 exits.

From Python, `SingleGrades.from_lines(lines)` and
`MultipleGrades.from_lines(lines)` build a book, `insert(student, grade)`
adds to it and `render()` returns the listing as text.
`cyatools.grades_cli.run_menu(book, lines, out, final_option)` runs the
menu over any input lines and output stream.

## Euclidean minimum spanning tree

```
cyatools-emst points.txt MODE
```

`points.txt` starts with the number of points followed by one `x y` pair per
point. The tree's arcs, one per line, and its cost are written to `EMST.txt`
in the current directory; with `MODE` equal to `1` the cost is measured with
the Manhattan distance, otherwise with the Euclidean distance.

From Python:

```python
from cyatools.emst import PointSet

points = PointSet([(0.0, 0.0), (3.0, 0.0), (3.0, 4.0)])
points.compute_emst()
print(points.cost())             # 7.0
print(points.manhattan_cost())   # 7.0
print(points.render())
```

`parse_points`, `format_point` and `format_points` read and write the
point-file format; `euclidean_distance` and `manhattan_distance` measure a
single arc.
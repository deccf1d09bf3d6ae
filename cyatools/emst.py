"""Euclidean minimum spanning trees of point sets, built with Kruskal's algorithm."""

from __future__ import annotations

import math
import sys
from typing import Iterable, Sequence

Point = tuple[float, float]
Arc = tuple[Point, Point]
WeightedArc = tuple[float, Arc]

FIELD_WIDTH = 3
PRECISION = 0
OUTPUT_FILE = "EMST.txt"
PROG = "cyatools-emst"


def euclidean_distance(arc: Arc) -> float:
    """Straight-line distance between the two ends of ``arc``."""
    (x1, y1), (x2, y2) = arc
    return math.hypot(x1 - x2, y1 - y2)


def manhattan_distance(arc: Arc) -> float:
    """Sum of the absolute coordinate differences between the ends of ``arc``."""
    (x1, y1), (x2, y2) = arc
    return abs(x1 - x2) + abs(y1 - y2)


def format_point(point: Point) -> str:
    """A point as two fixed-width whole numbers separated by a tab."""
    x, y = point
    return f"{x:{FIELD_WIDTH}.{PRECISION}f}\t{y:{FIELD_WIDTH}.{PRECISION}f}"


def format_points(points: Sequence[Point]) -> str:
    """The number of points on a line, then one point per line."""
    return f"{len(points)}\n" + "".join(f"{format_point(point)}\n" for point in points)


def parse_points(text: str) -> list[Point]:
    """Read a point count followed by that many ``x y`` pairs."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing number of points")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid number of points: {tokens[0]!r}") from None
    values = tokens[1 : 1 + 2 * max(count, 0)]
    if len(values) < 2 * max(count, 0):
        raise ValueError(f"expected {count} points, found fewer")
    try:
        numbers = [float(value) for value in values]
    except ValueError as error:
        raise ValueError(f"invalid coordinate: {error}") from None
    return list(zip(numbers[0::2], numbers[1::2]))


class SubTree:
    """A set of points joined by arcs, part of a spanning forest."""

    def __init__(self) -> None:
        self._arcs: list[Arc] = []
        self._points: set[Point] = set()
        self._cost = 0.0

    @property
    def arcs(self) -> list[Arc]:
        """The arcs of the subtree, in the order they were joined."""
        return list(self._arcs)

    @property
    def points(self) -> frozenset[Point]:
        """The points the subtree spans."""
        return frozenset(self._points)

    @property
    def cost(self) -> float:
        """Accumulated weight of the arcs added by merging."""
        return self._cost

    def add_arc(self, arc: Arc) -> None:
        """Add an arc and both of its ends."""
        self._arcs.append(arc)
        self._points.update(arc)

    def add_point(self, point: Point) -> None:
        """Add a lone point."""
        self._points.add(point)

    def contains(self, point: Point) -> bool:
        """Whether ``point`` belongs to the subtree."""
        return point in self._points

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def merge(self, other: "SubTree", weighted_arc: WeightedArc) -> None:
        """Absorb ``other`` through the arc that joins the two subtrees."""
        weight, arc = weighted_arc
        self._arcs.extend(other._arcs)
        self._arcs.append(arc)
        self._points.update(other._points)
        self._cost += weight + other._cost


class PointSet:
    """A sequence of points together with its minimum spanning tree."""

    def __init__(self, points: Iterable[Point]) -> None:
        self._points: tuple[Point, ...] = tuple(
            (float(x), float(y)) for x, y in points
        )
        self._tree: list[Arc] = []

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def tree(self) -> list[Arc]:
        """The arcs of the last computed tree; empty before computing it."""
        return list(self._tree)

    def _weighted_arcs(self) -> list[WeightedArc]:
        arcs = [
            (euclidean_distance((first, second)), (first, second))
            for index, first in enumerate(self._points)
            for second in self._points[index + 1 :]
        ]
        arcs.sort()
        return arcs

    @staticmethod
    def _incident(forest: list[SubTree], arc: Arc) -> tuple[int, int]:
        first = second = -1
        for index, subtree in enumerate(forest):
            if subtree.contains(arc[0]):
                first = index
            if subtree.contains(arc[1]):
                second = index
            if first != -1 and second != -1:
                break
        return first, second

    def compute_emst(self) -> list[Arc]:
        """Compute the Euclidean minimum spanning tree and return its arcs."""
        forest: list[SubTree] = []
        for point in self._points:
            subtree = SubTree()
            subtree.add_point(point)
            forest.append(subtree)
        for weight, arc in self._weighted_arcs():
            first, second = self._incident(forest, arc)
            if first != second:
                forest[first].merge(forest[second], (weight, arc))
                del forest[second]
        self._tree = forest[0].arcs if forest else []
        return self.tree

    def cost(self) -> float:
        """Total Euclidean length of the tree's arcs."""
        return sum(euclidean_distance(arc) for arc in self._tree)

    def manhattan_cost(self) -> float:
        """Total Manhattan length of the tree's arcs."""
        return sum(manhattan_distance(arc) for arc in self._tree)

    def _render(self, cost: float) -> str:
        lines = "".join(
            f"{format_point(first)} -> {format_point(second)}\n"
            for first, second in self._tree
        )
        # Once a point has been printed the cost follows the same fixed format.
        cost_text = f"{cost:.{PRECISION}f}" if self._tree else f"{cost:g}"
        return f"{lines}\nCoste: {cost_text}\n"

    def render(self) -> str:
        """The tree's arcs, one per line, and its Euclidean cost."""
        return self._render(self.cost())

    def render_manhattan(self) -> str:
        """The tree's arcs, one per line, and its Manhattan cost."""
        return self._render(self.manhattan_cost())

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)


def main(argv: list[str] | None = None) -> int:
    """Read points from a file and write their tree and cost to EMST.txt."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(f"Usage: {PROG} points.txt distance (1 = Manhattan)", file=sys.stderr)
        return 1
    input_path, choice = args
    try:
        with open(input_path, encoding="utf-8") as source:
            text = source.read()
    except OSError:
        print("Error: the file does not exist.", file=sys.stderr)
        return 0
    try:
        points = parse_points(text)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    point_set = PointSet(points)
    point_set.compute_emst()
    if choice == "1":
        print("Cost using Manhattan distance: ")
        report = point_set.render_manhattan()
    else:
        print("Cost using Euclidean distance: ")
        report = point_set.render()
    with open(OUTPUT_FILE, "w", encoding="utf-8") as target:
        target.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
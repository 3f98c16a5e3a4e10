"""Mixed-radix numbering over a weighted DAG, and a Gregorian calendar built on it."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate

Edge = tuple[int, int]


class CalendarGraph:
    """Numbers the root-to-leaf paths of a weighted DAG in order.

    Each node lists its children as ``(child, weight)`` pairs; a weight of
    ``w`` means the child appears ``w`` times in a row. A path is given as a
    sequence of digits, one per level, each digit being the position of the
    chosen repetition among all repetitions of the node's children.
    """

    def __init__(self, adjacency: Sequence[Sequence[Edge]], root: int = 0) -> None:
        self.children: list[list[Edge]] = [
            [(int(child), int(weight)) for child, weight in edges] for edges in adjacency
        ]
        self.root = root
        size = len(self.children)
        self._count = [0] * size
        self._span_prefix: list[list[int]] = [[] for _ in range(size)]
        self._weight_prefix: list[list[int]] = [[] for _ in range(size)]
        visited = [False] * size

        def visit(node: int) -> None:
            visited[node] = True
            edges = self.children[node]
            for child, _ in edges:
                if not visited[child]:
                    visit(child)
            if not edges:
                self._count[node] = 1
                return
            self._span_prefix[node] = list(
                accumulate(self._count[child] * weight for child, weight in edges)
            )
            self._weight_prefix[node] = list(accumulate(weight for _, weight in edges))
            self._count[node] = self._span_prefix[node][-1]

        visit(root)

    @property
    def total(self) -> int:
        """Number of distinct leaf paths below the root."""
        return self._count[self.root]

    def get_num(self, digits: Iterable[int]) -> int:
        """Return the index of the path described by ``digits``."""
        node = self.root
        result = 0
        for digit in digits:
            weights = self._weight_prefix[node]
            if not weights or not 0 <= digit < weights[-1]:
                raise ValueError(f"digit {digit} out of range at node {node}")
            pos = bisect_right(weights, digit)
            child = self.children[node][pos][0]
            result += self._span_prefix[node][pos] - (weights[pos] - digit) * self._count[child]
            node = child
        return result

    def get_path(self, num: int) -> list[int]:
        """Return the digits of the path with index ``num``."""
        root_spans = self._span_prefix[self.root]
        if not root_spans or not 0 <= num < root_spans[-1]:
            raise ValueError(f"index {num} out of range")
        path: list[int] = []
        node = self.root
        while self._span_prefix[node]:
            spans = self._span_prefix[node]
            pos = bisect_right(spans, num)
            digit = 0
            if pos:
                digit = self._weight_prefix[node][pos - 1]
                num -= spans[pos - 1]
            child = self.children[node][pos][0]
            step, num = divmod(num, self._count[child])
            path.append(digit + step)
            node = child
        return path


_COMMON_YEAR = [(11, 1), (8, 1), (11, 1), (10, 1), (11, 1), (10, 1),
                (11, 1), (11, 1), (10, 1), (11, 1), (10, 1), (11, 1)]
_LEAP_YEAR = [(11, 1), (9, 1), (11, 1), (10, 1), (11, 1), (10, 1),
              (11, 1), (11, 1), (10, 1), (11, 1), (10, 1), (11, 1)]

_GREGORIAN_GRAPH: list[list[Edge]] = [
    [(1, 25)],            # 0: ten thousand years
    [(2, 3), (3, 1)],     # 1: four hundred years
    [(4, 24), (5, 1)],    # 2: century without a leap year at its end
    [(4, 25)],            # 3: century ending in a leap year
    [(6, 3), (7, 1)],     # 4: four years ending in a leap year
    [(6, 4)],             # 5: four common years
    _COMMON_YEAR,         # 6: common year
    _LEAP_YEAR,           # 7: leap year
    [(12, 28)],           # 8: 28-day month
    [(12, 29)],           # 9: 29-day month
    [(12, 30)],           # 10: 30-day month
    [(12, 31)],           # 11: 31-day month
    [],                   # 12: day
]


class GregorianCalendar:
    """Proleptic Gregorian calendar for years 1 to 10000; day 0 is 1 January of year 1."""

    MONTH_NAMES = ("January", "February", "March", "April", "May", "June", "July",
                   "August", "September", "October", "November", "December")
    DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

    def __init__(self) -> None:
        self.graph = CalendarGraph(_GREGORIAN_GRAPH, 0)

    def date_to_days(self, year: int, month: int, day: int) -> int:
        """Return the number of days since 1 January of year 1."""
        y400, rest = divmod(year - 1, 400)
        y100, rest = divmod(rest, 100)
        y4, rest = divmod(rest, 4)
        return self.graph.get_num([y400, y100, y4, rest, month - 1, day - 1])

    def days_to_date(self, num: int) -> tuple[int, int, int]:
        """Return ``(year, month, day)`` for a day number."""
        y400, y100, y4, y1, month, day = self.graph.get_path(num)
        return y400 * 400 + y100 * 100 + y4 * 4 + y1 + 1, month + 1, day + 1

    def day_of_the_week(self, year: int, month: int, day: int) -> str:
        """Return the English name of the weekday of a date."""
        return self.DAY_NAMES[self.date_to_days(year, month, day) % 7]

    def next_day(self, year: int, month: int, day: int) -> tuple[int, int, int]:
        """Return the date following the given one."""
        return self.days_to_date(self.date_to_days(year, month, day) + 1)
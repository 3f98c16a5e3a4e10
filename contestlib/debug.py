"""Readable dumps of values, nested containers, array slices and numbers in any base."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

_OPENING = frozenset("({[")
_CLOSING = frozenset(")}]")
_HEX_DIGITS = "0123456789ABCDEF"


def split_arguments(text: str) -> list[str]:
    """Split an argument list on top-level commas and trim the spaces around each part.

    Commas inside brackets or inside quoted literals do not split.
    """
    parts: list[str] = []
    current: list[str] = []
    level = 0
    in_double = in_single = False
    previous = ""
    for char in text:
        current.append(char)
        if not in_double and not in_single:
            if char in _OPENING:
                level += 1
            elif char in _CLOSING:
                level -= 1
            elif char == '"':
                in_double = True
            elif char == "'":
                in_single = True
            elif level == 0 and char == ",":
                current.pop()
                parts.append("".join(current))
                current = []
        elif in_double and char == '"' and previous != "\\":
            in_double = False
        elif in_single and char == "'" and previous != "\\":
            in_single = False
        previous = char
    parts.append("".join(current))
    return [part.strip(" ") for part in parts]


def _is_container(value: Any) -> bool:
    if isinstance(value, (str, tuple, complex)):
        return False
    return isinstance(value, Iterable)


def _elements(value: Any) -> list[Any]:
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, (set, frozenset)):
        try:
            return sorted(value)
        except TypeError:
            return list(value)
    return list(value)


def to_debug_string(value: Any) -> str:
    """Render a value: containers in braces, tuples in parentheses, strings quoted."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, complex):
        return f"({value.real:f}, {value.imag:f})"
    if isinstance(value, tuple):
        return "(" + ", ".join(to_debug_string(item) for item in value) + ")"
    if _is_container(value):
        return "{" + ", ".join(to_debug_string(item) for item in _elements(value)) + "}"
    return str(value)


def _debug_lines(path: str, value: Any, depth: int, lines: list[str]) -> None:
    if not _is_container(value) or depth <= 0:
        lines.append(f"{path}: {to_debug_string(value)}")
        return
    for index, item in enumerate(_elements(value)):
        _debug_lines(f"{path}[{index}]", item, depth - 1, lines)


def _debug_block(name: str, value: Any, depth: int = 0) -> str:
    lines: list[str] = []
    _debug_lines(name, value, depth, lines)
    return "".join(line + "\n" for line in lines)


def format_debug(name: str, value: Any, depth: int = 0) -> str:
    """Dump ``value`` under ``name``, one line per element down to ``depth`` levels.

    The text ends with a blank line.
    """
    return _debug_block(name, value, depth) + "\n"


def format_multi(text: str, values: Sequence[Any], inline: bool = False) -> str:
    """Dump several values named by the comma-separated ``text``.

    With ``inline`` the values share one line, separated by commas.
    """
    names = split_arguments(text)
    if len(names) != len(values):
        raise ValueError(f"{len(names)} names for {len(values)} values")
    pieces = []
    last = len(values) - 1
    for index, (name, value) in enumerate(zip(names, values)):
        piece = _debug_block(name, value)
        if inline:
            if index != last:
                piece = piece[:-1]
            if index:
                piece = ", " + piece
        if index == last:
            piece += "\n"
        pieces.append(piece)
    return "".join(pieces)


def convert_basis(
    num: int, base: int = 2, precision: int | None = None, reverse: bool = False
) -> str:
    """Write ``num`` in ``base``.

    Bases up to 10 and base 16 use one character per digit; other bases write
    each digit in decimal, separated by dots. ``precision`` fixes the number of
    lowest digits written; ``reverse`` reverses the final text.
    """
    if precision == -1:
        precision = None
    if num < 0:
        raise ValueError(f"negative number {num}")
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if precision is not None and precision < 1:
        raise ValueError(f"precision must be positive, got {precision}")
    if num == 0:
        return "0"

    digits: list[int] = []
    if precision is None:
        while num:
            num, digit = divmod(num, base)
            digits.append(digit)
    else:
        for _ in range(precision):
            num, digit = divmod(num, base)
            digits.append(digit)
    digits.reverse()

    if base <= 10 or base == 16:
        result = "".join(_HEX_DIGITS[digit] for digit in digits)
    else:
        result = ".".join(str(digit) for digit in digits)
    return result[::-1] if reverse else result


def format_basis(
    text: str, num: int, base: int = 2, precision: int | None = None, reverse: bool = False
) -> str:
    """Dump ``num`` written in ``base`` under the first name in ``text``."""
    name = split_arguments(text)[0]
    return f"{name}: {convert_basis(num, base, precision, reverse)}\n\n"


@dataclass
class _Node:
    children: dict[int, _Node] = field(default_factory=dict)
    text: str = ""


def format_array(text: str, array: Any, *args: int) -> str:
    """Dump a slice of a nested array.

    ``args`` holds an inclusive ``first, last`` index pair per dimension,
    optionally followed by a depth: elements that many levels down are
    written one per line. An empty slice gives an empty string.
    """
    name = split_arguments(text)[0]
    if len(args) % 2:
        ranges, depth = args[:-1], args[-1]
    else:
        ranges, depth = args, 0

    records: list[tuple[tuple[int, ...], str]] = []

    def walk(value: Any, dims: tuple[int, ...], remaining: Sequence[int]) -> None:
        if not remaining:
            records.append((dims, to_debug_string(value)))
            return
        first, last = remaining[0], remaining[1]
        for index in range(first, last + 1):
            walk(value[index], dims + (index,), remaining[2:])

    walk(array, (), ranges)
    if not records:
        return ""

    root = _Node()
    for dims, rendered in records:
        node = root
        for index in dims:
            node = node.children.setdefault(index, _Node())
        node.text = rendered

    lines: list[str] = []

    def render(node: _Node, level: int, path: str) -> str:
        if not node.children:
            if level > 0:
                lines.append(f"{path}: {node.text}")
            return node.text
        parts = []
        for index in sorted(node.children):
            child = node.children[index]
            child_path = f"{path}[{index}]"
            if level - 1 > 0:
                render(child, level - 1, child_path)
                parts.append("")
            elif level - 1 == 0:
                lines.append(f"{child_path}: {render(child, 0, child_path)}")
                parts.append("")
            else:
                parts.append(render(child, level - 1, child_path))
        return "{" + ", ".join(parts) + "}"

    if depth <= 0:
        return f"{name}: {render(root, depth, name)}\n\n"
    render(root, depth, name)
    return "".join(line + "\n" for line in lines) + "\n"


def format_single(text: str, array: Any, *args: int) -> str:
    """Dump the single element of ``array`` at the indices ``args``."""
    name = split_arguments(text)[0]
    value = array
    for index in args:
        value = value[index]
    path = "".join(f"[{index}]" for index in args)
    return f"{name}{path}: {to_debug_string(value)}\n\n"
"""Text drawing of a binary tree."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.tree import Node


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    for index, char in enumerate(text, start):
        if index >= 0:
            row[index] = char


def _place(tree: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    box = f"({tree.value:03d})"
    width = len(box)
    left = _place(tree.left, offset, depth + 1, rows)
    right = _place(tree.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, box)
    if depth:
        above = rows[depth - 1]
        if is_left:
            _write(above, offset + left + width // 2, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return a drawing of the tree, one text line per level."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _place(tree, 0, 0, rows)
    lines = []
    for row in rows:
        line = "".join(row)
        lines.append(line[:2] + line[2:].rstrip(" "))
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to a file, standard output by default."""
    (sys.stdout if file is None else file).write(render(tree))
"""The ``show`` command: print the indexed tree."""

from __future__ import annotations

from typing import List, Optional

from fyle.command import Command
from fyle.filenode import FileNode


def render_tree(node: Optional[FileNode], depth: int = 0) -> str:
    """Render ``node`` and, for directories, its descendants as indented lines."""
    if node is None:
        return ""
    line = "   " * depth + "|-- " + node.name
    if node.type == "dir":
        line += "/"
    if node.type == "file":
        line += f" ({node.size} bytes)"
    parts = [line + "\n"]
    if node.type == "dir":
        parts.extend(render_tree(child, depth + 1) for child in node.children)
    return "".join(parts)


class Show(Command):
    name = "show"

    def run(self, args: List[str]) -> None:
        root = self.ctx.index_data
        if root is None:
            self._write("Данные еще не проиндексированы.\n")
            return
        self._write("\n" + render_tree(root) + "\n")

    def help(self) -> None:
        self._write("\n")
        self._write("Что бы посмотреть индексируемые данные, вызовите:\n")
        self._write("  show\n")
        self._write("\n")
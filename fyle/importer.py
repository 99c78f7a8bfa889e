"""The ``import`` command: read a tree previously written by ``export``."""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional

from fyle.command import Command
from fyle.filenode import FileNode, PathLike


def deserialize_node(data: Mapping[str, Any], parent: Optional[FileNode] = None) -> FileNode:
    """Rebuild a :class:`FileNode` tree from exported data, linking parents."""
    node = FileNode(
        type=data["type"],
        name=data["name"],
        path=data["path"],
        size=data["size"],
        last_change=data["lastChange"],
        parent=parent,
    )
    node.children = [deserialize_node(child, node) for child in data["children"]]
    return node


def load(path: PathLike) -> FileNode:
    """Read the JSON file at ``path`` and return the root of its tree."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    return deserialize_node(data)


class Import(Command):
    name = "import"

    def run(self, args: List[str]) -> None:
        if not args:
            self._write("Укажите путь к файлу...\n")
            return
        self._write("Импортирую\n")
        self.ctx.index_data = load(args[0])
        self._write("Импорт завершен\n\n")

    def help(self) -> None:
        self._write("\n")
        self._write("Что бы импортировать индексируемые данные в формате json, вызовите:\n")
        self._write("  import путь_к_файлу\n")
        self._write("\n")
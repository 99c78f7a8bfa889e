"""The ``export`` command: write the indexed tree to a JSON file."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from fyle.command import Command
from fyle.filenode import FileNode, PathLike


def serialize_node(node: FileNode) -> Dict[str, Any]:
    """Turn ``node`` and its descendants into plain JSON-ready data."""
    return {
        "type": node.type,
        "name": node.name,
        "path": node.path,
        "size": node.size,
        "lastChange": node.last_change,
        "children": [serialize_node(child) for child in node.children],
    }


def save(node: FileNode, output: PathLike) -> None:
    """Write the tree rooted at ``node`` to ``output`` as indented JSON."""
    with open(output, "w", encoding="utf-8") as handle:
        json.dump(
            serialize_node(node),
            handle,
            indent=4,
            sort_keys=True,
            ensure_ascii=False,
        )


class Export(Command):
    name = "export"

    def run(self, args: List[str]) -> None:
        if not args:
            self._write("Укажите куда сохранить...\n")
            return
        root = self.ctx.index_data
        if root is None:
            self._write("Данные еще не проиндексированы.\n")
            return
        self._write("Экспортирую...\n")
        save(root, args[0])
        self._write("Экспорт завершен\n\n")

    def help(self) -> None:
        self._write("\n")
        self._write("Что бы экспортировать индексируемые данные в формате json, вызовите:\n")
        self._write("  export путь_куда_сохранить_файл\n")
        self._write("\n")
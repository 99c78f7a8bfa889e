"""The ``index`` command: walk a directory into a file tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from fyle.command import Command
from fyle.filenode import FileNode, PathLike, file_node


def collect(target: PathLike, parent: FileNode) -> None:
    """Attach every entry below ``target`` to ``parent``, recursing into directories."""
    for entry in sorted(Path(target).iterdir()):
        child = file_node(entry)
        child.parent = parent
        parent.children.append(child)
        if entry.is_dir():
            collect(entry, child)


def build_index(target: PathLike) -> FileNode:
    """Index the directory ``target`` and return the root node."""
    if not os.path.isdir(target):
        raise NotADirectoryError(f"not an existing directory: {os.fspath(target)}")
    root = file_node(target)
    collect(target, root)
    return root


class Indexer(Command):
    name = "index"

    def run(self, args: List[str]) -> None:
        if not args:
            self._write("Укажите путь...\n")
            return
        self._write("Индексирую...\n")
        try:
            root = build_index(args[0])
        except NotADirectoryError:
            self._write("Путь не ведет к папке, котороя существует.\n")
            return
        self.ctx.index_data = root
        self._write("Индксация завершена\n")

    def help(self) -> None:
        self._write("\n")
        self._write("Что бы индексировать директорию, вызовите:\n")
        self._write("  index путь_к_папке\n")
        self._write("\n")
"""The ``search`` command: find indexed entries by name tokens."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from fyle.command import Command
from fyle.filenode import FileNode

_SEPARATORS = str.maketrans({ch: " " for ch in '<>:"/\\|?*.-_,'})


def normalize(text: str) -> str:
    """Lower-case ``text``, turn separator characters into spaces and collapse whitespace."""
    return " ".join(text.lower().translate(_SEPARATORS).split())


def tokenize(text: str) -> List[str]:
    """Split ``text`` into whitespace-separated tokens."""
    return text.split()


def matches(file_name: str, query: Sequence[str]) -> int:
    """Count the query tokens that occur among the tokens of ``file_name``."""
    tokens = set(tokenize(normalize(file_name)))
    return sum(1 for token in query if token in tokens)


def search(tokens: Sequence[str], node: FileNode) -> Iterator[Tuple[int, str]]:
    """Yield ``(score, path)`` for every descendant of ``node`` that matches."""
    for child in node.children:
        score = matches(child.name, tokens)
        if score:
            yield score, child.path
        if child.type == "dir":
            yield from search(tokens, child)


class Search(Command):
    name = "search"

    def run(self, args: List[str]) -> None:
        if not args:
            self._write("Укажите имя файла...\n")
            return
        root = self.ctx.index_data
        if root is None:
            self._write("Данные еще не проиндексированы.\n")
            return
        tokens = tokenize(normalize(args[0]))
        self._write("Поиск:\n\n")
        for score, path in search(tokens, root):
            self._write(f"{score} | {path}\n")
        self._write("Поиск завершен\n\n")

    def help(self) -> None:
        self._write("\n")
        self._write("Что бы найти файл, вызовите:\n")
        self._write("  search текст\n")
        self._write("\n")
"""Interactive shell that dispatches lines to the file-index commands."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from fyle.command import Command, Context
from fyle.exporter import Export
from fyle.importer import Import
from fyle.indexer import Indexer
from fyle.search import Search
from fyle.show import Show


def split_args(command: str) -> List[str]:
    """Split a command line into whitespace-separated words."""
    return command.split()


def find_command(name: str, commands: Iterable[Command]) -> Optional[Command]:
    """Return the command called ``name``, or ``None`` if there is none."""
    return next((command for command in commands if command.name == name), None)


def create_commands(ctx: Optional[Context] = None, out: Optional[TextIO] = None) -> List[Command]:
    """Create every command, all sharing one context."""
    shared = ctx if ctx is not None else Context()
    return [cls(shared, out) for cls in (Indexer, Show, Search, Export, Import)]


def _read_line(stream: TextIO) -> Optional[str]:
    line = stream.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive shell on standard input and output."""
    stdin, stdout = sys.stdin, sys.stdout
    write = stdout.write

    write(
        "Это файловый менеджер с индексацией файлов. "
        "(exit - что бы выйти, help - информация о командах)\n\n"
    )

    commands = create_commands(Context(), stdout)
    for command in commands:
        try:
            command.init()
        except Exception as exc:
            write(f"Ошибка инициализации: {exc}\n")

    while True:
        line = _read_line(stdin)
        if line is None or line == "exit":
            break
        if line == "help":
            for command in commands:
                try:
                    command.help()
                except Exception:
                    write("Ошибка!\n")
            continue
        args = split_args(line)
        if not args:
            continue
        name, *rest = args
        command = find_command(name, commands)
        if command is None:
            write("Такой команды не существует\n")
            continue
        try:
            command.run(rest)
        except Exception as exc:
            write(f"Ошибка: {exc}\n")

    for command in commands:
        try:
            command.close()
        except Exception as exc:
            write(f"Ошибка выхода: {exc}\n")

    write("Поки\n")
    write("Нажмите Enter что бы выйти")
    stdout.flush()
    _read_line(stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Shared session state and the base class for shell commands."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from fyle.filenode import FileNode


@dataclass
class Context:
    """State shared between all commands of one session."""

    index_data: Optional[FileNode] = None


class Command:
    """A shell command bound to a shared context; subclasses override the hooks."""

    name: str = ""

    def __init__(self, ctx: Context, out: Optional[TextIO] = None) -> None:
        self.ctx = ctx
        self.out = out if out is not None else sys.stdout
        self.active = False

    def _write(self, text: str) -> None:
        self.out.write(text)

    def init(self) -> None:
        """Mark the command as active when the session starts."""
        self.active = True

    def run(self, args: List[str]) -> None:
        """Execute the command with its arguments."""

    def close(self) -> None:
        """Flush pending output and mark the command inactive."""
        self.out.flush()
        self.active = False

    def help(self) -> None:
        """Print usage information."""
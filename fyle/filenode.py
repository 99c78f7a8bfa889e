"""File tree nodes and construction from filesystem paths."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class FileNode:
    """One entry of an indexed file tree."""

    type: str
    name: str
    path: str
    parent: Optional["FileNode"] = field(default=None, repr=False, compare=False)
    children: List["FileNode"] = field(default_factory=list)
    size: int = 0
    last_change: int = 0


def last_write_time(path: PathLike) -> int:
    """Return the modification time of ``path`` as whole seconds since the epoch."""
    return int(os.stat(path).st_mtime)


def _kind(target: Path) -> str:
    if target.is_file():
        return "file"
    if target.is_dir():
        return "dir"
    if target.is_symlink():
        return "link"
    if target.is_socket():
        return "socket"
    if target.is_fifo():
        return "fifo"
    if target.is_block_device():
        return "block"
    if target.is_char_device():
        return "char"
    return "none"


def file_node(target: PathLike) -> FileNode:
    """Describe ``target`` as a childless :class:`FileNode`."""
    raw = os.fspath(target)
    kind = _kind(Path(raw))
    node = FileNode(type=kind, name=os.path.basename(raw), path=os.path.abspath(raw))
    if kind == "file":
        node.size = os.path.getsize(raw)
    if kind in ("file", "dir"):
        node.last_change = last_write_time(raw)
    return node
import os

import pytest

from fyle.filenode import FileNode, file_node, last_write_time


def test_regular_file(tmp_path):
    data = b"hello world"
    target = tmp_path / "notes.txt"
    target.write_bytes(data)
    node = file_node(target)
    assert node.type == "file"
    assert node.name == "notes.txt"
    assert node.size == len(data)
    assert node.path == os.path.abspath(target)
    assert node.children == []
    assert node.parent is None


def test_directory_has_mtime(tmp_path):
    target = tmp_path / "folder"
    target.mkdir()
    os.utime(target, (1_000_000, 1_000_000))
    node = file_node(target)
    assert node.type == "dir"
    assert node.last_change == 1_000_000


def test_file_mtime(tmp_path):
    target = tmp_path / "a.bin"
    target.write_bytes(b"x")
    os.utime(target, (2_000_000, 2_000_000))
    assert last_write_time(target) == 2_000_000
    assert file_node(target).last_change == 2_000_000


def test_missing_path_is_none(tmp_path):
    node = file_node(tmp_path / "ghost")
    assert node.type == "none"
    assert node.name == "ghost"


def test_broken_symlink_is_link(tmp_path):
    link = tmp_path / "dangling"
    link.symlink_to(tmp_path / "nowhere")
    assert file_node(link).type == "link"


def test_last_write_time_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        last_write_time(tmp_path / "ghost")


def test_parent_excluded_from_equality():
    parent = FileNode(type="dir", name="p", path="/p")
    a = FileNode(type="file", name="f", path="/p/f", parent=parent)
    b = FileNode(type="file", name="f", path="/p/f")
    assert a == b
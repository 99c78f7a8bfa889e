import io

import pytest

from fyle.command import Context
from fyle.filenode import FileNode
from fyle.search import Search, matches, normalize, search, tokenize


def _tree():
    root = FileNode(type="dir", name="root", path="/root")
    first = FileNode(type="file", name="my_report.txt", path="/root/my_report.txt", parent=root)
    docs = FileNode(type="dir", name="docs", path="/root/docs", parent=root)
    second = FileNode(type="file", name="Report-Final.pdf", path="/root/docs/Report-Final.pdf", parent=docs)
    other = FileNode(type="file", name="other.bin", path="/root/docs/other.bin", parent=docs)
    docs.children.extend([second, other])
    root.children.extend([first, docs])
    return root


def test_normalize_separators():
    assert normalize("Hello_World.TXT") == "hello world txt"


def test_normalize_cyrillic():
    assert normalize("ПРИВЕТ-Мир") == "привет мир"


@pytest.mark.parametrize("text", ["a<b>c:d", "  x,,y  ", "Foo/Bar\\Baz|Q?*", "уже норм"])
def test_normalize_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once
    assert "  " not in once
    assert once == once.strip()


def test_tokenize_splits_whitespace():
    assert tokenize("  alpha   beta\tgamma ") == ["alpha", "beta", "gamma"]


def test_matches_counts_query_tokens():
    assert matches("report_2023.pdf", ["report", "pdf", "missing"]) == 2


def test_matches_zero_when_absent():
    assert matches("photo.jpg", ["report"]) == 0


def test_search_walks_tree_in_order():
    root = _tree()
    tokens = tokenize(normalize("report"))
    results = list(search(tokens, root))
    assert [path for _, path in results] == ["/root/my_report.txt", "/root/docs/Report-Final.pdf"]
    for score, path in results:
        assert score == matches(path.rsplit("/", 1)[1], tokens)


def test_search_skips_non_dir_children():
    root = FileNode(type="dir", name="root", path="/root")
    link = FileNode(type="link", name="zzz", path="/root/zzz", parent=root)
    link.children.append(FileNode(type="file", name="report", path="/root/zzz/report"))
    root.children.append(link)
    assert list(search(["report"], root)) == []


def test_run_without_args():
    out = io.StringIO()
    Search(Context(index_data=_tree()), out).run([])
    assert out.getvalue() == "Укажите имя файла...\n"


def test_run_without_index():
    out = io.StringIO()
    Search(Context(), out).run(["report"])
    assert out.getvalue() == "Данные еще не проиндексированы.\n"


def test_run_prints_results():
    root = _tree()
    out = io.StringIO()
    Search(Context(index_data=root), out).run(["REPORT"])
    text = out.getvalue()
    assert text.startswith("Поиск:\n\n")
    assert text.endswith("Поиск завершен\n\n")
    for score, path in search(["report"], root):
        assert f"{score} | {path}\n" in text
    assert "other.bin" not in text
# fyle

An interactive console file manager. It indexes a directory tree into memory,
prints the tree, searches entry names, and saves or loads the index as JSON.
The prompts and messages it prints are in Russian.

## Installation

```
pip install .
```

There are no dependencies outside the standard library.

## Usage

Start the interactive prompt:

```
fyle
```

Then type one command per line:

| Command          | What it does                                                   |
|------------------|----------------------------------------------------------------|
| `index <folder>` | Index a directory recursively and keep the tree in memory      |
| `show`           | Print the indexed tree                                         |
| `search <text>`  | List entries whose names share words with the text             |
| `export <file>`  | Save the index to a JSON file                                  |
| `import <file>`  | Load an index from a JSON file written by `export`             |
| `help`           | Describe every command                                         |
| `exit`           | Leave the prompt                                               |

Extra words after a command are ignored. Blank lines are skipped, and an
unknown command prints a message saying it does not exist. An error raised
while a command runs (for example a missing file given to `import`) is printed
and the prompt carries on. After `exit`, or at the end of input, the program
says goodbye and waits for one more Enter before it returns.

### Indexing

`index` accepts only an existing directory; anything else prints a message and
leaves the current index unchanged. Entries in each directory are visited in
sorted order. Every entry records its type (`file`, `dir`, `link`, `socket`,
`fifo`, `block`, `char` or `none`), its name, its absolute path, its size in
bytes (files only, otherwise 0) and its modification time as whole seconds
since the epoch (files and directories only, otherwise 0).

### Showing

`show` prints one line per entry, indented three spaces per level. Directory
names end with `/` and files show their size:

```
|-- docs/
   |-- annual_report.pdf (20480 bytes)
   |-- notes.txt (12 bytes)
```

### Searching

Search is case-insensitive. The query (the first word after `search`) and each
entry name are split into words, and these characters count as separators as
well as whitespace: `< > : " / \ | ? * . - _ ,`. To search for several words,
join them with one of these, e.g. `annual-report`. Each entry that shares at
least one word with the query is printed with the number of matching query
words, then its full path, in the order of the tree:

```
search annual-report
2 | /home/user/docs/annual_report.pdf
1 | /home/user/docs/report.txt
```

The root directory itself is not matched, only what lies below it.

### JSON format

`export` writes the tree with four-space indentation, keys sorted and
non-ASCII characters kept as they are. Each node holds `type`, `name`, `path`,
`size`, `lastChange` and a list of `children`. `import` reads the same shape
back and links every node to its parent.

## Using it from Python

The pieces behind the commands can be called directly:

```python
from fyle.indexer import build_index
from fyle.show import render_tree
from fyle.search import normalize, tokenize, search
from fyle.exporter import save
from fyle.importer import load

root = build_index("docs")          # NotADirectoryError if not a directory
print(render_tree(root), end="")
for score, path in search(tokenize(normalize("annual-report")), root):
    print(score, path)
save(root, "index.json")
same = load("index.json")
```

`fyle.filenode.FileNode` is the tree node, and `fyle.filenode.file_node(path)`
describes a single path without its children.

## What it does not do

fyle only reads the filesystem. It cannot copy, move, rename, delete or open
files. The index lives in memory until it is exported; it is not refreshed when
files change, so run `index` again to pick up changes.

## Running the tests

```
pip install .[test]
pytest
```
"""Unit tests for the TreeWalker class."""

import locale
import os
from pathlib import Path

import pytest

from dirtree.ignore_rules.glob_rules import GlobIgnoreRules
from dirtree.tree_walker.directory_entry import DirectoryEntry, scan_directory
from dirtree.tree_walker.tree_node import DEPTH_LIMIT_LABEL, UNREADABLE_LABEL
from dirtree.tree_walker.tree_walker import MAX_DEPTH, TreeWalker, sort_entries
from dirtree.types import EntryKind


def fake_lister(layout, root="/root", unreadable=()):
    """Build a listing function from a nested dict rooted at ``root``; ``None`` values are files."""

    def find(path):
        node = layout
        for part in Path(os.path.relpath(path, root)).parts:
            node = node[part]
        return node

    def list_entries(path):
        if path in unreadable:
            raise PermissionError(13, "Permission denied", path)
        node = find(path)
        if node is None:
            raise NotADirectoryError(20, "Not a directory", path)
        return [DirectoryEntry(name, os.path.join(path, name), child is not None) for name, child in node.items()]

    return list_entries


@pytest.fixture
def nested_chain(tmp_path):
    """A root holding a chain of MAX_DEPTH + 1 nested single-child directories."""
    current = tmp_path / "chain"
    current.mkdir()
    root = current
    for i in range(1, MAX_DEPTH + 2):
        current = current / f"d{i}"
        current.mkdir()
    return root


def test_tree_walker_initialization(tmp_path):
    walker = TreeWalker(str(tmp_path))
    assert walker.root_path == Path(tmp_path)
    assert walker.max_depth == MAX_DEPTH == 50
    assert walker._tree is None


def test_sample_project_with_ignore_rules(sample_project):
    walker = TreeWalker(sample_project, GlobIgnoreRules(["node_modules", "*.log"]))
    tree = walker.get_tree_representation()

    assert "📁 src" in tree
    assert "📄 index.ts" in tree
    assert "📄 package.json" in tree
    assert "📄 README.md" in tree
    assert "node_modules" not in tree
    assert "some-package.js" not in tree
    assert "test.log" not in tree


def test_sample_project_rendering(sample_project):
    walker = TreeWalker(sample_project, GlobIgnoreRules(["node_modules", "*.log"]))
    files = sorted(["package.json", "README.md"], key=locale.strxfrm)
    expected = [
        "📁 project",
        "├── 📁 src",
        "│   └── 📄 index.ts",
        f"├── 📄 {files[0]}",
        f"└── 📄 {files[1]}",
    ]
    assert walker.get_tree_representation().split("\n") == expected


def test_no_rules_renders_everything(sample_project):
    tree = TreeWalker(sample_project).get_tree_representation()
    assert "📁 node_modules" in tree
    assert "📄 some-package.js" in tree
    assert "📄 test.log" in tree


def test_prefixes_for_nested_entries(tmp_path):
    (tmp_path / "a" / "inner").mkdir(parents=True)
    (tmp_path / "a" / "inner" / "deep.txt").touch()
    (tmp_path / "a" / "x.txt").touch()
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "y.txt").touch()

    lines = TreeWalker(tmp_path).get_tree_representation().split("\n")

    assert lines[1:] == [
        "├── 📁 a",
        "│   ├── 📁 inner",
        "│   │   └── 📄 deep.txt",
        "│   └── 📄 x.txt",
        "└── 📁 b",
        "    └── 📄 y.txt",
    ]


def test_root_line_uses_directory_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    lines = TreeWalker(".").get_tree_representation().split("\n")
    assert lines == [f"📁 {tmp_path.name}"]


def test_directories_before_files_in_locale_order(tmp_path):
    for name in ["zeta", "Alpha", "beta"]:
        (tmp_path / name).mkdir()
    for name in ["zz.txt", "Aa.txt", "bb.txt", "_x.txt"]:
        (tmp_path / name).touch()

    lines = TreeWalker(tmp_path).get_tree_representation().split("\n")[1:]
    dir_lines = [line for line in lines if "📁" in line]
    file_lines = [line for line in lines if "📄" in line]

    assert lines == dir_lines + file_lines
    assert [line.split(" ", 2)[2] for line in dir_lines] == sorted(["zeta", "Alpha", "beta"], key=locale.strxfrm)
    assert [line.split(" ", 2)[2] for line in file_lines] == sorted(
        ["zz.txt", "Aa.txt", "bb.txt", "_x.txt"], key=locale.strxfrm
    )


def test_sort_entries():
    entries = [
        DirectoryEntry("b.txt", "./b.txt", False),
        DirectoryEntry("lib", "./lib", True),
        DirectoryEntry("a.txt", "./a.txt", False),
        DirectoryEntry("app", "./app", True),
    ]
    assert [e.name for e in sort_entries(entries)] == ["app", "lib", "a.txt", "b.txt"]


def test_depth_limit_marker(nested_chain):
    walker = TreeWalker(nested_chain)
    lines = walker.get_tree_representation().split("\n")

    # Root line, 51 directories and the marker
    assert len(lines) == MAX_DEPTH + 3
    assert lines[-1].endswith(DEPTH_LIMIT_LABEL)
    assert lines[-2].endswith(f"📁 d{MAX_DEPTH + 1}")
    assert DEPTH_LIMIT_LABEL not in "\n".join(lines[:-1])

    marker = walker.get_tree().leaves[0]
    assert marker.kind is EntryKind.DEPTH_LIMIT
    assert marker.depth_level == MAX_DEPTH + 1


def test_depth_limit_is_configurable(tmp_path):
    (tmp_path / "a" / "b" / "c").mkdir(parents=True)
    (tmp_path / "a" / "b" / "c" / "file.txt").touch()

    lines = TreeWalker(tmp_path, max_depth=1).get_tree_representation().split("\n")

    assert lines[1:] == [
        "└── 📁 a",
        "    └── 📁 b",
        f"        └── {DEPTH_LIMIT_LABEL}",
    ]


def test_unreadable_directory_marker():
    layout = {"locked": {"secret.txt": None}, "open": {"visible.txt": None}, "z.txt": None}
    walker = TreeWalker("/root", list_entries=fake_lister(layout, unreadable={"/root/locked"}))

    lines = walker.get_tree_representation().split("\n")

    assert lines == [
        "📁 root",
        "├── 📁 locked",
        f"│   └── {UNREADABLE_LABEL}",
        "├── 📁 open",
        "│   └── 📄 visible.txt",
        "└── 📄 z.txt",
    ]
    assert "secret.txt" not in "\n".join(lines)


def test_directory_replaced_by_file_is_unreadable():
    # Listed as a directory, but listing it fails with NotADirectoryError
    def list_entries(path):
        if path == "/root":
            return [DirectoryEntry("gone", "/root/gone", True), DirectoryEntry("kept", "/root/kept", False)]
        raise NotADirectoryError(20, "Not a directory", path)

    lines = TreeWalker("/root", list_entries=list_entries).get_tree_representation().split("\n")

    assert lines[1:] == ["├── 📁 gone", f"│   └── {UNREADABLE_LABEL}", "└── 📄 kept"]


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="Needs POSIX permissions and a non-root user")
def test_permission_denied_on_disk(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "hidden.txt").touch()
    (tmp_path / "sibling.txt").touch()
    locked.chmod(0)
    try:
        tree = TreeWalker(tmp_path).get_tree_representation()
    finally:
        locked.chmod(0o755)

    assert UNREADABLE_LABEL in tree
    assert "📄 sibling.txt" in tree
    assert "hidden.txt" not in tree


def test_unreadable_root_is_fatal():
    walker = TreeWalker("/root", list_entries=fake_lister({}, unreadable={"/root"}))
    with pytest.raises(PermissionError):
        walker.get_tree_representation()


def test_non_existent_root():
    with pytest.raises(FileNotFoundError):
        TreeWalker("/non/existent/directory").get_tree()


def test_file_as_root():
    with pytest.raises(NotADirectoryError):
        TreeWalker(__file__).get_tree()


def test_entries_without_name_or_path_are_skipped():
    def list_entries(path):
        return [
            DirectoryEntry("", "/root/", False),
            DirectoryEntry("orphan", "", False),
            DirectoryEntry("ok.txt", "/root/ok.txt", False),
        ]

    lines = TreeWalker("/root", list_entries=list_entries).get_tree_representation().split("\n")
    assert lines[1:] == ["└── 📄 ok.txt"]


def test_ignored_directory_is_not_listed():
    listed = []
    lister = fake_lister({"node_modules": {"pkg.js": None}, "src": {}})

    def list_entries(path):
        listed.append(path)
        return lister(path)

    TreeWalker("/root", GlobIgnoreRules(["node_modules"]), list_entries=list_entries).get_tree()

    assert listed == ["/root", "/root/src"]


def test_empty_directory(tmp_path):
    (tmp_path / "empty_dir").mkdir()
    walker = TreeWalker(tmp_path)
    empty_node = walker.get_tree().children[0]
    assert empty_node.name == "empty_dir"
    assert empty_node.children == ()
    assert walker.get_tree_representation().split("\n")[1:] == ["└── 📁 empty_dir"]


def test_counts(sample_project):
    walker = TreeWalker(sample_project, GlobIgnoreRules(["node_modules", "*.log"]))
    assert walker.get_directory_count() == 1
    assert walker.get_file_count() == 3


def test_refresh(sample_project):
    walker = TreeWalker(sample_project)
    walker.get_tree()
    (sample_project / "new_file.txt").touch()
    walker.refresh()
    assert "📄 new_file.txt" in walker.get_tree_representation()


def test_walk_is_idempotent(sample_project):
    rules = GlobIgnoreRules(["node_modules", "*.log"])
    first = TreeWalker(sample_project, rules).get_tree_representation()
    second = TreeWalker(sample_project, rules).get_tree_representation()
    assert first == second


@pytest.fixture
def project_with_symlink(tmp_path):
    (tmp_path / "real").mkdir()
    (tmp_path / "real" / "inside.txt").touch()
    try:
        os.symlink(tmp_path / "real", tmp_path / "link")
        os.symlink(tmp_path, tmp_path / "real" / "loop")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    return tmp_path


def test_symlinks_not_followed_by_default(project_with_symlink):
    tree = TreeWalker(project_with_symlink).get_tree_representation()
    assert "📄 link" in tree
    assert "📄 loop" in tree
    assert DEPTH_LIMIT_LABEL not in tree


def test_symlink_cycle_stops_at_depth_limit(project_with_symlink):
    walker = TreeWalker(project_with_symlink, follow_symlinks=True, max_depth=6)
    tree = walker.get_tree_representation()
    assert "📁 link" in tree
    assert DEPTH_LIMIT_LABEL in tree
    assert all(leaf.depth_level <= 7 for leaf in walker.get_tree().leaves)


def test_scan_directory(tmp_path):
    (tmp_path / "dir").mkdir()
    (tmp_path / "file.txt").touch()
    entries = {entry.name: entry for entry in scan_directory(str(tmp_path))}
    assert entries["dir"].is_dir
    assert not entries["file.txt"].is_dir
    assert entries["file.txt"].path == os.path.join(str(tmp_path), "file.txt")


def test_scan_directory_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_directory(str(tmp_path / "missing"))
    (tmp_path / "file.txt").touch()
    with pytest.raises(NotADirectoryError):
        scan_directory(str(tmp_path / "file.txt"))

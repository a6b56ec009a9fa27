from pathlib import Path

from ggg.cache_listing import (
    METADATA_FILE,
    DirNode,
    build_tree,
    collect_files,
    render_tree,
)


def _make(root: Path, paths):
    for rel in paths:
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("x")


def _flatten(node, prefix=""):
    paths = [prefix + name for name in node.files]
    for name, sub in node.subdirs.items():
        paths.extend(_flatten(sub, prefix + name + "/"))
    return paths


def test_collect_files_returns_sorted_posix_paths(tmp_path: Path):
    paths = ["z.txt", "addons/gut/plugin.cfg", "addons/gut/gut.gd", "a/b/c/d.txt"]
    _make(tmp_path, paths)
    assert collect_files(tmp_path) == sorted(paths)


def test_collect_files_skips_metadata(tmp_path: Path):
    _make(tmp_path, [METADATA_FILE, "addons/x.gd", f"addons/{METADATA_FILE}"])
    assert collect_files(tmp_path) == ["addons/x.gd"]


def test_collect_files_ignores_empty_dirs(tmp_path: Path):
    (tmp_path / "empty" / "deeper").mkdir(parents=True)
    _make(tmp_path, ["one.txt"])
    assert collect_files(tmp_path) == ["one.txt"]


def test_collect_files_missing_directory_raises(tmp_path: Path):
    missing = tmp_path / "nope"
    try:
        collect_files(missing)
    except FileNotFoundError as exc:
        assert missing.name in str(exc)
    else:
        raise AssertionError("expected FileNotFoundError")


def test_insert_places_files_and_dirs():
    node = DirNode()
    node.insert(["addons", "gut", "gut.gd"])
    node.insert(["README.md"])
    node.insert([])
    assert node.files == ["README.md"]
    assert node.subdirs["addons"].subdirs["gut"].files == ["gut.gd"]
    assert node.subdirs["addons"].files == []


def test_build_tree_round_trips_paths():
    files = ["addons/gut/a.gd", "addons/gut/b.gd", "addons/other/c.gd", "top.txt"]
    tree = build_tree(files)
    assert sorted(_flatten(tree)) == sorted(files)


def test_render_tree_counts_and_indents():
    tree = build_tree(["addons/gut/a.gd", "addons/gut/b.gd", "addons/one/c.gd", "top.txt"])
    lines = list(render_tree(tree))
    assert lines == [
        "addons/",
        "  gut/  2 files",
        "  one/  1 file",
    ]


def test_render_tree_one_line_per_directory_sorted():
    tree = build_tree(["b/x", "a/y", "c/d/e/z"])
    lines = list(render_tree(tree))
    assert len(lines) == 5
    top = [line for line in lines if not line.startswith(" ")]
    assert top == sorted(top)


def test_render_tree_depth_offsets_indent():
    tree = build_tree(["dir/file"])
    shallow = list(render_tree(tree))
    deep = list(render_tree(tree, 2))
    assert deep == ["    " + line for line in shallow]


def test_render_tree_root_files_not_listed():
    assert list(render_tree(build_tree(["a.txt", "b.txt"]))) == []
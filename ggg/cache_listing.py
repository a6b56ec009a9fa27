"""Listing a dependency's cache entry as files or a collapsed tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Sequence

METADATA_FILE = ".ggg_dep_info.toml"
"""Bookkeeping file kept in each cache entry; never listed."""


def _walk(directory: Path, prefix: tuple[str, ...]) -> Iterator[str]:
    for child in directory.iterdir():
        if child.name == METADATA_FILE:
            continue
        parts = (*prefix, child.name)
        if child.is_dir():
            yield from _walk(child, parts)
        elif child.is_file():
            yield "/".join(parts)


def collect_files(directory: str | Path) -> list[str]:
    """Return every file below ``directory`` as sorted ``/``-separated paths."""
    return sorted(_walk(Path(directory), ()))


@dataclass
class DirNode:
    """A directory in the collapsed tree: its own files and subdirectories."""

    files: list[str] = field(default_factory=list)
    subdirs: dict[str, DirNode] = field(default_factory=dict)

    def insert(self, parts: Sequence[str]) -> None:
        """Add a file given as its path components."""
        if not parts:
            return
        if len(parts) == 1:
            self.files.append(parts[0])
            return
        self.subdirs.setdefault(parts[0], DirNode()).insert(parts[1:])


def build_tree(files: Iterable[str]) -> DirNode:
    """Build a tree from ``/``-separated file paths."""
    root = DirNode()
    for path in files:
        root.insert(path.split("/"))
    return root


def render_tree(node: DirNode, depth: int = 0) -> Iterator[str]:
    """Yield one line per directory, sorted, indented by depth, with file counts."""
    indent = "  " * depth
    for name in sorted(node.subdirs):
        subdir = node.subdirs[name]
        count = len(subdir.files)
        if count:
            yield f"{indent}{name}/  {count} file{'' if count == 1 else 's'}"
        else:
            yield f"{indent}{name}/"
        yield from render_tree(subdir, depth + 1)
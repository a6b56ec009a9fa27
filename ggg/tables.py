"""Plain-text tables for dependency listings and asset search results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ggg.dependency import ArchiveSource, Dependency, GitSource

_TYPE_WIDTH = len("archive")
_VERSION_HEADER = "Version / Source"
_LICENSE_HEADER = "License"


@dataclass(frozen=True)
class SearchRow:
    """One asset library search result."""

    asset_id: int
    title: str
    author: str
    license: str


def truncate(s: str, max_len: int) -> str:
    """Return ``s`` unchanged if it fits in ``max_len``, else cut it and end with ``..``."""
    if len(s) <= max_len:
        return s
    return s[: max(max_len - 2, 0)] + ".."


def digits(n: int) -> int:
    """Return the number of decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError(f"digits() needs a non-negative integer, got {n}")
    return len(str(n))


def _strip_git_suffix(url: str) -> str:
    while url.endswith(".git"):
        url = url[: -len(".git")]
    return url


def _describe(dep: Dependency) -> tuple[str, str]:
    source = dep.kind()
    if isinstance(source, GitSource):
        short_url = _strip_git_suffix(source.git).rsplit("/", 1)[-1]
        return "git", f"{source.rev}  ({short_url})"
    if isinstance(source, ArchiveSource):
        return "archive", source.url.rsplit("/", 1)[-1]
    return "asset", f"asset #{source.asset_id}"


def format_dependency_table(dependencies: Sequence[Dependency]) -> str:
    """Return a table of each dependency's name, source type and version."""
    if not dependencies:
        return "No dependencies in ggg.toml."

    name_w = max(4, *(len(dep.name) for dep in dependencies))
    lines = [
        f"{'Name':<{name_w}}  {'Type':<{_TYPE_WIDTH}}  {_VERSION_HEADER}",
        "-" * (name_w + 2 + _TYPE_WIDTH + 2 + len(_VERSION_HEADER)),
    ]
    for dep in dependencies:
        type_label, version_info = _describe(dep)
        lines.append(f"{dep.name:<{name_w}}  {type_label:<{_TYPE_WIDTH}}  {version_info}")
    return "\n".join(lines)


def format_search_table(rows: Iterable[SearchRow], total: int, godot_version: str) -> str:
    """Return a table of search results followed by a summary line.

    ``total`` is the number of matches the library reported, which may be
    larger than the rows shown. An empty ``godot_version`` means no filter.
    """
    rows = list(rows)
    version_label = f" on Godot {godot_version}" if godot_version else ""

    if not rows:
        return f"No results{version_label}."

    id_w = max(2, *(digits(r.asset_id) for r in rows))
    title_w = min(40, max(5, *(len(r.title) for r in rows)))
    author_w = min(20, max(6, *(len(r.author) for r in rows)))

    lines = [
        f"{'ID':<{id_w}}  {'Title':<{title_w}}  {'Author':<{author_w}}  {_LICENSE_HEADER}",
        "-" * (id_w + 2 + title_w + 2 + author_w + 2 + len(_LICENSE_HEADER)),
    ]
    for r in rows:
        lines.append(
            f"{r.asset_id:>{id_w}}  "
            f"{truncate(r.title, title_w):<{title_w}}  "
            f"{truncate(r.author, author_w):<{author_w}}  "
            f"{r.license}"
        )

    shown = len(rows)
    lines.append("")
    if total > shown:
        lines.append(
            f"Showing {shown} of {total} results{version_label}. "
            "Use `ggg search` with a more specific query to narrow results."
        )
    else:
        plural = "" if total == 1 else "s"
        lines.append(f"Found {total} result{plural}{version_label}.")
    lines.append("Use `ggg add asset --id <N>` to add a specific asset.")
    return "\n".join(lines)
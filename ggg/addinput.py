"""Interpreting what a user types when adding a dependency."""

from __future__ import annotations

import enum

from ggg.dependency import is_archive_url


class InputKind(enum.Enum):
    """The kind of dependency a bare ``add`` argument refers to."""

    ARCHIVE = "archive"
    GIT = "git"
    ASSET = "asset"


def _looks_like_git_url(text: str) -> bool:
    return "://" in text or text.endswith(".git") or ":" in text


def classify_input(text: str) -> InputKind:
    """Decide which kind of dependency ``text`` names.

    Archive extensions (``.zip``, ``.tar.gz``, ``.tgz``) mean an archive,
    URL-like strings (``://``, ``.git`` suffix, SCP-style ``host:path``)
    mean a git repository, and anything else is an asset library query or ID.
    """
    if is_archive_url(text):
        return InputKind.ARCHIVE
    if _looks_like_git_url(text):
        return InputKind.GIT
    return InputKind.ASSET


def parse_url_rev(s: str) -> tuple[str, str | None]:
    """Split ``s`` into a git URL and an optional revision after the last ``@``.

    The split only happens when the part before the ``@`` looks like a URL,
    so SCP-style addresses such as ``git@host:repo.git`` are left intact.
    """
    left, sep, right = s.rpartition("@")
    if sep and _looks_like_git_url(left):
        return left, right
    return s, None


def infer_name_from_asset(title: str) -> str:
    """Derive a dependency name from an asset library title.

    Takes the text before the first ``" - "``, lowercases it, turns every
    non-alphanumeric character into a hyphen and collapses runs of hyphens.
    """
    base = title.split(" - ", 1)[0]
    replaced = "".join(c if c.isalnum() else "-" for c in base.lower())
    return "-".join(part for part in replaced.split("-") if part)


def infer_name_from_git(url: str) -> str:
    """Derive a dependency name from the last path segment of a git URL."""
    last = url.rstrip("/").rsplit("/", 1)[-1]
    while last.endswith(".git"):
        last = last[: -len(".git")]
    return last.lower()
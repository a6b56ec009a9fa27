"""Files written into a project when it is first set up."""

from __future__ import annotations

from pathlib import Path


def ensure_gitignore_entry(gitignore_path: str | Path, entry: str) -> None:
    """Make sure ``entry`` is a line of the ignore file, creating it if needed.

    Nothing changes when a line already matches ``entry`` exactly.
    """
    path = Path(gitignore_path)
    if not path.exists():
        path.write_text(f"{entry}\n", encoding="utf-8", newline="")
        return

    content = path.read_text(encoding="utf-8", newline="")
    if any(line.removesuffix("\r") == entry for line in content.split("\n")):
        return

    prefix = "\n" if content and not content.endswith("\n") else ""
    with path.open("a", encoding="utf-8", newline="") as handle:
        handle.write(f"{prefix}{entry}\n")


def project_godot_content(major: int, minor: int) -> str:
    """Return a minimal ``project.godot`` for the given engine version.

    Engine 3.x uses ``config_version=4``; 4.x and later use 5 and also
    record the version in ``config/features``.
    """
    config_version = 4 if major == 3 else 5
    lines = [
        f"config_version={config_version}",
        "",
        "[application]",
        "",
        'config/name=""',
    ]
    if major >= 4:
        lines.append(f'config/features=PackedStringArray("{major}.{minor}")')
    return "\n".join(lines) + "\n"


def create_project_godot(path: str | Path, major: int, minor: int) -> None:
    """Write a minimal ``project.godot`` at ``path``."""
    Path(path).write_text(project_godot_content(major, minor), encoding="utf-8", newline="")
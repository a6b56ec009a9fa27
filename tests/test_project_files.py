from pathlib import Path

from ggg.project_files import (
    create_project_godot,
    ensure_gitignore_entry,
    project_godot_content,
)

ENTRY = ".ggg.state"


def test_gitignore_created_when_missing(tmp_path: Path):
    path = tmp_path / ".gitignore"
    ensure_gitignore_entry(path, ENTRY)
    assert path.read_text() == f"{ENTRY}\n"


def test_gitignore_entry_not_duplicated(tmp_path: Path):
    path = tmp_path / ".gitignore"
    path.write_text(f"build/\n{ENTRY}\n")
    ensure_gitignore_entry(path, ENTRY)
    assert path.read_text() == f"build/\n{ENTRY}\n"


def test_gitignore_appends_with_newline_fix(tmp_path: Path):
    path = tmp_path / ".gitignore"
    path.write_text("build/")
    ensure_gitignore_entry(path, ENTRY)
    assert path.read_text() == f"build/\n{ENTRY}\n"


def test_gitignore_appends_after_trailing_newline(tmp_path: Path):
    path = tmp_path / ".gitignore"
    path.write_text("build/\n")
    ensure_gitignore_entry(path, ENTRY)
    assert path.read_text() == f"build/\n{ENTRY}\n"


def test_gitignore_is_idempotent(tmp_path: Path):
    path = tmp_path / ".gitignore"
    ensure_gitignore_entry(path, ENTRY)
    first = path.read_text()
    ensure_gitignore_entry(path, ENTRY)
    assert path.read_text() == first
    assert first.split("\n").count(ENTRY) == 1


def test_gitignore_partial_match_still_appends(tmp_path: Path):
    path = tmp_path / ".gitignore"
    path.write_text(f"{ENTRY}.bak\n")
    ensure_gitignore_entry(path, ENTRY)
    assert path.read_text().splitlines() == [f"{ENTRY}.bak", ENTRY]


def test_gitignore_crlf_line_matches(tmp_path: Path):
    path = tmp_path / ".gitignore"
    path.write_bytes(f"{ENTRY}\r\n".encode())
    ensure_gitignore_entry(path, ENTRY)
    assert path.read_bytes() == f"{ENTRY}\r\n".encode()


def test_project_godot_content_godot4():
    assert project_godot_content(4, 3) == (
        "config_version=5\n\n[application]\n\nconfig/name=\"\"\n"
        "config/features=PackedStringArray(\"4.3\")\n"
    )


def test_project_godot_content_godot3_has_no_features():
    content = project_godot_content(3, 5)
    assert content.startswith("config_version=4\n")
    assert "config/features" not in content
    assert "[application]" in content


def test_project_godot_content_future_major_uses_version_5():
    content = project_godot_content(5, 0)
    assert content.splitlines()[0] == project_godot_content(4, 0).splitlines()[0]
    assert 'PackedStringArray("5.0")' in content


def test_create_project_godot_writes_content(tmp_path: Path):
    path = tmp_path / "project.godot"
    create_project_godot(path, 4, 2)
    assert path.read_text() == project_godot_content(4, 2)
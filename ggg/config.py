"""The ``ggg.toml`` project manifest: reading, validating and writing it.

The file looks like this::

    [project]
    godot = "4.3-stable"

    [[dependency]]
    name = "gut"
    git  = "https://github.com/bitwes/Gut.git"
    rev  = "v9.3.0"
    map  = [
        { from = "addons/gut" },
        { from = "examples/", to = "examples/gut" },
    ]

Saving into an existing file replaces only the ``dependency`` entries and
keeps the comments and formatting of everything else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import tomlkit
from tomlkit.exceptions import TOMLKitError

from ggg.dependency import ConfigError, Dependency

_MISSING_MANIFEST = (
    "no ggg.toml found in the current directory - run `ggg init` to create one"
)


@dataclass
class Project:
    """The ``[project]`` table: the exact engine build, e.g. ``"4.3-stable"``."""

    godot: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Project:
        if not isinstance(data, Mapping):
            raise ConfigError("invalid type for `project`: expected a table")
        if "godot" not in data:
            raise ConfigError("missing field `godot`")
        godot = data["godot"]
        if not isinstance(godot, str):
            raise ConfigError("invalid type for `godot`: expected a string")
        return cls(godot=godot)


@dataclass
class SyncSettings:
    """The optional ``[sync]`` table.

    ``force_overwrite`` holds glob patterns of project-relative paths that a
    sync always overwrites, bypassing conflict detection.
    """

    force_overwrite: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SyncSettings:
        if not isinstance(data, Mapping):
            raise ConfigError("invalid type for `sync`: expected a table")
        patterns = data.get("force_overwrite", [])
        if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
            raise ConfigError("invalid type for `force_overwrite`: expected an array of strings")
        return cls(force_overwrite=list(patterns))


def _dependency_table(dep: Dependency) -> tomlkit.items.Table:
    table = tomlkit.table()
    for key, value in dep.to_dict().items():
        if key == "map":
            entries = tomlkit.array()
            for entry in value:
                inline = tomlkit.inline_table()
                inline.update(entry)
                entries.append(inline)
            table["map"] = entries
        else:
            table[key] = value
    return table


@dataclass
class Config:
    """The full contents of a ``ggg.toml`` file."""

    project: Project
    sync: SyncSettings | None = None
    dependency: list[Dependency] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Config:
        """Parse manifest text. Structure is checked; sources are not validated."""
        try:
            data = tomlkit.parse(text).unwrap()
        except TOMLKitError as exc:
            raise ConfigError(str(exc)) from exc

        if "project" not in data:
            raise ConfigError("missing field `project`")
        project = Project.from_dict(data["project"])

        sync = SyncSettings.from_dict(data["sync"]) if "sync" in data else None

        raw_deps = data.get("dependency", [])
        if not isinstance(raw_deps, list):
            raise ConfigError("invalid type for `dependency`: expected an array of tables")
        dependencies = [Dependency.from_dict(item) for item in raw_deps]

        return cls(project=project, sync=sync, dependency=dependencies)

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Read, parse and validate the manifest at ``path``."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ConfigError(_MISSING_MANIFEST) from exc
        except OSError as exc:
            raise ConfigError(f"failed to read {path}: {exc}") from exc
        try:
            config = cls.parse(text)
        except ConfigError as exc:
            raise ConfigError(f"failed to parse {path}: {exc}") from exc
        config.validate()
        return config

    def validate(self) -> None:
        """Check names are unique and every dependency has a valid source."""
        seen: set[str] = set()
        for dep in self.dependency:
            if dep.name in seen:
                raise ConfigError(f'duplicate dependency name: "{dep.name}"')
            seen.add(dep.name)
            dep.validate()

    def _document(self) -> tomlkit.TOMLDocument:
        doc = tomlkit.document()
        project = tomlkit.table()
        project["godot"] = self.project.godot
        doc["project"] = project

        if self.sync is not None:
            sync = tomlkit.table()
            sync["force_overwrite"] = list(self.sync.force_overwrite)
            doc["sync"] = sync

        if self.dependency:
            deps = tomlkit.aot()
            for dep in self.dependency:
                deps.append(_dependency_table(dep))
            doc["dependency"] = deps
        return doc

    def to_toml(self) -> str:
        """Serialise the whole manifest freshly, leaving out unset fields."""
        return tomlkit.dumps(self._document())

    def save(self, path: str | Path) -> None:
        """Validate, then write the manifest to ``path``.

        An invalid manifest is rejected before the file is touched. An
        existing file keeps everything but its ``dependency`` entries.
        """
        self.validate()
        path = Path(path)
        fresh = self._document()

        if not path.exists():
            path.write_text(tomlkit.dumps(fresh), encoding="utf-8")
            return

        try:
            original = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to read {path}: {exc}") from exc
        try:
            doc = tomlkit.parse(original)
        except TOMLKitError as exc:
            raise ConfigError(f"failed to parse {path}: {exc}") from exc

        if "dependency" in doc:
            del doc["dependency"]
        if "dependency" in fresh:
            doc["dependency"] = fresh["dependency"]

        path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def get_dependency(self, name: str) -> Dependency | None:
        """Return the dependency called ``name``, or None."""
        return next((dep for dep in self.dependency if dep.name == name), None)

    def remove_dependency(self, name: str) -> None:
        """Drop the dependency called ``name`` if there is one."""
        self.dependency[:] = [dep for dep in self.dependency if dep.name != name]

    def has_dependency(self, name: str) -> bool:
        """Return True if a dependency called ``name`` exists."""
        return any(dep.name == name for dep in self.dependency)
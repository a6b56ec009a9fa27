"""Dependency entries of a project manifest and their validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

_ARCHIVE_SUFFIXES = (".zip", ".tar.gz", ".tgz")
_U32_MAX = 2**32 - 1


class ConfigError(ValueError):
    """Raised when a manifest is malformed or inconsistent."""


def is_archive_url(url: str) -> bool:
    """Return True if ``url`` ends in a supported archive extension."""
    return url.endswith(_ARCHIVE_SUFFIXES)


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ConfigError(f"missing field `{key}`")
    return data[key]


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"invalid type for `{key}`: expected a string")
    return value


def _optional_u32(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"invalid type for `{key}`: expected an integer")
    if not 0 <= value <= _U32_MAX:
        raise ConfigError(f"invalid value for `{key}`: {value} is out of range")
    return int(value)


@dataclass
class MapEntry:
    """One path copied from a dependency's source into the project.

    ``source`` is the path inside the repository or archive; ``target`` is
    the destination relative to the project root and defaults to ``source``.
    """

    source: str
    target: str | None = None

    @property
    def destination(self) -> str:
        """The effective destination path."""
        return self.target if self.target is not None else self.source

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MapEntry:
        if not isinstance(data, Mapping):
            raise ConfigError("invalid map entry: expected a table")
        source = _require(data, "from")
        if not isinstance(source, str):
            raise ConfigError("invalid type for `from`: expected a string")
        return cls(source=source, target=_optional_str(data, "to"))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"from": self.source}
        if self.target is not None:
            result["to"] = self.target
        return result


@dataclass(frozen=True)
class GitSource:
    """A dependency fetched from a git repository at a revision."""

    git: str
    rev: str


@dataclass(frozen=True)
class ArchiveSource:
    """A dependency fetched as a pre-built archive."""

    url: str
    sha256: str | None
    strip_components: int


@dataclass(frozen=True)
class AssetLibSource:
    """A dependency fetched from the Godot Asset Library by numeric ID."""

    asset_id: int


@dataclass
class Dependency:
    """One ``[[dependency]]`` entry.

    Exactly one of ``git``, ``url`` or ``asset_id`` must be set; see
    :meth:`validate`.
    """

    name: str
    git: str | None = None
    rev: str | None = None
    url: str | None = None
    sha256: str | None = None
    strip_components: int | None = None
    asset_id: int | None = None
    map: list[MapEntry] | None = None

    @classmethod
    def new_git(cls, name: str, git: str, rev: str) -> Dependency:
        return cls(name=name, git=git, rev=rev)

    @classmethod
    def new_archive(cls, name: str, url: str) -> Dependency:
        return cls(name=name, url=url)

    @classmethod
    def new_asset_lib(cls, name: str, asset_id: int) -> Dependency:
        return cls(name=name, asset_id=asset_id)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Dependency:
        """Build a dependency from a parsed table. Does not validate sources."""
        if not isinstance(data, Mapping):
            raise ConfigError("invalid dependency: expected a table")
        name = _require(data, "name")
        if not isinstance(name, str):
            raise ConfigError("invalid type for `name`: expected a string")

        raw_map = data.get("map")
        entries: list[MapEntry] | None = None
        if raw_map is not None:
            if isinstance(raw_map, (str, bytes)) or not isinstance(raw_map, (list, tuple)):
                raise ConfigError("invalid type for `map`: expected an array")
            entries = [MapEntry.from_dict(item) for item in raw_map]

        return cls(
            name=name,
            git=_optional_str(data, "git"),
            rev=_optional_str(data, "rev"),
            url=_optional_str(data, "url"),
            sha256=_optional_str(data, "sha256"),
            strip_components=_optional_u32(data, "strip_components"),
            asset_id=_optional_u32(data, "asset_id"),
            map=entries,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the entry as a table, leaving out unset fields."""
        result: dict[str, Any] = {"name": self.name}
        optional = {
            "git": self.git,
            "rev": self.rev,
            "url": self.url,
            "sha256": self.sha256,
            "strip_components": self.strip_components,
            "asset_id": self.asset_id,
        }
        result.update((key, value) for key, value in optional.items() if value is not None)
        if self.map is not None:
            result["map"] = [entry.to_dict() for entry in self.map]
        return result

    def kind(self) -> GitSource | ArchiveSource | AssetLibSource:
        """Return the source this dependency uses.

        Raises ``ConfigError`` if the entry has not got exactly one source;
        call :meth:`validate` first.
        """
        has = (self.git is not None, self.url is not None, self.asset_id is not None)
        if has == (True, False, False):
            if self.rev is None:
                raise ConfigError(f"dependency {self.name!r}: git dependency is missing 'rev'")
            return GitSource(git=self.git, rev=self.rev)
        if has == (False, True, False):
            return ArchiveSource(
                url=self.url,
                sha256=self.sha256,
                strip_components=self.strip_components or 0,
            )
        if has == (False, False, True):
            return AssetLibSource(asset_id=self.asset_id)
        raise ConfigError(
            f"invalid dep {self.name!r}: must have exactly one of git, url, or asset_id"
        )

    def validate(self) -> None:
        """Check the source fields of this entry, raising ``ConfigError``."""
        name = self.name
        source_count = sum(
            value is not None for value in (self.git, self.url, self.asset_id)
        )
        if source_count > 1:
            raise ConfigError(
                f"dependency {name!r}: 'git', 'url', and 'asset_id' are mutually "
                "exclusive; set exactly one"
            )
        if source_count == 0:
            raise ConfigError(
                f"dependency {name!r}: must have exactly one of 'git', 'url', or 'asset_id'"
            )

        if self.git is not None:
            if self.rev is None:
                raise ConfigError(f"dependency {name!r}: 'git' dependencies require a 'rev' field")
            if self.sha256 is not None:
                raise ConfigError(
                    f"dependency {name!r}: 'sha256' is only valid for archive ('url') dependencies"
                )
            if self.strip_components is not None:
                raise ConfigError(
                    f"dependency {name!r}: 'strip_components' is only valid for "
                    "archive ('url') dependencies"
                )

        if self.url is not None:
            if self.rev is not None:
                raise ConfigError(f"dependency {name!r}: 'rev' is only valid for 'git' dependencies")
            if not is_archive_url(self.url):
                raise ConfigError(
                    f"dependency {name!r}: unrecognised archive format in URL {self.url!r}; "
                    "supported extensions: .zip, .tar.gz, .tgz"
                )

        if self.asset_id is not None:
            if self.rev is not None:
                raise ConfigError(f"dependency {name!r}: 'rev' is only valid for 'git' dependencies")
            if self.sha256 is not None:
                raise ConfigError(
                    f"dependency {name!r}: 'sha256' is not valid for asset library dependencies "
                    "(the hash is recorded automatically in ggg.lock)"
                )
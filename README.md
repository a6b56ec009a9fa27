# ggg

`ggg` reads, validates and writes `ggg.toml`, a file that declares the
addons of a Godot project next to the engine version the project uses. It
also has a small command line to list and remove declared dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The `ggg.toml` file

```toml
[project]
godot = "4.3-stable"

[sync]
force_overwrite = ["**/*.import", "**/*.uid"]

[[dependency]]
name = "gut"
git  = "https://example.com/addons/Gut.git"
rev  = "v9.3.0"
map  = [
    { from = "addons/gut" },
    { from = "examples/", to = "examples/gut" },
]

[[dependency]]
name             = "debug_draw_3d"
url              = "https://example.com/debug_draw_3d.zip"
sha256           = "..."
strip_components = 1

[[dependency]]
name     = "phantom-camera"
asset_id = 1234
```

Each dependency has exactly one source:

- `git` with a `rev` (tag, branch or commit SHA); `sha256` and
  `strip_components` are not allowed,
- `url` of an archive ending in `.zip`, `.tar.gz` or `.tgz`, with an optional
  `sha256` and `strip_components`; `rev` is not allowed,
- `asset_id` of an entry in the Godot Asset Library; `rev` and `sha256` are
  not allowed.

Dependency names must be unique. Problems are reported by raising
`ggg.dependency.ConfigError` (a `ValueError`), whose message names the
offending dependency or the missing field. A missing `ggg.toml` gives a
message telling you to create one.

When `Config.save` writes to an existing file, only the `[[dependency]]`
entries are replaced, so comments and formatting elsewhere in the file are
kept. An invalid configuration is rejected before the file is touched.

## Command line

List the declared dependencies of the `ggg.toml` in the current directory,
as a table of name, source type and version:

```
ggg deps
```

Remove a dependency from `ggg.toml`:

```
ggg remove gut
```

`remove` only edits `ggg.toml`; it deletes no project files. On an error
both commands print `Error: ...` to standard error and exit with status 1.

## Library use

```python
from pathlib import Path

from ggg.config import Config
from ggg.dependency import Dependency, GitSource

config = Config.load(Path("ggg.toml"))
config.dependency.append(
    Dependency.new_git("gut", "https://example.com/addons/Gut.git", "v9.3.0")
)
config.save(Path("ggg.toml"))

dep = config.get_dependency("gut")
assert isinstance(dep.kind(), GitSource)
```

Other modules:

- `ggg.config` – `Config` (`parse`, `load`, `validate`, `to_toml`, `save`,
  `get_dependency`, `has_dependency`, `remove_dependency`), `Project`,
  `SyncSettings`.
- `ggg.dependency` – `Dependency`, `MapEntry`, the source kinds
  `GitSource`, `ArchiveSource` and `AssetLibSource`, and `is_archive_url`.
- `ggg.addinput` – `classify_input` tells an archive URL, a git URL and an
  asset library query apart (`InputKind`); `parse_url_rev` splits
  `url@rev`; `infer_name_from_git` and `infer_name_from_asset` suggest
  dependency names.
- `ggg.project_files` – `ensure_gitignore_entry`, and
  `project_godot_content` / `create_project_godot` for a minimal
  `project.godot`.
- `ggg.cache_listing` – `collect_files` lists a directory's files as
  sorted `/`-separated paths; `build_tree` and `render_tree` show them as a
  collapsed directory tree with file counts.
- `ggg.tables` – `format_dependency_table`, `format_search_table` (for
  `SearchRow` results), `truncate` and `digits`.
- `ggg.cache` – `resolve_cache_root` returns the directory named by the
  `GGG_CACHE_DIR` environment variable, or `ggg` under the platform's user
  data directory otherwise.

## What this package does not do

It only manages the manifest. It does not download, cache or install
dependencies, does not resolve git revisions, has no lock file, does not
query the Godot Asset Library, and does not download or launch the Godot
engine. The command line has only `deps` and `remove`; there are no
`init`, `add`, `search`, `sync`, `diff`, `update`, `edit` or `run`
commands.
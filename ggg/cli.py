"""Command-line entry point for managing a project's ``ggg.toml``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from ggg.config import Config
from ggg.dependency import ConfigError
from ggg.tables import format_dependency_table

DEFAULT_MANIFEST = Path("ggg.toml")


def run_remove(name: str, path: str | Path = DEFAULT_MANIFEST) -> None:
    """Remove the dependency called ``name`` from the manifest at ``path``.

    No project files are deleted; a later sync cleans them up.
    """
    config = Config.load(path)
    if not config.has_dependency(name):
        raise ConfigError(f'no dependency named "{name}" found in ggg.toml')

    config.remove_dependency(name)
    config.save(path)

    print(f'Removed "{name}" from ggg.toml.')
    print("Run `ggg sync` to uninstall its files from the project.")


def run_deps(path: str | Path = DEFAULT_MANIFEST) -> None:
    """Print the dependencies declared in the manifest at ``path``."""
    config = Config.load(path)
    print(format_dependency_table(config.dependency))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ggg", description="Manage Godot project dependencies.")
    commands = parser.add_subparsers(dest="command", required=True)

    remove = commands.add_parser("remove", help="remove a dependency from ggg.toml")
    remove.add_argument("name", help="name of the dependency to remove")

    commands.add_parser("deps", help="list the dependencies declared in ggg.toml")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit code."""
    args = _parser().parse_args(argv)
    try:
        if args.command == "remove":
            run_remove(args.name)
        elif args.command == "deps":
            run_deps()
    except (ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
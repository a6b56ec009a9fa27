"""Reading, validating and writing ggg.toml dependency manifests for Godot projects."""

__version__ = "0.1.0"
"""Programmatic entry points mirroring the CLI."""

from .run import BuildResult, build_from_config

__all__ = ["BuildResult", "build_from_config"]

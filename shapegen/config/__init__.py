"""Configuration loading utilities for shapegen."""

from .schema import (
    SceneConfig,
    load_config,
)

__all__ = ["SceneConfig", "load_config"]

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional, Union, List

import yaml
from pydantic import BaseModel, Field, model_validator


class PlacementConfig(BaseModel):
    translate: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotate_deg: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: float = Field(1.0, gt=0.0)


class BoxConfig(PlacementConfig):
    kind: Literal["box"]
    width: float = Field(gt=0.0)
    height: float = Field(gt=0.0)
    depth: float = Field(gt=0.0)


class RoomConfig(PlacementConfig):
    kind: Literal["room"]
    width: float = Field(gt=0.0)
    height: float = Field(gt=0.0)
    depth: float = Field(gt=0.0)


class CylinderConfig(PlacementConfig):
    kind: Literal["cylinder"]
    segments: int = Field(18, ge=3)
    height: float = Field(gt=0.0)
    radius: float = Field(gt=0.0)


class SphereConfig(PlacementConfig):
    kind: Literal["sphere"]
    longitude_segments: int = Field(18, ge=3)
    latitude_segments: int = Field(8, ge=2)
    radius: float = Field(gt=0.0)


class TubeConfig(PlacementConfig):
    kind: Literal["tube"]
    segments: int = Field(18, ge=3)
    control_points: List[tuple[float, float, float]] = Field(min_length=2)
    bezier_segments: int = Field(32, ge=1)
    radius: float = Field(gt=0.0)


PartConfig = Annotated[
    Union[BoxConfig, RoomConfig, CylinderConfig, SphereConfig, TubeConfig],
    Field(discriminator="kind"),
]


class OutputConfig(BaseModel):
    path: Path
    format: Literal["ply", "obj", "npz"] = "ply"


class SceneConfig(BaseModel):
    parts: List[PartConfig] = Field(default_factory=list)
    preset: Optional[str] = None
    output: OutputConfig

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "SceneConfig":
        if self.preset is None and not self.parts:
            raise ValueError("Scene requires either 'parts' or a 'preset'")
        if self.preset is not None and self.parts:
            raise ValueError("Scene accepts 'parts' or 'preset', not both")
        return self


def load_config(path: str | Path) -> SceneConfig:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError("Configuration root must be a mapping.")
    cfg = SceneConfig.model_validate(data)
    if not cfg.output.path.is_absolute():
        cfg.output.path = (path.parent / cfg.output.path).resolve()
    return cfg

# levelgen/utils/level_schema.py
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .bounds import MAX_JUMP_REACH, MIN_PLATFORM_CLEARANCE

_FROZEN = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

class House(BaseModel):
    model_config = _FROZEN

    x: float = Field(ge=300, le=4500)
    color: str = Field(min_length=1)

class Platform(BaseModel):
    model_config = _FROZEN

    x: float = Field(ge=200, le=4500)
    height_above_ground: float = Field(ge=MIN_PLATFORM_CLEARANCE, le=MAX_JUMP_REACH)
    width: float = Field(ge=50, le=150)
    moving: bool = False
    speed: float = Field(default=1.0, ge=0.5, le=2.0)

class LevelConfig(BaseModel):
    model_config = _FROZEN

    name: str = Field(min_length=1)
    theme: str = Field(default="winter", min_length=1)
    world_width: int = Field(default=3000, ge=2000, le=5000)
    houses: Tuple[House, ...] = Field(min_length=3, max_length=12)
    platforms: Tuple[Platform, ...] = Field(min_length=2, max_length=15)
    ice_count: int = Field(default=14, ge=5, le=30)
    ice_speed: float = Field(default=1.0, ge=0.5, le=2.0)
    deliveries_needed: int = Field(default=6, ge=3, le=12)
    thief_enabled: bool = True
    thief_speed: float = Field(default=1.0, ge=0.5, le=1.5)
    power_up_chance: float = Field(default=0.3, ge=0.1, le=0.8)
    description: str = Field(min_length=1)

    def to_wire(self) -> Dict[str, Any]:
        # camelCase dict, the shape the game runtime reads
        return self.model_dump(by_alias=True, mode="json")

class DifficultyTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    house_count: int = Field(ge=3, le=12)
    platform_density: float = Field(ge=0.0, le=1.0)
    ice_density: float = Field(ge=0.0, le=1.0)
    deliveries_needed: int = Field(ge=3, le=12)
    thief_enabled: bool

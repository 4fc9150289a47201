# levelgen/planners/validator.py
import logging
from typing import Any, Dict, List, Optional

from ..utils.bounds import (
    MAX_JUMP_REACH, MIN_PLATFORM_CLEARANCE,
    clamp_flag, clamp_int, clamp_number, clean_text, palette_color,
)
from ..utils.level_schema import House, LevelConfig, Platform
from .procedural import ProceduralGenerator

logger = logging.getLogger(__name__)

MIN_HOUSES, MAX_HOUSES = 3, 12
MIN_PLATFORMS, MAX_PLATFORMS = 2, 15
DEFAULT_STRUCTURE_COUNT = 8

def _entry(raw: Any) -> Dict[str, Any]:
    return raw if isinstance(raw, dict) else {}

class LevelValidator:
    """The one place untrusted level data becomes a LevelConfig.

    Degrades field by field: an out-of-range or missing value is clamped or
    defaulted, a bad house/platform list is regenerated. Never raises.
    """

    def __init__(self, procedural: Optional[ProceduralGenerator] = None):
        self.procedural = procedural or ProceduralGenerator()

    @property
    def rng(self):
        return self.procedural.rng

    def normalize(self, candidate: Optional[Dict[str, Any]]) -> LevelConfig:
        if not isinstance(candidate, dict):
            logger.warning("no usable candidate, using procedural medium level")
            return self.procedural.generate_random_level("medium")

        c = candidate
        return LevelConfig(
            name=clean_text(c.get("name"), "AI Generated Level", 60),
            theme=clean_text(c.get("theme"), "winter", 30),
            world_width=clamp_int(c.get("worldWidth"), 3000, 2000, 5000),
            houses=self.normalize_houses(c.get("houses")),
            platforms=self.normalize_platforms(c.get("platforms")),
            ice_count=clamp_int(c.get("iceCount"), 14, 5, 30),
            ice_speed=clamp_number(c.get("iceSpeed"), 1.0, 0.5, 2.0),
            deliveries_needed=clamp_int(c.get("deliveriesNeeded"), 6, 3, 12),
            thief_enabled=clamp_flag(c.get("thiefEnabled"), True),
            thief_speed=clamp_number(c.get("thiefSpeed"), 1.0, 0.5, 1.5),
            power_up_chance=clamp_number(c.get("powerUpChance"), 0.3, 0.1, 0.8),
            description=clean_text(c.get("description"), "A custom AI-generated level", 280),
        )

    def normalize_houses(self, raw_houses: Any) -> List[House]:
        if not isinstance(raw_houses, list) or len(raw_houses) < MIN_HOUSES:
            logger.debug("houses unusable (%r), generating defaults", type(raw_houses).__name__)
            return self.procedural.generate_default_houses(DEFAULT_STRUCTURE_COUNT)
        houses = []
        for i, raw in enumerate(raw_houses[:MAX_HOUSES]):
            h = _entry(raw)
            houses.append(House(
                x=clamp_number(h.get("x"), 400 + i * 300, 300, 4500),
                color=clean_text(h.get("color"), palette_color(i), 32),
            ))
        return houses

    def normalize_platforms(self, raw_platforms: Any) -> List[Platform]:
        if not isinstance(raw_platforms, list) or len(raw_platforms) < MIN_PLATFORMS:
            logger.debug("platforms unusable (%r), generating defaults", type(raw_platforms).__name__)
            return self.procedural.generate_default_platforms(DEFAULT_STRUCTURE_COUNT)
        platforms = []
        for raw in raw_platforms[:MAX_PLATFORMS]:
            p = _entry(raw)
            # "height" is the legacy name
            legacy = clamp_number(p.get("height"), 80, MIN_PLATFORM_CLEARANCE, MAX_JUMP_REACH)
            moving = p.get("moving")
            platforms.append(Platform(
                x=clamp_number(p.get("x"), 500, 200, 4500),
                height_above_ground=clamp_number(p.get("heightAboveGround"), legacy, MIN_PLATFORM_CLEARANCE, MAX_JUMP_REACH),
                width=clamp_number(p.get("width"), 80, 50, 150),
                moving=moving if isinstance(moving, bool) else self.rng.random() < 0.5,
                speed=clamp_number(p.get("speed"), 1, 0.5, 2),
            ))
        return platforms

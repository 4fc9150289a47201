# levelgen/planners/procedural.py
import logging
import math
import random
from typing import List, Optional

from ..utils.bounds import MAX_JUMP_REACH, MIN_PLATFORM_CLEARANCE, palette_color
from ..utils.level_schema import House, LevelConfig, Platform
from .templates import get_template, resolve_tier

logger = logging.getLogger(__name__)

HOUSE_START_X = 400
HOUSE_SPAN = 2800
HOUSE_JITTER = 50
PLATFORM_START_X = 300
PLATFORM_STRIDE = 350
PLATFORM_JITTER = 100
PLATFORM_MAX_X = 4500
PLATFORMS_AT_FULL_DENSITY = 12

class ProceduralGenerator:
    """Random level content that is in range by construction.

    The random source is injected so tests can seed it; one instance may be shared.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate_default_houses(self, count: int) -> List[House]:
        if count < 1:
            raise ValueError(f"house count must be positive, got {count}")
        spacing = HOUSE_SPAN / count
        houses = []
        for i in range(count):
            jitter = self.rng.uniform(-HOUSE_JITTER, HOUSE_JITTER)
            houses.append(House(x=HOUSE_START_X + i * spacing + jitter, color=palette_color(i)))
        return houses

    def generate_default_platforms(self, count: int) -> List[Platform]:
        if count < 1:
            raise ValueError(f"platform count must be positive, got {count}")
        platforms = []
        for i in range(count):
            x = PLATFORM_START_X + i * PLATFORM_STRIDE + self.rng.uniform(0, PLATFORM_JITTER)
            platforms.append(Platform(
                x=min(x, PLATFORM_MAX_X),
                # jumpable range only
                height_above_ground=self.rng.uniform(MIN_PLATFORM_CLEARANCE, MAX_JUMP_REACH),
                width=self.rng.uniform(70, 120),
                moving=self.rng.random() < 0.5,
                speed=self.rng.uniform(0.8, 1.6),
            ))
        return platforms

    def generate_random_level(self, tier: str = "medium") -> LevelConfig:
        tier = resolve_tier(tier)
        template = get_template(tier)
        platform_count = math.floor(template.platform_density * PLATFORMS_AT_FULL_DENSITY)
        level = LevelConfig(
            name=f"Random {tier.capitalize()} Level",
            theme="winter",
            world_width=3000,
            houses=self.generate_default_houses(template.house_count),
            platforms=self.generate_default_platforms(max(2, platform_count)),
            ice_count=math.floor(12 + template.ice_density * 8),
            ice_speed=0.8 + template.ice_density * 0.4,
            deliveries_needed=template.deliveries_needed,
            thief_enabled=template.thief_enabled,
            thief_speed=1.0,
            power_up_chance=0.3,
            description=f"A randomly generated {tier} level",
        )
        logger.debug("procedural %s level: %d houses, %d platforms",
                     tier, len(level.houses), len(level.platforms))
        return level

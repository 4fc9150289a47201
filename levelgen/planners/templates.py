# levelgen/planners/templates.py
from typing import Optional

from ..utils.level_schema import DifficultyTemplate

DEFAULT_TIER = "medium"

LEVEL_TEMPLATES = {
    "easy": DifficultyTemplate(
        house_count=6, platform_density=0.3, ice_density=0.5,
        deliveries_needed=4, thief_enabled=False,
    ),
    "medium": DifficultyTemplate(
        house_count=8, platform_density=0.5, ice_density=0.7,
        deliveries_needed=6, thief_enabled=True,
    ),
    "hard": DifficultyTemplate(
        house_count=10, platform_density=0.7, ice_density=1.0,
        deliveries_needed=8, thief_enabled=True,
    ),
}

def resolve_tier(tier: Optional[str]) -> str:
    """Case-insensitive tier lookup; anything unknown resolves to medium."""
    key = (tier or "").strip().lower()
    return key if key in LEVEL_TEMPLATES else DEFAULT_TIER

def get_template(tier: Optional[str]) -> DifficultyTemplate:
    return LEVEL_TEMPLATES[resolve_tier(tier)]

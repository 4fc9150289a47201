"""Tests for procedural level content."""

import random

import pytest

from levelgen.planners.procedural import ProceduralGenerator
from levelgen.planners.templates import LEVEL_TEMPLATES, get_template, resolve_tier
from levelgen.utils.bounds import PALETTE


class TestTemplates:
    def test_tiers(self):
        assert set(LEVEL_TEMPLATES) == {"easy", "medium", "hard"}

    @pytest.mark.parametrize("tier", ["nonsense-tier", "", None, "EXTREME"])
    def test_unknown_tier_resolves_to_medium(self, tier):
        assert resolve_tier(tier) == "medium"
        assert get_template(tier) == LEVEL_TEMPLATES["medium"]

    def test_tier_is_case_insensitive(self):
        assert resolve_tier(" Hard ") == "hard"


class TestDefaultHouses:
    def test_count_spacing_and_colors(self, procedural):
        houses = procedural.generate_default_houses(8)
        assert len(houses) == 8
        assert [h.color for h in houses] == [PALETTE[i % 5] for i in range(8)]
        xs = [h.x for h in houses]
        assert xs == sorted(xs)
        for i, h in enumerate(houses):
            assert abs(h.x - (400 + i * 350)) <= 50

    def test_rejects_non_positive_count(self, procedural):
        with pytest.raises(ValueError):
            procedural.generate_default_houses(0)


class TestDefaultPlatforms:
    def test_ranges(self, procedural):
        platforms = procedural.generate_default_platforms(8)
        assert len(platforms) == 8
        for i, p in enumerate(platforms):
            assert 300 + i * 350 <= p.x <= 300 + i * 350 + 100
            assert 60 <= p.height_above_ground <= 120
            assert 70 <= p.width <= 120
            assert 0.8 <= p.speed <= 1.6

    def test_large_counts_stay_in_world(self, procedural):
        platforms = procedural.generate_default_platforms(15)
        assert max(p.x for p in platforms) <= 4500


class TestRandomLevel:
    def test_easy_has_no_thief(self, procedural):
        level = procedural.generate_random_level("easy")
        assert level.thief_enabled is False
        assert len(level.houses) == 6
        assert len(level.platforms) == 3
        assert level.deliveries_needed == 4

    def test_hard(self, procedural):
        level = procedural.generate_random_level("hard")
        assert level.thief_enabled is True
        assert level.deliveries_needed == 8
        assert len(level.houses) == 10
        assert len(level.platforms) == 8
        assert level.ice_count == 20
        assert level.ice_speed == pytest.approx(1.2)

    def test_medium_fields(self, procedural):
        level = procedural.generate_random_level("medium")
        assert level.name == "Random Medium Level"
        assert level.theme == "winter"
        assert level.world_width == 3000
        assert level.ice_count == 17
        assert level.ice_speed == pytest.approx(1.08)
        assert level.thief_speed == 1.0
        assert level.power_up_chance == 0.3

    def test_unknown_tier_matches_medium(self):
        odd = ProceduralGenerator(random.Random(7)).generate_random_level("nonsense-tier")
        medium = ProceduralGenerator(random.Random(7)).generate_random_level("medium")
        assert odd == medium

    @pytest.mark.parametrize("tier", ["easy", "medium", "hard"])
    def test_platforms_always_jumpable(self, tier):
        gen = ProceduralGenerator(random.Random(99))
        for _ in range(20):
            level = gen.generate_random_level(tier)
            assert all(60 <= p.height_above_ground <= 120 for p in level.platforms)

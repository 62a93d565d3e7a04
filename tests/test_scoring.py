"""
Scoring Tests

Tag/score aggregation and capability-tier classification.

Tests verify:
1. Tags are unioned and deduplicated in rule-table order
2. Points sum over every selected option
3. Unknown ids and unanswered questions weigh zero
4. Tier depends on floor tags alone
"""

import pytest

from app.rules import CapabilityTier, Tag
from app.scoring import aggregate, classify_tier


@pytest.fixture
def slab_answers():
    return {
        "context_location": "attached",
        "floor_type": "slab",
        "ceiling_height": "h_8_9",
        "above_space": "living",
        "neighbors": "family",
        "use_cases": ["voice", "acoustic"],
        "time_of_use": "evening",
        "expectation": "faint",
        "mods": "yes",
        "ventilation": "vent_yes",
        "budget": "b_25_50",
        "mindset": "adjust",
    }


class TestAggregate:

    def test_points_summed(self, slab_answers):
        # attached 1 + living 2 + family 1 + acoustic 1 + evening 1 + faint 1 + b_25_50 1 + adjust 1
        assert aggregate(slab_answers).points == 9

    def test_no_hard_stop(self, slab_answers):
        assert aggregate(slab_answers).hard_stop_triggered is False

    def test_explicit_hard_stop(self, slab_answers):
        slab_answers["ventilation"] = "vent_no"
        agg = aggregate(slab_answers)
        assert agg.hard_stop_triggered is True
        assert agg.points >= 999

    def test_tags_deduplicated(self):
        agg = aggregate({"ceiling_height": ["h_9plus", "h_8_9"], "expectation": "faint"})
        assert agg.tags == (Tag.HEIGHT_GREEN, Tag.EXP_REASONABLE)
        assert len(agg.tags) == len(set(agg.tags))

    def test_tags_in_table_order(self, slab_answers):
        agg = aggregate(slab_answers)
        assert agg.tags[0] == Tag.ATTACHED
        assert agg.tags[1] == Tag.FLOOR_SLAB
        assert agg.tag_values()[-1] == "mindset_flexible"

    def test_multiple_selection_contributes_each_option(self):
        agg = aggregate({"use_cases": ["amps", "drums"]})
        assert agg.points == 7
        assert agg.has(Tag.SRC_AMPS)
        assert agg.has(Tag.SRC_DRUMS)

    def test_empty_answers(self):
        agg = aggregate({})
        assert agg.points == 0
        assert agg.tags == ()
        assert agg.hard_stop_triggered is False

    def test_unanswered_values_weigh_zero(self):
        agg = aggregate({"floor_type": None, "use_cases": []})
        assert agg.points == 0
        assert agg.tags == ()

    def test_unknown_option_ignored(self):
        agg = aggregate({"floor_type": "marble", "budget": "b_lt10"})
        assert agg.points == 4
        assert agg.tags == (Tag.BUDGET_LOW,)
        assert "floor_type.marble" in agg.ignored

    def test_unknown_question_ignored(self):
        agg = aggregate({"pool": "yes", "budget": "b_50plus"})
        assert agg.points == 0
        assert "pool" in agg.ignored

    def test_pure(self, slab_answers):
        snapshot = dict(slab_answers)
        assert aggregate(slab_answers) == aggregate(slab_answers)
        assert slab_answers == snapshot


class TestClassifyTier:

    def test_slab_is_a(self):
        assert classify_tier([Tag.FLOOR_SLAB]) == CapabilityTier.A

    def test_crawl_is_b(self):
        assert classify_tier([Tag.FLOOR_WOOD, Tag.FLOOR_CRAWL]) == CapabilityTier.B

    def test_living_below_is_c(self):
        assert classify_tier([Tag.FLOOR_WOOD, Tag.FLOOR_LIVING_BELOW]) == CapabilityTier.C

    def test_missing_floor_is_c(self):
        assert classify_tier([]) == CapabilityTier.C

    def test_slab_wins_over_crawl(self):
        assert classify_tier([Tag.FLOOR_CRAWL, Tag.FLOOR_SLAB]) == CapabilityTier.A

    @pytest.mark.parametrize("noise", [
        [Tag.SRC_DRUMS, Tag.NEIGHBORS_VERY_CLOSE, Tag.TIME_OVERNIGHT],
        [Tag.SHARED_BUILDING, Tag.BUDGET_LOW],
        [Tag.DETACHED, Tag.VENT_OK, Tag.EXP_UNREALISTIC],
    ])
    def test_other_tags_do_not_change_tier(self, noise):
        assert classify_tier([Tag.FLOOR_SLAB] + noise) == CapabilityTier.A
        assert classify_tier([Tag.FLOOR_CRAWL] + noise) == CapabilityTier.B
        assert classify_tier(noise) == CapabilityTier.C

    def test_tier_labels(self):
        assert CapabilityTier.A.label == "High isolation possible (slab)"
        assert "crawlspace" in CapabilityTier.B.label
        assert "living space" in CapabilityTier.C.label

"""
Tests for shared utilities
Covers canonical hashing and the locked disclaimer copy.
"""

from app.rules import LightLevel
from app.shared import (
    canonicalize,
    canonicalize_and_hash,
    get_disclaimer,
    hash_answers,
    normalize_answers,
)
from app.verdict import evaluate


class TestCanonicalize:

    def test_key_order_irrelevant(self):
        assert canonicalize({"b": 1, "a": 2}) == canonicalize({"a": 2, "b": 1})

    def test_enum_by_value(self):
        assert canonicalize({"light": LightLevel.RED}) == '{"light":"RED"}'

    def test_hash_format(self):
        digest = canonicalize_and_hash({"a": 1})
        assert digest.startswith("sha256:")
        assert len(digest) == len("sha256:") + 64

    def test_list_order_matters(self):
        assert canonicalize_and_hash({"x": [1, 2]}) != canonicalize_and_hash({"x": [2, 1]})


class TestHashAnswers:

    def test_unanswered_dropped(self):
        assert normalize_answers({"floor_type": None, "use_cases": [], "budget": "b_lt10"}) == {
            "budget": ["b_lt10"],
        }

    def test_selection_order_irrelevant(self):
        assert hash_answers({"use_cases": ["voice", "drums"]}) == hash_answers({"use_cases": ["drums", "voice"]})

    def test_single_and_list_equivalent(self):
        assert hash_answers({"floor_type": "slab"}) == hash_answers({"floor_type": ["slab"]})

    def test_different_answers_differ(self):
        assert hash_answers({"floor_type": "slab"}) != hash_answers({"floor_type": "wood_crawl"})

    def test_repeated_ids_kept(self):
        assert normalize_answers({"use_cases": ["drums", "voice", "drums"]}) == {
            "use_cases": ["drums", "drums", "voice"],
        }

    def test_repeated_selection_changes_hash_with_verdict(self):
        once = evaluate({"floor_type": "slab", "use_cases": ["drums"]})
        twice = evaluate({"floor_type": "slab", "use_cases": ["drums", "drums"]})
        assert once.meta.points != twice.meta.points
        assert once.light != twice.light
        assert once.meta.answers_hash != twice.meta.answers_hash


class TestDisclaimer:

    def test_fields(self):
        disclaimer = get_disclaimer()
        assert set(disclaimer) == {"scope", "not_a_quote", "directional", "version"}
        assert disclaimer["directional"].startswith("This assessment is directional.")

    def test_returns_fresh_copy(self):
        first = get_disclaimer()
        first["scope"] = "changed"
        assert get_disclaimer()["scope"] != "changed"

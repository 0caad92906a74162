"""Tests for RICE scoring, score labels and advice."""

import math
import pytest

from focusdeck.config import EngineConfig
from focusdeck.engine.rice import (
    calculate_rice_score,
    calculate_task_rice,
    effort_multiplier,
    format_rice_score,
    get_rice_advice,
)
from focusdeck.models.rice import RICEParams
from focusdeck.models.task import Task


class TestCalculateRICEScore:
    """calculate_rice_score() semantics."""

    def test_formula(self):
        params = RICEParams(reach=3, impact=3, confidence=4, effort="M")
        assert calculate_rice_score(params) == 9.0

    def test_strictly_decreasing_with_effort(self):
        scores = [
            calculate_rice_score(RICEParams(reach=2, impact=5, confidence=3, effort=effort))
            for effort in ["XS", "S", "M", "L", "XL"]
        ]
        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == 5

    @pytest.mark.parametrize("effort, multiplier", [("XS", 1), ("S", 2), ("M", 4), ("L", 8), ("XL", 16)])
    def test_effort_multiplier_table(self, effort, multiplier):
        assert effort_multiplier(effort) == multiplier

    def test_unknown_effort_falls_back_to_medium(self):
        params = RICEParams(reach=1, impact=1, confidence=4, effort="XXL")
        assert calculate_rice_score(params) == 1.0

    def test_out_of_range_inputs_are_not_clamped(self):
        params = RICEParams(reach=10, impact=10, confidence=10, effort="XS")
        assert calculate_rice_score(params) == 1000.0

    def test_non_finite_inputs_propagate(self):
        params = RICEParams(reach=float("nan"), impact=1, confidence=1, effort="XS")
        assert math.isnan(calculate_rice_score(params))


class TestCalculateTaskRICE:
    """calculate_task_rice() defaults and cache short-circuit."""

    def test_cached_score_is_returned_verbatim(self, make_task, engine_config):
        task = make_task(rice_score=7.0, effort="XL", impact=5)
        assert calculate_task_rice(task, engine_config) == 7.0

    def test_cached_zero_is_still_a_cache_hit(self, make_task, engine_config):
        task = make_task(rice_score=0.0, effort="XS")
        assert calculate_task_rice(task, engine_config) == 0.0

    def test_defaults(self, make_task, engine_config):
        # reach 3 * impact 3 * confidence 4 / S(2)
        task = make_task(effort="S")
        assert calculate_task_rice(task, engine_config) == 18.0

    def test_task_impact_is_used(self, make_task, engine_config):
        task = make_task(effort="M", impact=5)
        assert calculate_task_rice(task, engine_config) == 15.0

    def test_defaults_are_configurable(self, make_task):
        config = EngineConfig(default_reach=1, default_confidence=1, default_impact=2)
        task = make_task(effort="XS")
        assert calculate_task_rice(task, config) == 2.0

    def test_unknown_effort_on_unvalidated_task(self, sample_task_base, engine_config):
        task = Task.model_construct(**{**sample_task_base, "effort": "HUGE"})
        assert calculate_task_rice(task, engine_config) == 9.0


class TestFormatRICEScore:
    """Tier labels have inclusive lower bounds."""

    @pytest.mark.parametrize(
        "score, label",
        [
            (10.0, "🔥 Very High"),
            (9.999, "⚡ High"),
            (5.0, "⚡ High"),
            (4.999, "📈 Medium"),
            (2.0, "📈 Medium"),
            (1.999, "📉 Low"),
            (1.0, "📉 Low"),
            (0.999, "🐌 Very Low"),
            (0.0, "🐌 Very Low"),
        ],
    )
    def test_boundaries(self, score, label):
        assert format_rice_score(score) == label


class TestGetRICEAdvice:
    """get_rice_advice() maps scores to suggestions."""

    @pytest.mark.parametrize(
        "score, advice",
        [
            (12.0, "🚀 High impact! Consider making this a Must-Do."),
            (5.0, "⚡ Good candidate for Focus Block."),
            (2.0, "📈 Worth doing when you have time."),
            (1.0, "📉 Low priority. Consider delegating or deferring."),
            (0.5, "🐌 Very low value. Consider archiving."),
        ],
    )
    def test_cached_score_tiers(self, make_task, engine_config, score, advice):
        assert get_rice_advice(make_task(rice_score=score), engine_config) == advice

    def test_computes_score_when_not_cached(self, make_task, engine_config):
        # 3 * 3 * 4 / XL(16) = 2.25
        task = make_task(effort="XL")
        assert get_rice_advice(task, engine_config) == "📈 Worth doing when you have time."

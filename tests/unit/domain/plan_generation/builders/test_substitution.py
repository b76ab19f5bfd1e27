"""Unit tests for BMI substitution post-processing."""

import pytest

from domain.plan_generation.builders.substitution import apply_bmi_substitutions
from domain.plan_generation.calculation.metrics_calculator import MetricsCalculator
from domain.plan_generation.core.entities.generated_plan import (
    GeneratedPlan,
    PlanDay,
    PlanKind,
    PlanSource,
)
from domain.plan_generation.core.value_objects.bmi_category import BMICategory
from domain.plan_generation.core.value_objects.fitness_level import FitnessLevel


def _exercise(name: str) -> dict:
    return {
        "name": name,
        "sets": 3,
        "reps": "10",
        "rest": "60 seconds",
        "form_cues": ["Brace core"],
        "notes": "",
    }


@pytest.fixture
def plan(scenario_profile) -> GeneratedPlan:
    day = PlanDay(
        name="Day 1",
        focus="Full Body",
        items=(_exercise("Jumping Jacks"), _exercise("Push-Ups"), _exercise("Glute Bridges")),
        opening={"exercises": [{"name": "Arm Circles"}]},
        closing={"exercises": [{"name": "Static Stretching"}]},
    )
    return GeneratedPlan(
        kind=PlanKind.WORKOUT,
        name="1-Day Plan",
        description="Test",
        days=(day,),
        metrics=MetricsCalculator().calculate(scenario_profile),
        source=PlanSource.FALLBACK,
    )


class TestApplyBMISubstitutions:
    """Test swaps, annotations and idempotence."""

    def test_overweight_beginner_swaps(self, plan: GeneratedPlan) -> None:
        result = apply_bmi_substitutions(plan, FitnessLevel.BEGINNER, BMICategory.OVERWEIGHT)
        items = result.days[0].items

        assert [item["name"] for item in items] == [
            "Step Jacks",
            "Incline Push-Ups",
            "Glute Bridges",
        ]
        assert items[0]["substituted_for"] == "Jumping Jacks"
        assert items[0]["notes"].startswith("Modified for overweight BMI:")
        assert items[0]["form_cues"] == ["Brace core", "Modified variant of Jumping Jacks"]
        assert "substituted_for" not in items[2]

    def test_input_plan_untouched(self, plan: GeneratedPlan) -> None:
        apply_bmi_substitutions(plan, FitnessLevel.BEGINNER, BMICategory.OBESE)

        assert plan.item_names() == ["Jumping Jacks", "Push-Ups", "Glute Bridges"]

    @pytest.mark.parametrize(
        "band", [BMICategory.UNDERWEIGHT, BMICategory.OVERWEIGHT, BMICategory.OBESE]
    )
    def test_idempotent(self, plan: GeneratedPlan, band: BMICategory) -> None:
        once = apply_bmi_substitutions(plan, FitnessLevel.BEGINNER, band)
        twice = apply_bmi_substitutions(once, FitnessLevel.BEGINNER, band)

        assert twice == once

    def test_normal_band_returns_same_plan(self, plan: GeneratedPlan) -> None:
        assert apply_bmi_substitutions(plan, FitnessLevel.BEGINNER, BMICategory.NORMAL) is plan

    def test_non_beginner_returns_same_plan(self, plan: GeneratedPlan) -> None:
        result = apply_bmi_substitutions(plan, FitnessLevel.ADVANCED, BMICategory.OBESE)

        assert result is plan

    def test_custom_table(self, plan: GeneratedPlan) -> None:
        from domain.plan_generation.catalog.substitutions import Substitution

        table = {BMICategory.OBESE: {"Glute Bridges": Substitution("Hip Lifts", "Test reason")}}
        result = apply_bmi_substitutions(plan, FitnessLevel.BEGINNER, BMICategory.OBESE, table)

        assert result.item_names() == ["Jumping Jacks", "Push-Ups", "Hip Lifts"]

    def test_guidance_blocks_follow_the_swap(self, plan: GeneratedPlan) -> None:
        from dataclasses import replace

        from domain.plan_generation.catalog.exercises import EXERCISE_CATALOG, FULL_BODY

        push_ups = next(
            e for e in EXERCISE_CATALOG[FULL_BODY][FitnessLevel.BEGINNER] if e.name == "Push-Ups"
        )
        day = replace(plan.days[0], items=(push_ups.to_plan_item(),))
        result = apply_bmi_substitutions(
            plan.with_days((day,)), FitnessLevel.BEGINNER, BMICategory.OBESE
        )
        item = result.days[0].items[0]

        assert item["name"] == "Wall Push-Ups"
        assert item["progression"]["variations"] == ["Push-Ups"]
        assert item["progression"]["next_steps"] == "Return to Push-Ups once this variant feels easy"
        assert item["execution"]["form_cues"][-1] == "Modified variant of Push-Ups"

"""Unit tests for the static catalogs and templates."""

from types import MappingProxyType

import pytest

from domain.plan_generation.catalog import (
    BMI_SUBSTITUTIONS,
    CARDIO,
    EXERCISE_CATALOG,
    FOCUS_AREAS,
    FULL_BODY,
    MEAL_CATALOG,
    MEAL_LAYOUTS,
    SNACK_SECTION,
    validate_catalogs,
)
from domain.plan_generation.catalog.templates import hydration_section, occurrence_shares
from domain.plan_generation.core.entities.catalog_item import DietType, MealSlot
from domain.plan_generation.core.exceptions.domain_errors import CatalogExhaustionError
from domain.plan_generation.core.value_objects.bmi_category import BMICategory
from domain.plan_generation.core.value_objects.fitness_level import FitnessLevel


class TestValidateCatalogs:
    """Test startup validation."""

    def test_shipped_catalogs_are_valid(self) -> None:
        validate_catalogs()

    def test_empty_exercise_cell_raises(self) -> None:
        broken = {focus: dict(cells) for focus, cells in EXERCISE_CATALOG.items()}
        broken[FOCUS_AREAS[0]][FitnessLevel.ADVANCED] = ()

        with pytest.raises(CatalogExhaustionError) as exc_info:
            validate_catalogs(exercise_catalog=broken)

        assert exc_info.value.level == "advanced"

    def test_misfiled_meal_raises(self) -> None:
        broken = dict(MEAL_CATALOG)
        broken[(MealSlot.LUNCH, DietType.VEGAN)] = MEAL_CATALOG[(MealSlot.DINNER, DietType.VEGAN)]

        with pytest.raises(CatalogExhaustionError, match="misfiled"):
            validate_catalogs(meal_catalog=broken)


class TestCatalogContents:
    """Test catalog invariants the builders rely on."""

    def test_catalogs_are_read_only(self) -> None:
        assert isinstance(EXERCISE_CATALOG, MappingProxyType)
        with pytest.raises(TypeError):
            EXERCISE_CATALOG["Yoga"] = {}  # type: ignore[index]

    @pytest.mark.parametrize("focus", FOCUS_AREAS)
    @pytest.mark.parametrize("level", list(FitnessLevel))
    def test_exercise_names_unique_per_cell(self, focus: str, level: FitnessLevel) -> None:
        names = [exercise.name for exercise in EXERCISE_CATALOG[focus][level]]

        assert len(names) == len(set(names))
        assert len(names) >= 4

    def test_substitutions_are_not_chained(self) -> None:
        for table in BMI_SUBSTITUTIONS.values():
            targets = {substitution.name for substitution in table.values()}
            assert not targets & set(table)

    def test_normal_bmi_has_no_substitutions(self) -> None:
        assert not BMI_SUBSTITUTIONS[BMICategory.NORMAL]


class TestTemplates:
    """Test meal layouts, shares and hydration."""

    @pytest.mark.parametrize("meals_per_day", sorted(MEAL_LAYOUTS))
    def test_layout_length(self, meals_per_day: int) -> None:
        assert len(MEAL_LAYOUTS[meals_per_day]) == meals_per_day

    @pytest.mark.parametrize("meals_per_day", sorted(MEAL_LAYOUTS))
    def test_shares_sum_to_one(self, meals_per_day: int) -> None:
        shares = occurrence_shares(MEAL_LAYOUTS[meals_per_day] + (SNACK_SECTION,))

        assert sum(shares.values()) == pytest.approx(1.0)

    def test_two_meal_shares(self) -> None:
        shares = occurrence_shares(MEAL_LAYOUTS[2] + (SNACK_SECTION,))

        assert shares["Breakfast"] == pytest.approx(0.25 / 0.65)
        assert shares["Dinner"] == pytest.approx(0.30 / 0.65)

    def test_hydration_scales_with_weight(self) -> None:
        section = hydration_section(80.0)

        assert section["water"] == "2.8 liters per day"
        assert section["schedule"]


def _named(focus: str, level: FitnessLevel, name: str):
    return next(e for e in EXERCISE_CATALOG[focus][level] if e.name == name)


class TestExerciseGuidance:
    """Test execution and progression blocks on catalog exercises."""

    @pytest.mark.parametrize("focus", FOCUS_AREAS)
    @pytest.mark.parametrize("level", list(FitnessLevel))
    def test_every_exercise_renders_guidance(self, focus: str, level: FitnessLevel) -> None:
        for exercise in EXERCISE_CATALOG[focus][level]:
            item = exercise.to_plan_item()

            assert exercise.progression is not None
            assert set(item["execution"]) == {
                "starting_position",
                "movement",
                "breathing",
                "tempo",
                "form_cues",
            }
            assert all(item["execution"][key] for key in ("movement", "breathing", "tempo"))
            assert set(item["progression"]) == {"next_steps", "variations", "scaling_options"}
            assert item["progression"]["next_steps"]

    @pytest.mark.parametrize("focus", FOCUS_AREAS)
    def test_progressions_link_neighbouring_levels(self, focus: str) -> None:
        cells = EXERCISE_CATALOG[focus]
        beginner = {e.name for e in cells[FitnessLevel.BEGINNER]}
        advanced = {e.name for e in cells[FitnessLevel.ADVANCED]}

        for exercise in cells[FitnessLevel.INTERMEDIATE]:
            assert set(exercise.progression.variations) <= advanced
            assert set(exercise.progression.scaling_options) <= beginner
        for exercise in cells[FitnessLevel.ADVANCED]:
            assert exercise.name not in exercise.progression.variations

    def test_beginner_scaling_uses_substitutions(self) -> None:
        push_ups = _named(FULL_BODY, FitnessLevel.BEGINNER, "Push-Ups")

        assert push_ups.progression.scaling_options == ("Knee Push-Ups", "Incline Push-Ups")
        assert push_ups.progression.next_steps.startswith("Progress to ")

    def test_explicit_execution_is_kept(self) -> None:
        item = _named(FULL_BODY, FitnessLevel.BEGINNER, "Bodyweight Squats").to_plan_item()

        assert item["setup"] == "Stand with feet shoulder-width apart, toes slightly turned out"
        assert item["execution"]["tempo"] == "2-1-2"
        assert item["execution"]["breathing"] == "Inhale on the way down, exhale on the way up"
        assert item["execution"]["form_cues"] == item["form_cues"]

    def test_timed_exercise_gets_steady_pace(self) -> None:
        timed = next(
            e for e in EXERCISE_CATALOG[CARDIO][FitnessLevel.BEGINNER]
            if e.is_timed() and e.execution is None
        )

        assert timed.execution_block().tempo == "Steady, controlled pace"

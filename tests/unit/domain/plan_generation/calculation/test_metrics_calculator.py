"""Unit tests for MetricsCalculator.

Tests focus on:
- BMI, BMR, TDEE and calorie target formulas
- Unit conversion (lb, in)
- Macro distribution bounds for every goal and activity level
- Determinism
"""

import pytest

from domain.plan_generation.calculation.metrics_calculator import (
    MACRO_BOUNDS,
    MetricsCalculator,
    bmi,
    bmr,
    macro_distribution,
    target_calories,
    tdee,
)
from domain.plan_generation.core.exceptions.domain_errors import InvalidInputError
from domain.plan_generation.core.value_objects.activity_level import ActivityLevel
from domain.plan_generation.core.value_objects.biometric_profile import (
    BiometricProfile,
    HeightUnit,
    Sex,
    WeightUnit,
)
from domain.plan_generation.core.value_objects.bmi_category import BMICategory
from domain.plan_generation.core.value_objects.goal import Goal


class TestFormulas:
    """Test the individual formulas."""

    def test_bmi(self) -> None:
        assert bmi(80.0, 170.0) == pytest.approx(27.68, abs=0.01)

    def test_bmi_rejects_non_positive_values(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            bmi(0.0, -1.0)

        assert len(exc_info.value.errors) == 2

    def test_bmr_male(self) -> None:
        # 800 + 1062.5 - 125 + 5
        assert bmr(80.0, 170.0, 25, Sex.MALE) == pytest.approx(1742.5)

    def test_bmr_female(self) -> None:
        assert bmr(80.0, 170.0, 25, Sex.FEMALE) == pytest.approx(1576.5)

    def test_bmr_other_uses_female_offset(self) -> None:
        assert bmr(60.0, 165.0, 40, Sex.OTHER) == bmr(60.0, 165.0, 40, Sex.FEMALE)

    @pytest.mark.parametrize(
        "level,multiplier",
        [
            (ActivityLevel.SEDENTARY, 1.2),
            (ActivityLevel.LIGHT, 1.375),
            (ActivityLevel.MODERATE, 1.55),
            (ActivityLevel.ACTIVE, 1.725),
            (ActivityLevel.VERY_ACTIVE, 1.9),
        ],
    )
    def test_tdee_multipliers(self, level: ActivityLevel, multiplier: float) -> None:
        assert tdee(1000.0, level) == pytest.approx(1000.0 * multiplier)

    def test_tdee_unknown_level_uses_sedentary(self) -> None:
        assert tdee(1000.0, "couch") == pytest.approx(1200.0)

    @pytest.mark.parametrize(
        "goal,expected",
        [
            (Goal.WEIGHT_LOSS, 1700.0),
            (Goal.MAINTENANCE, 2000.0),
            (Goal.MUSCLE_GAIN, 2300.0),
        ],
    )
    def test_target_calories(self, goal: Goal, expected: float) -> None:
        assert target_calories(2000.0, goal) == pytest.approx(expected)


class TestMacroDistribution:
    """Test macro split bounds."""

    @pytest.mark.parametrize("goal", list(Goal))
    @pytest.mark.parametrize("level", list(ActivityLevel))
    def test_shares_within_bounds_and_total(self, goal: Goal, level: ActivityLevel) -> None:
        split = macro_distribution(goal, level)

        for macro, share in split.as_dict().items():
            low, high = MACRO_BOUNDS[macro]
            assert low <= share <= high, macro
        assert split.total() <= 1.0 + 1e-9

    def test_weight_loss_sedentary(self) -> None:
        split = macro_distribution(Goal.WEIGHT_LOSS, ActivityLevel.SEDENTARY)

        assert split.protein == pytest.approx(0.35)
        assert split.carbs == pytest.approx(0.25)
        assert split.fats == pytest.approx(0.28)
        assert split.fiber == pytest.approx(0.12)

    def test_grams_use_energy_density(self) -> None:
        split = macro_distribution(Goal.MAINTENANCE, ActivityLevel.MODERATE)
        grams = split.grams(2000.0)

        assert grams["protein"] == pytest.approx(125.0)
        assert grams["carbs"] == pytest.approx(200.0)
        assert grams["fats"] == pytest.approx(500.0 / 9.0)


class TestMetricsCalculator:
    """Test the full calculation."""

    def test_reference_scenario(self, scenario_profile: BiometricProfile) -> None:
        metrics = MetricsCalculator().calculate(scenario_profile)

        assert metrics.bmi == pytest.approx(27.68, abs=0.01)
        assert metrics.bmi_category is BMICategory.OVERWEIGHT
        assert metrics.bmr == pytest.approx(1742.5)
        assert metrics.tdee == pytest.approx(2091.0)
        assert metrics.target_calories == pytest.approx(1777.35)

    def test_deterministic(self, scenario_profile: BiometricProfile) -> None:
        calculator = MetricsCalculator()

        assert calculator.calculate(scenario_profile) == calculator.calculate(scenario_profile)

    def test_imperial_units_converted(self, make_profile) -> None:
        metric = MetricsCalculator().calculate(make_profile(weight=80.0, height=170.0))
        imperial = MetricsCalculator().calculate(
            make_profile(
                weight=80.0 / 0.453592,
                height=170.0 / 2.54,
                weight_unit=WeightUnit.LB,
                height_unit=HeightUnit.IN,
            )
        )

        assert imperial.bmi == pytest.approx(metric.bmi)
        assert imperial.bmr == pytest.approx(metric.bmr)

    def test_to_dict_is_camel_case(self, scenario_profile: BiometricProfile) -> None:
        data = MetricsCalculator().calculate(scenario_profile).to_dict()

        assert data["bmiCategory"] == "overweight"
        assert data["targetCalories"] == 1777
        assert set(data["macroDistribution"]) == {"protein", "carbs", "fats", "fiber"}


class TestBMICategory:
    """Test WHO banding edges."""

    @pytest.mark.parametrize(
        "value,category",
        [
            (18.4, BMICategory.UNDERWEIGHT),
            (18.5, BMICategory.NORMAL),
            (24.9, BMICategory.NORMAL),
            (25.0, BMICategory.OVERWEIGHT),
            (29.9, BMICategory.OVERWEIGHT),
            (30.0, BMICategory.OBESE),
        ],
    )
    def test_cutoffs(self, value: float, category: BMICategory) -> None:
        assert BMICategory.from_bmi(value) is category


class TestBiometricProfile:
    """Test profile validation."""

    def test_rejects_non_positive_fields(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            BiometricProfile(
                age=0,
                weight=-5.0,
                height=170.0,
                sex=Sex.MALE,
                activity_level=ActivityLevel.LIGHT,
                goal=Goal.MAINTENANCE,
            )

        assert len(exc_info.value.errors) == 2

    def test_sex_aliases(self) -> None:
        assert Sex("M") is Sex.MALE
        assert Sex("non-binary") is Sex.OTHER

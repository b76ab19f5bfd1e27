"""DerivedMetrics value object - metrics computed once per request."""

from dataclasses import dataclass
from typing import Any, Dict

from .bmi_category import BMICategory

# kcal per gram; fiber is counted as a carbohydrate
KCAL_PER_GRAM = {
    "protein": 4.0,
    "carbs": 4.0,
    "fats": 9.0,
    "fiber": 4.0,
}


@dataclass(frozen=True)
class MacroDistribution:
    """Fractions of total daily calories per macronutrient.

    Attributes:
        protein: Protein share (0.20-0.50)
        carbs: Carbohydrate share (0.20-0.60)
        fats: Fat share (0.15-0.40)
        fiber: Fiber share (0.10-0.20)
    """

    protein: float
    carbs: float
    fats: float
    fiber: float

    def total(self) -> float:
        return self.protein + self.carbs + self.fats + self.fiber

    def as_dict(self) -> Dict[str, float]:
        return {
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "fiber": self.fiber,
        }

    def grams(self, calories: float) -> Dict[str, float]:
        """Convert fractions of ``calories`` into grams per macro.

        Example:
            >>> MacroDistribution(0.3, 0.4, 0.2, 0.1).grams(2000.0)["fats"]
            44.44444444444444
        """
        return {
            macro: calories * share / KCAL_PER_GRAM[macro]
            for macro, share in self.as_dict().items()
        }


@dataclass(frozen=True)
class DerivedMetrics:
    """Metrics shared by the prompt builder and the fallback builders.

    Both generation paths read the same instance so model and fallback
    plans target the same nutritional and volume envelope.
    """

    bmi: float
    bmi_category: BMICategory
    bmr: float
    tdee: float
    target_calories: float
    macro_distribution: MacroDistribution

    def macro_grams(self) -> Dict[str, float]:
        """Daily macro targets in grams for ``target_calories``."""
        return self.macro_distribution.grams(self.target_calories)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bmi": round(self.bmi, 1),
            "bmiCategory": self.bmi_category.value,
            "bmr": round(self.bmr),
            "tdee": round(self.tdee),
            "targetCalories": round(self.target_calories),
            "macroDistribution": self.macro_distribution.as_dict(),
        }

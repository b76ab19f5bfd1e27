"""Prompts for meal plan generation."""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from domain.plan_generation.core.ports.generative_service import ChatMessage
from domain.plan_generation.core.value_objects.derived_metrics import DerivedMetrics
from domain.plan_generation.core.value_objects.goal import Goal

MEAL_SYSTEM_PROMPT = (
    "You are a professional nutritionist creating personalized meal plans. "
    "Respond with a single JSON object and nothing else."
)

MEAL_JSON_SCHEMA = """{
  "name": "string",
  "description": "string",
  "days": [
    {
      "name": "string",
      "focus": "string",
      "meals": [
        {
          "name": "string",
          "meal": "string",
          "time": "string",
          "portion": "string",
          "calories": number,
          "protein": number,
          "carbs": number,
          "fats": number,
          "fiber": number,
          "preparation": ["string"]
        }
      ],
      "snacks": {
        "time": "string",
        "calories": number,
        "items": [{"name": "string", "portion": "string", "calories": number}]
      },
      "hydration": {
        "water": "string",
        "schedule": ["string"]
      },
      "notes": "string"
    }
  ],
  "groceryList": {
    "proteins": ["string"],
    "carbs": ["string"],
    "fats": ["string"],
    "produce": ["string"],
    "pantry": ["string"],
    "alternatives": {"dairy": ["string"], "gluten": ["string"], "meat": ["string"]}
  },
  "mealPrep": {
    "tips": ["string"],
    "schedule": "string",
    "storage": ["string"]
  },
  "nutrition": {
    "guidelines": ["string"],
    "timing": "string",
    "supplements": ["string"],
    "hydration": "string"
  }
}"""

SIMPLIFIED_MEAL_JSON_SCHEMA = """{
  "name": "string",
  "description": "string",
  "days": [
    {
      "name": "string",
      "focus": "string",
      "meals": [{"name": "string", "calories": number}],
      "snacks": {"items": [{"name": "string", "calories": number}]},
      "hydration": {"water": "string", "schedule": ["string"]},
      "notes": "string"
    }
  ]
}"""


@dataclass(frozen=True)
class MealPrompts:
    """Prompt parameters for one meal request."""

    meals_per_day: int
    goal: Goal
    metrics: DerivedMetrics
    restrictions: FrozenSet[str]

    def _targets(self) -> str:
        grams = self.metrics.macro_grams()
        return (
            f"{round(self.metrics.target_calories)} kcal per day; "
            f"protein {round(grams['protein'])} g, carbs {round(grams['carbs'])} g, "
            f"fats {round(grams['fats'])} g, fiber {round(grams['fiber'])} g"
        )

    def _restrictions(self) -> str:
        return ", ".join(sorted(self.restrictions)) if self.restrictions else "none"

    def detailed(self) -> Tuple[ChatMessage, ...]:
        user = (
            f"Create a 7-day meal plan with {self.meals_per_day} meals per day.\n\n"
            f"1. Goal: {self.goal.label()}\n"
            f"2. Daily targets: {self._targets()}\n"
            f"3. Dietary restrictions: {self._restrictions()}\n"
            f"4. BMI category: {self.metrics.bmi_category.value}; "
            "consider it when choosing portions and foods\n"
            "5. Structure:\n"
            "   - Exactly 7 days, named after the days of the week\n"
            f"   - Exactly {self.meals_per_day} meals per day with calories and macros\n"
            "   - A snacks section and a hydration schedule for every day\n"
            "   - Vary meals across the week\n"
            "   - A grocery list, meal prep guidance and nutrition guidelines "
            "for the whole week\n\n"
            "Return the plan in this JSON format:\n"
            f"{MEAL_JSON_SCHEMA}"
        )
        return (ChatMessage("system", MEAL_SYSTEM_PROMPT), ChatMessage("user", user))

    def simplified(self) -> Tuple[ChatMessage, ...]:
        system = (
            "You are a nutritionist. Generate a meal plan in JSON with this "
            f"structure:\n{SIMPLIFIED_MEAL_JSON_SCHEMA}\n"
            f"IMPORTANT: exactly 7 days, each with at least {self.meals_per_day} meals "
            "with positive calories, one snack item and a hydration schedule. "
            "Do NOT return any text outside the JSON."
        )
        user = (
            f"Goal {self.goal.label()}. Targets: {self._targets()}. "
            f"BMI category {self.metrics.bmi_category.value}. "
            f"Restrictions: {self._restrictions()}."
        )
        return (ChatMessage("system", system), ChatMessage("user", user))

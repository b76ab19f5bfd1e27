"""Prompts for workout plan generation.

The detailed prompt is used for the first attempt with the primary model.
Retries use the simplified prompt: shorter, schema-only, stricter.
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from domain.plan_generation.builders.progression import (
    exercise_guidance,
    progression_guidance,
)
from domain.plan_generation.core.ports.generative_service import ChatMessage
from domain.plan_generation.core.value_objects.bmi_category import BMICategory
from domain.plan_generation.core.value_objects.fitness_level import FitnessLevel
from domain.plan_generation.core.value_objects.goal import Goal

WORKOUT_SYSTEM_PROMPT = (
    "You are a professional fitness trainer creating personalized workout plans. "
    "Respond with a single JSON object and nothing else."
)

WORKOUT_JSON_SCHEMA = """{
  "name": "string",
  "description": "string",
  "days": [
    {
      "name": "string",
      "focus": "string",
      "warmup": {
        "duration": "string",
        "exercises": [
          {"name": "string", "duration": "string", "description": "string", "purpose": "string"}
        ]
      },
      "exercises": [
        {
          "name": "string",
          "sets": number,
          "reps": "string",
          "rest": "string",
          "notes": "string",
          "difficulty": "string",
          "equipment": ["string"],
          "muscles": ["string"],
          "setup": "string",
          "execution": {
            "starting_position": "string",
            "movement": "string",
            "breathing": "string",
            "tempo": "string",
            "form_cues": ["string"]
          },
          "progression": {
            "next_steps": "string",
            "variations": ["string"],
            "scaling_options": ["string"]
          },
          "form_cues": ["string"]
        }
      ],
      "cooldown": {
        "duration": "string",
        "exercises": [
          {"name": "string", "duration": "string", "description": "string", "purpose": "string"}
        ]
      },
      "notes": "string"
    }
  ]
}"""

SIMPLIFIED_WORKOUT_JSON_SCHEMA = """{
  "name": "string",
  "description": "string",
  "days": [
    {
      "name": "string",
      "focus": "string",
      "warmup": {"exercises": [{"name": "string", "duration": "string"}]},
      "exercises": [{"name": "string", "sets": number, "reps": "string", "rest": "string"}],
      "cooldown": {"exercises": [{"name": "string", "duration": "string"}]},
      "notes": "string"
    }
  ]
}"""


def _restriction_text(restrictions: FrozenSet[str]) -> str:
    return ", ".join(sorted(restrictions)) if restrictions else "none"


@dataclass(frozen=True)
class WorkoutPrompts:
    """Prompt parameters for one workout request."""

    days_per_week: int
    fitness_level: FitnessLevel
    goal: Goal
    bmi_category: BMICategory
    week_number: int
    restrictions: FrozenSet[str]
    min_exercises: int

    def detailed(self) -> Tuple[ChatMessage, ...]:
        level = self.fitness_level.value
        guidance = exercise_guidance(self.goal, self.fitness_level, self.bmi_category)
        progression = progression_guidance(self.goal, self.fitness_level, self.week_number)
        user = (
            f"Create a {self.days_per_week}-day workout plan for a {level} level trainee.\n\n"
            f"1. Goal: {self.goal.label()}\n"
            "2. Exercise Selection:\n"
            "   - Each day must have unique exercises (no repeats across days)\n"
            f"   - For {self.bmi_category.value} individuals at {level} level, "
            f"prioritize {guidance}\n"
            f"   - Restrictions: {_restriction_text(self.restrictions)}\n"
            "3. Progression:\n"
            f"   - {progression}\n"
            "4. Structure:\n"
            f"   - Exactly {self.days_per_week} days, each with at least "
            f"{self.min_exercises} exercises\n"
            "   - Include warmup and cooldown routines\n"
            "   - Specify sets, reps and rest periods\n"
            "   - Describe setup, execution (breathing, tempo, form cues) and\n"
            "     progression options for each exercise\n\n"
            "Return the plan in this JSON format:\n"
            f"{WORKOUT_JSON_SCHEMA}"
        )
        return (ChatMessage("system", WORKOUT_SYSTEM_PROMPT), ChatMessage("user", user))

    def simplified(self) -> Tuple[ChatMessage, ...]:
        system = (
            "You are a professional fitness coach. Generate a workout plan in JSON "
            f"with this structure:\n{SIMPLIFIED_WORKOUT_JSON_SCHEMA}\n"
            f"IMPORTANT: Each day MUST have at least {self.min_exercises} exercises in "
            "the 'exercises' array, each with all fields filled, plus at least one "
            "warmup and one cooldown exercise. Do NOT return any text outside the JSON."
        )
        user = (
            f"{self.days_per_week} days, {self.fitness_level.value} level, "
            f"goal {self.goal.label()}, BMI category {self.bmi_category.value}, "
            f"restrictions: {_restriction_text(self.restrictions)}."
        )
        return (ChatMessage("system", system), ChatMessage("user", user))

"""Catalog entities - static reference data for the fallback builders."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional, Protocol, Tuple

from ..value_objects.fitness_level import FitnessLevel

BODYWEIGHT_EQUIPMENT = frozenset({"None", "Exercise Mat", "Wall"})


class CatalogItem(Protocol):
    """Anything the selector can score: a name plus numeric attributes."""

    name: str

    def attributes(self) -> Mapping[str, float]:
        ...


class MealSlot(str, Enum):
    """Meal slot types within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class DietType(str, Enum):
    """Catalog column for meals."""

    STANDARD = "standard"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"


_TIMED_UNITS = ("second", "minute", "meter")


@dataclass(frozen=True)
class Execution:
    """How to perform one repetition (or one timed effort)."""

    starting_position: str
    movement: str
    breathing: str
    tempo: str


@dataclass(frozen=True)
class ExerciseProgression:
    """Where to go from an exercise: harder variations and easier options."""

    next_steps: str
    variations: Tuple[str, ...] = ()
    scaling_options: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "next_steps": self.next_steps,
            "variations": list(self.variations),
            "scaling_options": list(self.scaling_options),
        }


@dataclass(frozen=True)
class Exercise:
    """Exercise catalog entry keyed by (focus, difficulty).

    Guidance fields (description, setup, cues, execution, progression) are
    opaque to selection. ``execution`` falls back to a block derived from
    the description when the catalog does not spell it out.
    """

    name: str
    focus: str
    difficulty: FitnessLevel
    sets: int
    reps: str
    rest_seconds: int
    description: str
    muscles: Tuple[str, ...] = ()
    equipment: Tuple[str, ...] = ("None",)
    form_cues: Tuple[str, ...] = ()
    setup: str = ""
    execution: Optional[Execution] = None
    progression: Optional[ExerciseProgression] = None

    def attributes(self) -> Dict[str, float]:
        return {"sets": float(self.sets), "rest_seconds": float(self.rest_seconds)}

    def is_bodyweight(self) -> bool:
        return set(self.equipment) <= BODYWEIGHT_EQUIPMENT

    def is_timed(self) -> bool:
        return any(unit in self.reps for unit in _TIMED_UNITS)

    def execution_block(self) -> Execution:
        if self.execution is not None:
            return self.execution
        if self.is_timed():
            return Execution(
                starting_position=self.setup or "Brace the core and set a stable stance",
                movement=self.description,
                breathing="Breathe rhythmically throughout the interval",
                tempo="Steady, controlled pace",
            )
        return Execution(
            starting_position=self.setup or "Brace the core and set a stable stance",
            movement=self.description,
            breathing="Exhale on the effort, inhale on the return",
            tempo="2-1-2",
        )

    def to_plan_item(self) -> Dict[str, Any]:
        """Render as a plan exercise entry."""
        execution = self.execution_block()
        progression = self.progression or ExerciseProgression(
            "Add a set once every set feels controlled"
        )
        return {
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "rest": f"{self.rest_seconds} seconds",
            "description": self.description,
            "difficulty": self.difficulty.label(),
            "equipment": list(self.equipment),
            "muscles": list(self.muscles),
            "setup": execution.starting_position,
            "execution": {
                "starting_position": execution.starting_position,
                "movement": execution.movement,
                "breathing": execution.breathing,
                "tempo": execution.tempo,
                "form_cues": list(self.form_cues),
            },
            "progression": progression.to_dict(),
            "form_cues": list(self.form_cues),
            "notes": "",
        }


@dataclass(frozen=True)
class MealItem:
    """Meal catalog entry keyed by (slot, diet).

    Attributes:
        tags: Allergen/content tags (e.g. "gluten", "dairy", "nuts")
    """

    name: str
    slot: MealSlot
    diet: DietType
    calories: float
    protein: float
    carbs: float
    fats: float
    fiber: float
    portion: str
    preparation: Tuple[str, ...] = ()
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def attributes(self) -> Dict[str, float]:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "fiber": self.fiber,
        }

    def to_plan_item(self) -> Dict[str, Any]:
        """Render as a plan food entry."""
        return {
            "name": self.name,
            "portion": self.portion,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "fiber": self.fiber,
            "preparation": list(self.preparation),
        }

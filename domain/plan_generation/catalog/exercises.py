"""Exercise catalog keyed by (focus area, fitness level).

Static reference data, read-only at generation time. Validated at startup
by ``validate_catalogs``.
"""

from dataclasses import replace
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..core.entities.catalog_item import Execution, Exercise, ExerciseProgression
from ..core.value_objects.fitness_level import FitnessLevel
from .substitutions import BMI_SUBSTITUTIONS

FULL_BODY = "Full Body"
UPPER_BODY = "Upper Body & Core"
LOWER_BODY = "Lower Body & Core"
CARDIO = "Endurance & Cardio"

FOCUS_AREAS = (FULL_BODY, UPPER_BODY, LOWER_BODY, CARDIO)

BEGINNER = FitnessLevel.BEGINNER
INTERMEDIATE = FitnessLevel.INTERMEDIATE
ADVANCED = FitnessLevel.ADVANCED


def _ex(
    name: str,
    sets: int,
    reps: str,
    rest_seconds: int,
    description: str,
    muscles: Tuple[str, ...],
    equipment: Tuple[str, ...] = ("None",),
    cues: Tuple[str, ...] = (),
    setup: str = "",
    execution: Optional[Execution] = None,
) -> Exercise:
    # focus and difficulty are filled in by _cell
    return Exercise(
        name=name,
        focus="",
        difficulty=BEGINNER,
        sets=sets,
        reps=reps,
        rest_seconds=rest_seconds,
        description=description,
        muscles=muscles,
        equipment=equipment,
        form_cues=cues,
        setup=setup,
        execution=execution,
    )


def _cell(focus: str, level: FitnessLevel, *rows: Exercise) -> Tuple[Exercise, ...]:
    return tuple(replace(row, focus=focus, difficulty=level) for row in rows)


_BASE_CATALOG: Mapping[str, Mapping[FitnessLevel, Tuple[Exercise, ...]]] = MappingProxyType(
    {
        FULL_BODY: MappingProxyType(
            {
                BEGINNER: _cell(
                    FULL_BODY,
                    BEGINNER,
                    _ex("Bodyweight Squats", 3, "10-12", 60,
                        "Fundamental lower body exercise that targets multiple muscle groups",
                        ("Quadriceps", "Glutes", "Hamstrings", "Core"),
                        cues=("Keep knees aligned with toes", "Push through heels to stand"),
                        setup="Stand with feet shoulder-width apart, toes slightly turned out",
                        execution=Execution(
                            "Stand tall with chest up and core engaged",
                            "Lower body by bending knees and hips, keeping chest up",
                            "Inhale on the way down, exhale on the way up",
                            "2-1-2",
                        )),
                    _ex("Push-Ups", 3, "8-10", 60,
                        "Classic upper body exercise that builds chest and arm strength",
                        ("Chest", "Shoulders", "Triceps", "Core"),
                        cues=("Keep elbows at 45 degrees", "Maintain a straight body line"),
                        setup="Hands slightly wider than shoulders, body in a straight line",
                        execution=Execution(
                            "High plank with arms extended and core braced",
                            "Lower chest to just above the floor, then press back up",
                            "Inhale on the way down, exhale as you push up",
                            "2-0-1",
                        )),
                    _ex("Plank", 3, "30-45 seconds", 60,
                        "Core stability exercise that improves posture and strength",
                        ("Core", "Shoulders", "Glutes"), ("Exercise Mat",),
                        cues=("Keep core tight", "Don't let hips sag"),
                        setup="Forearms on the mat, elbows under shoulders",
                        execution=Execution(
                            "Straight line from head to heels on forearms and toes",
                            "Hold the position without letting the hips drop or pike",
                            "Slow steady breaths through the nose",
                            "Static hold",
                        )),
                    _ex("Glute Bridges", 3, "12-15", 45,
                        "Hip extension that strengthens glutes and lower back",
                        ("Glutes", "Hamstrings", "Lower Back"), ("Exercise Mat",),
                        cues=("Squeeze glutes at the top", "Keep ribs down")),
                    _ex("Jumping Jacks", 3, "30 seconds", 45,
                        "Rhythmic full body movement that raises heart rate",
                        ("Full Body",),
                        cues=("Land softly", "Keep a steady rhythm")),
                    _ex("Bird Dogs", 3, "10 per side", 45,
                        "Anti-rotation core drill that builds coordination",
                        ("Core", "Lower Back", "Glutes"), ("Exercise Mat",),
                        cues=("Extend opposite arm and leg", "Keep hips level")),
                    _ex("Reverse Lunges", 3, "8 per leg", 60,
                        "Knee-friendly lunge variation for leg strength and balance",
                        ("Quadriceps", "Glutes", "Hamstrings"),
                        cues=("Step back far enough to keep shin vertical", "Keep torso upright")),
                    _ex("Dead Bugs", 3, "10 per side", 45,
                        "Supine core exercise that teaches spinal control",
                        ("Core", "Hip Flexors"), ("Exercise Mat",),
                        cues=("Press lower back into the floor", "Move slowly")),
                ),
                INTERMEDIATE: _cell(
                    FULL_BODY,
                    INTERMEDIATE,
                    _ex("Jump Squats", 3, "10-12", 75,
                        "Explosive lower body exercise that builds power",
                        ("Quadriceps", "Glutes", "Calves"),
                        cues=("Land softly on the balls of the feet", "Use arms for momentum")),
                    _ex("Burpees", 3, "8-10", 75,
                        "Full body explosive movement that improves conditioning",
                        ("Full Body",),
                        cues=("Keep core engaged", "Land softly from the jump")),
                    _ex("Mountain Climbers", 3, "30 seconds", 60,
                        "Dynamic plank variation for core and conditioning",
                        ("Core", "Shoulders", "Hip Flexors"),
                        cues=("Keep hips low", "Drive knees toward chest")),
                    _ex("Dumbbell Thrusters", 3, "10-12", 75,
                        "Squat into overhead press for total body strength",
                        ("Quadriceps", "Glutes", "Shoulders"), ("Dumbbells",),
                        cues=("Drive the press with the legs", "Lock out overhead")),
                    _ex("Kettlebell Swings", 3, "15", 60,
                        "Hip hinge power movement for posterior chain",
                        ("Glutes", "Hamstrings", "Core"), ("Kettlebell",),
                        cues=("Hinge, don't squat", "Snap hips forward")),
                    _ex("Renegade Rows", 3, "8 per side", 75,
                        "Plank row combining core stability and back strength",
                        ("Back", "Core", "Shoulders"), ("Dumbbells",),
                        cues=("Keep hips square", "Row to the hip")),
                ),
                ADVANCED: _cell(
                    FULL_BODY,
                    ADVANCED,
                    _ex("Pistol Squats", 3, "6-8 per leg", 90,
                        "Single leg squat that builds strength and balance",
                        ("Quadriceps", "Glutes", "Core"),
                        cues=("Keep chest up", "Control the descent")),
                    _ex("Handstand Push-Ups", 3, "5-8", 120,
                        "Overhead pressing movement for shoulder strength",
                        ("Shoulders", "Triceps", "Core"), ("Wall",),
                        cues=("Keep core tight", "Maintain a straight body line")),
                    _ex("Muscle-Ups", 3, "3-5", 120,
                        "Combined pulling and pushing movement over the bar",
                        ("Back", "Chest", "Shoulders", "Arms"), ("Pull-up Bar",),
                        cues=("Keep the bar close", "Transition with fast hips")),
                    _ex("Dragon Flags", 3, "6-8", 90,
                        "Demanding core exercise with a rigid body lever",
                        ("Core", "Hip Flexors"), ("Bench",),
                        cues=("Don't use momentum", "Lower slowly")),
                    _ex("Barbell Clean and Press", 4, "5", 120,
                        "Olympic-style lift for power and full body strength",
                        ("Full Body",), ("Barbell",),
                        cues=("Keep the bar close", "Catch in a quarter squat")),
                    _ex("Burpee Pull-Ups", 3, "8", 90,
                        "Burpee finished with a pull-up for conditioning",
                        ("Full Body", "Back"), ("Pull-up Bar",),
                        cues=("Jump into the pull", "Control the landing")),
                ),
            }
        ),
        UPPER_BODY: MappingProxyType(
            {
                BEGINNER: _cell(
                    UPPER_BODY,
                    BEGINNER,
                    _ex("Wall Push-Ups", 3, "10-12", 60,
                        "Push-up against a wall to build pressing strength",
                        ("Chest", "Triceps"), ("Wall",),
                        cues=("Keep body in one line", "Lower chest toward the wall")),
                    _ex("Knee Push-Ups", 3, "8-10", 60,
                        "Push-up from the knees to reduce load",
                        ("Chest", "Shoulders", "Triceps"), ("Exercise Mat",),
                        cues=("Keep hips in line with shoulders", "Elbows at 45 degrees")),
                    _ex("Incline Push-Ups", 3, "8-12", 60,
                        "Hands-elevated push-up for gradual progression",
                        ("Chest", "Triceps"), ("Bench",),
                        cues=("Keep core braced", "Touch chest to the edge")),
                    _ex("Superman Holds", 3, "20 seconds", 45,
                        "Prone hold that strengthens the back chain",
                        ("Lower Back", "Glutes", "Shoulders"), ("Exercise Mat",),
                        cues=("Lift arms and legs together", "Keep neck neutral")),
                    _ex("Dumbbell Rows", 3, "10 per arm", 60,
                        "Single-arm row for upper back strength",
                        ("Back", "Biceps"), ("Dumbbells", "Bench"),
                        cues=("Pull elbow to hip", "Keep back flat")),
                    _ex("Forearm Side Plank", 3, "20 seconds per side", 45,
                        "Lateral core hold for obliques",
                        ("Obliques", "Shoulders"), ("Exercise Mat",),
                        cues=("Stack hips", "Keep a straight line")),
                ),
                INTERMEDIATE: _cell(
                    UPPER_BODY,
                    INTERMEDIATE,
                    _ex("Diamond Push-Ups", 3, "10-12", 60,
                        "Push-up with hands forming a diamond shape",
                        ("Triceps", "Chest"),
                        cues=("Keep elbows close", "Lower under control")),
                    _ex("Pike Push-Ups", 3, "8-10", 75,
                        "Inverted push-up that targets the shoulders",
                        ("Shoulders", "Triceps"),
                        cues=("Hips high", "Head travels in front of hands")),
                    _ex("Inverted Rows", 3, "10-12", 60,
                        "Horizontal pull under a bar",
                        ("Back", "Biceps"), ("Pull-up Bar",),
                        cues=("Squeeze shoulder blades", "Keep body rigid")),
                    _ex("Dumbbell Shoulder Press", 3, "10", 75,
                        "Overhead press for shoulder strength",
                        ("Shoulders", "Triceps"), ("Dumbbells",),
                        cues=("Brace core", "Press straight up")),
                    _ex("Bicycle Crunches", 3, "20", 45,
                        "Rotational crunch for obliques",
                        ("Core", "Obliques"), ("Exercise Mat",),
                        cues=("Rotate through the torso", "Don't pull on the neck")),
                    _ex("Side Plank with Reach", 3, "10 per side", 45,
                        "Side plank with a thread-through for obliques",
                        ("Obliques", "Shoulders"), ("Exercise Mat",),
                        cues=("Keep hips high", "Move slowly")),
                ),
                ADVANCED: _cell(
                    UPPER_BODY,
                    ADVANCED,
                    _ex("Weighted Pull-Ups", 4, "5-6", 120,
                        "Loaded vertical pull for back strength",
                        ("Back", "Biceps"), ("Pull-up Bar", "Weight Belt"),
                        cues=("Full hang at the bottom", "Chin over bar")),
                    _ex("Archer Push-Ups", 3, "6 per side", 90,
                        "Unilateral push-up toward one-arm strength",
                        ("Chest", "Triceps", "Shoulders"),
                        cues=("Keep the straight arm long", "Control the descent")),
                    _ex("Ring Dips", 3, "6-8", 120,
                        "Unstable dip for pressing strength",
                        ("Chest", "Triceps"), ("Gymnastic Rings",),
                        cues=("Turn rings out at the top", "Keep shoulders down")),
                    _ex("Hanging Leg Raises", 3, "10", 90,
                        "Strict hanging core raise",
                        ("Core", "Hip Flexors"), ("Pull-up Bar",),
                        cues=("No swinging", "Lift legs to bar height")),
                    _ex("L-Sit Hold", 3, "15-20 seconds", 90,
                        "Isometric hold for core and triceps",
                        ("Core", "Triceps"), ("Parallettes",),
                        cues=("Lock elbows", "Point toes")),
                    _ex("Clap Push-Ups", 3, "6-8", 90,
                        "Plyometric push-up for upper body power",
                        ("Chest", "Triceps"),
                        cues=("Explode off the floor", "Land with soft elbows")),
                ),
            }
        ),
        LOWER_BODY: MappingProxyType(
            {
                BEGINNER: _cell(
                    LOWER_BODY,
                    BEGINNER,
                    _ex("Lunges", 3, "10 per leg", 60,
                        "Basic lunge movement for leg strength",
                        ("Quadriceps", "Glutes"),
                        cues=("Front knee over ankle", "Keep torso upright")),
                    _ex("Step-Ups", 3, "10 per leg", 60,
                        "Step onto a box or stair for single-leg strength",
                        ("Quadriceps", "Glutes"), ("Step",),
                        cues=("Drive through the front heel", "Stand tall at the top")),
                    _ex("Wall Sits", 3, "30 seconds", 60,
                        "Isometric squat hold against a wall",
                        ("Quadriceps", "Glutes"), ("Wall",),
                        cues=("Thighs parallel to the floor", "Back flat on the wall")),
                    _ex("Calf Raises", 3, "15", 45,
                        "Heel raises for calf strength",
                        ("Calves",),
                        cues=("Pause at the top", "Lower slowly")),
                    _ex("Side-Lying Leg Raises", 3, "12 per side", 45,
                        "Hip abduction for glute medius",
                        ("Glutes", "Hips"), ("Exercise Mat",),
                        cues=("Keep hips stacked", "Lift with control")),
                    _ex("Good Mornings", 3, "12", 45,
                        "Bodyweight hip hinge for hamstrings and back",
                        ("Hamstrings", "Lower Back"),
                        cues=("Soft knees", "Hinge at the hips")),
                ),
                INTERMEDIATE: _cell(
                    LOWER_BODY,
                    INTERMEDIATE,
                    _ex("Jump Squats", 3, "12-15", 60,
                        "Explosive squat jump",
                        ("Quadriceps", "Glutes", "Calves"),
                        cues=("Land softly", "Knees track over toes")),
                    _ex("Bulgarian Split Squats", 3, "8-10 per leg", 75,
                        "Rear-foot-elevated split squat",
                        ("Quadriceps", "Glutes"), ("Bench",),
                        cues=("Keep front heel down", "Drop the back knee")),
                    _ex("Walking Lunges", 3, "12 per leg", 60,
                        "Continuous lunges for strength and endurance",
                        ("Quadriceps", "Glutes", "Hamstrings"),
                        cues=("Long strides", "Stay upright")),
                    _ex("Single-Leg Glute Bridges", 3, "10 per leg", 45,
                        "Unilateral bridge for glute strength",
                        ("Glutes", "Hamstrings"), ("Exercise Mat",),
                        cues=("Keep pelvis level", "Squeeze at the top")),
                    _ex("Goblet Squats", 3, "10-12", 75,
                        "Front-loaded squat for depth and posture",
                        ("Quadriceps", "Glutes", "Core"), ("Kettlebell",),
                        cues=("Elbows inside knees", "Chest up")),
                    _ex("Russian Twists", 3, "20", 45,
                        "Seated rotation for obliques",
                        ("Core", "Obliques"), ("Exercise Mat",),
                        cues=("Rotate from the ribs", "Keep spine long")),
                ),
                ADVANCED: _cell(
                    LOWER_BODY,
                    ADVANCED,
                    _ex("Pistol Squats", 3, "6-8 per leg", 90,
                        "Single leg squat",
                        ("Quadriceps", "Glutes", "Core"),
                        cues=("Keep heel down", "Reach arms forward")),
                    _ex("Barbell Back Squats", 4, "5-6", 150,
                        "Heavy bilateral squat",
                        ("Quadriceps", "Glutes", "Core"), ("Barbell", "Squat Rack"),
                        cues=("Brace before descending", "Drive up through mid-foot")),
                    _ex("Nordic Hamstring Curls", 3, "5-6", 120,
                        "Eccentric hamstring strength",
                        ("Hamstrings",), ("Anchor",),
                        cues=("Lower as slowly as possible", "Keep hips extended")),
                    _ex("Box Jumps", 4, "5", 90,
                        "Plyometric jump onto a box",
                        ("Quadriceps", "Glutes", "Calves"), ("Plyo Box",),
                        cues=("Land softly", "Step down")),
                    _ex("Single-Leg Romanian Deadlifts", 3, "8 per leg", 90,
                        "Unilateral hinge for hamstrings and balance",
                        ("Hamstrings", "Glutes"), ("Dumbbells",),
                        cues=("Square hips", "Reach the back leg long")),
                    _ex("Toes-to-Bar", 3, "8-10", 90,
                        "Hanging core flexion",
                        ("Core", "Lats"), ("Pull-up Bar",),
                        cues=("Control the swing", "Touch the bar with toes")),
                ),
            }
        ),
        CARDIO: MappingProxyType(
            {
                BEGINNER: _cell(
                    CARDIO,
                    BEGINNER,
                    _ex("Brisk Walking", 1, "20 minutes", 60,
                        "Steady brisk walking",
                        ("Legs", "Cardiovascular"),
                        cues=("Swing arms", "Keep a conversational pace")),
                    _ex("Stationary Cycling", 1, "15 minutes", 60,
                        "Low-impact cycling at an easy pace",
                        ("Legs", "Cardiovascular"), ("Stationary Bike",),
                        cues=("Adjust seat height", "Keep cadence steady")),
                    _ex("Step Touches", 3, "1 minute", 45,
                        "Side-to-side stepping for light conditioning",
                        ("Legs", "Cardiovascular"),
                        cues=("Stay light on the feet", "Add arm swings")),
                    _ex("High Knees", 3, "30 seconds", 45,
                        "Running in place with high knee drive",
                        ("Hip Flexors", "Cardiovascular"),
                        cues=("Drive knees to hip height", "Pump the arms")),
                    _ex("Shadow Boxing", 3, "1 minute", 45,
                        "Punch combinations for upper body conditioning",
                        ("Shoulders", "Core", "Cardiovascular"),
                        cues=("Stay on the balls of the feet", "Rotate through the hips")),
                    _ex("Jumping Rope", 3, "45 seconds", 60,
                        "Basic rope skipping",
                        ("Calves", "Cardiovascular"), ("Jump Rope",),
                        cues=("Small jumps", "Turn rope with the wrists")),
                ),
                INTERMEDIATE: _cell(
                    CARDIO,
                    INTERMEDIATE,
                    _ex("Jogging", 1, "20 minutes", 60,
                        "Steady state jogging",
                        ("Legs", "Cardiovascular"),
                        cues=("Land under the hips", "Relax the shoulders")),
                    _ex("Jump Rope Intervals", 5, "1 minute", 45,
                        "Alternating fast and easy rope skipping",
                        ("Calves", "Cardiovascular"), ("Jump Rope",),
                        cues=("Stay tall", "Keep elbows close")),
                    _ex("Rowing Intervals", 5, "250 meters", 60,
                        "Rowing machine intervals",
                        ("Back", "Legs", "Cardiovascular"), ("Rowing Machine",),
                        cues=("Legs, then hips, then arms", "Reverse on the return")),
                    _ex("Skater Hops", 3, "30 seconds", 45,
                        "Lateral bounds for agility",
                        ("Glutes", "Legs", "Cardiovascular"),
                        cues=("Land on a soft knee", "Reach across the body")),
                    _ex("Stair Climbing", 1, "15 minutes", 60,
                        "Continuous stair climbing",
                        ("Legs", "Glutes", "Cardiovascular"), ("Stairs",),
                        cues=("Use the whole foot", "Keep posture upright")),
                    _ex("Cycling Intervals", 6, "1 minute", 60,
                        "High-resistance bike intervals",
                        ("Legs", "Cardiovascular"), ("Stationary Bike",),
                        cues=("Push through the pedal", "Recover fully")),
                ),
                ADVANCED: _cell(
                    CARDIO,
                    ADVANCED,
                    _ex("Sprint Intervals", 6, "30 seconds", 90,
                        "High intensity sprints",
                        ("Legs", "Cardiovascular"),
                        cues=("Drive the arms", "Full recovery between sprints")),
                    _ex("Battle Rope Waves", 5, "30 seconds", 60,
                        "Alternating rope waves",
                        ("Shoulders", "Core", "Cardiovascular"), ("Battle Ropes",),
                        cues=("Athletic stance", "Move from the shoulders")),
                    _ex("Tuck Jumps", 4, "10", 75,
                        "Explosive jumps bringing knees to chest",
                        ("Legs", "Core", "Cardiovascular"),
                        cues=("Pull knees high", "Land quietly")),
                    _ex("Assault Bike Sprints", 6, "20 seconds", 90,
                        "All-out air bike efforts",
                        ("Full Body", "Cardiovascular"), ("Air Bike",),
                        cues=("Push and pull the handles", "Max effort")),
                    _ex("Burpee Broad Jumps", 4, "8", 90,
                        "Burpee followed by a forward jump",
                        ("Full Body", "Cardiovascular"),
                        cues=("Jump for distance", "Stick the landing")),
                    _ex("Double-Unders", 5, "30 seconds", 60,
                        "Rope passes twice per jump",
                        ("Calves", "Cardiovascular"), ("Jump Rope",),
                        cues=("Fast wrists", "Slightly higher jump")),
                ),
            }
        ),
    }
)

_LEVELS = (BEGINNER, INTERMEDIATE, ADVANCED)

MAX_LINKED = 2


def _related(exercise: Exercise, cell: Tuple[Exercise, ...]) -> List[str]:
    """Names from a cell that train the same muscles, primary muscle first."""
    others = [other for other in cell if other.name != exercise.name]
    primary = exercise.muscles[:1]
    ranked = [o for o in others if o.muscles[:1] == primary]
    ranked += [o for o in others if o not in ranked and set(o.muscles) & set(exercise.muscles)]
    return [o.name for o in ranked[:MAX_LINKED]]


def _scaling_from_substitutions(name: str) -> List[str]:
    names: List[str] = []
    for table in BMI_SUBSTITUTIONS.values():
        substitution = table.get(name)
        if substitution is not None and substitution.name not in names:
            names.append(substitution.name)
    return names[:MAX_LINKED]


def _link_progression(
    exercise: Exercise, cells: Mapping[FitnessLevel, Tuple[Exercise, ...]]
) -> ExerciseProgression:
    position = _LEVELS.index(exercise.difficulty)
    harder = _LEVELS[position + 1] if position + 1 < len(_LEVELS) else None
    easier = _LEVELS[position - 1] if position > 0 else None

    if harder is None:
        variations = _related(exercise, cells.get(exercise.difficulty, ()))
        next_steps = "Add load or slow the tempo once every set feels controlled"
    else:
        variations = _related(exercise, cells.get(harder, ()))
        next_steps = (
            f"Progress to {variations[0]} once every set feels controlled"
            if variations
            else "Add a set once every set feels controlled"
        )

    if easier is None:
        scaling = _scaling_from_substitutions(exercise.name)
    else:
        scaling = _related(exercise, cells.get(easier, ()))

    return ExerciseProgression(next_steps, tuple(variations), tuple(scaling))


def _with_progressions(
    catalog: Mapping[str, Mapping[FitnessLevel, Tuple[Exercise, ...]]],
) -> Mapping[str, Mapping[FitnessLevel, Tuple[Exercise, ...]]]:
    linked: Dict[str, Mapping[FitnessLevel, Tuple[Exercise, ...]]] = {}
    for focus, cells in catalog.items():
        linked[focus] = MappingProxyType(
            {
                level: tuple(
                    exercise
                    if exercise.progression is not None
                    else replace(exercise, progression=_link_progression(exercise, cells))
                    for exercise in cell
                )
                for level, cell in cells.items()
            }
        )
    return MappingProxyType(linked)


EXERCISE_CATALOG: Mapping[str, Mapping[FitnessLevel, Tuple[Exercise, ...]]] = _with_progressions(
    _BASE_CATALOG
)


def exercises_for(focus: str, level: FitnessLevel) -> Tuple[Exercise, ...]:
    """Catalog cell for (focus, level); empty tuple when missing."""
    return EXERCISE_CATALOG.get(focus, {}).get(level, ())

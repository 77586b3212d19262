"""Built-in exercise -> muscle contribution table.

Each built-in exercise credits its completed sets to one or more tracked
muscles, scaled by a contribution weight in (0, 1]:
- 1.0: primary mover
- 0.5: secondary mover
- 0.25: tertiary / stabilizer
Intermediate weights (0.3, 0.4, 0.7) are used where a muscle sits between
those roles. Weights for one exercise do not need to sum to 1.

The table is static load-time data and is exposed read-only.
"""

from types import MappingProxyType
from typing import NamedTuple

from liftlog.muscles.catalog import Muscle


class MuscleContribution(NamedTuple):
    """One muscle credited by an exercise, with its contribution weight."""

    muscle: Muscle
    weight: float


def _row(*pairs: tuple[Muscle, float]) -> tuple[MuscleContribution, ...]:
    return tuple(MuscleContribution(muscle, weight) for muscle, weight in pairs)


BUILTIN_CONTRIBUTIONS: MappingProxyType[str, tuple[MuscleContribution, ...]] = MappingProxyType(
    {
        # CHEST
        "chest-01": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5), (Muscle.FRONT_DELTS, 0.3)),  # Barbell Bench Press
        "chest-02": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5), (Muscle.FRONT_DELTS, 0.4)),  # Incline Barbell Bench Press
        "chest-03": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5)),  # Decline Barbell Bench Press
        "chest-04": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5), (Muscle.FRONT_DELTS, 0.3)),  # Dumbbell Bench Press
        "chest-05": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5), (Muscle.FRONT_DELTS, 0.4)),  # Incline Dumbbell Press
        "chest-06": _row((Muscle.CHEST, 1.0)),  # Dumbbell Fly
        "chest-07": _row((Muscle.CHEST, 1.0)),  # Cable Fly
        "chest-08": _row((Muscle.CHEST, 1.0)),  # Pec Deck Machine
        "chest-09": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5), (Muscle.FRONT_DELTS, 0.3)),  # Machine Chest Press
        "chest-10": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5), (Muscle.FRONT_DELTS, 0.3), (Muscle.ABS, 0.25)),  # Push-ups
        "chest-11": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5), (Muscle.FRONT_DELTS, 0.3)),  # Dips (Chest)
        "chest-12": _row((Muscle.CHEST, 1.0)),  # Cable Crossover
        "chest-13": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5), (Muscle.FRONT_DELTS, 0.3)),  # Smith Machine Bench Press
        "chest-14": _row((Muscle.CHEST, 1.0), (Muscle.TRICEPS, 0.5)),  # Decline Dumbbell Press

        # BACK
        "back-01": _row((Muscle.LATS, 1.0), (Muscle.BICEPS, 0.5), (Muscle.REAR_DELTS, 0.25)),  # Lat Pulldown
        "back-02": _row((Muscle.LATS, 0.7), (Muscle.TRAPS, 0.5), (Muscle.BICEPS, 0.5), (Muscle.REAR_DELTS, 0.3)),  # Seated Cable Row
        "back-03": _row((Muscle.LATS, 0.7), (Muscle.TRAPS, 0.5), (Muscle.BICEPS, 0.5), (Muscle.REAR_DELTS, 0.3)),  # Barbell Bent-over Row
        "back-04": _row((Muscle.LATS, 1.0), (Muscle.TRAPS, 0.3), (Muscle.BICEPS, 0.5)),  # Dumbbell Row
        "back-05": _row((Muscle.HAMSTRINGS, 0.5), (Muscle.GLUTES, 0.5), (Muscle.TRAPS, 0.5)),  # Deadlift
        "back-06": _row((Muscle.HAMSTRINGS, 1.0), (Muscle.GLUTES, 0.5)),  # Romanian Deadlift
        "back-07": _row((Muscle.LATS, 1.0), (Muscle.BICEPS, 0.5), (Muscle.REAR_DELTS, 0.25)),  # Pull-ups
        "back-08": _row((Muscle.LATS, 1.0), (Muscle.BICEPS, 0.7)),  # Chin-ups
        "back-09": _row((Muscle.LATS, 0.7), (Muscle.TRAPS, 0.5), (Muscle.BICEPS, 0.5)),  # T-Bar Row
        "back-10": _row((Muscle.LATS, 1.0)),  # Cable Pullover
        "back-11": _row((Muscle.LATS, 0.7), (Muscle.TRAPS, 0.5), (Muscle.BICEPS, 0.5)),  # Machine Row
        "back-12": _row((Muscle.GLUTES, 0.5), (Muscle.HAMSTRINGS, 0.5)),  # Hyperextension
        "back-13": _row((Muscle.LATS, 1.0), (Muscle.BICEPS, 0.5), (Muscle.REAR_DELTS, 0.25)),  # Vertical Traction
        "back-14": _row((Muscle.GLUTES, 0.25)),  # Seated Back Extension
        "back-15": _row((Muscle.LATS, 0.7), (Muscle.BICEPS, 0.5)),  # Assisted Chin/Dip
        "back-16": _row((Muscle.LATS, 0.7), (Muscle.CHEST, 0.3)),  # Dumbbell Pullover
        "back-17": _row((Muscle.LATS, 1.0)),  # Straight Arm Pulldown

        # LEGS
        "legs-01": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5), (Muscle.HAMSTRINGS, 0.25), (Muscle.ABS, 0.25)),  # Barbell Squat
        "legs-02": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5), (Muscle.ABS, 0.3)),  # Front Squat
        "legs-03": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5), (Muscle.HAMSTRINGS, 0.25)),  # Leg Press
        "legs-04": _row((Muscle.QUADS, 1.0)),  # Leg Extension
        "legs-05": _row((Muscle.HAMSTRINGS, 1.0)),  # Leg Curl (Lying)
        "legs-06": _row((Muscle.HAMSTRINGS, 1.0)),  # Leg Curl (Seated)
        "legs-07": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5)),  # Hack Squat
        "legs-08": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5), (Muscle.HAMSTRINGS, 0.25)),  # Bulgarian Split Squat
        "legs-09": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5), (Muscle.HAMSTRINGS, 0.25)),  # Walking Lunges
        "legs-10": _row((Muscle.CALVES, 1.0)),  # Calf Raise (Standing)
        "legs-11": _row((Muscle.CALVES, 1.0)),  # Calf Raise (Seated)
        "legs-12": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5), (Muscle.ABS, 0.25)),  # Goblet Squat
        "legs-13": _row((Muscle.GLUTES, 1.0), (Muscle.HAMSTRINGS, 0.3)),  # Hip Thrust
        "legs-14": _row((Muscle.CALVES, 1.0)),  # Leg Press Calf Raise
        "legs-15": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5)),  # Smith Machine Squat
        "legs-16": _row((Muscle.GLUTES, 0.5)),  # Hip Abductor
        "legs-18": _row((Muscle.GLUTES, 0.5)),  # Multi Hip
        "legs-19": _row((Muscle.GLUTES, 1.0), (Muscle.HAMSTRINGS, 0.3)),  # Hip Thrust Machine
        "legs-20": _row((Muscle.QUADS, 0.5), (Muscle.GLUTES, 0.7), (Muscle.HAMSTRINGS, 0.5)),  # Sumo Deadlift
        "legs-21": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5), (Muscle.HAMSTRINGS, 0.25)),  # Reverse Lunge
        "legs-22": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5)),  # Step-ups
        "legs-23": _row((Muscle.HAMSTRINGS, 1.0)),  # Nordic Hamstring Curl
        "legs-24": _row((Muscle.GLUTES, 1.0), (Muscle.HAMSTRINGS, 0.25)),  # Glute Kickback Machine
        "legs-25": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5)),  # Pendulum Squat
        "legs-26": _row((Muscle.QUADS, 1.0), (Muscle.GLUTES, 0.5), (Muscle.HAMSTRINGS, 0.25)),  # Belt Squat

        # SHOULDERS
        "shldr-01": _row((Muscle.FRONT_DELTS, 1.0), (Muscle.SIDE_DELTS, 0.5), (Muscle.TRICEPS, 0.5)),  # Overhead Press (Barbell)
        "shldr-02": _row((Muscle.FRONT_DELTS, 1.0), (Muscle.SIDE_DELTS, 0.5), (Muscle.TRICEPS, 0.5)),  # Dumbbell Shoulder Press
        "shldr-03": _row((Muscle.SIDE_DELTS, 1.0)),  # Lateral Raise
        "shldr-04": _row((Muscle.FRONT_DELTS, 1.0)),  # Front Raise
        "shldr-05": _row((Muscle.REAR_DELTS, 1.0), (Muscle.TRAPS, 0.3)),  # Face Pull
        "shldr-06": _row((Muscle.REAR_DELTS, 1.0)),  # Rear Delt Fly
        "shldr-07": _row((Muscle.FRONT_DELTS, 1.0), (Muscle.SIDE_DELTS, 0.5), (Muscle.TRICEPS, 0.5)),  # Machine Shoulder Press
        "shldr-08": _row((Muscle.SIDE_DELTS, 1.0)),  # Cable Lateral Raise
        "shldr-09": _row((Muscle.FRONT_DELTS, 1.0), (Muscle.SIDE_DELTS, 0.5), (Muscle.TRICEPS, 0.3)),  # Arnold Press
        "shldr-10": _row((Muscle.SIDE_DELTS, 1.0), (Muscle.TRAPS, 0.5)),  # Upright Row
        "shldr-11": _row((Muscle.REAR_DELTS, 1.0)),  # Reverse Pec Deck
        "shldr-12": _row((Muscle.TRAPS, 1.0)),  # Shrugs (Barbell)
        "shldr-13": _row((Muscle.TRAPS, 1.0)),  # Shrugs (Dumbbell)
        "shldr-14": _row((Muscle.SIDE_DELTS, 1.0)),  # Machine Lateral Raise
        "shldr-15": _row((Muscle.FRONT_DELTS, 1.0), (Muscle.CHEST, 0.3), (Muscle.TRICEPS, 0.3)),  # Landmine Press

        # ARMS
        "arms-01": _row((Muscle.BICEPS, 1.0)),  # Barbell Curl
        "arms-02": _row((Muscle.BICEPS, 1.0)),  # Dumbbell Curl
        "arms-03": _row((Muscle.BICEPS, 0.7), (Muscle.FOREARMS, 0.5)),  # Hammer Curl
        "arms-04": _row((Muscle.BICEPS, 1.0)),  # Preacher Curl
        "arms-05": _row((Muscle.BICEPS, 1.0)),  # Cable Curl
        "arms-06": _row((Muscle.BICEPS, 1.0)),  # Concentration Curl
        "arms-07": _row((Muscle.TRICEPS, 1.0)),  # Tricep Pushdown
        "arms-08": _row((Muscle.TRICEPS, 1.0)),  # Overhead Tricep Extension
        "arms-09": _row((Muscle.TRICEPS, 1.0)),  # Skull Crushers
        "arms-10": _row((Muscle.TRICEPS, 1.0), (Muscle.CHEST, 0.3), (Muscle.FRONT_DELTS, 0.25)),  # Tricep Dips
        "arms-11": _row((Muscle.TRICEPS, 1.0)),  # Cable Overhead Extension
        "arms-12": _row((Muscle.TRICEPS, 1.0), (Muscle.CHEST, 0.5)),  # Close-Grip Bench Press
        "arms-13": _row((Muscle.FOREARMS, 1.0)),  # Wrist Curl
        "arms-14": _row((Muscle.FOREARMS, 0.7), (Muscle.BICEPS, 0.5)),  # Reverse Curl
        "arms-15": _row((Muscle.BICEPS, 1.0)),  # Machine Bicep Curl
        "arms-16": _row((Muscle.TRICEPS, 1.0)),  # Machine Tricep Extension
        "arms-17": _row((Muscle.BICEPS, 1.0)),  # Incline Dumbbell Curl
        "arms-18": _row((Muscle.BICEPS, 1.0)),  # EZ Bar Curl
        "arms-19": _row((Muscle.TRICEPS, 1.0)),  # Tricep Kickback
        "arms-20": _row((Muscle.BICEPS, 1.0)),  # Spider Curl

        # CORE
        "core-01": _row((Muscle.ABS, 1.0)),  # Plank
        "core-02": _row((Muscle.ABS, 1.0)),  # Crunches
        "core-03": _row((Muscle.ABS, 1.0)),  # Hanging Leg Raise
        "core-04": _row((Muscle.ABS, 1.0)),  # Cable Crunch
        "core-05": _row((Muscle.ABS, 1.0)),  # Russian Twist
        "core-06": _row((Muscle.ABS, 1.0)),  # Ab Wheel Rollout
        "core-07": _row((Muscle.ABS, 0.5)),  # Mountain Climbers
        "core-08": _row((Muscle.ABS, 0.7)),  # Side Plank
        "core-09": _row((Muscle.ABS, 1.0)),  # Bicycle Crunch
        "core-10": _row((Muscle.ABS, 1.0)),  # Dead Bug
        "core-11": _row((Muscle.ABS, 1.0)),  # Decline Sit-up
        "core-12": _row((Muscle.ABS, 1.0)),  # Abdominal Crunch Machine
        "core-13": _row((Muscle.ABS, 1.0)),  # Total Abdominal Machine
        "core-14": _row((Muscle.ABS, 0.7)),  # Rotary Torso Machine
        "core-15": _row((Muscle.ABS, 0.7)),  # Cable Woodchop
        "core-16": _row((Muscle.ABS, 0.7)),  # Pallof Press
        "core-17": _row((Muscle.ABS, 1.0)),  # Lying Leg Raise
        "core-18": _row((Muscle.TRAPS, 0.5), (Muscle.FOREARMS, 0.5), (Muscle.ABS, 0.3)),  # Farmer's Walk

        # CARDIO
        "cardio-01": (),  # Treadmill
        "cardio-02": (),  # Elliptical
        "cardio-03": (),  # Stationary Bike
        "cardio-04": _row((Muscle.LATS, 0.3), (Muscle.BICEPS, 0.25)),  # Rowing Machine
        "cardio-05": (),  # Stair Climber
        "cardio-06": (),  # Jump Rope
        "cardio-07": (),  # Battle Ropes
        "cardio-08": (),  # Burpees
        "cardio-10": _row((Muscle.LATS, 0.3), (Muscle.ABS, 0.25)),  # Ski Erg
        "cardio-11": _row((Muscle.GLUTES, 0.7), (Muscle.HAMSTRINGS, 0.5), (Muscle.ABS, 0.25)),  # Kettlebell Swing
    }
)


def builtin_contributions(exercise_id: str) -> list[MuscleContribution]:
    """Look up contributions for a built-in exercise.

    Unknown ids are not an error: they simply credit no muscle.
    """
    return list(BUILTIN_CONTRIBUTIONS.get(exercise_id, ()))

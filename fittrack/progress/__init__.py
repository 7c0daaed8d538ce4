"""Progress module - completion tracking derived from committed plans.

This module provides:
- Progress document models mirroring plan weeks
- Projection of plans into progress, preserving prior completion
- Single-item completion toggles with aggregate recomputation
- Week expansion and the weight log
"""

from fittrack.progress.expander import append_nutrition_week, append_workout_week
from fittrack.progress.projector import (
    project_nutrition_progress,
    project_nutrition_week,
    project_workout_progress,
    project_workout_week,
)
from fittrack.progress.toggler import toggle_exercise, toggle_meal
from fittrack.progress.types import (
    DayMealProgress,
    DayProgress,
    ExerciseProgress,
    MealProgress,
    NutritionProgress,
    WeightProgress,
    WorkoutDetailsProgress,
    WorkoutProgress,
)
from fittrack.progress.weight import log_weight, set_goal

__all__ = [
    "DayMealProgress",
    "DayProgress",
    "ExerciseProgress",
    "MealProgress",
    "NutritionProgress",
    "WeightProgress",
    "WorkoutDetailsProgress",
    "WorkoutProgress",
    "append_nutrition_week",
    "append_workout_week",
    "log_weight",
    "project_nutrition_progress",
    "project_nutrition_week",
    "project_workout_progress",
    "project_workout_week",
    "set_goal",
    "toggle_exercise",
    "toggle_meal",
]

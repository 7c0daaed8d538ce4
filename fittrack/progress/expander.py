"""Week Expander.

Appends one week to a Plan/Progress pair. Prior weeks are reused by
reference; only the new week is projected (all items incomplete) and both
documents move their currentWeekIndex to it.
"""

from collections.abc import Sequence

from loguru import logger

from fittrack.plans.constants import DAYS_PER_WEEK
from fittrack.plans.types import DaySchedule, NutritionPlan, WeeklyMealPlan, WorkoutPlan
from fittrack.progress.projector import (
    project_nutrition_progress,
    project_nutrition_week,
    project_workout_progress,
    project_workout_week,
)
from fittrack.progress.types import NutritionProgress, WorkoutProgress


def append_workout_week(
    plan: WorkoutPlan,
    progress: WorkoutProgress | None,
    new_week: Sequence[DaySchedule],
) -> tuple[WorkoutPlan, WorkoutProgress]:
    """Append a validated week to a workout plan and its progress.

    Raises:
        ValueError: If new_week does not have exactly seven days
    """
    if len(new_week) != DAYS_PER_WEEK:
        raise ValueError(f"new week must have exactly {DAYS_PER_WEEK} days, got {len(new_week)}")

    if progress is None:
        progress = project_workout_progress(plan)

    new_index = plan.week_count
    updated_plan = plan.model_copy(
        update={
            "multi_week_schedules": [*plan.multi_week_schedules, list(new_week)],
            "current_week_index": new_index,
        }
    )
    updated_progress = progress.model_copy(
        update={
            "weekly_schedule": [*progress.weekly_schedule, project_workout_week(new_week)],
            "current_week_index": new_index,
        }
    )
    logger.info(
        "Appended workout week",
        week_index=new_index,
        total_workouts=updated_progress.total_workouts,
        completed_workouts=updated_progress.completed_workouts,
    )
    return updated_plan, updated_progress


def append_nutrition_week(
    plan: NutritionPlan,
    progress: NutritionProgress | None,
    new_week: WeeklyMealPlan,
) -> tuple[NutritionPlan, NutritionProgress]:
    """Append a validated week to a nutrition plan and its progress."""
    if progress is None:
        progress = project_nutrition_progress(plan)

    new_index = plan.week_count
    updated_plan = plan.model_copy(
        update={
            "multi_week_meal_plans": [*plan.multi_week_meal_plans, new_week],
            "current_week_index": new_index,
        }
    )
    updated_progress = progress.model_copy(
        update={
            "weekly_meal_progress": [*progress.weekly_meal_progress, project_nutrition_week(new_week)],
            "current_week_index": new_index,
        }
    )
    logger.info("Appended nutrition week", week_index=new_index)
    return updated_plan, updated_progress

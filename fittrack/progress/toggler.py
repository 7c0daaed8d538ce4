"""Completion Toggler.

Flips exactly one completion flag and returns a new Progress document. Only
the containers on the path to the toggled item are copied; every other week,
day and item is shared with the input. A missing week, day or item is a
no-op: the input is returned unchanged and a warning is logged.

Identity rules:
- Exercises: an int is the position within the day, a str the first
  exercise with that name
- Snacks ("snack"/"snacks"): an int is the position among the day's snacks
- Other meals: the meal name together with its mealType
"""

from collections.abc import Sequence
from typing import TypeVar

from loguru import logger

from fittrack.plans.constants import SNACK_MEAL_TYPES
from fittrack.plans.types import NutritionPlan
from fittrack.progress.aggregates import logged_totals
from fittrack.progress.types import DayMealProgress, DayProgress, NutritionProgress, WorkoutProgress

T = TypeVar("T")


def _replace(items: Sequence[T], index: int, value: T) -> list[T]:
    updated = list(items)
    updated[index] = value
    return updated


def is_index(value: object) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def _week(weeks: Sequence[Sequence[T]], week_index: int) -> Sequence[T] | None:
    if not is_index(week_index) or not 0 <= week_index < len(weeks):
        return None
    return weeks[week_index]


def _day_position(week: Sequence[DayProgress | DayMealProgress], day_of_week: str) -> int | None:
    weekday = day_of_week.strip().lower()
    for position, day in enumerate(week):
        if day.weekday == weekday:
            return position
    return None


def toggle_exercise(
    progress: WorkoutProgress,
    week_index: int,
    day_of_week: str,
    exercise: int | str,
) -> WorkoutProgress:
    """Flip one exercise's completed flag.

    Args:
        progress: Current workout progress
        week_index: Week containing the exercise
        day_of_week: Weekday name (any casing)
        exercise: Position within the day, or exercise name

    Returns:
        Updated progress, or the input unchanged when the target is missing
    """
    week = _week(progress.weekly_schedule, week_index)
    if week is None:
        logger.warning("Toggle exercise ignored: no such week", week_index=week_index)
        return progress

    day_idx = _day_position(week, day_of_week)
    if day_idx is None:
        logger.warning("Toggle exercise ignored: no such day", week_index=week_index, day_of_week=day_of_week)
        return progress

    day = week[day_idx]
    details = day.workout_details
    if details is None:
        logger.warning("Toggle exercise ignored: rest day", week_index=week_index, day_of_week=day_of_week)
        return progress

    if is_index(exercise):
        ex_idx = exercise if 0 <= exercise < len(details.exercises) else None
    else:
        matches = [idx for idx, item in enumerate(details.exercises) if item.name == exercise]
        if len(matches) > 1:
            logger.warning("Exercise name is ambiguous, toggling first match", exercise=exercise, matches=len(matches))
        ex_idx = matches[0] if matches else None
    if ex_idx is None:
        logger.warning(
            "Toggle exercise ignored: no such exercise",
            week_index=week_index,
            day_of_week=day_of_week,
            exercise=exercise,
        )
        return progress

    target = details.exercises[ex_idx]
    updated_details = details.model_copy(
        update={"exercises": _replace(details.exercises, ex_idx, target.model_copy(update={"completed": not target.completed}))}
    )
    updated_day = day.model_copy(update={"workout_details": updated_details})
    updated = progress.model_copy(
        update={"weekly_schedule": _replace(progress.weekly_schedule, week_index, _replace(week, day_idx, updated_day))}
    )
    logger.debug(
        "Toggled exercise",
        week_index=week_index,
        day_of_week=day.day_of_week,
        exercise=target.name,
        completed=not target.completed,
        completed_workouts=updated.completed_workouts,
    )
    return updated


def _meal_position(day: DayMealProgress, meal_type: str, meal: int | str) -> int | None:
    kind = meal_type.strip().lower()
    if kind in SNACK_MEAL_TYPES:
        if not is_index(meal):
            return None
        snack_positions = [
            idx for idx, item in enumerate(day.meals) if item.meal_type.strip().lower() in SNACK_MEAL_TYPES
        ]
        return snack_positions[meal] if 0 <= meal < len(snack_positions) else None

    for idx, item in enumerate(day.meals):
        if item.name == meal and item.meal_type.strip().lower() == kind:
            return idx
    return None


def toggle_meal(
    progress: NutritionProgress,
    plan: NutritionPlan,
    week_index: int,
    day_of_week: str,
    meal_type: str,
    meal: int | str,
) -> NutritionProgress:
    """Flip one meal's completed flag and recompute the day's logged totals.

    Args:
        progress: Current nutrition progress
        plan: The nutrition plan the progress was projected from
        week_index: Week containing the meal
        day_of_week: Weekday name (any casing)
        meal_type: Meal type; snack types switch identity to position
        meal: Position among the day's snacks, or meal name

    Returns:
        Updated progress, or the input unchanged when the target is missing
    """
    week = _week(progress.weekly_meal_progress, week_index)
    if week is None:
        logger.warning("Toggle meal ignored: no such week", week_index=week_index)
        return progress

    day_idx = _day_position(week, day_of_week)
    if day_idx is None:
        logger.warning("Toggle meal ignored: no such day", week_index=week_index, day_of_week=day_of_week)
        return progress

    day = week[day_idx]
    meal_idx = _meal_position(day, meal_type, meal)
    if meal_idx is None:
        logger.warning(
            "Toggle meal ignored: no such meal",
            week_index=week_index,
            day_of_week=day_of_week,
            meal_type=meal_type,
            meal=meal,
        )
        return progress

    plan_day = None
    if week_index < plan.week_count:
        plan_day = plan.multi_week_meal_plans[week_index].day(day.weekday)

    target = day.meals[meal_idx]
    meals = _replace(day.meals, meal_idx, target.model_copy(update={"completed": not target.completed}))
    updated_day = day.model_copy(update={"meals": meals, **logged_totals(meals, plan_day)})
    updated = progress.model_copy(
        update={"weekly_meal_progress": _replace(progress.weekly_meal_progress, week_index, _replace(week, day_idx, updated_day))}
    )
    logger.debug(
        "Toggled meal",
        week_index=week_index,
        day_of_week=day.day_of_week,
        meal=target.name,
        completed=not target.completed,
        calories_logged=updated_day.daily_total_calories_logged,
    )
    return updated

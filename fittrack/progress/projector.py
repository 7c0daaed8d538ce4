"""Progress Projector.

Derives a Progress document from a committed Plan. When the previous
Progress is supplied, an item keeps its completed flag only if an entry
exists at the same week index, the same weekday, the same position and with
the same name (and the same mealType for meals). Everything else starts
incomplete.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from loguru import logger

from fittrack.plans.types import DaySchedule, MealItem, NutritionPlan, WeeklyMealPlan, WorkoutPlan
from fittrack.progress.aggregates import logged_totals
from fittrack.progress.types import (
    DayMealProgress,
    DayProgress,
    ExerciseProgress,
    MealProgress,
    NutritionProgress,
    WorkoutDetailsProgress,
    WorkoutProgress,
)

ItemT = TypeVar("ItemT", ExerciseProgress, MealProgress)


def _carried(previous: Sequence[ItemT], position: int, same_item: Callable[[ItemT], bool]) -> bool:
    if position >= len(previous):
        return False
    prior = previous[position]
    return same_item(prior) and prior.completed


def _same_exercise(name: str) -> Callable[[ExerciseProgress], bool]:
    return lambda prior: prior.name == name


def _project_workout_day(day: DaySchedule, previous: DayProgress | None) -> DayProgress:
    if day.workout_details is None:
        return DayProgress(day_of_week=day.day_of_week, is_rest_day=day.is_rest_day, workout_details=None)

    prior_exercises: list[ExerciseProgress] = []
    if previous is not None and previous.workout_details is not None:
        prior_exercises = previous.workout_details.exercises

    exercises = [
        ExerciseProgress(
            **exercise.model_dump(),
            completed=_carried(prior_exercises, position, _same_exercise(exercise.name)),
        )
        for position, exercise in enumerate(day.workout_details.exercises)
    ]
    details = day.workout_details
    return DayProgress(
        day_of_week=day.day_of_week,
        is_rest_day=day.is_rest_day,
        workout_details=WorkoutDetailsProgress(
            workout_name=details.workout_name,
            warm_up=details.warm_up,
            cool_down=details.cool_down,
            exercises=exercises,
        ),
    )


def project_workout_week(
    week: Sequence[DaySchedule],
    previous_week: Sequence[DayProgress] | None = None,
) -> list[DayProgress]:
    """Project one plan week, carrying completion from the matching previous week."""
    previous_by_day = {day.weekday: day for day in previous_week or []}
    return [_project_workout_day(day, previous_by_day.get(day.weekday)) for day in week]


def project_workout_progress(plan: WorkoutPlan, previous: WorkoutProgress | None = None) -> WorkoutProgress:
    """Project a workout plan into its progress document.

    Args:
        plan: Validated workout plan
        previous: Progress to carry completion from, if any

    Returns:
        WorkoutProgress with the same shape as the plan
    """
    prior_weeks = previous.weekly_schedule if previous is not None else []
    weeks = [
        project_workout_week(week, prior_weeks[idx] if idx < len(prior_weeks) else None)
        for idx, week in enumerate(plan.multi_week_schedules)
    ]
    progress = WorkoutProgress(weekly_schedule=weeks, current_week_index=plan.current_week_index)
    logger.debug(
        "Projected workout progress",
        weeks=len(weeks),
        total_workouts=progress.total_workouts,
        completed_workouts=progress.completed_workouts,
    )
    return progress


def _same_meal(meal: MealItem) -> Callable[[MealProgress], bool]:
    return lambda prior: prior.name == meal.name and prior.meal_type == meal.meal_type


def project_nutrition_week(
    week: WeeklyMealPlan,
    previous_week: Sequence[DayMealProgress] | None = None,
) -> list[DayMealProgress]:
    """Project one plan week into seven capitalized progress days, Monday-first."""
    previous_by_day = {day.weekday: day for day in previous_week or []}
    days: list[DayMealProgress] = []
    for weekday, plan_day in week.days():
        previous = previous_by_day.get(weekday)
        prior_meals = previous.meals if previous is not None else []
        meals = [
            MealProgress(
                meal_type=meal.meal_type,
                name=meal.name,
                completed=_carried(prior_meals, position, _same_meal(meal)),
                original_calories=meal.calories,
            )
            for position, meal in enumerate(plan_day.meals)
        ]
        days.append(
            DayMealProgress(
                day_of_week=weekday.capitalize(),
                meals=meals,
                **logged_totals(meals, plan_day),
            )
        )
    return days


def project_nutrition_progress(plan: NutritionPlan, previous: NutritionProgress | None = None) -> NutritionProgress:
    """Project a nutrition plan into its progress document.

    Args:
        plan: Validated nutrition plan
        previous: Progress to carry completion from, if any

    Returns:
        NutritionProgress with logged totals recomputed from the plan
    """
    prior_weeks = previous.weekly_meal_progress if previous is not None else []
    weeks = [
        project_nutrition_week(week, prior_weeks[idx] if idx < len(prior_weeks) else None)
        for idx, week in enumerate(plan.multi_week_meal_plans)
    ]
    logger.debug("Projected nutrition progress", weeks=len(weeks))
    return NutritionProgress(weekly_meal_progress=weeks, current_week_index=plan.current_week_index)

"""Logged macro totals for a nutrition progress day.

Totals are always a full recompute from the source plan day, never an
increment, so they stay correct under repeated toggles and week switches.
"""

from collections.abc import Sequence

from fittrack.plans.types import DailyMealPlan, Macro, MealItem
from fittrack.progress.types import MealProgress


def source_meal(plan_day: DailyMealPlan | None, position: int, meal: MealProgress) -> MealItem | None:
    """Find the plan meal a progress entry tracks.

    The meal at the same position wins when its name and mealType agree, so
    repeated snack names resolve to their own macros. Otherwise the first
    meal with the same name and mealType is used.
    """
    if plan_day is None:
        return None
    if position < len(plan_day.meals):
        candidate = plan_day.meals[position]
        if candidate.name == meal.name and candidate.meal_type == meal.meal_type:
            return candidate
    for candidate in plan_day.meals:
        if candidate.name == meal.name and candidate.meal_type == meal.meal_type:
            return candidate
    return None


def logged_totals(meals: Sequence[MealProgress], plan_day: DailyMealPlan | None) -> dict[str, Macro]:
    """Sum the source macros of every completed meal.

    Args:
        meals: Progress entries for one day
        plan_day: The plan day those entries were projected from

    Returns:
        Field values for the four dailyTotal*Logged fields of DayMealProgress
    """
    calories: Macro = 0
    protein: Macro = 0
    carbs: Macro = 0
    fats: Macro = 0
    for position, meal in enumerate(meals):
        if not meal.completed:
            continue
        original = source_meal(plan_day, position, meal)
        if original is None:
            continue
        calories += original.calories
        protein += original.protein
        carbs += original.carbs
        fats += original.fats

    return {
        "daily_total_calories_logged": calories,
        "daily_total_protein_logged": protein,
        "daily_total_carbs_logged": carbs,
        "daily_total_fats_logged": fats,
    }

"""Plans module - canonical plan schema, validation and repair.

This module provides:
- Workout and nutrition plan models (camelCase on the wire)
- Validation that repairs malformed candidates instead of rejecting them
- Synthetic fallback plans and daily target calculation
"""

from fittrack.plans.repair import fallback_nutrition_plan, fallback_workout_plan
from fittrack.plans.targets import calculate_daily_targets
from fittrack.plans.types import (
    DailyMealPlan,
    DailyTargets,
    DaySchedule,
    Exercise,
    Ingredient,
    MealItem,
    NutritionPlan,
    NutritionPlanPreferences,
    WeeklyMealPlan,
    WorkoutDetails,
    WorkoutPlan,
    WorkoutPlanPreferences,
)
from fittrack.plans.validators import ValidationResult, validate_nutrition_plan, validate_plan, validate_workout_plan

__all__ = [
    "DailyMealPlan",
    "DailyTargets",
    "DaySchedule",
    "Exercise",
    "Ingredient",
    "MealItem",
    "NutritionPlan",
    "NutritionPlanPreferences",
    "ValidationResult",
    "WeeklyMealPlan",
    "WorkoutDetails",
    "WorkoutPlan",
    "WorkoutPlanPreferences",
    "calculate_daily_targets",
    "fallback_nutrition_plan",
    "fallback_workout_plan",
    "validate_nutrition_plan",
    "validate_plan",
    "validate_workout_plan",
]

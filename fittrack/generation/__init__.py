"""Generation module - produces raw plan documents for the store to validate."""

from fittrack.generation.base import (
    NutritionGenerationParams,
    PlanGenerator,
    WorkoutGenerationParams,
    nutrition_params_for_plan,
    nutrition_params_from_profile,
    workout_params_for_plan,
    workout_params_from_profile,
)
from fittrack.generation.errors import GenerationError, PlanGenerationError
from fittrack.generation.static_generator import StaticPlanGenerator

__all__ = [
    "GenerationError",
    "NutritionGenerationParams",
    "PlanGenerationError",
    "PlanGenerator",
    "StaticPlanGenerator",
    "WorkoutGenerationParams",
    "nutrition_params_for_plan",
    "nutrition_params_from_profile",
    "workout_params_for_plan",
    "workout_params_from_profile",
]

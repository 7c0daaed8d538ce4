"""Plan generator interface and parameter building.

A generator turns generation parameters into a raw plan document. Its output
is untrusted: the store runs everything it returns through the validators.

Parameters are built from the user profile with safe defaults for every
missing field. Profile body metrics are in lbs/inches; nutrition parameters
are metric because daily targets are computed in kg/cm.
"""

from typing import Any, Protocol

from pydantic import Field

from fittrack.plans.types import NutritionPlanPreferences, PlanDocument, WorkoutPlanPreferences
from fittrack.users.profile import Profile

DEFAULT_AGE = 25
DEFAULT_HEIGHT_IN = 70.0
DEFAULT_WEIGHT_LBS = 150.0
DEFAULT_TARGET_WEIGHT_LBS = 140.0
DEFAULT_GOAL_TYPE = "general_fitness"
DEFAULT_EXPERIENCE_LEVEL = "beginner"
DEFAULT_WORKOUT_DAYS = ("monday", "wednesday", "friday")
DEFAULT_SEX = "male"

KG_PER_LB = 0.45359237
CM_PER_IN = 2.54


class WorkoutGenerationParams(PlanDocument):
    goal_type: str = DEFAULT_GOAL_TYPE
    experience_level: str = DEFAULT_EXPERIENCE_LEVEL
    current_weight: float = DEFAULT_WEIGHT_LBS
    target_weight: float = DEFAULT_TARGET_WEIGHT_LBS
    age: int = DEFAULT_AGE
    sex: str = DEFAULT_SEX
    height: float = DEFAULT_HEIGHT_IN
    preferred_workout_days: list[str] = Field(default_factory=lambda: list(DEFAULT_WORKOUT_DAYS))
    workout_split: str | None = None

    def to_preferences(self) -> WorkoutPlanPreferences:
        """Plan preferences; beginners default to full body, everyone else to PPL."""
        split = self.workout_split or ("FullBody" if self.experience_level == "beginner" else "PPL")
        return WorkoutPlanPreferences(
            workout_split=split,
            goal_type=self.goal_type,
            experience_level=self.experience_level,
            preferred_days=list(self.preferred_workout_days),
        )


class NutritionGenerationParams(PlanDocument):
    goal_type: str = DEFAULT_GOAL_TYPE
    current_weight: float = round(DEFAULT_WEIGHT_LBS * KG_PER_LB, 1)
    height: float = round(DEFAULT_HEIGHT_IN * CM_PER_IN, 1)
    age: int = DEFAULT_AGE
    sex: str = DEFAULT_SEX
    activity_level: str | None = None

    def to_preferences(self) -> NutritionPlanPreferences:
        return NutritionPlanPreferences(
            current_weight=self.current_weight,
            height=self.height,
            age=self.age,
            sex=self.sex,
            goal_type=self.goal_type,
            activity_level=self.activity_level,
        )


class PlanGenerator(Protocol):
    """Produces raw, unvalidated plan documents."""

    async def generate_workout_plan(self, params: WorkoutGenerationParams) -> dict[str, Any]: ...

    async def generate_nutrition_plan(self, params: NutritionGenerationParams) -> dict[str, Any]: ...


def workout_params_from_profile(
    profile: Profile | None,
    workout_split: str | None = None,
) -> WorkoutGenerationParams:
    """Build workout generation parameters, defaulting every missing profile field."""
    profile = profile or Profile()
    return WorkoutGenerationParams(
        goal_type=profile.goal_type or DEFAULT_GOAL_TYPE,
        experience_level=profile.experience_level or DEFAULT_EXPERIENCE_LEVEL,
        current_weight=profile.current_weight or DEFAULT_WEIGHT_LBS,
        target_weight=profile.target_weight or DEFAULT_TARGET_WEIGHT_LBS,
        age=profile.age or DEFAULT_AGE,
        sex=profile.sex or DEFAULT_SEX,
        height=profile.height or DEFAULT_HEIGHT_IN,
        preferred_workout_days=profile.preferred_workout_days or list(DEFAULT_WORKOUT_DAYS),
        workout_split=workout_split,
    )


def nutrition_params_from_profile(profile: Profile | None) -> NutritionGenerationParams:
    """Build nutrition generation parameters, converting profile lbs/inches to kg/cm."""
    profile = profile or Profile()
    weight_lbs = profile.current_weight or DEFAULT_WEIGHT_LBS
    height_in = profile.height or DEFAULT_HEIGHT_IN
    return NutritionGenerationParams(
        goal_type=profile.goal_type or DEFAULT_GOAL_TYPE,
        current_weight=round(weight_lbs * KG_PER_LB, 1),
        height=round(height_in * CM_PER_IN, 1),
        age=profile.age or DEFAULT_AGE,
        sex=profile.sex or DEFAULT_SEX,
    )


def workout_params_for_plan(preferences: WorkoutPlanPreferences, profile: Profile | None) -> WorkoutGenerationParams:
    """Parameters for extending an existing plan: its own preferences win over the profile."""
    params = workout_params_from_profile(profile, workout_split=preferences.workout_split)
    overrides: dict[str, Any] = {}
    if preferences.goal_type:
        overrides["goal_type"] = preferences.goal_type
    if preferences.experience_level:
        overrides["experience_level"] = preferences.experience_level
    if preferences.preferred_days:
        overrides["preferred_workout_days"] = list(preferences.preferred_days)
    return params.model_copy(update=overrides)


def nutrition_params_for_plan(
    preferences: NutritionPlanPreferences,
    profile: Profile | None,
) -> NutritionGenerationParams:
    """Parameters for extending an existing plan: its own preferences win over the profile."""
    params = nutrition_params_from_profile(profile)
    overrides = {
        field: value
        for field, value in preferences.model_dump(exclude={"dietary_restrictions"}).items()
        if value is not None
    }
    return params.model_copy(update=overrides)

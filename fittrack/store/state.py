"""Tracker state aggregate and its hydration from persisted blobs.

The whole Plan/Progress/Weight/Profile aggregate lives in one TrackerState
owned by the store. Persisted blobs are untrusted: plans are run through the
validators, malformed progress, weight and profile entries are discarded
with a warning, and progress is always re-projected from the repaired plans
so aggregates and logged totals are recomputed from source.
"""

from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from fittrack.plans.types import NutritionPlan, WorkoutPlan
from fittrack.plans.validators import validate_nutrition_plan, validate_workout_plan
from fittrack.progress.projector import project_nutrition_progress, project_workout_progress
from fittrack.progress.types import NutritionProgress, WeightProgress, WorkoutProgress
from fittrack.users.profile import Profile


class TrackerState(BaseModel):
    """Mutable holder for one user's documents; each document is itself immutable."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    profile: Profile | None = None
    workout_plan: WorkoutPlan | None = None
    nutrition_plan: NutritionPlan | None = None
    workout_progress: WorkoutProgress | None = None
    nutrition_progress: NutritionProgress | None = None
    weight_progress: WeightProgress | None = None

    def to_document(self) -> dict[str, Any]:
        """Serialize to the persisted blob layout."""
        return self.model_dump(by_alias=True, mode="json")

    def clear(self) -> None:
        """Drop plans, progress and the weight log; the profile is kept."""
        self.workout_plan = None
        self.nutrition_plan = None
        self.workout_progress = None
        self.nutrition_progress = None
        self.weight_progress = None


def _load_entry(model: type[BaseModel], blob: dict[str, Any], key: str) -> Any:
    raw = blob.get(key)
    if raw is None:
        return None
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        logger.warning("Discarding malformed persisted entry", key=key, error_count=e.error_count())
        return None


def hydrate_state(blob: dict[str, Any] | None) -> TrackerState:
    """Rebuild tracker state from a persisted blob.

    Args:
        blob: Persisted blob ({profile, workoutPlan, ...}) or None

    Returns:
        TrackerState with repaired plans and re-projected progress
    """
    if not blob:
        return TrackerState()

    state = TrackerState(
        profile=_load_entry(Profile, blob, "profile"),
        weight_progress=_load_entry(WeightProgress, blob, "weightProgress"),
    )

    if blob.get("workoutPlan") is not None:
        state.workout_plan = validate_workout_plan(blob["workoutPlan"]).plan
        previous = _load_entry(WorkoutProgress, blob, "workoutProgress")
        state.workout_progress = project_workout_progress(state.workout_plan, previous)

    if blob.get("nutritionPlan") is not None:
        state.nutrition_plan = validate_nutrition_plan(blob["nutritionPlan"]).plan
        previous = _load_entry(NutritionProgress, blob, "nutritionProgress")
        state.nutrition_progress = project_nutrition_progress(state.nutrition_plan, previous)

    logger.debug(
        "Hydrated tracker state",
        has_profile=state.profile is not None,
        has_workout_plan=state.workout_plan is not None,
        has_nutrition_plan=state.nutrition_plan is not None,
        has_weight_log=state.weight_progress is not None,
    )
    return state

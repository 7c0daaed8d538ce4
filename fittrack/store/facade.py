"""Store Façade.

PlanStore owns one user's Plan/Progress/Weight/Profile aggregate and is the
only way to read or change it. It is constructed explicitly with its
collaborators (generator, repository, clock); there is no global instance.

Concurrency model: single-threaded asyncio. Every mutation is synchronous
except the guarded operations that await the generator (regenerate, reset,
append week). While one of those is in flight its flag is held, and any
other guarded call is rejected with False and a warning instead of
interleaving. Flags are always released in `finally`.

Failure policy:
- Malformed plans are repaired by the validators, never raised
- Generator failures are logged and replaced by a synthetic fallback plan
- Missing prerequisite state makes an operation a logged no-op
- Repository errors propagate
"""

import random
from collections.abc import Callable
from datetime import date
from typing import Any

from loguru import logger

from fittrack.config.settings import Settings, settings
from fittrack.core.logger import setup_logger
from fittrack.generation.base import (
    DEFAULT_TARGET_WEIGHT_LBS,
    NutritionGenerationParams,
    PlanGenerator,
    WorkoutGenerationParams,
    nutrition_params_for_plan,
    nutrition_params_from_profile,
    workout_params_for_plan,
    workout_params_from_profile,
)
from fittrack.generation.static_generator import StaticPlanGenerator
from fittrack.plans.repair import fallback_nutrition_plan, fallback_workout_plan
from fittrack.plans.types import (
    DaySchedule,
    NutritionPlan,
    NutritionPlanPreferences,
    WeeklyMealPlan,
    WorkoutPlan,
    WorkoutPlanPreferences,
)
from fittrack.plans.validators import ValidationResult, validate_nutrition_plan, validate_workout_plan
from fittrack.progress import expander, toggler, weight
from fittrack.progress.projector import project_nutrition_progress, project_workout_progress
from fittrack.progress.types import (
    DayMealProgress,
    DayProgress,
    NutritionProgress,
    WeightProgress,
    WorkoutProgress,
)
from fittrack.store.persistence import InMemoryStateRepository, JsonFileStateRepository, StateRepository
from fittrack.store.state import TrackerState, hydrate_state
from fittrack.users.profile import Profile, ProfileStatsUpdate


class PlanStore:
    """Single-user plan and progress store."""

    def __init__(
        self,
        generator: PlanGenerator,
        repository: StateRepository | None = None,
        *,
        state: TrackerState | None = None,
        today: Callable[[], date] = date.today,
    ):
        self._generator = generator
        self._repository = repository or InMemoryStateRepository()
        self._state = state or TrackerState()
        self._today = today
        self._viewed_week_index = 0
        if self._state.workout_plan is not None:
            self._viewed_week_index = self._state.workout_plan.current_week_index
        self._is_generating_plans = False
        self._is_resetting = False

    @classmethod
    def load(
        cls,
        generator: PlanGenerator,
        repository: StateRepository,
        *,
        today: Callable[[], date] = date.today,
    ) -> "PlanStore":
        """Create a store from the repository's persisted state.

        Plans are repaired and progress re-projected during hydration.

        Raises:
            OSError: If the repository cannot be read
        """
        state = hydrate_state(repository.load())
        store = cls(generator, repository, state=state, today=today)
        logger.info(
            "Loaded plan store",
            workout_weeks=state.workout_plan.week_count if state.workout_plan else 0,
            nutrition_weeks=state.nutrition_plan.week_count if state.nutrition_plan else 0,
        )
        return store

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def is_generating_plans(self) -> bool:
        return self._is_generating_plans

    @property
    def is_resetting(self) -> bool:
        return self._is_resetting

    @property
    def profile(self) -> Profile | None:
        return self._state.profile

    @property
    def workout_plan(self) -> WorkoutPlan | None:
        return self._state.workout_plan

    @property
    def nutrition_plan(self) -> NutritionPlan | None:
        return self._state.nutrition_plan

    @property
    def workout_progress(self) -> WorkoutProgress | None:
        return self._state.workout_progress

    @property
    def nutrition_progress(self) -> NutritionProgress | None:
        return self._state.nutrition_progress

    @property
    def weight_progress(self) -> WeightProgress | None:
        return self._state.weight_progress

    @property
    def viewed_week_index(self) -> int:
        return self._viewed_week_index

    def _week_at(self, weeks: list[Any] | None, index: int | None) -> Any:
        idx = self._viewed_week_index if index is None else index
        if weeks is None or not 0 <= idx < len(weeks):
            return None
        return weeks[idx]

    def workout_week(self, index: int | None = None) -> list[DaySchedule] | None:
        """Plan week at index (default: the viewed week), or None if absent."""
        plan = self._state.workout_plan
        return self._week_at(plan.multi_week_schedules if plan else None, index)

    def nutrition_week(self, index: int | None = None) -> WeeklyMealPlan | None:
        plan = self._state.nutrition_plan
        return self._week_at(plan.multi_week_meal_plans if plan else None, index)

    def workout_progress_week(self, index: int | None = None) -> list[DayProgress] | None:
        progress = self._state.workout_progress
        return self._week_at(progress.weekly_schedule if progress else None, index)

    def nutrition_progress_week(self, index: int | None = None) -> list[DayMealProgress] | None:
        progress = self._state.nutrition_progress
        return self._week_at(progress.weekly_meal_progress if progress else None, index)

    def snapshot(self) -> dict[str, Any]:
        """Serialized copy of the whole aggregate, in the persisted layout."""
        return self._state.to_document()

    def _persist(self) -> None:
        self._repository.save(self._state.to_document())

    # ------------------------------------------------------------------
    # Plan commits
    # ------------------------------------------------------------------

    def _workout_hints(self) -> WorkoutPlanPreferences:
        return workout_params_from_profile(self._state.profile).to_preferences()

    def _nutrition_hints(self) -> NutritionPlanPreferences:
        return nutrition_params_from_profile(self._state.profile).to_preferences()

    def _commit_workout(
        self,
        candidate: object,
        preserve_progress: bool,
        hints: WorkoutPlanPreferences,
    ) -> ValidationResult[WorkoutPlan]:
        result = validate_workout_plan(candidate, hints=hints)
        previous = self._state.workout_progress if preserve_progress else None
        self._state.workout_plan = result.plan
        self._state.workout_progress = project_workout_progress(result.plan, previous)
        self._viewed_week_index = result.plan.current_week_index
        logger.info(
            "Committed workout plan",
            plan_name=result.plan.plan_name,
            weeks=result.plan.week_count,
            repaired=result.repaired,
            preserve_progress=preserve_progress,
        )
        return result

    def _commit_nutrition(
        self,
        candidate: object,
        preserve_progress: bool,
        hints: NutritionPlanPreferences,
    ) -> ValidationResult[NutritionPlan]:
        result = validate_nutrition_plan(candidate, hints=hints)
        previous = self._state.nutrition_progress if preserve_progress else None
        self._state.nutrition_plan = result.plan
        self._state.nutrition_progress = project_nutrition_progress(result.plan, previous)
        logger.info(
            "Committed nutrition plan",
            plan_name=result.plan.plan_name,
            weeks=result.plan.week_count,
            repaired=result.repaired,
            preserve_progress=preserve_progress,
        )
        return result

    def commit_workout_plan(self, candidate: object, preserve_progress: bool = True) -> ValidationResult[WorkoutPlan]:
        """Validate, commit and project a workout plan.

        Args:
            candidate: Raw or typed workout plan
            preserve_progress: Carry completion over from the current progress

        Returns:
            The validation result for the committed plan
        """
        result = self._commit_workout(candidate, preserve_progress, self._workout_hints())
        self._persist()
        return result

    def commit_nutrition_plan(
        self,
        candidate: object,
        preserve_progress: bool = True,
    ) -> ValidationResult[NutritionPlan]:
        """Validate, commit and project a nutrition plan.

        Args:
            candidate: Raw or typed nutrition plan
            preserve_progress: Carry completion over from the current progress

        Returns:
            The validation result for the committed plan
        """
        result = self._commit_nutrition(candidate, preserve_progress, self._nutrition_hints())
        self._persist()
        return result

    # ------------------------------------------------------------------
    # Toggles
    # ------------------------------------------------------------------

    def toggle_exercise(self, week_index: int, day_of_week: str, exercise: int | str) -> bool:
        """Flip one exercise's completion. Returns False when nothing changed."""
        progress = self._state.workout_progress
        if progress is None:
            logger.warning("Toggle exercise ignored: no workout progress")
            return False

        updated = toggler.toggle_exercise(progress, week_index, day_of_week, exercise)
        if updated is progress:
            return False
        self._state.workout_progress = updated
        self._persist()
        return True

    def toggle_meal(self, week_index: int, day_of_week: str, meal_type: str, meal: int | str) -> bool:
        """Flip one meal's completion. Returns False when nothing changed."""
        progress = self._state.nutrition_progress
        plan = self._state.nutrition_plan
        if progress is None or plan is None:
            logger.warning("Toggle meal ignored: no nutrition plan or progress")
            return False

        updated = toggler.toggle_meal(progress, plan, week_index, day_of_week, meal_type, meal)
        if updated is progress:
            return False
        self._state.nutrition_progress = updated
        self._persist()
        return True

    # ------------------------------------------------------------------
    # Guarded generator operations
    # ------------------------------------------------------------------

    def _busy(self, operation: str) -> bool:
        if self._is_generating_plans or self._is_resetting:
            logger.warning(
                "Operation rejected: plan generation or reset already in progress",
                operation=operation,
                is_generating_plans=self._is_generating_plans,
                is_resetting=self._is_resetting,
            )
            return True
        return False

    async def _generate_workout_candidate(self, params: WorkoutGenerationParams) -> object:
        try:
            return await self._generator.generate_workout_plan(params)
        except Exception as e:
            logger.bind(error=str(e), error_type=type(e).__name__).error(
                "Workout plan generation failed, using fallback plan"
            )
            return fallback_workout_plan(params.to_preferences())

    async def _generate_nutrition_candidate(self, params: NutritionGenerationParams) -> object:
        try:
            return await self._generator.generate_nutrition_plan(params)
        except Exception as e:
            logger.bind(error=str(e), error_type=type(e).__name__).error(
                "Nutrition plan generation failed, using fallback plan"
            )
            return fallback_nutrition_plan(params.to_preferences())

    async def _regenerate_plans(self) -> None:
        workout_params = workout_params_from_profile(self._state.profile)
        nutrition_params = nutrition_params_from_profile(self._state.profile)

        workout_candidate = await self._generate_workout_candidate(workout_params)
        nutrition_candidate = await self._generate_nutrition_candidate(nutrition_params)

        self._commit_workout(workout_candidate, preserve_progress=False, hints=workout_params.to_preferences())
        self._commit_nutrition(nutrition_candidate, preserve_progress=False, hints=nutrition_params.to_preferences())

    async def regenerate_all(self) -> bool:
        """Replace both plans via the generator and re-project progress from scratch.

        Returns:
            False if another generation or reset is in flight
        """
        if self._busy("regenerate_all"):
            return False

        self._is_generating_plans = True
        try:
            await self._regenerate_plans()
            self._persist()
            logger.info("Regenerated all plans")
            return True
        finally:
            self._is_generating_plans = False

    async def reset_all(self) -> bool:
        """Clear plans, progress and the weight log, then start over.

        Plans are regenerated from the profile and an empty weight log is
        started with the profile's target weight as goal.

        Returns:
            False if another generation or reset is in flight
        """
        if self._busy("reset_all"):
            return False

        self._is_resetting = True
        try:
            profile = self._state.profile
            goal = profile.target_weight if profile and profile.target_weight else DEFAULT_TARGET_WEIGHT_LBS

            self._state.clear()
            self._viewed_week_index = 0
            await self._regenerate_plans()
            self._state.weight_progress = WeightProgress(dates=[], weights=[], goal=goal)
            self._persist()
            logger.info("Reset all plans and progress", goal=goal)
            return True
        finally:
            self._is_resetting = False

    async def append_workout_week(self) -> bool:
        """Generate one more workout week from the plan's preferences and append it.

        Returns:
            False if there is no plan or another generation is in flight
        """
        plan = self._state.workout_plan
        if plan is None:
            logger.warning("Append workout week ignored: no workout plan")
            return False
        if self._busy("append_workout_week"):
            return False

        self._is_generating_plans = True
        try:
            params = workout_params_for_plan(plan.preferences, self._state.profile)
            candidate = await self._generate_workout_candidate(params)
            new_week = validate_workout_plan(candidate, hints=plan.preferences).plan.multi_week_schedules[0]

            # Re-read: the plan may have been replaced while the generator ran
            plan = self._state.workout_plan
            if plan is None:
                logger.warning("Append workout week dropped: plan cleared during generation")
                return False
            plan, progress = expander.append_workout_week(plan, self._state.workout_progress, new_week)
            self._state.workout_plan = plan
            self._state.workout_progress = progress
            self._viewed_week_index = plan.current_week_index
            self._persist()
            return True
        finally:
            self._is_generating_plans = False

    async def append_nutrition_week(self) -> bool:
        """Generate one more nutrition week from the plan's preferences and append it.

        Returns:
            False if there is no plan or another generation is in flight
        """
        plan = self._state.nutrition_plan
        if plan is None:
            logger.warning("Append nutrition week ignored: no nutrition plan")
            return False
        if self._busy("append_nutrition_week"):
            return False

        self._is_generating_plans = True
        try:
            params = nutrition_params_for_plan(plan.preferences, self._state.profile)
            candidate = await self._generate_nutrition_candidate(params)
            new_week = validate_nutrition_plan(candidate, hints=plan.preferences).plan.multi_week_meal_plans[0]

            plan = self._state.nutrition_plan
            if plan is None:
                logger.warning("Append nutrition week dropped: plan cleared during generation")
                return False
            plan, progress = expander.append_nutrition_week(plan, self._state.nutrition_progress, new_week)
            self._state.nutrition_plan = plan
            self._state.nutrition_progress = progress
            self._persist()
            return True
        finally:
            self._is_generating_plans = False

    # ------------------------------------------------------------------
    # Profile, weight and navigation
    # ------------------------------------------------------------------

    def set_profile(self, profile: Profile | dict[str, Any]) -> None:
        if isinstance(profile, dict):
            profile = Profile.model_validate(profile)
        self._state.profile = profile
        self._persist()

    async def update_profile_stats(self, update: ProfileStatsUpdate | dict[str, Any]) -> bool:
        """Merge a stats update into the profile.

        Plans are regenerated when the goal type or experience level is part
        of the update.

        Returns:
            True if plans were regenerated
        """
        if isinstance(update, dict):
            update = ProfileStatsUpdate.model_validate(update)

        self._state.profile = (self._state.profile or Profile()).model_copy(update=update.changes())
        self._persist()
        logger.info("Updated profile stats", fields=sorted(update.changes()))

        if not update.requires_regeneration:
            return False
        return await self.regenerate_all()

    def log_weight(self, value: float, goal: float | None = None) -> bool:
        """Append today's weight; also records it as the profile's current weight.

        Args:
            value: Weight in lbs
            goal: Goal used if the weight log has to be started; defaults to
                the profile's target weight

        Returns:
            False if the entry was rejected
        """
        profile = self._state.profile
        if goal is None and profile is not None:
            goal = profile.target_weight

        current = self._state.weight_progress
        updated = weight.log_weight(current, value, on=self._today(), goal=goal)
        if updated is current:
            return False

        self._state.weight_progress = updated
        if profile is not None:
            self._state.profile = profile.model_copy(update={"current_weight": float(value)})
        self._persist()
        return True

    def set_goal(self, value: float) -> bool:
        current = self._state.weight_progress
        updated = weight.set_goal(current, value)
        if updated is current:
            return False
        self._state.weight_progress = updated
        self._persist()
        return True

    def set_viewed_week_index(self, index: int) -> bool:
        """Select the week returned by the *_week() readers."""
        plan = self._state.workout_plan
        if plan is None or not toggler.is_index(index) or not 0 <= index < plan.week_count:
            logger.warning(
                "Viewed week index rejected",
                index=index,
                weeks=plan.week_count if plan else 0,
            )
            return False
        self._viewed_week_index = index
        return True


def create_store(config: Settings | None = None) -> PlanStore:
    """Build a logger-configured store backed by the JSON file repository.

    Args:
        config: Settings to use; defaults to the environment-derived settings

    Returns:
        PlanStore loaded from the configured storage path
    """
    config = config or settings
    setup_logger(level=config.log_level, log_file=config.log_file, serialize=config.log_json)
    repository = JsonFileStateRepository(config.storage_path, config.storage_key)
    generator = StaticPlanGenerator(rng=random.Random(config.generator_seed))
    return PlanStore.load(generator, repository)

"""Progress document schema.

Progress mirrors a committed plan week for week and day for day, adding a
completion flag to every exercise and meal. Workout aggregates (day
completion, totals, percentage) are computed on read and never stored, so
they cannot drift from the flags they summarize. Nutrition logged totals are
stored because they depend on the source plan; every writer recomputes them
through fittrack.progress.aggregates.
"""

import math
from datetime import date

from pydantic import Field, StrictBool, computed_field, field_validator, model_validator

from fittrack.plans.types import Exercise, Macro, PlanDocument


class ExerciseProgress(Exercise):
    completed: StrictBool = False


class WorkoutDetailsProgress(PlanDocument):
    workout_name: str
    warm_up: str
    cool_down: str
    exercises: list[ExerciseProgress] = Field(default_factory=list)

    @computed_field
    @property
    def completed(self) -> bool:
        # An empty session has nothing to complete
        return bool(self.exercises) and all(exercise.completed for exercise in self.exercises)


class DayProgress(PlanDocument):
    day_of_week: str
    is_rest_day: StrictBool
    workout_details: WorkoutDetailsProgress | None = None

    @property
    def weekday(self) -> str:
        return self.day_of_week.strip().lower()


class WorkoutProgress(PlanDocument):
    """Completion state over every week of a workout plan."""

    weekly_schedule: list[list[DayProgress]]
    current_week_index: int = 0

    @computed_field
    @property
    def total_workouts(self) -> int:
        return sum(1 for week in self.weekly_schedule for day in week if not day.is_rest_day)

    @computed_field
    @property
    def completed_workouts(self) -> int:
        return sum(
            1
            for week in self.weekly_schedule
            for day in week
            if day.workout_details is not None and day.workout_details.completed
        )

    @computed_field
    @property
    def completion_percentage(self) -> int:
        if not self.total_workouts:
            return 0
        return round(100 * self.completed_workouts / self.total_workouts)


class MealProgress(PlanDocument):
    meal_type: str
    name: str
    completed: StrictBool = False
    original_calories: Macro = 0


class DayMealProgress(PlanDocument):
    day_of_week: str
    meals: list[MealProgress] = Field(default_factory=list)
    daily_total_calories_logged: Macro = 0
    daily_total_protein_logged: Macro = 0
    daily_total_carbs_logged: Macro = 0
    daily_total_fats_logged: Macro = 0

    @property
    def weekday(self) -> str:
        return self.day_of_week.strip().lower()


class NutritionProgress(PlanDocument):
    """Completion state and logged macros over every week of a nutrition plan."""

    weekly_meal_progress: list[list[DayMealProgress]]
    current_week_index: int = 0


class WeightProgress(PlanDocument):
    """Append-only weight log with an independently mutable goal.

    dates and weights are parallel arrays; entry i was logged on dates[i].
    """

    dates: list[str] = Field(default_factory=list)
    weights: list[float] = Field(default_factory=list)
    goal: float

    @field_validator("dates")
    @classmethod
    def _iso_dates(cls, v: list[str]) -> list[str]:
        for value in v:
            date.fromisoformat(value)
        return v

    @field_validator("weights")
    @classmethod
    def _finite_weights(cls, v: list[float]) -> list[float]:
        if not all(math.isfinite(weight) for weight in v):
            raise ValueError("weights must be finite numbers")
        return v

    @model_validator(mode="after")
    def _parallel_arrays(self) -> "WeightProgress":
        if len(self.dates) != len(self.weights):
            raise ValueError(f"dates ({len(self.dates)}) and weights ({len(self.weights)}) must have equal length")
        return self

    @computed_field
    @property
    def current_weight(self) -> float | None:
        return self.weights[-1] if self.weights else None

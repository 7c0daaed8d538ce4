"""Canonical plan document schema.

Plans are produced by an external generator as JSON. These models are the
structural contract every committed plan satisfies:
- Every workout week has exactly 7 days, Monday-first
- workoutDetails is present iff the day is not a rest day
- Every nutrition week has all 7 lowercase weekday keys
- Daily meal totals are the sum over the day's meals
- currentWeekIndex always points at an existing week

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, model_validator
from pydantic.alias_generators import to_camel

from fittrack.plans.constants import DAYS_PER_WEEK, WEEKDAYS

Macro = StrictInt | StrictFloat


class PlanDocument(BaseModel):
    """Base for every plan and progress entity."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_document(self) -> dict:
        """Serialize to the camelCase JSON shape."""
        return self.model_dump(by_alias=True, mode="json")


# ---------------------------------------------------------------------------
# Workout
# ---------------------------------------------------------------------------


class Exercise(PlanDocument):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(min_length=1)
    sets: StrictInt | str
    reps: str
    rest: str
    notes: str
    equipment: str | None = None
    muscle_group: str | None = None


class WorkoutDetails(PlanDocument):
    workout_name: str
    warm_up: str
    cool_down: str
    exercises: list[Exercise] = Field(min_length=1)


class DaySchedule(PlanDocument):
    day_of_week: str
    is_rest_day: StrictBool
    workout_details: WorkoutDetails | None = None

    @model_validator(mode="after")
    def _details_iff_training_day(self) -> "DaySchedule":
        if self.day_of_week.strip().lower() not in WEEKDAYS:
            raise ValueError(f"dayOfWeek must be a weekday name, got {self.day_of_week!r}")
        if self.is_rest_day and self.workout_details is not None:
            raise ValueError("rest days must not carry workoutDetails")
        if not self.is_rest_day and self.workout_details is None:
            raise ValueError("training days require workoutDetails")
        return self

    @property
    def weekday(self) -> str:
        """Normalized lowercase weekday key."""
        return self.day_of_week.strip().lower()


class WorkoutPlanPreferences(PlanDocument):
    workout_split: str | None = None
    goal_type: str | None = None
    experience_level: str | None = None
    preferred_days: list[str] = Field(default_factory=list)


class WorkoutPlan(PlanDocument):
    plan_name: str
    multi_week_schedules: list[list[DaySchedule]] = Field(min_length=1)
    current_week_index: StrictInt = 0
    preferences: WorkoutPlanPreferences = Field(default_factory=WorkoutPlanPreferences)
    summary_notes: str = ""

    @model_validator(mode="after")
    def _week_shape(self) -> "WorkoutPlan":
        for week_idx, week in enumerate(self.multi_week_schedules):
            if len(week) != DAYS_PER_WEEK:
                raise ValueError(f"week {week_idx} must have exactly {DAYS_PER_WEEK} days, got {len(week)}")
        if not 0 <= self.current_week_index < len(self.multi_week_schedules):
            raise ValueError(
                f"currentWeekIndex {self.current_week_index} out of range for {len(self.multi_week_schedules)} weeks"
            )
        return self

    @property
    def week_count(self) -> int:
        return len(self.multi_week_schedules)


# ---------------------------------------------------------------------------
# Nutrition
# ---------------------------------------------------------------------------


class Ingredient(PlanDocument):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    item: str
    qty: str
    calories: Macro | None = None
    protein: Macro | None = None
    carbs: Macro | None = None
    fats: Macro | None = None


class MealItem(PlanDocument):
    meal_type: str = Field(min_length=1)
    name: str = Field(min_length=1)
    ingredients: list[Ingredient] = Field(default_factory=list)
    calories: Macro
    protein: Macro
    carbs: Macro
    fats: Macro
    instructions: str | None = None


class DailyMealPlan(PlanDocument):
    meals: list[MealItem] = Field(min_length=1)
    daily_total_calories: Macro
    daily_total_protein: Macro
    daily_total_carbs: Macro
    daily_total_fats: Macro

    @classmethod
    def from_meals(cls, meals: list[MealItem]) -> "DailyMealPlan":
        """Build a day whose totals are the sum over its meals."""
        return cls(
            meals=meals,
            daily_total_calories=sum(meal.calories for meal in meals),
            daily_total_protein=sum(meal.protein for meal in meals),
            daily_total_carbs=sum(meal.carbs for meal in meals),
            daily_total_fats=sum(meal.fats for meal in meals),
        )


class WeeklyMealPlan(PlanDocument):
    monday: DailyMealPlan
    tuesday: DailyMealPlan
    wednesday: DailyMealPlan
    thursday: DailyMealPlan
    friday: DailyMealPlan
    saturday: DailyMealPlan
    sunday: DailyMealPlan

    def day(self, weekday: str) -> DailyMealPlan:
        """Return the day plan for a weekday name (any casing)."""
        key = weekday.strip().lower()
        if key not in WEEKDAYS:
            raise KeyError(weekday)
        return getattr(self, key)

    def days(self) -> list[tuple[str, DailyMealPlan]]:
        """Return (weekday, day plan) pairs, Monday-first."""
        return [(weekday, getattr(self, weekday)) for weekday in WEEKDAYS]


class DailyTargets(PlanDocument):
    calories: Macro
    protein_grams: Macro
    carb_grams: Macro
    fat_grams: Macro


class NutritionPlanPreferences(PlanDocument):
    current_weight: float | None = None
    height: float | None = None
    age: int | None = None
    sex: str | None = None
    goal_type: str | None = None
    activity_level: str | None = None
    dietary_restrictions: list[str] = Field(default_factory=list)


class NutritionPlan(PlanDocument):
    plan_name: str
    daily_targets: DailyTargets
    preferences: NutritionPlanPreferences = Field(default_factory=NutritionPlanPreferences)
    hydration_recommendation: str = ""
    general_tips: list[str] = Field(default_factory=list)
    multi_week_meal_plans: list[WeeklyMealPlan] = Field(min_length=1)
    current_week_index: StrictInt = 0

    @model_validator(mode="after")
    def _week_index_in_range(self) -> "NutritionPlan":
        if not 0 <= self.current_week_index < len(self.multi_week_meal_plans):
            raise ValueError(
                f"currentWeekIndex {self.current_week_index} out of range for {len(self.multi_week_meal_plans)} weeks"
            )
        return self

    @property
    def week_count(self) -> int:
        return len(self.multi_week_meal_plans)

"""Plan Validator and Repairer.

Every plan entering the store passes through here exactly once. Candidates
come from an external generator or from persisted storage and may be
malformed in arbitrary ways. Validation never raises: each entity is checked
against its schema, defects are collected and logged, and whatever cannot be
salvaged is replaced with the synthetic structure from fittrack.plans.repair.

Repair is granular:
- Whole plan: not an object, or no usable week list
- Week: not a list (workout) / not an object (nutrition)
- Day: missing, duplicated, unknown or invalid
- Item: exercises without a name and meals without type, name or numeric
  macros are dropped; missing exercise fields and ingredients are defaulted

Repairing an already valid or already repaired plan returns it unchanged.
"""

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_snake

from fittrack.plans.constants import (
    DEFAULT_COOL_DOWN,
    DEFAULT_HYDRATION,
    DEFAULT_WARM_UP,
    EXERCISE_FIELD_DEFAULTS,
    LEGACY_NUTRITION_WEEK_KEY,
    LEGACY_WORKOUT_WEEK_KEY,
    WEEKDAYS,
)
from fittrack.plans.repair import (
    fallback_meal_day,
    fallback_meal_week,
    fallback_nutrition_plan,
    fallback_workout_day,
    fallback_workout_plan,
    fallback_workout_week,
)
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

PlanKind = Literal["workout", "nutrition"]
PlanT = TypeVar("PlanT", WorkoutPlan, NutritionPlan)

_CODE_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")
_MACRO_FIELDS = ("calories", "protein", "carbs", "fats")
_DAY_TOTAL_FIELDS = (
    ("dailyTotalCalories", "daily_total_calories"),
    ("dailyTotalProtein", "daily_total_protein"),
    ("dailyTotalCarbs", "daily_total_carbs"),
    ("dailyTotalFats", "daily_total_fats"),
)


@dataclass(frozen=True)
class ValidationResult(Generic[PlanT]):
    """Outcome of validating a candidate plan.

    Attributes:
        plan: A structurally valid plan (the candidate itself or its repair)
        defects: Defects found, one entry per repair applied
        upgraded_legacy: True when a single-week legacy shape was wrapped
    """

    plan: PlanT
    defects: tuple[str, ...] = ()
    upgraded_legacy: bool = False

    @property
    def repaired(self) -> bool:
        return bool(self.defects)


# ---------------------------------------------------------------------------
# Raw document helpers
# ---------------------------------------------------------------------------


def _get(raw: dict[str, Any], alias: str) -> Any:
    """Read a field by its camelCase alias, falling back to snake_case."""
    if alias in raw:
        return raw[alias]
    return raw.get(to_snake(alias))


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _summarize(exc: ValidationError) -> str:
    parts = [f"{'.'.join(str(p) for p in err['loc']) or 'value'}: {err['msg']}" for err in exc.errors()[:3]]
    return "; ".join(parts)


def _parse_json_text(text: str) -> Any:
    """Parse generator text output, tolerating a surrounding markdown code fence."""
    match = _CODE_FENCE.search(text)
    if match:
        text = match.group(1)
    return json.loads(text)


def _as_document(candidate: object, defects: list[str]) -> dict[str, Any] | None:
    if isinstance(candidate, BaseModel):
        return candidate.model_dump(by_alias=True, mode="json")
    if isinstance(candidate, str):
        try:
            candidate = _parse_json_text(candidate)
        except json.JSONDecodeError as e:
            defects.append(f"UNPARSEABLE_JSON: {e.msg}")
            return None
    if isinstance(candidate, dict):
        return candidate
    defects.append(f"NOT_AN_OBJECT: got {type(candidate).__name__}")
    return None


def _upgrade_legacy(data: dict[str, Any], key: str, legacy_key: str, legacy_type: type) -> tuple[dict[str, Any], bool]:
    """Wrap a legacy single-week field as the sole week of the multi-week field."""
    if _get(data, key) is not None:
        return data, False
    legacy_week = _get(data, legacy_key)
    if not isinstance(legacy_week, legacy_type):
        return data, False

    upgraded = {k: v for k, v in data.items() if k not in {legacy_key, to_snake(legacy_key)}}
    upgraded[key] = [legacy_week]
    if _get(upgraded, "currentWeekIndex") is None:
        upgraded["currentWeekIndex"] = 0
    logger.info("Upgrading legacy single-week plan", legacy_key=legacy_key)
    return upgraded, True


def _week_index(raw: Any, week_count: int, defects: list[str]) -> int:
    if raw is None:
        return 0
    if isinstance(raw, int) and not isinstance(raw, bool) and 0 <= raw < week_count:
        return raw
    defects.append(f"INVALID_WEEK_INDEX: {raw!r} not in [0, {week_count}), reset to 0")
    return 0


def _finish(kind: PlanKind, plan: PlanT, defects: list[str], upgraded: bool) -> ValidationResult[PlanT]:
    if defects:
        logger.warning(
            f"{kind.capitalize()} plan failed validation, repaired",
            defect_count=len(defects),
            defects=defects[:20],
        )
    else:
        logger.debug(f"{kind.capitalize()} plan validated", upgraded_legacy=upgraded)
    return ValidationResult(plan=plan, defects=tuple(defects), upgraded_legacy=upgraded)


# ---------------------------------------------------------------------------
# Workout
# ---------------------------------------------------------------------------


def _workout_preferences(
    raw: Any,
    hints: WorkoutPlanPreferences | None,
    defects: list[str],
) -> WorkoutPlanPreferences:
    if raw is None:
        return hints or WorkoutPlanPreferences()
    try:
        return WorkoutPlanPreferences.model_validate(raw)
    except ValidationError as e:
        defects.append(f"INVALID_PREFERENCES: {_summarize(e)}")
        return hints or WorkoutPlanPreferences()


def _repair_exercise(raw: Any, where: str, defects: list[str]) -> Exercise | None:
    if not isinstance(raw, dict):
        defects.append(f"INVALID_EXERCISE {where}: not an object")
        return None
    if _text(raw.get("name")) is None:
        defects.append(f"INVALID_EXERCISE {where}: missing name")
        return None

    data = dict(raw)
    missing = [field for field in EXERCISE_FIELD_DEFAULTS if data.get(field) is None]
    for field in missing:
        data[field] = EXERCISE_FIELD_DEFAULTS[field]
    if missing:
        defects.append(f"EXERCISE_FIELDS_DEFAULTED {where}: {', '.join(missing)}")

    try:
        return Exercise.model_validate(data)
    except ValidationError as e:
        defects.append(f"INVALID_EXERCISE {where}: {_summarize(e)}")
        return None


def _repair_workout_details(raw: Any, where: str, defects: list[str]) -> WorkoutDetails | None:
    if not isinstance(raw, dict):
        defects.append(f"MISSING_WORKOUT_DETAILS {where}")
        return None

    raw_exercises = _get(raw, "exercises")
    if not isinstance(raw_exercises, list) or not raw_exercises:
        defects.append(f"MISSING_EXERCISES {where}")
        return None

    exercises: list[Exercise] = []
    for idx, raw_exercise in enumerate(raw_exercises):
        exercise = _repair_exercise(raw_exercise, f"{where} exercise={idx}", defects)
        if exercise is not None:
            exercises.append(exercise)
    if not exercises:
        defects.append(f"NO_VALID_EXERCISES {where}")
        return None

    workout_name = _text(_get(raw, "workoutName"))
    if workout_name is None:
        defects.append(f"WORKOUT_NAME_DEFAULTED {where}")
        workout_name = "Workout"

    warm_up = _get(raw, "warmUp")
    if not isinstance(warm_up, str):
        defects.append(f"WARM_UP_DEFAULTED {where}")
        warm_up = DEFAULT_WARM_UP

    cool_down = _get(raw, "coolDown")
    if not isinstance(cool_down, str):
        defects.append(f"COOL_DOWN_DEFAULTED {where}")
        cool_down = DEFAULT_COOL_DOWN

    return WorkoutDetails(
        workout_name=workout_name,
        warm_up=warm_up,
        cool_down=cool_down,
        exercises=exercises,
    )


def _weekday_of(raw_day: Any) -> str | None:
    if not isinstance(raw_day, dict):
        return None
    name = _get(raw_day, "dayOfWeek")
    if not isinstance(name, str):
        return None
    weekday = name.strip().lower()
    return weekday if weekday in WEEKDAYS else None


def _repair_workout_day(raw: dict[str, Any], where: str, defects: list[str]) -> DaySchedule | None:
    is_rest_day = _get(raw, "isRestDay")
    if not isinstance(is_rest_day, bool):
        defects.append(f"INVALID_DAY {where}: isRestDay must be a boolean")
        return None

    day_of_week = _get(raw, "dayOfWeek").strip()
    if is_rest_day:
        if _get(raw, "workoutDetails") is not None:
            defects.append(f"REST_DAY_DETAILS_DROPPED {where}")
        return DaySchedule(day_of_week=day_of_week, is_rest_day=True, workout_details=None)

    details = _repair_workout_details(_get(raw, "workoutDetails"), where, defects)
    if details is None:
        return None
    return DaySchedule(day_of_week=day_of_week, is_rest_day=False, workout_details=details)


def _repair_workout_week(
    raw: Any,
    week_idx: int,
    preferences: WorkoutPlanPreferences,
    defects: list[str],
) -> list[DaySchedule]:
    where = f"week={week_idx}"
    if not isinstance(raw, list):
        defects.append(f"INVALID_WEEK {where}: not a list")
        return fallback_workout_week(preferences)

    by_weekday: dict[str, dict[str, Any]] = {}
    seen_order: list[str] = []
    for position, raw_day in enumerate(raw):
        weekday = _weekday_of(raw_day)
        if weekday is None:
            defects.append(f"INVALID_DAY {where} position={position}: missing or unknown dayOfWeek")
            continue
        if weekday in by_weekday:
            defects.append(f"DUPLICATE_DAY {where} day={weekday}")
            continue
        by_weekday[weekday] = raw_day
        seen_order.append(weekday)

    if seen_order != [weekday for weekday in WEEKDAYS if weekday in by_weekday]:
        defects.append(f"DAYS_REORDERED {where}")

    days: list[DaySchedule] = []
    for weekday in WEEKDAYS:
        raw_day = by_weekday.get(weekday)
        day = None
        if raw_day is None:
            defects.append(f"MISSING_DAY {where} day={weekday}")
        else:
            day = _repair_workout_day(raw_day, f"{where} day={weekday}", defects)
        days.append(day or fallback_workout_day(weekday, preferences))
    return days


def validate_workout_plan(
    candidate: object,
    hints: WorkoutPlanPreferences | None = None,
) -> ValidationResult[WorkoutPlan]:
    """Validate a candidate workout plan, repairing it if necessary.

    Args:
        candidate: Anything purporting to be a workout plan (dict, JSON text,
            or an existing WorkoutPlan)
        hints: Preferences used when the candidate carries none

    Returns:
        ValidationResult holding a structurally valid WorkoutPlan
    """
    defects: list[str] = []
    data = _as_document(candidate, defects)
    if data is None:
        return _finish("workout", fallback_workout_plan(hints), defects, False)

    data, upgraded = _upgrade_legacy(data, "multiWeekSchedules", LEGACY_WORKOUT_WEEK_KEY, list)
    preferences = _workout_preferences(_get(data, "preferences"), hints, defects)

    raw_weeks = _get(data, "multiWeekSchedules")
    if not isinstance(raw_weeks, list) or not raw_weeks:
        defects.append("MISSING_WEEKS: multiWeekSchedules must be a non-empty list")
        return _finish("workout", fallback_workout_plan(preferences), defects, upgraded)

    weeks = [_repair_workout_week(raw_week, idx, preferences, defects) for idx, raw_week in enumerate(raw_weeks)]

    plan_name = _text(_get(data, "planName"))
    if plan_name is None:
        defects.append("PLAN_NAME_DEFAULTED")
        plan_name = f"{preferences.workout_split or 'General'} Workout Plan"

    summary_notes = _get(data, "summaryNotes")
    if summary_notes is not None and not isinstance(summary_notes, str):
        defects.append("INVALID_SUMMARY_NOTES")
        summary_notes = None

    plan = WorkoutPlan(
        plan_name=plan_name,
        multi_week_schedules=weeks,
        current_week_index=_week_index(_get(data, "currentWeekIndex"), len(weeks), defects),
        preferences=preferences,
        summary_notes=summary_notes or "",
    )
    return _finish("workout", plan, defects, upgraded)


# ---------------------------------------------------------------------------
# Nutrition
# ---------------------------------------------------------------------------


def _nutrition_preferences(
    raw: Any,
    hints: NutritionPlanPreferences | None,
    defects: list[str],
) -> NutritionPlanPreferences:
    if raw is None:
        return hints or NutritionPlanPreferences()
    try:
        return NutritionPlanPreferences.model_validate(raw)
    except ValidationError as e:
        defects.append(f"INVALID_PREFERENCES: {_summarize(e)}")
        return hints or NutritionPlanPreferences()


def _daily_targets(raw: Any, preferences: NutritionPlanPreferences, defects: list[str]) -> DailyTargets:
    if raw is None:
        defects.append("MISSING_DAILY_TARGETS: computed from preferences")
        return calculate_daily_targets(preferences)
    try:
        return DailyTargets.model_validate(raw)
    except ValidationError as e:
        defects.append(f"INVALID_DAILY_TARGETS: {_summarize(e)}")
        return calculate_daily_targets(preferences)


def _repair_ingredient(raw: Any, where: str, defects: list[str]) -> Ingredient | None:
    if not isinstance(raw, dict) or _text(raw.get("item")) is None:
        defects.append(f"INVALID_INGREDIENT {where}: missing item")
        return None

    data = dict(raw)
    if data.get("qty") is None:
        defects.append(f"INGREDIENT_QTY_DEFAULTED {where}")
        data["qty"] = "1 serving"

    try:
        return Ingredient.model_validate(data)
    except ValidationError as e:
        defects.append(f"INVALID_INGREDIENT {where}: {_summarize(e)}")
        return None


def _repair_meal(raw: Any, where: str, defects: list[str]) -> MealItem | None:
    if not isinstance(raw, dict):
        defects.append(f"INVALID_MEAL {where}: not an object")
        return None

    meal_type = _text(_get(raw, "mealType"))
    name = _text(raw.get("name"))
    if meal_type is None or name is None:
        defects.append(f"INVALID_MEAL {where}: missing mealType or name")
        return None

    non_numeric = [field for field in _MACRO_FIELDS if not _is_number(raw.get(field))]
    if non_numeric:
        defects.append(f"INVALID_MEAL {where}: non-numeric {', '.join(non_numeric)}")
        return None

    raw_ingredients = raw.get("ingredients")
    ingredients: list[Ingredient] = []
    if isinstance(raw_ingredients, list):
        for idx, raw_ingredient in enumerate(raw_ingredients):
            ingredient = _repair_ingredient(raw_ingredient, f"{where} ingredient={idx}", defects)
            if ingredient is not None:
                ingredients.append(ingredient)
    else:
        defects.append(f"INGREDIENTS_DEFAULTED {where}")

    instructions = raw.get("instructions")
    if instructions is not None and not isinstance(instructions, str):
        defects.append(f"INVALID_INSTRUCTIONS {where}")
        instructions = None

    return MealItem(
        meal_type=meal_type,
        name=name,
        ingredients=ingredients,
        calories=raw["calories"],
        protein=raw["protein"],
        carbs=raw["carbs"],
        fats=raw["fats"],
        instructions=instructions,
    )


def _repair_meal_day(raw: Any, where: str, defects: list[str]) -> DailyMealPlan | None:
    if not isinstance(raw, dict):
        defects.append(f"INVALID_DAY {where}: not an object")
        return None

    raw_meals = raw.get("meals")
    if not isinstance(raw_meals, list) or not raw_meals:
        defects.append(f"EMPTY_MEALS {where}")
        return None

    meals: list[MealItem] = []
    for idx, raw_meal in enumerate(raw_meals):
        meal = _repair_meal(raw_meal, f"{where} meal={idx}", defects)
        if meal is not None:
            meals.append(meal)
    if not meals:
        defects.append(f"NO_VALID_MEALS {where}")
        return None

    day = DailyMealPlan.from_meals(meals)
    for alias, field in _DAY_TOTAL_FIELDS:
        stated = _get(raw, alias)
        if not _is_number(stated) or not math.isclose(stated, getattr(day, field), abs_tol=1e-6):
            defects.append(f"TOTALS_RECOMPUTED {where}")
            break
    return day


def _repair_meal_week(
    raw: Any,
    week_idx: int,
    targets: DailyTargets,
    defects: list[str],
) -> WeeklyMealPlan:
    where = f"week={week_idx}"
    if not isinstance(raw, dict):
        defects.append(f"INVALID_WEEK {where}: not an object")
        return fallback_meal_week(targets)

    days: dict[str, DailyMealPlan] = {}
    for weekday in WEEKDAYS:
        raw_day = raw.get(weekday)
        day = None
        if raw_day is None:
            defects.append(f"MISSING_DAY {where} day={weekday}")
        else:
            day = _repair_meal_day(raw_day, f"{where} day={weekday}", defects)
        days[weekday] = day or fallback_meal_day(targets)
    return WeeklyMealPlan(**days)


def validate_nutrition_plan(
    candidate: object,
    hints: NutritionPlanPreferences | None = None,
) -> ValidationResult[NutritionPlan]:
    """Validate a candidate nutrition plan, repairing it if necessary.

    Args:
        candidate: Anything purporting to be a nutrition plan (dict, JSON
            text, or an existing NutritionPlan)
        hints: Body metrics and goal used when the candidate carries none

    Returns:
        ValidationResult holding a structurally valid NutritionPlan
    """
    defects: list[str] = []
    data = _as_document(candidate, defects)
    if data is None:
        return _finish("nutrition", fallback_nutrition_plan(hints), defects, False)

    data, upgraded = _upgrade_legacy(data, "multiWeekMealPlans", LEGACY_NUTRITION_WEEK_KEY, dict)
    preferences = _nutrition_preferences(_get(data, "preferences"), hints, defects)

    raw_weeks = _get(data, "multiWeekMealPlans")
    if not isinstance(raw_weeks, list) or not raw_weeks:
        defects.append("MISSING_WEEKS: multiWeekMealPlans must be a non-empty list")
        return _finish("nutrition", fallback_nutrition_plan(preferences), defects, upgraded)

    targets = _daily_targets(_get(data, "dailyTargets"), preferences, defects)
    weeks = [_repair_meal_week(raw_week, idx, targets, defects) for idx, raw_week in enumerate(raw_weeks)]

    plan_name = _text(_get(data, "planName"))
    if plan_name is None:
        defects.append("PLAN_NAME_DEFAULTED")
        plan_name = "Standard Nutrition Plan"

    hydration = _get(data, "hydrationRecommendation")
    if hydration is not None and not isinstance(hydration, str):
        defects.append("INVALID_HYDRATION_RECOMMENDATION")
        hydration = None

    general_tips = _get(data, "generalTips")
    if general_tips is None:
        general_tips = []
    elif not isinstance(general_tips, list) or not all(isinstance(tip, str) for tip in general_tips):
        defects.append("INVALID_GENERAL_TIPS")
        general_tips = [tip for tip in general_tips if isinstance(tip, str)] if isinstance(general_tips, list) else []

    plan = NutritionPlan(
        plan_name=plan_name,
        daily_targets=targets,
        preferences=preferences,
        hydration_recommendation=hydration or DEFAULT_HYDRATION,
        general_tips=general_tips,
        multi_week_meal_plans=weeks,
        current_week_index=_week_index(_get(data, "currentWeekIndex"), len(weeks), defects),
    )
    return _finish("nutrition", plan, defects, upgraded)


def validate_plan(kind: PlanKind, candidate: object) -> ValidationResult:
    """Validate a candidate plan of the given kind.

    Raises:
        ValueError: If kind is not "workout" or "nutrition"
    """
    if kind == "workout":
        return validate_workout_plan(candidate)
    if kind == "nutrition":
        return validate_nutrition_plan(candidate)
    raise ValueError(f"Unknown plan kind: {kind}")

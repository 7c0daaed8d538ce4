"""Tests for plan validation and repair.

Tests enforce that:
- Valid plans pass through untouched
- Malformed plans are repaired, never raised
- Repair is granular (exercise, meal, day, week, whole plan)
- Legacy single-week shapes are upgraded without counting as defects
- Repair is idempotent
"""

import json

import pytest

from fittrack.plans.constants import WEEKDAYS
from fittrack.plans.types import NutritionPlan, WorkoutPlan
from fittrack.plans.validators import validate_nutrition_plan, validate_plan, validate_workout_plan


def _has_defect(result, prefix: str) -> bool:
    return any(defect.startswith(prefix) for defect in result.defects)


# ---------------------------------------------------------------------------
# Workout
# ---------------------------------------------------------------------------


def test_valid_workout_plan_is_not_repaired(raw_workout_plan):
    result = validate_workout_plan(raw_workout_plan)

    assert not result.repaired
    assert result.defects == ()
    assert not result.upgraded_legacy
    assert isinstance(result.plan, WorkoutPlan)
    assert result.plan.plan_name == "Strength Base"
    assert [day.weekday for day in result.plan.multi_week_schedules[0]] == list(WEEKDAYS)


def test_typed_plan_round_trips_without_defects(raw_workout_plan):
    plan = validate_workout_plan(raw_workout_plan).plan

    result = validate_workout_plan(plan)

    assert not result.repaired
    assert result.plan == plan


def test_legacy_weekly_schedule_is_upgraded(raw_workout_plan):
    raw_workout_plan["weeklySchedule"] = raw_workout_plan.pop("multiWeekSchedules")[0]
    del raw_workout_plan["currentWeekIndex"]

    result = validate_workout_plan(raw_workout_plan)

    assert result.upgraded_legacy
    assert not result.repaired
    assert result.plan.week_count == 1
    assert result.plan.current_week_index == 0


@pytest.mark.parametrize("candidate", [None, 42, ["not", "a", "plan"]])
def test_non_object_candidate_gets_fallback_plan(candidate):
    result = validate_workout_plan(candidate)

    assert result.repaired
    assert _has_defect(result, "NOT_AN_OBJECT")
    assert result.plan.week_count == 1
    assert len(result.plan.multi_week_schedules[0]) == 7


def test_json_text_in_code_fence_is_parsed(raw_workout_plan):
    text = f"Here is your plan:\n```json\n{json.dumps(raw_workout_plan)}\n```"

    result = validate_workout_plan(text)

    assert not result.repaired
    assert result.plan.plan_name == "Strength Base"


def test_unparseable_text_gets_fallback_plan():
    result = validate_workout_plan("{not json")

    assert _has_defect(result, "UNPARSEABLE_JSON")
    assert result.plan.plan_name == "Default Workout Plan"


def test_empty_week_list_falls_back_with_candidate_preferences(raw_workout_plan):
    raw_workout_plan["multiWeekSchedules"] = []

    result = validate_workout_plan(raw_workout_plan)

    assert _has_defect(result, "MISSING_WEEKS")
    assert result.plan.preferences.workout_split == "PPL"


def test_missing_day_is_synthesized(raw_workout_plan):
    raw_workout_plan["multiWeekSchedules"][0] = raw_workout_plan["multiWeekSchedules"][0][:6]

    result = validate_workout_plan(raw_workout_plan)

    week = result.plan.multi_week_schedules[0]
    assert "MISSING_DAY week=0 day=sunday" in result.defects
    assert len(week) == 7
    assert week[6].weekday == "sunday"
    # Sunday is outside the default Monday-Friday training days
    assert week[6].is_rest_day


def test_days_are_reordered_monday_first(raw_workout_plan):
    raw_workout_plan["multiWeekSchedules"][0].reverse()

    result = validate_workout_plan(raw_workout_plan)

    assert "DAYS_REORDERED week=0" in result.defects
    assert [day.weekday for day in result.plan.multi_week_schedules[0]] == list(WEEKDAYS)
    assert result.plan.multi_week_schedules[0][1].workout_details.workout_name == "Tuesday Session"


def test_duplicate_day_keeps_first_occurrence(raw_workout_plan):
    week = raw_workout_plan["multiWeekSchedules"][0]
    duplicate = {"dayOfWeek": "tuesday", "isRestDay": True, "workoutDetails": None}
    week.append(duplicate)

    result = validate_workout_plan(raw_workout_plan)

    assert "DUPLICATE_DAY week=0 day=tuesday" in result.defects
    tuesday = result.plan.multi_week_schedules[0][1]
    assert not tuesday.is_rest_day
    assert len(tuesday.workout_details.exercises) == 3


def test_rest_day_details_are_dropped(raw_workout_plan):
    monday = raw_workout_plan["multiWeekSchedules"][0][0]
    monday["workoutDetails"] = raw_workout_plan["multiWeekSchedules"][0][1]["workoutDetails"]

    result = validate_workout_plan(raw_workout_plan)

    assert "REST_DAY_DETAILS_DROPPED week=0 day=monday" in result.defects
    assert result.plan.multi_week_schedules[0][0].workout_details is None


def test_missing_exercise_fields_are_defaulted(raw_workout_plan):
    exercise = raw_workout_plan["multiWeekSchedules"][0][1]["workoutDetails"]["exercises"][1]
    del exercise["sets"]
    del exercise["notes"]

    result = validate_workout_plan(raw_workout_plan)

    repaired = result.plan.multi_week_schedules[0][1].workout_details.exercises[1]
    assert _has_defect(result, "EXERCISE_FIELDS_DEFAULTED week=0 day=tuesday exercise=1")
    assert repaired.sets == 3
    assert repaired.notes == ""
    assert repaired.name == "Bench Press"


def test_exercise_without_name_is_dropped(raw_workout_plan):
    exercises = raw_workout_plan["multiWeekSchedules"][0][1]["workoutDetails"]["exercises"]
    exercises[0]["name"] = "   "

    result = validate_workout_plan(raw_workout_plan)

    names = [ex.name for ex in result.plan.multi_week_schedules[0][1].workout_details.exercises]
    assert _has_defect(result, "INVALID_EXERCISE week=0 day=tuesday exercise=0")
    assert names == ["Bench Press", "Barbell Row"]


def test_training_day_without_valid_exercises_is_replaced(raw_workout_plan):
    raw_workout_plan["multiWeekSchedules"][0][1]["workoutDetails"]["exercises"] = [{"sets": 3}]
    raw_workout_plan["preferences"]["preferredDays"] = []

    result = validate_workout_plan(raw_workout_plan)

    tuesday = result.plan.multi_week_schedules[0][1]
    assert _has_defect(result, "NO_VALID_EXERCISES week=0 day=tuesday")
    assert not tuesday.is_rest_day
    assert tuesday.workout_details.workout_name == "Default Lower Body Workout"


def test_non_boolean_rest_flag_replaces_day(raw_workout_plan):
    raw_workout_plan["multiWeekSchedules"][0][2]["isRestDay"] = "no"

    result = validate_workout_plan(raw_workout_plan)

    assert _has_defect(result, "INVALID_DAY week=0 day=wednesday")
    assert result.plan.multi_week_schedules[0][2].day_of_week == "wednesday"


def test_week_that_is_not_a_list_is_replaced(raw_workout_plan):
    raw_workout_plan["multiWeekSchedules"].append({"monday": "push"})

    result = validate_workout_plan(raw_workout_plan)

    assert "INVALID_WEEK week=1: not a list" in result.defects
    assert result.plan.week_count == 2
    assert len(result.plan.multi_week_schedules[1]) == 7


@pytest.mark.parametrize("index", [5, -1, "0", True])
def test_invalid_week_index_resets_to_zero(raw_workout_plan, index):
    raw_workout_plan["currentWeekIndex"] = index

    result = validate_workout_plan(raw_workout_plan)

    assert _has_defect(result, "INVALID_WEEK_INDEX")
    assert result.plan.current_week_index == 0


def test_missing_plan_name_is_derived(raw_workout_plan):
    del raw_workout_plan["planName"]

    result = validate_workout_plan(raw_workout_plan)

    assert "PLAN_NAME_DEFAULTED" in result.defects
    assert result.plan.plan_name == "PPL Workout Plan"


def test_workout_repair_is_idempotent(raw_workout_plan):
    week = raw_workout_plan["multiWeekSchedules"][0]
    week.reverse()
    week.pop(0)
    week[2]["workoutDetails"]["exercises"][0].pop("reps")
    raw_workout_plan["currentWeekIndex"] = 9

    first = validate_workout_plan(raw_workout_plan)
    second = validate_workout_plan(first.plan.to_document())

    assert first.repaired
    assert not second.repaired
    assert second.plan == first.plan


# ---------------------------------------------------------------------------
# Nutrition
# ---------------------------------------------------------------------------


def test_valid_nutrition_plan_is_not_repaired(raw_nutrition_plan):
    result = validate_nutrition_plan(raw_nutrition_plan)

    assert not result.repaired
    assert isinstance(result.plan, NutritionPlan)
    assert result.plan.multi_week_meal_plans[0].day("Friday").daily_total_calories == 2030


def test_missing_sunday_gets_default_meals(raw_nutrition_plan):
    del raw_nutrition_plan["multiWeekMealPlans"][0]["sunday"]

    result = validate_nutrition_plan(raw_nutrition_plan)

    sunday = result.plan.multi_week_meal_plans[0].sunday
    assert "MISSING_DAY week=0 day=sunday" in result.defects
    assert len(sunday.meals) >= 1
    assert sunday.daily_total_calories == sum(meal.calories for meal in sunday.meals)


def test_meal_with_non_numeric_macros_is_dropped(raw_nutrition_plan):
    monday = raw_nutrition_plan["multiWeekMealPlans"][0]["monday"]
    monday["meals"][1]["calories"] = "600"

    result = validate_nutrition_plan(raw_nutrition_plan)

    day = result.plan.multi_week_meal_plans[0].monday
    assert _has_defect(result, "INVALID_MEAL week=0 day=monday meal=1")
    assert "TOTALS_RECOMPUTED week=0 day=monday" in result.defects
    assert [meal.name for meal in day.meals] == ["Oatmeal", "Salmon Plate", "Almonds", "Protein Bar"]
    assert day.daily_total_calories == 1430


def test_disagreeing_day_totals_are_recomputed(raw_nutrition_plan):
    raw_nutrition_plan["multiWeekMealPlans"][0]["tuesday"]["dailyTotalProtein"] = 1

    result = validate_nutrition_plan(raw_nutrition_plan)

    assert "TOTALS_RECOMPUTED week=0 day=tuesday" in result.defects
    assert result.plan.multi_week_meal_plans[0].tuesday.daily_total_protein == 131


def test_missing_ingredients_default_to_empty(raw_nutrition_plan):
    del raw_nutrition_plan["multiWeekMealPlans"][0]["wednesday"]["meals"][0]["ingredients"]

    result = validate_nutrition_plan(raw_nutrition_plan)

    assert "INGREDIENTS_DEFAULTED week=0 day=wednesday meal=0" in result.defects
    assert result.plan.multi_week_meal_plans[0].wednesday.meals[0].ingredients == []


def test_invalid_ingredient_entries_are_dropped(raw_nutrition_plan):
    meal = raw_nutrition_plan["multiWeekMealPlans"][0]["thursday"]["meals"][0]
    meal["ingredients"] = [{"qty": "1 cup"}, {"item": "Oats", "qty": "1/2 cup"}, "milk"]

    result = validate_nutrition_plan(raw_nutrition_plan)

    ingredients = result.plan.multi_week_meal_plans[0].thursday.meals[0].ingredients
    assert [ingredient.item for ingredient in ingredients] == ["Oats"]


def test_missing_daily_targets_are_computed_from_preferences(raw_nutrition_plan):
    del raw_nutrition_plan["dailyTargets"]

    result = validate_nutrition_plan(raw_nutrition_plan)

    targets = result.plan.daily_targets
    assert _has_defect(result, "MISSING_DAILY_TARGETS")
    assert targets.calories == 3159
    assert targets.protein_grams == 141
    assert targets.fat_grams == 88
    assert targets.carb_grams == 451


def test_legacy_weekly_meal_plan_is_upgraded(raw_nutrition_plan):
    raw_nutrition_plan["weeklyMealPlan"] = raw_nutrition_plan.pop("multiWeekMealPlans")[0]

    result = validate_nutrition_plan(raw_nutrition_plan)

    assert result.upgraded_legacy
    assert not result.repaired
    assert result.plan.week_count == 1


def test_empty_meal_weeks_fall_back_to_synthetic_plan(raw_nutrition_plan):
    raw_nutrition_plan["multiWeekMealPlans"] = []

    result = validate_nutrition_plan(raw_nutrition_plan)

    assert _has_defect(result, "MISSING_WEEKS")
    assert result.plan.week_count == 1
    assert all(day.meals for _, day in result.plan.multi_week_meal_plans[0].days())


def test_nutrition_repair_is_idempotent(raw_nutrition_plan):
    week = raw_nutrition_plan["multiWeekMealPlans"][0]
    del week["sunday"]
    week["monday"]["meals"][0]["protein"] = None
    week["friday"]["meals"] = []
    raw_nutrition_plan["dailyTargets"] = {"calories": "lots"}

    first = validate_nutrition_plan(raw_nutrition_plan)
    second = validate_nutrition_plan(first.plan.to_document())

    assert first.repaired
    assert not second.repaired
    assert second.plan == first.plan


def test_validate_plan_dispatches_on_kind(raw_workout_plan, raw_nutrition_plan):
    assert isinstance(validate_plan("workout", raw_workout_plan).plan, WorkoutPlan)
    assert isinstance(validate_plan("nutrition", raw_nutrition_plan).plan, NutritionPlan)


def test_validate_plan_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown plan kind"):
        validate_plan("sleep", {})

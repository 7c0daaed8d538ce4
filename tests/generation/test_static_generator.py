"""Tests for the static template generator and generation parameters."""

import random

import pytest

from fittrack.generation.base import (
    NutritionGenerationParams,
    WorkoutGenerationParams,
    nutrition_params_for_plan,
    nutrition_params_from_profile,
    workout_params_for_plan,
    workout_params_from_profile,
)
from fittrack.generation.errors import GenerationError, PlanGenerationError
from fittrack.generation.static_generator import (
    MUSCLE_GAIN_NOTE,
    WEIGHT_LOSS_NOTE,
    StaticPlanGenerator,
    adjust_exercise_for_goal,
    weekly_sequence,
)
from fittrack.plans.types import NutritionPlanPreferences, WorkoutPlanPreferences
from fittrack.plans.validators import validate_nutrition_plan, validate_workout_plan
from fittrack.users.profile import Profile


@pytest.mark.asyncio
async def test_static_workout_plan_validates_cleanly(static_generator):
    raw = await static_generator.generate_workout_plan(WorkoutGenerationParams(experience_level="intermediate"))

    result = validate_workout_plan(raw)

    assert result.defects == ()
    assert result.plan.preferences.workout_split == "PPL"
    assert result.plan.plan_name == "PPL Plan (general_fitness)"
    assert [day.is_rest_day for day in result.plan.multi_week_schedules[0]] == [
        False,
        False,
        False,
        True,
        False,
        False,
        False,
    ]


@pytest.mark.asyncio
async def test_static_nutrition_plan_validates_cleanly(static_generator):
    raw = await static_generator.generate_nutrition_plan(NutritionGenerationParams(goal_type="weight_loss"))

    result = validate_nutrition_plan(raw)

    assert result.defects == ()
    assert result.plan.plan_name == "Weight loss Nutrition Plan"
    assert result.plan.week_count == 1


def test_beginners_train_full_body_on_preferred_days(static_generator):
    params = WorkoutGenerationParams(preferred_workout_days=["Tuesday", "thursday"])

    plan = validate_workout_plan(static_generator.build_workout_plan(params)).plan

    week = plan.multi_week_schedules[0]
    assert [day.weekday for day in week if not day.is_rest_day] == ["tuesday", "thursday"]
    assert week[1].workout_details.workout_name == "Full Body Workout A - Beginner"
    assert week[3].workout_details.workout_name == "Full Body Workout B - Beginner"


def test_weekly_sequence():
    assert weekly_sequence("PPL", ["monday"]) == ("push", "pull", "legs", "rest", "push", "pull", "legs")
    assert weekly_sequence("UpperLower", []) == weekly_sequence("FullBody", [])
    assert weekly_sequence(None, ["someday"]).count("fullBody") == 3
    assert weekly_sequence("FullBody", ["sunday"]) == ("rest",) * 6 + ("fullBody",)


def test_weight_loss_adds_reps_and_cardio_note():
    exercise = adjust_exercise_for_goal({"name": "Squat", "reps": "8-10", "notes": "Brace."}, "weight_loss")

    assert exercise["reps"] == "10-12"
    assert exercise["notes"] == f"Brace. {WEIGHT_LOSS_NOTE}"
    assert exercise["sets"] == 3
    assert exercise["equipment"] == "Bodyweight"


def test_muscle_gain_raises_low_rep_ranges():
    exercise = adjust_exercise_for_goal({"name": "Deadlift", "sets": 5, "reps": "3-5"}, "muscle_gain")

    assert exercise["reps"] == "6-10"
    assert exercise["notes"] == MUSCLE_GAIN_NOTE
    assert exercise["sets"] == 5


def test_non_numeric_reps_are_left_alone():
    exercise = adjust_exercise_for_goal({"name": "Plank", "reps": "30-60 seconds hold"}, "weight_loss")

    assert exercise["reps"] == "30-60 seconds hold"


def test_daily_meals_include_two_distinct_snacks(static_generator):
    plan = validate_nutrition_plan(static_generator.build_nutrition_plan(NutritionGenerationParams())).plan

    for _, day in plan.multi_week_meal_plans[0].days():
        snacks = [meal.name for meal in day.meals if meal.meal_type == "Snack"]
        assert len(snacks) == 2
        assert len(set(snacks)) == 2


def test_same_seed_builds_same_plan():
    params = NutritionGenerationParams()

    first = StaticPlanGenerator(rng=random.Random(3)).build_nutrition_plan(params)
    second = StaticPlanGenerator(rng=random.Random(3)).build_nutrition_plan(params)

    assert first == second


def test_empty_template_category_raises():
    generator = StaticPlanGenerator(workout_library={"push": [], "pull": [], "legs": []})

    with pytest.raises(PlanGenerationError, match="push"):
        generator.build_workout_plan(WorkoutGenerationParams(workout_split="PPL"))


def test_plan_generation_error_is_a_generation_error():
    assert issubclass(PlanGenerationError, GenerationError)


def test_params_default_every_missing_profile_field():
    params = workout_params_from_profile(None)

    assert params.goal_type == "general_fitness"
    assert params.experience_level == "beginner"
    assert params.preferred_workout_days == ["monday", "wednesday", "friday"]
    assert params.to_preferences().workout_split == "FullBody"


def test_nutrition_params_are_metric():
    params = nutrition_params_from_profile(Profile(current_weight=200, height=72, age=40, sex="female"))

    assert params.current_weight == 90.7
    assert params.height == 182.9
    assert params.age == 40
    assert params.sex == "female"


def test_plan_preferences_override_profile():
    profile = Profile(goal_type="weight_loss", experience_level="beginner")
    preferences = WorkoutPlanPreferences(workout_split="PPL", experience_level="advanced", preferred_days=["monday"])

    params = workout_params_for_plan(preferences, profile)

    assert params.goal_type == "weight_loss"
    assert params.experience_level == "advanced"
    assert params.workout_split == "PPL"
    assert params.preferred_workout_days == ["monday"]


def test_nutrition_plan_preferences_override_profile():
    preferences = NutritionPlanPreferences(current_weight=70, goal_type="muscle_gain")

    params = nutrition_params_for_plan(preferences, Profile(current_weight=200))

    assert params.current_weight == 70
    assert params.goal_type == "muscle_gain"
    assert params.height == 177.8

"""Tests for appending a week to a plan and its progress."""

import pytest

from fittrack.progress.expander import append_nutrition_week, append_workout_week
from fittrack.progress.projector import project_nutrition_progress, project_workout_progress
from fittrack.progress.toggler import toggle_exercise, toggle_meal


def test_append_workout_week_preserves_prior_weeks(workout_plan):
    progress = toggle_exercise(project_workout_progress(workout_plan), 0, "Tuesday", 0)
    new_week = workout_plan.multi_week_schedules[0]

    plan, updated = append_workout_week(workout_plan, progress, new_week)

    assert plan.week_count == 2
    assert plan.current_week_index == 1
    assert updated.current_week_index == 1
    assert plan.multi_week_schedules[0] is workout_plan.multi_week_schedules[0]
    assert updated.weekly_schedule[0] is progress.weekly_schedule[0]
    assert updated.weekly_schedule[0][1].workout_details.exercises[0].completed


def test_appended_workout_week_starts_incomplete(workout_plan):
    progress = project_workout_progress(workout_plan)
    for idx in range(3):
        progress = toggle_exercise(progress, 0, "Tuesday", idx)

    _, updated = append_workout_week(workout_plan, progress, workout_plan.multi_week_schedules[0])

    new_week = updated.weekly_schedule[1]
    assert not any(ex.completed for day in new_week if day.workout_details for ex in day.workout_details.exercises)
    assert updated.total_workouts == 12
    assert updated.completed_workouts == 1


def test_append_workout_week_projects_missing_progress(workout_plan):
    plan, progress = append_workout_week(workout_plan, None, workout_plan.multi_week_schedules[0])

    assert len(progress.weekly_schedule) == plan.week_count == 2
    assert progress.completed_workouts == 0


def test_append_workout_week_rejects_short_week(workout_plan):
    with pytest.raises(ValueError, match="exactly 7 days"):
        append_workout_week(workout_plan, None, workout_plan.multi_week_schedules[0][:6])


def test_append_nutrition_week(nutrition_plan):
    progress = toggle_meal(project_nutrition_progress(nutrition_plan), nutrition_plan, 0, "Monday", "Lunch", "Chicken Bowl")

    plan, updated = append_nutrition_week(nutrition_plan, progress, nutrition_plan.multi_week_meal_plans[0])

    assert plan.week_count == 2
    assert plan.current_week_index == updated.current_week_index == 1
    assert updated.weekly_meal_progress[0] is progress.weekly_meal_progress[0]
    assert updated.weekly_meal_progress[0][0].daily_total_calories_logged == 600
    assert updated.weekly_meal_progress[1][0].daily_total_calories_logged == 0
    assert not any(meal.completed for day in updated.weekly_meal_progress[1] for meal in day.meals)


def test_append_leaves_inputs_untouched(nutrition_plan):
    progress = project_nutrition_progress(nutrition_plan)

    append_nutrition_week(nutrition_plan, progress, nutrition_plan.multi_week_meal_plans[0])

    assert nutrition_plan.week_count == 1
    assert len(progress.weekly_meal_progress) == 1

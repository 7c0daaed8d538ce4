"""Static template plan generator.

Builds plans from the template libraries instead of calling a model:
- Workout weeks follow a split sequence (PPL or full body; UpperLower is
  served as full body), full-body templates alternate A/B
- Full-body splits train on the preferred days when any are given
- Rep ranges and notes are adjusted for weight loss and muscle gain
- Every day gets breakfast, lunch, dinner and two distinct snacks

Randomness comes from an injectable random.Random so tests can seed it.
"""

import copy
import random
import re
from typing import Any

from loguru import logger

from fittrack.generation.base import NutritionGenerationParams, WorkoutGenerationParams
from fittrack.generation.errors import PlanGenerationError
from fittrack.generation.library import GENERAL_TIPS, MEAL_LIBRARY, WORKOUT_LIBRARY
from fittrack.plans.constants import DEFAULT_COOL_DOWN, DEFAULT_HYDRATION, DEFAULT_WARM_UP, WEEKDAYS
from fittrack.plans.targets import calculate_daily_targets

REST = "rest"

FULL_BODY_SEQUENCE = ("fullBody", REST, "fullBody", REST, "fullBody", REST, REST)

SPLIT_SEQUENCES: dict[str, tuple[str, ...]] = {
    "PPL": ("push", "pull", "legs", REST, "push", "pull", "legs"),
    "FullBody": FULL_BODY_SEQUENCE,
    "UpperLower": FULL_BODY_SEQUENCE,
}

SUMMARY_NOTES: dict[str, str] = {
    "weight_loss": "Focus on maintaining a calorie deficit and consistent training. Stay hydrated!",
    "muscle_gain": "Ensure you are in a slight calorie surplus with adequate protein. Lift progressively heavier!",
}
DEFAULT_SUMMARY_NOTES = "Maintain consistency with your workouts and nutrition. Listen to your body."

WEIGHT_LOSS_NOTE = "Consider adding 20-30 mins of cardio after this workout."
MUSCLE_GAIN_NOTE = "Focus on progressive overload: increasing weight or reps over time."

_REP_RANGE = re.compile(r"^(\d+)-(\d+)$")


def adjust_exercise_for_goal(exercise: dict[str, Any], goal_type: str) -> dict[str, Any]:
    """Shift rep ranges and append coaching notes for the goal.

    Weight loss adds two reps to both ends of a numeric range; muscle gain
    raises a lower bound under 6 to 6 (upper bound at least 10). Non-numeric
    rep schemes such as "30-60 seconds hold" are left alone.
    """
    reps = exercise.get("reps") or "10-12"
    notes = exercise.get("notes") or ""
    match = _REP_RANGE.match(reps)

    if goal_type == "weight_loss":
        if match:
            reps = f"{int(match.group(1)) + 2}-{int(match.group(2)) + 2}"
        notes = f"{notes} {WEIGHT_LOSS_NOTE}"
    elif goal_type == "muscle_gain":
        if match and int(match.group(1)) < 6:
            reps = f"6-{max(int(match.group(2)), 10)}"
        notes = f"{notes} {MUSCLE_GAIN_NOTE}"

    return {
        **exercise,
        "reps": reps,
        "notes": notes.strip(),
        "sets": exercise.get("sets") or 3,
        "rest": exercise.get("rest") or "60s",
        "equipment": exercise.get("equipment") or "Bodyweight",
    }


def weekly_sequence(split: str | None, preferred_days: list[str]) -> tuple[str, ...]:
    """Workout category (or rest) for each weekday, Monday-first."""
    sequence = SPLIT_SEQUENCES.get(split or "", FULL_BODY_SEQUENCE)
    if sequence is not FULL_BODY_SEQUENCE:
        return sequence

    preferred = {day.strip().lower() for day in preferred_days}
    if not preferred & set(WEEKDAYS):
        return sequence
    return tuple("fullBody" if weekday in preferred else REST for weekday in WEEKDAYS)


class StaticPlanGenerator:
    """Plan generator backed by the static template libraries."""

    def __init__(
        self,
        rng: random.Random | None = None,
        workout_library: dict[str, list[dict[str, Any]]] | None = None,
        meal_library: dict[str, list[dict[str, Any]]] | None = None,
    ):
        self._rng = rng or random.Random()
        self._workouts = WORKOUT_LIBRARY if workout_library is None else workout_library
        self._meals = MEAL_LIBRARY if meal_library is None else meal_library

    async def generate_workout_plan(self, params: WorkoutGenerationParams) -> dict[str, Any]:
        return self.build_workout_plan(params)

    async def generate_nutrition_plan(self, params: NutritionGenerationParams) -> dict[str, Any]:
        return self.build_nutrition_plan(params)

    def _templates(self, library: dict[str, list[dict[str, Any]]], category: str) -> list[dict[str, Any]]:
        templates = library.get(category) or []
        if not templates:
            raise PlanGenerationError(f"No templates for category '{category}'")
        return templates

    def build_workout_plan(self, params: WorkoutGenerationParams) -> dict[str, Any]:
        """Build a single-week workout plan document.

        Args:
            params: Workout generation parameters

        Returns:
            Raw camelCase plan document

        Raises:
            PlanGenerationError: If a required template category is empty
        """
        preferences = params.to_preferences()
        sequence = weekly_sequence(preferences.workout_split, preferences.preferred_days)

        week: list[dict[str, Any]] = []
        full_body_index = 0
        for weekday, category in zip(WEEKDAYS, sequence):
            if category == REST:
                week.append({"dayOfWeek": weekday, "isRestDay": True, "workoutDetails": None})
                continue

            templates = self._templates(self._workouts, category)
            if category == "fullBody" and len(templates) > 1:
                template = templates[full_body_index % len(templates)]
                full_body_index += 1
            else:
                template = self._rng.choice(templates)

            week.append(
                {
                    "dayOfWeek": weekday,
                    "isRestDay": False,
                    "workoutDetails": {
                        "workoutName": template.get("workoutName") or f"{category} Workout",
                        "warmUp": template.get("warmUp") or DEFAULT_WARM_UP,
                        "coolDown": template.get("coolDown") or DEFAULT_COOL_DOWN,
                        "exercises": [
                            adjust_exercise_for_goal(copy.deepcopy(exercise), params.goal_type)
                            for exercise in template.get("exercises", [])
                        ],
                    },
                }
            )

        training_days = sum(1 for day in week if not day["isRestDay"])
        logger.info(
            "Built static workout plan",
            split=preferences.workout_split,
            goal_type=params.goal_type,
            training_days=training_days,
        )
        return {
            "planName": f"{preferences.workout_split} Plan ({params.goal_type})",
            "multiWeekSchedules": [week],
            "currentWeekIndex": 0,
            "preferences": preferences.to_document(),
            "summaryNotes": SUMMARY_NOTES.get(params.goal_type, DEFAULT_SUMMARY_NOTES),
        }

    def _daily_meals(self) -> dict[str, Any]:
        meals = [
            copy.deepcopy(self._rng.choice(self._templates(self._meals, "breakfast"))),
            copy.deepcopy(self._rng.choice(self._templates(self._meals, "lunch"))),
            copy.deepcopy(self._rng.choice(self._templates(self._meals, "dinner"))),
        ]
        snacks = self._templates(self._meals, "snacks")
        if len(snacks) > 1:
            meals.extend(copy.deepcopy(snack) for snack in self._rng.sample(snacks, 2))
        else:
            meals.extend(copy.deepcopy(snacks[0]) for _ in range(2))

        return {
            "meals": meals,
            "dailyTotalCalories": sum(meal["calories"] for meal in meals),
            "dailyTotalProtein": sum(meal["protein"] for meal in meals),
            "dailyTotalCarbs": sum(meal["carbs"] for meal in meals),
            "dailyTotalFats": sum(meal["fats"] for meal in meals),
        }

    def build_nutrition_plan(self, params: NutritionGenerationParams) -> dict[str, Any]:
        """Build a single-week nutrition plan document.

        Args:
            params: Nutrition generation parameters (metric body metrics)

        Returns:
            Raw camelCase plan document

        Raises:
            PlanGenerationError: If a meal category is empty
        """
        preferences = params.to_preferences()
        targets = calculate_daily_targets(preferences)
        goal = params.goal_type.replace("_", " ")

        logger.info("Built static nutrition plan", goal_type=params.goal_type, calories=targets.calories)
        return {
            "planName": f"{goal[:1].upper()}{goal[1:]} Nutrition Plan",
            "dailyTargets": targets.to_document(),
            "preferences": preferences.to_document(),
            "hydrationRecommendation": DEFAULT_HYDRATION,
            "generalTips": list(GENERAL_TIPS),
            "multiWeekMealPlans": [{weekday: self._daily_meals() for weekday in WEEKDAYS}],
            "currentWeekIndex": 0,
        }

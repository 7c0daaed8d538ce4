"""Root conftest for all tests.

Shared raw plan documents in the camelCase wire shape, plus generators and
repositories for store tests.
"""

import random
from datetime import date

import pytest

from fittrack.generation.static_generator import StaticPlanGenerator
from fittrack.plans.types import NutritionPlan, WorkoutPlan
from fittrack.plans.validators import validate_nutrition_plan, validate_workout_plan
from fittrack.store.persistence import InMemoryStateRepository

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _exercise(name: str, sets: int = 3, reps: str = "8-12") -> dict:
    return {"name": name, "sets": sets, "reps": reps, "rest": "60s", "notes": "", "equipment": "Barbell"}


def _meal(meal_type: str, name: str, calories: int, protein: int, carbs: int, fats: int) -> dict:
    return {
        "mealType": meal_type,
        "name": name,
        "ingredients": [{"item": name, "qty": "1 serving"}],
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fats": fats,
    }


def _meal_day() -> dict:
    meals = [
        _meal("Breakfast", "Oatmeal", 400, 20, 50, 10),
        _meal("Lunch", "Chicken Bowl", 600, 45, 60, 15),
        _meal("Dinner", "Salmon Plate", 650, 40, 40, 30),
        _meal("Snack", "Almonds", 180, 6, 6, 15),
        _meal("Snack", "Protein Bar", 200, 20, 20, 8),
    ]
    return {
        "meals": meals,
        "dailyTotalCalories": sum(m["calories"] for m in meals),
        "dailyTotalProtein": sum(m["protein"] for m in meals),
        "dailyTotalCarbs": sum(m["carbs"] for m in meals),
        "dailyTotalFats": sum(m["fats"] for m in meals),
    }


@pytest.fixture
def raw_workout_week() -> list[dict]:
    """One week: Monday rest, Tuesday with 3 exercises, every other day 2 exercises."""
    week = []
    for name in WEEKDAY_NAMES:
        if name == "Monday":
            week.append({"dayOfWeek": name, "isRestDay": True, "workoutDetails": None})
            continue
        exercises = [_exercise(f"{name} Squat"), _exercise(f"{name} Press")]
        if name == "Tuesday":
            exercises = [_exercise("Back Squat", 5, "5"), _exercise("Bench Press"), _exercise("Barbell Row")]
        week.append(
            {
                "dayOfWeek": name,
                "isRestDay": False,
                "workoutDetails": {
                    "workoutName": f"{name} Session",
                    "warmUp": "5 min bike",
                    "coolDown": "5 min stretch",
                    "exercises": exercises,
                },
            }
        )
    return week


@pytest.fixture
def raw_workout_plan(raw_workout_week) -> dict:
    return {
        "planName": "Strength Base",
        "multiWeekSchedules": [raw_workout_week],
        "currentWeekIndex": 0,
        "preferences": {
            "workoutSplit": "PPL",
            "goalType": "muscle_gain",
            "experienceLevel": "intermediate",
            "preferredDays": [],
        },
        "summaryNotes": "Lift heavy.",
    }


@pytest.fixture
def raw_meal_week() -> dict:
    return {day.lower(): _meal_day() for day in WEEKDAY_NAMES}


@pytest.fixture
def raw_nutrition_plan(raw_meal_week) -> dict:
    return {
        "planName": "Lean Gain",
        "dailyTargets": {"calories": 2600, "proteinGrams": 160, "carbGrams": 300, "fatGrams": 80},
        "preferences": {
            "currentWeight": 80,
            "height": 180,
            "age": 30,
            "sex": "male",
            "goalType": "muscle_gain",
            "activityLevel": "moderate",
            "dietaryRestrictions": [],
        },
        "hydrationRecommendation": "3 litres a day",
        "generalTips": ["Eat protein with every meal"],
        "multiWeekMealPlans": [raw_meal_week],
        "currentWeekIndex": 0,
    }


@pytest.fixture
def static_generator() -> StaticPlanGenerator:
    return StaticPlanGenerator(rng=random.Random(7))


@pytest.fixture
def repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def fixed_today():
    return lambda: date(2024, 3, 4)


@pytest.fixture
def workout_plan(raw_workout_plan) -> WorkoutPlan:
    return validate_workout_plan(raw_workout_plan).plan


@pytest.fixture
def nutrition_plan(raw_nutrition_plan) -> NutritionPlan:
    return validate_nutrition_plan(raw_nutrition_plan).plan

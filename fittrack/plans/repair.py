"""Synthetic fallback plans.

When a candidate plan (or part of one) cannot be salvaged, the validator
substitutes the minimal valid structure built here. Fallbacks are
deterministic and derived from whatever preference hints are available, so
repairing the same input twice yields the same plan.
"""

from fittrack.plans.constants import DEFAULT_COOL_DOWN, DEFAULT_HYDRATION, DEFAULT_WARM_UP, WEEKDAYS
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

_DEFAULT_TRAINING_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")

_UPPER_BODY = (
    ("Push-ups", "Bodyweight", "Chest", "Focus on form"),
    ("Dumbbell Rows", "Dumbbells", "Back", "Maintain proper posture"),
    ("Shoulder Press", "Dumbbells", "Shoulders", "Control the movement"),
)

_LOWER_BODY = (
    ("Bodyweight Squats", "Bodyweight", "Legs", "Focus on form"),
    ("Lunges", "Bodyweight", "Legs", "Maintain proper posture"),
    ("Calf Raises", "Bodyweight", "Calves", "Control the movement"),
)

# (meal type, name, share of daily calories, ingredients, instructions)
_FALLBACK_MEALS = (
    (
        "Breakfast",
        "Default Breakfast",
        0.25,
        (("Eggs", "2"), ("Toast", "2 slices")),
        "Scramble eggs and serve with toast.",
    ),
    (
        "Lunch",
        "Default Lunch",
        0.35,
        (("Chicken Breast", "4 oz"), ("Rice", "1 cup"), ("Vegetables", "1 cup")),
        "Cook chicken and serve with rice and vegetables.",
    ),
    (
        "Dinner",
        "Default Dinner",
        0.30,
        (("Salmon", "4 oz"), ("Sweet Potato", "1 medium"), ("Broccoli", "1 cup")),
        "Bake salmon and serve with sweet potato and steamed broccoli.",
    ),
    (
        "Snack",
        "Default Snack",
        0.10,
        (("Greek Yogurt", "1 cup"), ("Berries", "1/2 cup")),
        "Mix berries into yogurt.",
    ),
)


def _training_days(preferences: WorkoutPlanPreferences | None) -> tuple[str, ...]:
    preferred = []
    if preferences is not None:
        preferred = [day.strip().lower() for day in preferences.preferred_days]
    chosen = tuple(day for day in WEEKDAYS if day in preferred)
    return chosen or _DEFAULT_TRAINING_DAYS


def fallback_workout_day(weekday: str, preferences: WorkoutPlanPreferences | None = None) -> DaySchedule:
    """Build the synthetic day for a weekday.

    Args:
        weekday: Lowercase weekday name
        preferences: Optional preferences (preferred days, experience level)

    Returns:
        A rest day, or an upper/lower body session alternating over training days
    """
    training_days = _training_days(preferences)
    if weekday not in training_days:
        return DaySchedule(day_of_week=weekday, is_rest_day=True, workout_details=None)

    advanced = preferences is not None and preferences.experience_level == "advanced"
    upper = training_days.index(weekday) % 2 == 0
    template = _UPPER_BODY if upper else _LOWER_BODY
    focus = "Upper Body" if upper else "Lower Body"

    exercises = [
        Exercise(
            name=name,
            sets=4 if advanced else 3,
            reps="10-12",
            rest="60s",
            notes=notes,
            equipment=equipment,
            muscle_group=muscle_group,
        )
        for name, equipment, muscle_group, notes in template
    ]
    return DaySchedule(
        day_of_week=weekday,
        is_rest_day=False,
        workout_details=WorkoutDetails(
            workout_name=f"Default {focus} Workout",
            warm_up=DEFAULT_WARM_UP,
            cool_down=DEFAULT_COOL_DOWN,
            exercises=exercises,
        ),
    )


def fallback_workout_week(preferences: WorkoutPlanPreferences | None = None) -> list[DaySchedule]:
    return [fallback_workout_day(weekday, preferences) for weekday in WEEKDAYS]


def fallback_workout_plan(preferences: WorkoutPlanPreferences | None = None) -> WorkoutPlan:
    """Build a single-week workout plan from preference hints.

    Args:
        preferences: Optional preferences; generic defaults when None

    Returns:
        A structurally valid WorkoutPlan
    """
    prefs = preferences or WorkoutPlanPreferences(
        workout_split="UpperLower",
        goal_type="general_fitness",
        experience_level="beginner",
    )
    return WorkoutPlan(
        plan_name="Default Workout Plan",
        multi_week_schedules=[fallback_workout_week(prefs)],
        current_week_index=0,
        preferences=prefs,
        summary_notes="A basic upper/lower plan. Regenerate once your profile is complete.",
    )


def fallback_meal_day(targets: DailyTargets | None = None) -> DailyMealPlan:
    """Build a four-meal day whose macros split the daily targets.

    Args:
        targets: Daily targets to distribute; generic defaults when None

    Returns:
        DailyMealPlan with totals equal to the sum of its meals
    """
    targets = targets or calculate_daily_targets(None)
    meals = [
        MealItem(
            meal_type=meal_type,
            name=name,
            ingredients=[Ingredient(item=item, qty=qty) for item, qty in ingredients],
            calories=round(targets.calories * share),
            protein=round(targets.protein_grams * share),
            carbs=round(targets.carb_grams * share),
            fats=round(targets.fat_grams * share),
            instructions=instructions,
        )
        for meal_type, name, share, ingredients, instructions in _FALLBACK_MEALS
    ]
    return DailyMealPlan.from_meals(meals)


def fallback_meal_week(targets: DailyTargets | None = None) -> WeeklyMealPlan:
    day = fallback_meal_day(targets)
    return WeeklyMealPlan(**{weekday: day for weekday in WEEKDAYS})


def fallback_nutrition_plan(preferences: NutritionPlanPreferences | None = None) -> NutritionPlan:
    """Build a single-week nutrition plan from preference hints.

    Args:
        preferences: Optional body metrics and goal; generic defaults when None

    Returns:
        A structurally valid NutritionPlan
    """
    prefs = preferences or NutritionPlanPreferences()
    targets = calculate_daily_targets(prefs)
    return NutritionPlan(
        plan_name="Default Nutrition Plan",
        daily_targets=targets,
        preferences=prefs,
        hydration_recommendation=DEFAULT_HYDRATION,
        general_tips=["Focus on whole foods", "Eat protein with every meal", "Stay hydrated"],
        multi_week_meal_plans=[fallback_meal_week(targets)],
        current_week_index=0,
    )

"""Shared constants for plan documents.

Single source of truth for weekday keys, legacy field names and the defaults
the repairer fills into incomplete plan entities.
"""

# Monday-first; nutrition weeks use these as object keys
WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

DAYS_PER_WEEK = len(WEEKDAYS)

# Single-week fields used before plans became multi-week
LEGACY_WORKOUT_WEEK_KEY = "weeklySchedule"
LEGACY_NUTRITION_WEEK_KEY = "weeklyMealPlan"

SNACK_MEAL_TYPES = frozenset({"snack", "snacks"})

EXERCISE_FIELD_DEFAULTS: dict[str, int | str] = {
    "sets": 3,
    "reps": "10-12",
    "rest": "60s",
    "notes": "",
}

DEFAULT_WARM_UP = "5-10 min light cardio & dynamic stretches"
DEFAULT_COOL_DOWN = "5-10 min static stretches"
DEFAULT_HYDRATION = "Aim for 8-10 glasses (64-80 oz) of water daily. Adjust based on activity level and thirst."

"""Daily nutrition target calculation.

Targets are derived from body metrics with the Mifflin-St Jeor equation:
- Inputs are kilograms, centimetres and years
- Calories are BMR x activity factor, adjusted for the goal
- Protein is 0.8 g per lb of body weight, fat 25% of calories, carbs the remainder
"""

from loguru import logger

from fittrack.plans.types import DailyTargets, NutritionPlanPreferences

ACTIVITY_FACTORS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

GOAL_CALORIE_ADJUSTMENT: dict[str, int] = {
    "weight_loss": -400,
    "muscle_gain": 400,
}

DEFAULT_TARGETS = DailyTargets(calories=2000, protein_grams=150, carb_grams=200, fat_grams=67)

LBS_PER_KG = 2.20462
PROTEIN_GRAMS_PER_LB = 0.8
FAT_CALORIE_SHARE = 0.25


def calculate_daily_targets(preferences: NutritionPlanPreferences | None) -> DailyTargets:
    """Compute daily calorie and macro targets.

    Args:
        preferences: Nutrition preferences with weight (kg), height (cm),
            age, sex, goal type and optional activity level

    Returns:
        DailyTargets, or the generic defaults when any body metric is missing
    """
    if preferences is None:
        return DEFAULT_TARGETS

    weight = preferences.current_weight
    height = preferences.height
    age = preferences.age
    if not weight or not height or not age or not preferences.sex or not preferences.goal_type:
        logger.debug("Body metrics incomplete, using default daily targets")
        return DEFAULT_TARGETS

    sex_offset = 5 if preferences.sex.lower() == "male" else -161
    bmr = 10 * weight + 6.25 * height - 5 * age + sex_offset

    activity = (preferences.activity_level or "moderate").lower()
    tdee = bmr * ACTIVITY_FACTORS.get(activity, ACTIVITY_FACTORS["moderate"])

    calories = tdee + GOAL_CALORIE_ADJUSTMENT.get(preferences.goal_type, 0)
    protein = round(weight * LBS_PER_KG * PROTEIN_GRAMS_PER_LB)
    fat = round(calories * FAT_CALORIE_SHARE / 9)
    carbs = max(0, round((calories - protein * 4 - fat * 9) / 4))

    return DailyTargets(
        calories=round(calories),
        protein_grams=protein,
        carb_grams=carbs,
        fat_grams=fat,
    )

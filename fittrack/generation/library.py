"""Template libraries for the static plan generator.

Entries are raw plan documents in the camelCase wire shape, so generated
plans go through exactly the same validation as any external generator's.
"""

from typing import Any

WORKOUT_LIBRARY: dict[str, list[dict[str, Any]]] = {
    "push": [
        {
            "workoutName": "Push Day - Strength Focus",
            "warmUp": (
                "5-10 minutes of light cardio (jogging, jump ropes) followed by dynamic stretches "
                "(arm circles, shoulder rotations)."
            ),
            "coolDown": (
                "5-10 minutes of static stretching, holding each stretch for 20-30 seconds "
                "(chest, shoulders, triceps)."
            ),
            "exercises": [
                {
                    "name": "Barbell Bench Press",
                    "sets": 4,
                    "reps": "6-8",
                    "rest": "90-120s",
                    "notes": "Focus on controlled descent and explosive push.",
                    "equipment": "Barbell, Bench",
                    "muscleGroup": "Chest",
                },
                {
                    "name": "Incline Dumbbell Press",
                    "sets": 3,
                    "reps": "8-12",
                    "rest": "60-90s",
                    "notes": "Adjust incline to target upper chest.",
                    "equipment": "Dumbbells, Incline Bench",
                    "muscleGroup": "Chest",
                },
                {
                    "name": "Overhead Press (Barbell)",
                    "sets": 4,
                    "reps": "6-8",
                    "rest": "90-120s",
                    "notes": "Keep core tight, avoid excessive back arch.",
                    "equipment": "Barbell",
                    "muscleGroup": "Shoulders",
                },
                {
                    "name": "Dumbbell Lateral Raises",
                    "sets": 3,
                    "reps": "12-15",
                    "rest": "45-60s",
                    "notes": "Focus on controlled movement, avoid using momentum.",
                    "equipment": "Dumbbells",
                    "muscleGroup": "Shoulders",
                },
                {
                    "name": "Triceps Dips (or Bench Dips)",
                    "sets": 3,
                    "reps": "8-12",
                    "rest": "60-90s",
                    "notes": "Go as deep as comfortable while maintaining form.",
                    "equipment": "Dip Bars / Bench",
                    "muscleGroup": "Triceps",
                },
                {
                    "name": "Triceps Pushdowns (Rope or Bar)",
                    "sets": 3,
                    "reps": "10-15",
                    "rest": "45-60s",
                    "notes": "Keep elbows tucked in.",
                    "equipment": "Cable Machine",
                    "muscleGroup": "Triceps",
                },
            ],
        },
    ],
    "pull": [
        {
            "workoutName": "Pull Day - Strength Focus",
            "warmUp": (
                "5-10 minutes of light cardio (rowing machine, elliptical) followed by dynamic stretches "
                "(band pull-aparts, cat-cow)."
            ),
            "coolDown": "5-10 minutes of static stretching (lats, biceps, traps, lower back).",
            "exercises": [
                {
                    "name": "Deadlifts (Conventional)",
                    "sets": 1,
                    "reps": "5",
                    "rest": "120-180s",
                    "notes": "Maintain neutral spine. Ensure proper form and warm-up sets.",
                    "equipment": "Barbell",
                    "muscleGroup": "Back",
                },
                {
                    "name": "Pull-ups (or Lat Pulldowns)",
                    "sets": 4,
                    "reps": "6-10",
                    "rest": "60-90s",
                    "notes": "Full range of motion. If using Lat Pulldown, control the negative.",
                    "equipment": "Pull-up Bar / Lat Pulldown Machine",
                    "muscleGroup": "Back",
                },
                {
                    "name": "Barbell Rows",
                    "sets": 3,
                    "reps": "8-12",
                    "rest": "60-90s",
                    "notes": "Maintain a flat back, pull towards your lower chest.",
                    "equipment": "Barbell",
                    "muscleGroup": "Back",
                },
                {
                    "name": "Face Pulls",
                    "sets": 3,
                    "reps": "15-20",
                    "rest": "45-60s",
                    "notes": "Focus on rear delt and upper back activation.",
                    "equipment": "Cable Machine, Rope Attachment",
                    "muscleGroup": "Shoulders, Back",
                },
                {
                    "name": "Bicep Curls (Dumbbell or Barbell)",
                    "sets": 3,
                    "reps": "10-15",
                    "rest": "45-60s",
                    "notes": "Avoid swinging, control the eccentric.",
                    "equipment": "Dumbbells / Barbell",
                    "muscleGroup": "Biceps",
                },
            ],
        },
    ],
    "legs": [
        {
            "workoutName": "Leg Day - Strength Focus",
            "warmUp": (
                "5-10 minutes of light cardio (cycling, incline walk) followed by dynamic stretches "
                "(leg swings, bodyweight squats)."
            ),
            "coolDown": "5-10 minutes of static stretching (quads, hamstrings, glutes, calves).",
            "exercises": [
                {
                    "name": "Barbell Squats",
                    "sets": 4,
                    "reps": "6-8",
                    "rest": "120-180s",
                    "notes": "Focus on depth and maintaining an upright torso.",
                    "equipment": "Barbell, Squat Rack",
                    "muscleGroup": "Legs",
                },
                {
                    "name": "Romanian Deadlifts (RDLs)",
                    "sets": 3,
                    "reps": "8-12",
                    "rest": "60-90s",
                    "notes": "Focus on hamstring stretch and maintaining a flat back.",
                    "equipment": "Barbell / Dumbbells",
                    "muscleGroup": "Hamstrings, Glutes",
                },
                {
                    "name": "Leg Press",
                    "sets": 3,
                    "reps": "10-15",
                    "rest": "60-90s",
                    "notes": "Control the descent, avoid letting knees cave in.",
                    "equipment": "Leg Press Machine",
                    "muscleGroup": "Legs",
                },
                {
                    "name": "Leg Extensions",
                    "sets": 3,
                    "reps": "12-15",
                    "rest": "45-60s",
                    "notes": "Focus on quad contraction at the top.",
                    "equipment": "Leg Extension Machine",
                    "muscleGroup": "Quads",
                },
                {
                    "name": "Hamstring Curls",
                    "sets": 3,
                    "reps": "12-15",
                    "rest": "45-60s",
                    "notes": "Control the movement throughout.",
                    "equipment": "Hamstring Curl Machine",
                    "muscleGroup": "Hamstrings",
                },
                {
                    "name": "Calf Raises (Standing or Seated)",
                    "sets": 4,
                    "reps": "15-20",
                    "rest": "30-45s",
                    "notes": "Full range of motion, pause at the top.",
                    "equipment": "Bodyweight / Machine",
                    "muscleGroup": "Calves",
                },
            ],
        },
    ],
    "fullBody": [
        {
            "workoutName": "Full Body Workout A - Beginner",
            "warmUp": "5 minutes of light cardio and dynamic movements like torso twists and high knees.",
            "coolDown": "5 minutes of light stretching for all major muscle groups.",
            "exercises": [
                {
                    "name": "Goblet Squats",
                    "sets": 3,
                    "reps": "10-15",
                    "rest": "60s",
                    "notes": "Keep the dumbbell close to your chest.",
                    "equipment": "Dumbbell",
                    "muscleGroup": "Legs",
                },
                {
                    "name": "Push-ups (or Knee Push-ups)",
                    "sets": 3,
                    "reps": "As many as possible (AMRAP)",
                    "rest": "60s",
                    "notes": "Maintain a straight line from head to heels/knees.",
                    "equipment": "Bodyweight",
                    "muscleGroup": "Chest, Shoulders, Triceps",
                },
                {
                    "name": "Dumbbell Rows (Single Arm)",
                    "sets": 3,
                    "reps": "10-12 per side",
                    "rest": "60s",
                    "notes": "Support yourself on a bench, pull dumbbell towards hip.",
                    "equipment": "Dumbbell, Bench",
                    "muscleGroup": "Back, Biceps",
                },
                {
                    "name": "Plank",
                    "sets": 3,
                    "reps": "30-60 seconds hold",
                    "rest": "60s",
                    "notes": "Keep core engaged, avoid letting hips sag.",
                    "equipment": "Bodyweight",
                    "muscleGroup": "Core",
                },
                {
                    "name": "Overhead Press (Dumbbell)",
                    "sets": 3,
                    "reps": "10-15",
                    "rest": "60s",
                    "notes": "Press dumbbells directly overhead.",
                    "equipment": "Dumbbells",
                    "muscleGroup": "Shoulders",
                },
            ],
        },
        {
            "workoutName": "Full Body Workout B - Beginner",
            "warmUp": "5 minutes of light cardio and dynamic movements.",
            "coolDown": "5 minutes of light stretching.",
            "exercises": [
                {
                    "name": "Romanian Deadlifts (Dumbbells)",
                    "sets": 3,
                    "reps": "12-15",
                    "rest": "60s",
                    "notes": "Focus on hip hinge, slight knee bend.",
                    "equipment": "Dumbbells",
                    "muscleGroup": "Hamstrings, Glutes",
                },
                {
                    "name": "Incline Dumbbell Press",
                    "sets": 3,
                    "reps": "10-15",
                    "rest": "60s",
                    "notes": "Targets upper chest.",
                    "equipment": "Dumbbells, Incline Bench",
                    "muscleGroup": "Chest",
                },
                {
                    "name": "Lat Pulldowns (or Assisted Pull-ups)",
                    "sets": 3,
                    "reps": "10-15",
                    "rest": "60s",
                    "notes": "Focus on pulling with your back.",
                    "equipment": "Lat Pulldown Machine / Assisted Pull-up Machine",
                    "muscleGroup": "Back",
                },
                {
                    "name": "Russian Twists",
                    "sets": 3,
                    "reps": "15-20 per side",
                    "rest": "45s",
                    "notes": "Keep core engaged.",
                    "equipment": "Bodyweight / Light Weight",
                    "muscleGroup": "Core",
                },
                {
                    "name": "Bicep Curls (Dumbbells)",
                    "sets": 2,
                    "reps": "12-15",
                    "rest": "45s",
                    "notes": "Control the movement.",
                    "equipment": "Dumbbells",
                    "muscleGroup": "Biceps",
                },
            ],
        },
    ],
}

MEAL_LIBRARY: dict[str, list[dict[str, Any]]] = {
    "breakfast": [
        {
            "mealType": "Breakfast",
            "name": "Oatmeal with Almond Butter & Berries",
            "calories": 380,
            "protein": 15,
            "carbs": 50,
            "fats": 14,
            "ingredients": [
                {"item": "Oats", "qty": "1/2 cup", "calories": 150},
                {"item": "Almond Butter", "qty": "2 tbsp", "calories": 190},
                {"item": "Berries", "qty": "1/2 cup", "calories": 40},
            ],
            "instructions": "Cook oats with water or milk. Stir in almond butter and top with berries.",
        },
        {
            "mealType": "Breakfast",
            "name": "Scrambled Eggs with Spinach & Whole Wheat Toast",
            "calories": 400,
            "protein": 25,
            "carbs": 30,
            "fats": 18,
            "ingredients": [
                {"item": "Eggs", "qty": "3"},
                {"item": "Spinach", "qty": "1 cup"},
                {"item": "Whole Wheat Toast", "qty": "2 slices"},
            ],
            "instructions": "Scramble eggs with spinach. Serve with toast.",
        },
        {
            "mealType": "Breakfast",
            "name": "Greek Yogurt with Granola and Honey",
            "calories": 320,
            "protein": 20,
            "carbs": 40,
            "fats": 9,
            "ingredients": [
                {"item": "Greek Yogurt", "qty": "1 cup"},
                {"item": "Granola", "qty": "1/4 cup"},
                {"item": "Honey", "qty": "1 tsp"},
            ],
            "instructions": "Combine Greek yogurt, granola, and a drizzle of honey.",
        },
        {
            "mealType": "Breakfast",
            "name": "Protein Smoothie (Whey, Banana, PB)",
            "calories": 450,
            "protein": 35,
            "carbs": 45,
            "fats": 15,
            "ingredients": [
                {"item": "Whey Protein", "qty": "1 scoop"},
                {"item": "Banana", "qty": "1"},
                {"item": "Peanut Butter", "qty": "2 tbsp"},
                {"item": "Almond Milk", "qty": "1 cup"},
            ],
        },
    ],
    "lunch": [
        {
            "mealType": "Lunch",
            "name": "Grilled Chicken Salad with Vinaigrette",
            "calories": 480,
            "protein": 45,
            "carbs": 25,
            "fats": 22,
            "ingredients": [
                {"item": "Chicken Breast", "qty": "150g"},
                {"item": "Mixed Greens", "qty": "3 cups"},
                {"item": "Olive Oil Vinaigrette", "qty": "2 tbsp"},
            ],
        },
        {
            "mealType": "Lunch",
            "name": "Quinoa Bowl with Black Beans and Avocado",
            "calories": 550,
            "protein": 20,
            "carbs": 70,
            "fats": 20,
            "ingredients": [
                {"item": "Quinoa", "qty": "1 cup cooked"},
                {"item": "Black Beans", "qty": "1/2 cup"},
                {"item": "Avocado", "qty": "1/2"},
            ],
        },
    ],
    "dinner": [
        {
            "mealType": "Dinner",
            "name": "Baked Salmon with Roasted Asparagus & Sweet Potato",
            "calories": 650,
            "protein": 45,
            "carbs": 55,
            "fats": 28,
            "ingredients": [
                {"item": "Salmon Fillet", "qty": "150g"},
                {"item": "Asparagus", "qty": "1 cup"},
                {"item": "Sweet Potato", "qty": "1 medium"},
            ],
        },
        {
            "mealType": "Dinner",
            "name": "Lean Beef Stir-fry with Brown Rice",
            "calories": 600,
            "protein": 40,
            "carbs": 60,
            "fats": 20,
            "ingredients": [
                {"item": "Lean Beef Strips", "qty": "150g"},
                {"item": "Mixed Vegetables", "qty": "2 cups"},
                {"item": "Brown Rice", "qty": "1 cup cooked"},
            ],
        },
    ],
    "snacks": [
        {
            "mealType": "Snack",
            "name": "Apple with Peanut Butter",
            "calories": 220,
            "protein": 8,
            "carbs": 25,
            "fats": 10,
            "ingredients": [{"item": "Apple", "qty": "1 medium"}, {"item": "Peanut Butter", "qty": "2 tbsp"}],
        },
        {
            "mealType": "Snack",
            "name": "Protein Bar",
            "calories": 200,
            "protein": 20,
            "carbs": 20,
            "fats": 8,
            "ingredients": [{"item": "Protein Bar", "qty": "1"}],
        },
        {
            "mealType": "Snack",
            "name": "Handful of Almonds",
            "calories": 180,
            "protein": 6,
            "carbs": 6,
            "fats": 15,
            "ingredients": [{"item": "Almonds", "qty": "1/4 cup"}],
        },
    ],
}

GENERAL_TIPS: tuple[str, ...] = (
    "Prioritize whole, unprocessed foods.",
    "Include a variety of colorful fruits and vegetables.",
    "Ensure adequate protein intake at each meal for satiety and muscle repair.",
    "Don't fear healthy fats from sources like avocados, nuts, seeds, and olive oil.",
    "Listen to your body's hunger and fullness cues.",
    "Meal prep can save time and help you stick to your plan.",
)

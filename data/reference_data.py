"""Reference data seeded into an empty database by `database.init_db`."""

MEAL_TYPES = [
    {"name": "BREAKFAST", "order_index": 1},
    {"name": "LUNCH", "order_index": 2},
    {"name": "DINNER", "order_index": 3},
    {"name": "SNACK", "order_index": 4},
]

# MET values from the Compendium of Physical Activities
ACTIVITY_TYPES = [
    # Cardio
    {"name": "Walking (leisurely)", "category": "CARDIO", "met_value": 3.5},
    {"name": "Walking (brisk)", "category": "CARDIO", "met_value": 4.3},
    {"name": "Jogging", "category": "CARDIO", "met_value": 7.0},
    {"name": "Running", "category": "CARDIO", "met_value": 9.8},
    {"name": "Cycling (leisurely)", "category": "CARDIO", "met_value": 4.0},
    {"name": "Cycling (fast)", "category": "CARDIO", "met_value": 8.0},
    {"name": "Swimming", "category": "CARDIO", "met_value": 6.0},
    {"name": "Aerobics", "category": "CARDIO", "met_value": 6.5},
    # Strength
    {"name": "Weight lifting (light)", "category": "STRENGTH", "met_value": 3.5},
    {"name": "Weight lifting (heavy)", "category": "STRENGTH", "met_value": 6.0},
    {"name": "Push ups", "category": "STRENGTH", "met_value": 8.0},
    {"name": "Sit ups", "category": "STRENGTH", "met_value": 8.0},
    {"name": "Plank", "category": "STRENGTH", "met_value": 4.0},
    # Flexibility
    {"name": "Yoga", "category": "FLEXIBILITY", "met_value": 2.5},
    {"name": "Pilates", "category": "FLEXIBILITY", "met_value": 3.0},
    {"name": "Stretching", "category": "FLEXIBILITY", "met_value": 2.5},
    # Sports
    {"name": "Badminton", "category": "SPORTS", "met_value": 5.5},
    {"name": "Football", "category": "SPORTS", "met_value": 7.0},
    {"name": "Basketball", "category": "SPORTS", "met_value": 6.5},
    {"name": "Tennis", "category": "SPORTS", "met_value": 7.3},
    {"name": "Volleyball", "category": "SPORTS", "met_value": 4.0},
    # Daily
    {"name": "House cleaning", "category": "DAILY", "met_value": 3.5},
    {"name": "Gardening", "category": "DAILY", "met_value": 4.0},
    {"name": "Climbing stairs", "category": "DAILY", "met_value": 8.0},
    {"name": "Shopping", "category": "DAILY", "met_value": 2.3},
    {"name": "Cooking", "category": "DAILY", "met_value": 2.5},
]

# per serving
FOODS = [
    {"name": "Boiled egg", "serving_description": "1 large egg (50 g)", "calories": 78, "protein": 6.3, "carbs": 0.6, "fat": 5.3},
    {"name": "Chicken breast, grilled", "serving_description": "100 g", "calories": 165, "protein": 31.0, "carbs": 0.0, "fat": 3.6},
    {"name": "Salmon, baked", "serving_description": "100 g", "calories": 206, "protein": 22.0, "carbs": 0.0, "fat": 12.4},
    {"name": "White rice, cooked", "serving_description": "1 cup (158 g)", "calories": 205, "protein": 4.3, "carbs": 44.5, "fat": 0.4},
    {"name": "Brown rice, cooked", "serving_description": "1 cup (195 g)", "calories": 216, "protein": 5.0, "carbs": 44.8, "fat": 1.8},
    {"name": "Oatmeal", "serving_description": "1 cup cooked (234 g)", "calories": 166, "protein": 5.9, "carbs": 28.1, "fat": 3.6},
    {"name": "Whole wheat bread", "serving_description": "1 slice (32 g)", "calories": 81, "protein": 4.0, "carbs": 13.8, "fat": 1.1},
    {"name": "Banana", "serving_description": "1 medium (118 g)", "calories": 105, "protein": 1.3, "carbs": 27.0, "fat": 0.4},
    {"name": "Apple", "serving_description": "1 medium (182 g)", "calories": 95, "protein": 0.5, "carbs": 25.1, "fat": 0.3},
    {"name": "Broccoli, steamed", "serving_description": "1 cup (156 g)", "calories": 55, "protein": 3.7, "carbs": 11.2, "fat": 0.6},
    {"name": "Greek yogurt, plain", "serving_description": "170 g", "calories": 100, "protein": 17.0, "carbs": 6.0, "fat": 0.7},
    {"name": "Milk, low fat", "serving_description": "1 cup (244 g)", "calories": 102, "protein": 8.2, "carbs": 12.2, "fat": 2.4},
    {"name": "Cheddar cheese", "serving_description": "1 slice (28 g)", "calories": 113, "protein": 7.0, "carbs": 0.4, "fat": 9.3},
    {"name": "Almonds", "serving_description": "28 g", "calories": 164, "protein": 6.0, "carbs": 6.1, "fat": 14.2},
    {"name": "Tofu, firm", "serving_description": "100 g", "calories": 144, "protein": 17.3, "carbs": 2.8, "fat": 8.7},
]

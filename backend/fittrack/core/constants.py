"""Shared application constants.

Centralizes repeat values used across goal and report logic so we can
document and adjust them in one place.
"""

GOAL_TYPES = ("weekly", "monthly")

GOAL_CATEGORIES = ("calories", "workouts", "sleep")

DAYS_PER_WEEK = 7

# Meal periods by start hour: [start, end)
MEAL_PERIODS = [
    ("Morning", 5, 11),
    ("Lunch", 11, 14),
    ("Afternoon", 14, 18),
]
LATE_MEAL_PERIOD = "Evening"

# Breakfast window used by the meal timing insight: [06:00, 10:00)
EARLY_MEAL_HOURS = (6, 10)

# Report insight thresholds
MIN_DAYS_FOR_SLEEP_INSIGHT = 3
SLEEP_WORKOUT_LIFT = 1.15
MIN_MEALS_FOR_TIMING_INSIGHT = 5
EARLY_MEAL_RATIO = 0.2
WORKOUT_CONSISTENCY_PCT = 50
GOAL_POSITIVE_PCT = 60
GOAL_NEUTRAL_PCT = 30

# Daily note severity scale (inclusive)
SEVERITY_MIN = 1
SEVERITY_MAX = 5

EXPORT_VERSION = "1.0"

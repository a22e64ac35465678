from prometheus_client import Counter

USERS_CREATED_TOTAL = Counter(
    "coach_users_created_total",
    "Number of users registered in coach-api",
)

CUSTOM_EXERCISES_CREATED_TOTAL = Counter(
    "coach_custom_exercises_created_total",
    "Number of custom exercises created in coach-api",
    ["muscle_group"],
)

WORKOUT_SETS_ADDED_TOTAL = Counter(
    "coach_workout_sets_added_total",
    "Number of sets recorded in coach-api",
)

WORKOUTS_COMPLETED_TOTAL = Counter(
    "coach_workouts_completed_total",
    "Number of workouts completed in coach-api",
    ["muscle_group"],
)

DUPLICATE_COMPLETIONS_TOTAL = Counter(
    "coach_duplicate_completions_total",
    "Number of completion requests rejected because the workout was already completed",
)

EXERCISE_CACHE_HITS_TOTAL = Counter(
    "coach_exercise_cache_hits_total",
    "Number of Redis cache hits for exercise lists",
)

EXERCISE_CACHE_MISSES_TOTAL = Counter(
    "coach_exercise_cache_misses_total",
    "Number of Redis cache misses for exercise lists",
)

EXERCISE_CACHE_ERRORS_TOTAL = Counter(
    "coach_exercise_cache_errors_total",
    "Number of Redis cache errors for exercise lists",
)

from .exercise_repository import ExerciseRepository
from .user_repository import UserRepository
from .week_plan_repository import WeekPlanRepository
from .workout_repository import WorkoutRepository

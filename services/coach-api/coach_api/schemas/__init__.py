from .exercise import ExerciseCreate, ExerciseProgressResponse, ExerciseResponse
from .stats import StatsResponse
from .user import UserCreate, UserResponse
from .week_plan import TodayPlanResponse, WeekPlanResponse, WeekPlanUpdate
from .workout import (
    WorkoutComplete,
    WorkoutCompletionResponse,
    WorkoutCreate,
    WorkoutResponse,
    WorkoutSetCreate,
    WorkoutSetResponse,
)

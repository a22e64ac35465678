from fastapi import HTTPException, status


class CoachException(HTTPException):
    """HTTP error carrying a stable machine-readable ``code``."""

    code = "error"

    def __init__(self, status_code: int, detail: str, code: str | None = None):
        super().__init__(status_code=status_code, detail=detail)
        if code is not None:
            self.code = code


class NotFoundException(CoachException):
    code = "not_found"

    def __init__(self, detail: str = "Объект не найден", code: str | None = None):
        super().__init__(status.HTTP_404_NOT_FOUND, detail, code)


class UserNotFoundException(NotFoundException):
    def __init__(self, telegram_id: str):
        super().__init__(detail=f"Пользователь с telegram_id={telegram_id} не найден", code="user_not_found")


class WorkoutNotFoundException(NotFoundException):
    def __init__(self, workout_id: int):
        super().__init__(detail=f"Тренировка с id={workout_id} не найдена", code="workout_not_found")


class ExerciseNotFoundException(NotFoundException):
    def __init__(self, exercise_id: int):
        super().__init__(detail=f"Упражнение с id={exercise_id} не найдено", code="exercise_not_found")


class AlreadyCompletedException(CoachException):
    code = "already_completed"

    def __init__(self, workout_id: int):
        super().__init__(status.HTTP_409_CONFLICT, f"Тренировка с id={workout_id} уже завершена")


class StoreUnavailableException(CoachException):
    code = "store_unavailable"

    def __init__(self, detail: str = "Хранилище временно недоступно"):
        super().__init__(status.HTTP_503_SERVICE_UNAVAILABLE, detail)

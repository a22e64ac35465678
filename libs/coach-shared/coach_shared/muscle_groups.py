from dataclasses import dataclass
from enum import Enum


class MuscleGroup(str, Enum):
    chest = "chest"
    back = "back"
    shoulders = "shoulders"
    biceps = "biceps"
    triceps = "triceps"
    legs = "legs"
    glutes = "glutes"
    abs = "abs"
    cardio = "cardio"


MUSCLE_GROUP_LABELS: dict[MuscleGroup, str] = {
    MuscleGroup.chest: "Грудь",
    MuscleGroup.back: "Спина",
    MuscleGroup.shoulders: "Плечи",
    MuscleGroup.biceps: "Бицепс",
    MuscleGroup.triceps: "Трицепс",
    MuscleGroup.legs: "Ноги",
    MuscleGroup.glutes: "Ягодицы",
    MuscleGroup.abs: "Пресс",
    MuscleGroup.cardio: "Кардио",
}


@dataclass(frozen=True)
class DefaultExercise:
    slug: str
    name: str
    muscle_group: MuscleGroup


DEFAULT_EXERCISES: tuple[DefaultExercise, ...] = (
    DefaultExercise("push-ups", "Отжимания", MuscleGroup.chest),
    DefaultExercise("pull-ups", "Подтягивания", MuscleGroup.back),
    DefaultExercise("squats", "Приседания", MuscleGroup.legs),
    DefaultExercise("plank", "Планка", MuscleGroup.abs),
    DefaultExercise("bench-press", "Жим лёжа", MuscleGroup.chest),
    DefaultExercise("deadlift", "Становая тяга", MuscleGroup.back),
)


def parse_muscle_group(value: str | MuscleGroup) -> MuscleGroup:
    if isinstance(value, MuscleGroup):
        return value
    try:
        return MuscleGroup(value)
    except ValueError as exc:
        allowed = ", ".join(m.value for m in MuscleGroup)
        raise ValueError(f"muscle group must be one of: {allowed}") from exc


def muscle_group_label(value: str | MuscleGroup) -> str:
    return MUSCLE_GROUP_LABELS[parse_muscle_group(value)]

from coach_shared import MuscleGroup
from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    false,
    func,
)
from sqlalchemy import (
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from .database import Base


def muscle_group_type(column: str) -> SqlEnum:
    # Stored as VARCHAR + CHECK so sqlite and postgres enforce the same 9 tags
    return SqlEnum(
        MuscleGroup,
        name=f"{column}_musclegroup",
        native_enum=False,
        create_constraint=True,
        length=32,
        values_callable=lambda enum: [member.value for member in enum],
    )


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    telegram_id = Column(String(64), nullable=False, unique=True, index=True)
    username = Column(String(255), nullable=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    stats = relationship("UserStats", back_populates="user", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, telegram_id='{self.telegram_id}')>"


class UserStats(Base):
    __tablename__ = "user_stats"
    __table_args__ = (
        CheckConstraint("best_streak >= current_streak", name="ck_user_stats_best_ge_current"),
    )

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    current_streak = Column(Integer, nullable=False, default=0, server_default="0")
    best_streak = Column(Integer, nullable=False, default=0, server_default="0")
    total_workouts = Column(Integer, nullable=False, default=0, server_default="0")
    badges = Column(JSON, nullable=False, default=list, server_default="[]")
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    user = relationship("User", back_populates="stats")


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)
    # Only global defaults carry a slug; NULLs do not collide
    slug = Column(String(64), nullable=True, unique=True)
    name = Column(String(255), nullable=False)
    muscle_group = Column(muscle_group_type("muscle_group"), nullable=False, index=True)
    is_custom = Column(Boolean, nullable=False, default=False, server_default=false())
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)

    def __repr__(self):
        return f"<Exercise(id={self.id}, name='{self.name}', user_id={self.user_id})>"


class WeekPlan(Base):
    __tablename__ = "week_plans"
    __table_args__ = (UniqueConstraint("user_id", "week", name="uq_week_plans_user_week"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    week = Column(String(7), nullable=False)
    monday = Column(muscle_group_type("monday"), nullable=True)
    tuesday = Column(muscle_group_type("tuesday"), nullable=True)
    wednesday = Column(muscle_group_type("wednesday"), nullable=True)
    thursday = Column(muscle_group_type("thursday"), nullable=True)
    friday = Column(muscle_group_type("friday"), nullable=True)
    saturday = Column(muscle_group_type("saturday"), nullable=True)
    sunday = Column(muscle_group_type("sunday"), nullable=True)

    def __repr__(self):
        return f"<WeekPlan(id={self.id}, user_id={self.user_id}, week='{self.week}')>"


class Workout(Base):
    __tablename__ = "workouts"
    __table_args__ = (
        UniqueConstraint("user_id", "date", "muscle_group", name="uq_workouts_user_date_muscle_group"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    muscle_group = Column(muscle_group_type("muscle_group"), nullable=False)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())
    # minutes
    duration = Column(Integer, nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    sets = relationship(
        "WorkoutSet",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutSet.id",
    )

    def __repr__(self):
        return "<Workout(id=%s, date=%s, muscle_group=%s, completed=%s)>" % (
            self.id,
            self.date,
            self.muscle_group,
            self.completed,
        )


class WorkoutSet(Base):
    __tablename__ = "workout_sets"
    __table_args__ = (
        CheckConstraint("reps > 0", name="ck_workout_sets_reps_positive"),
        CheckConstraint("weight IS NULL OR weight >= 0", name="ck_workout_sets_weight_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    workout_id = Column(Integer, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False, index=True)
    reps = Column(Integer, nullable=False)
    weight = Column(Float, nullable=True)
    # seconds
    rest_time = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    workout = relationship("Workout", back_populates="sets")
    exercise = relationship("Exercise", lazy="joined")

"""Streak bookkeeping applied when a workout is completed.

A completion always extends the current streak by one; there is no rule that
breaks a streak after missed days, so ``current_streak`` only ever grows.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StatsSnapshot:
    current_streak: int = 0
    best_streak: int = 0
    total_workouts: int = 0


def apply_completion(snapshot: StatsSnapshot) -> StatsSnapshot:
    current = snapshot.current_streak + 1
    return StatsSnapshot(
        current_streak=current,
        best_streak=max(snapshot.best_streak, current),
        total_workouts=snapshot.total_workouts + 1,
    )

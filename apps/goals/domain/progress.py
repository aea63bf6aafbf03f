# apps/goals/domain/progress.py
import math
from datetime import date, datetime
from typing import Optional, Union

from django.utils import timezone

from apps.goals.domain.entities import GoalEntity, GoalProgress
from apps.goals.domain.policies import StatusInputs, StatusPolicy, get_status_policy

DateLike = Union[date, datetime]


def as_date(value: DateLike) -> date:
    """Sprowadza datetime do daty kalendarzowej (lokalnej dla aware)."""
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value).date()
        return value.date()
    return value


def days_between(start: DateLike, end: DateLike) -> int:
    """Liczba pełnych dni kalendarzowych od start do end (może być ujemna)."""
    return (as_date(end) - as_date(start)).days


def display_percentage(percentage: float) -> int:
    """Procent do paska postępu: zaokrąglony i przycięty do 0-100."""
    rounded = math.floor(percentage + 0.5)
    return max(0, min(100, rounded))


def time_elapsed_percentage(start: DateLike, end: DateLike, now: DateLike) -> float:
    """Ile procent okresu celu upłynęło (0 przed startem, 100 po końcu)."""
    today = as_date(now)
    total = days_between(start, end)
    if total <= 0:
        return 100.0
    if today > as_date(end):
        return 100.0
    if today < as_date(start):
        return 0.0
    elapsed = days_between(start, today)
    return min(100.0, max(0.0, (elapsed / total) * 100))


class GoalProgressEngine:
    def __init__(self, policy: Union[StatusPolicy, str, None] = None):
        if policy is None or isinstance(policy, str):
            policy = get_status_policy(policy)
        self.policy = policy

    def compute(self, goal: GoalEntity, now: Optional[DateLike] = None) -> GoalProgress:
        if now is None:
            now = timezone.now()

        # 1. Czas trwania (cel jednodniowy -> 1, żeby nie dzielić przez zero)
        days_total = days_between(goal.start_date, goal.end_date)
        if days_total <= 0:
            days_total = 1

        # 2. Czas, który upłynął / pozostał
        time_elapsed = max(0, days_between(goal.start_date, now))
        time_remaining = max(0, days_between(now, goal.end_date))

        # 3. Procent realizacji
        if goal.target_value == 0:
            percentage = 0.0
        else:
            percentage = (goal.current_value / goal.target_value) * 100

        # 4. Oczekiwany postęp wg upływu czasu
        expected_progress = (time_elapsed / days_total) * 100

        status = self.policy(StatusInputs(
            percentage=percentage,
            expected_progress=expected_progress,
            days_remaining=time_remaining,
            progress=display_percentage(percentage),
            elapsed_percentage=time_elapsed_percentage(goal.start_date, goal.end_date, now),
        ))

        # 5. Projekcja liniowa (brak danych, gdy nic jeszcze nie upłynęło)
        projected_value = None
        if time_elapsed > 0:
            daily_rate = goal.current_value / time_elapsed
            projected_value = goal.current_value + daily_rate * time_remaining

        remaining = max(0.0, goal.target_value - goal.current_value)

        return GoalProgress(
            percentage=percentage,
            remaining=remaining,
            status=status,
            time_elapsed=time_elapsed,
            time_remaining=time_remaining,
            days_total=days_total,
            expected_progress=expected_progress,
            projected_value=projected_value,
        )


def compute_progress(goal: GoalEntity, now: Optional[DateLike] = None,
                     policy: Union[StatusPolicy, str, None] = None) -> GoalProgress:
    return GoalProgressEngine(policy).compute(goal, now)

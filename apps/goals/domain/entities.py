# apps/goals/domain/entities.py
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional


class GoalStatus(str, Enum):
    COMPLETED = 'completed'
    ON_TRACK = 'on_track'
    AT_RISK = 'at_risk'
    BEHIND = 'behind'


class GoalType(str, Enum):
    REVENUE = 'revenue'
    DEALS = 'deals'
    UNITS = 'units'
    MEETINGS = 'meetings'
    CALLS = 'calls'


class GoalScope(str, Enum):
    INDIVIDUAL = 'individual'
    TEAM = 'team'
    DEPARTMENT = 'department'
    COMPANY = 'company'


class GoalPeriod(str, Enum):
    MONTHLY = 'monthly'
    QUARTERLY = 'quarterly'
    YEARLY = 'yearly'
    CUSTOM = 'custom'


@dataclass
class GoalEntity:
    id: Optional[int]  # None przed zapisem
    title: str
    target_value: float
    start_date: date
    end_date: date
    current_value: float = 0.0
    description: str = ""

    goal_type: GoalType = GoalType.REVENUE
    scope: GoalScope = GoalScope.INDIVIDUAL
    period: GoalPeriod = GoalPeriod.QUARTERLY  # tylko informacyjnie, nie wpływa na obliczenia

    # Relacje (tylko ID)
    owner_id: Optional[int] = None
    team_id: str = ""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_revenue(self) -> bool:
        return self.goal_type == GoalType.REVENUE


@dataclass(frozen=True)
class GoalProgress:
    """Wynik obliczeń postępu. Nigdy nie jest zapisywany."""
    percentage: float  # bez przycinania do 100
    remaining: float
    status: GoalStatus
    time_elapsed: int  # dni
    time_remaining: int  # dni
    days_total: int
    expected_progress: float
    projected_value: Optional[float] = None

    def as_dict(self) -> dict:
        return {
            'percentage': self.percentage,
            'remaining': self.remaining,
            'status': self.status.value,
            'time_elapsed': self.time_elapsed,
            'time_remaining': self.time_remaining,
            'days_total': self.days_total,
            'expected_progress': self.expected_progress,
            'projected_value': self.projected_value,
        }

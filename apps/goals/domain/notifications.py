# apps/goals/domain/notifications.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from django.conf import settings

from apps.goals.domain.entities import GoalEntity, GoalStatus
from apps.goals.domain.forecast import days_remaining
from apps.goals.domain.progress import GoalProgressEngine


class NotificationType(str, Enum):
    COMPLETED = 'completed'
    AT_RISK = 'at_risk'
    BEHIND = 'behind'
    APPROACHING = 'approaching'


@dataclass
class GoalNotification:
    id: str
    goal_id: Optional[int]
    goal_title: str
    type: NotificationType
    message: str
    timestamp: datetime
    read: bool = False


MESSAGES = {
    NotificationType.COMPLETED: 'Congratulations! Goal "{title}" has been completed.',
    NotificationType.AT_RISK: 'Goal "{title}" is falling behind schedule and may be at risk.',
    NotificationType.BEHIND: 'Goal "{title}" is significantly behind schedule and needs attention.',
    NotificationType.APPROACHING: 'Goal "{title}" deadline is approaching in {days} days.',
}

STATUS_TO_TYPE = {
    GoalStatus.COMPLETED: NotificationType.COMPLETED,
    GoalStatus.AT_RISK: NotificationType.AT_RISK,
    GoalStatus.BEHIND: NotificationType.BEHIND,
}


class GoalNotificationService:
    def __init__(self, engine: Optional[GoalProgressEngine] = None, approaching_days: Optional[int] = None):
        self.engine = engine or GoalProgressEngine()
        if approaching_days is None:
            approaching_days = getattr(settings, 'GOAL_APPROACHING_DAYS', 7)
        self.approaching_days = approaching_days

    def build(self, goals: Iterable[GoalEntity], now: datetime) -> List[GoalNotification]:
        """Status z silnika postępu + ostrzeżenie o zbliżającym się terminie."""
        notifications = []

        for goal in goals:
            progress = self.engine.compute(goal, now)

            # 1. Status (on track nie generuje powiadomienia)
            n_type = STATUS_TO_TYPE.get(progress.status)
            if n_type:
                notifications.append(self._make(goal, n_type, now))

            # 2. Zbliżający się termin (tylko dla nieukończonych)
            left = days_remaining(goal.end_date, now)
            if progress.status != GoalStatus.COMPLETED and 0 < left <= self.approaching_days:
                notifications.append(self._make(goal, NotificationType.APPROACHING, now, days=left))

        return notifications

    def _make(self, goal: GoalEntity, n_type: NotificationType, now: datetime, **fmt) -> GoalNotification:
        return GoalNotification(
            id=f"{n_type.value}-{goal.id}",
            goal_id=goal.id,
            goal_title=goal.title,
            type=n_type,
            message=MESSAGES[n_type].format(title=goal.title, **fmt),
            timestamp=now,
        )

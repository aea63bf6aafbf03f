# apps/goals/adapters/memory_repository.py
from dataclasses import replace
from itertools import count
from typing import Dict, Iterable, List, Optional

from django.utils import timezone

from apps.goals.domain.entities import GoalEntity
from apps.goals.ports.repositories import GoalNotFoundError, IGoalRepository


class InMemoryGoalRepository(IGoalRepository):
    """Repozytorium w pamięci (testy, skrypty bez bazy). Zwraca kopie encji."""

    def __init__(self, goals: Iterable[GoalEntity] = ()):
        self._goals: Dict[int, GoalEntity] = {}
        self._ids = count(1)
        for goal in goals:
            self._insert(goal)

    def get_by_id(self, goal_id: int) -> Optional[GoalEntity]:
        goal = self._goals.get(goal_id)
        return replace(goal) if goal else None

    def list(self, owner_id: Optional[int] = None, team_id: Optional[str] = None) -> List[GoalEntity]:
        goals = [
            g for g in self._goals.values()
            if (owner_id is None or g.owner_id == owner_id) and (not team_id or g.team_id == team_id)
        ]
        goals.sort(key=lambda g: (g.created_at, g.id), reverse=True)
        return [replace(g) for g in goals]

    def save(self, goal: GoalEntity) -> GoalEntity:
        if goal.id is None:
            return self._insert(goal)
        if goal.id not in self._goals:
            raise GoalNotFoundError(goal.id)
        stored = replace(goal, created_at=self._goals[goal.id].created_at, updated_at=timezone.now())
        self._goals[stored.id] = stored
        return replace(stored)

    def _insert(self, goal: GoalEntity) -> GoalEntity:
        now = timezone.now()
        goal_id = goal.id if goal.id is not None else self._next_id()
        stored = replace(goal, id=goal_id, created_at=goal.created_at or now, updated_at=goal.updated_at or now)
        self._goals[goal_id] = stored
        return replace(stored)

    def _next_id(self) -> int:
        goal_id = next(self._ids)
        while goal_id in self._goals:
            goal_id = next(self._ids)
        return goal_id

    def delete(self, goal_id: int) -> bool:
        return self._goals.pop(goal_id, None) is not None

# apps/goals/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List, Optional
from apps.goals.domain.entities import GoalEntity


class GoalNotFoundError(LookupError):
    def __init__(self, goal_id):
        super().__init__(f"Goal with ID {goal_id} not found")
        self.goal_id = goal_id


class IGoalRepository(ABC):
    @abstractmethod
    def get_by_id(self, goal_id: int) -> Optional[GoalEntity]:
        pass

    @abstractmethod
    def list(self, owner_id: Optional[int] = None, team_id: Optional[str] = None) -> List[GoalEntity]:
        """Zwraca cele (najnowsze najpierw), opcjonalnie filtrowane po właścicielu / zespole."""
        pass

    @abstractmethod
    def save(self, goal: GoalEntity) -> GoalEntity:
        """Zapisuje (tworzy lub aktualizuje) cel i zwraca zaktualizowaną encję (np. z ID).

        Aktualizacja nieistniejącego ID rzuca GoalNotFoundError.
        """
        pass

    @abstractmethod
    def delete(self, goal_id: int) -> bool:
        """Usuwa cel. Zwraca False, jeśli nie istniał."""
        pass

# apps/goals/application/use_cases.py
import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from apps.goals.domain.entities import GoalEntity, GoalProgress, GoalType, GoalScope, GoalPeriod
from apps.goals.domain.progress import DateLike, GoalProgressEngine
from apps.goals.ports.repositories import IGoalRepository, GoalNotFoundError

logger = logging.getLogger(__name__)

# Pola, które można zmienić przez UpdateGoalUseCase
EDITABLE_FIELDS = {
    'title', 'description', 'goal_type', 'scope', 'period',
    'target_value', 'current_value', 'start_date', 'end_date',
    'owner_id', 'team_id',
}


def validate_goal(goal: GoalEntity) -> None:
    """Walidacja przy tworzeniu/edycji. Silnik postępu sam niczego nie waliduje."""
    if not goal.title or not goal.title.strip():
        raise ValueError("Goal title cannot be empty")
    if goal.target_value < 0:
        raise ValueError("Target value cannot be negative")
    if goal.current_value < 0:
        raise ValueError("Current value cannot be negative")
    if goal.end_date <= goal.start_date:
        raise ValueError("End date must be after start date")


@dataclass
class CreateGoalInput:
    title: str
    target_value: float
    start_date: date
    end_date: date
    current_value: Optional[float] = None
    description: str = ""
    goal_type: GoalType = GoalType.REVENUE
    scope: GoalScope = GoalScope.INDIVIDUAL
    period: GoalPeriod = GoalPeriod.QUARTERLY
    owner_id: Optional[int] = None
    team_id: str = ""


class CreateGoalUseCase:
    def __init__(self, repository: IGoalRepository):
        self.repository = repository

    def execute(self, input_dto: CreateGoalInput) -> GoalEntity:
        goal = GoalEntity(
            id=None,
            title=input_dto.title,
            description=input_dto.description,
            goal_type=GoalType(input_dto.goal_type),
            scope=GoalScope(input_dto.scope),
            period=GoalPeriod(input_dto.period),
            target_value=input_dto.target_value,
            current_value=input_dto.current_value or 0,
            start_date=input_dto.start_date,
            end_date=input_dto.end_date,
            owner_id=input_dto.owner_id,
            team_id=input_dto.team_id,
        )
        validate_goal(goal)

        saved = self.repository.save(goal)
        logger.info("Created goal %s (%s)", saved.id, saved.title)
        return saved


class UpdateGoalUseCase:
    def __init__(self, repository: IGoalRepository):
        self.repository = repository

    def execute(self, goal_id: int, **changes) -> GoalEntity:
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        goal = self.repository.get_by_id(goal_id)
        if goal is None:
            raise GoalNotFoundError(goal_id)

        # Enumy mogą przyjść jako stringi (np. z formularza)
        for field, enum_cls in (('goal_type', GoalType), ('scope', GoalScope), ('period', GoalPeriod)):
            if field in changes:
                changes[field] = enum_cls(changes[field])

        updated = replace(goal, **changes)
        validate_goal(updated)

        saved = self.repository.save(updated)
        logger.info("Updated goal %s: %s", goal_id, ', '.join(sorted(changes)) or 'no changes')
        return saved


class DeleteGoalUseCase:
    def __init__(self, repository: IGoalRepository):
        self.repository = repository

    def execute(self, goal_id: int) -> None:
        if not self.repository.delete(goal_id):
            raise GoalNotFoundError(goal_id)
        logger.info("Deleted goal %s", goal_id)


class GoalProgressQuery:
    def __init__(self, repository: IGoalRepository, engine: Optional[GoalProgressEngine] = None):
        self.repository = repository
        self.engine = engine or GoalProgressEngine()

    def execute(self, goal_id: int, now: Optional[DateLike] = None) -> GoalProgress:
        goal = self.repository.get_by_id(goal_id)
        if goal is None:
            raise GoalNotFoundError(goal_id)
        return self.engine.compute(goal, now)

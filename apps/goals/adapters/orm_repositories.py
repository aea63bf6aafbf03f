# apps/goals/adapters/orm_repositories.py
from decimal import Decimal
from typing import List, Optional
from apps.goals.domain.entities import GoalEntity, GoalType, GoalScope, GoalPeriod
from apps.goals.ports.repositories import GoalNotFoundError, IGoalRepository
from apps.goals.models import SalesGoal as GoalModel


class DjangoGoalRepository(IGoalRepository):
    def to_entity(self, model: GoalModel) -> GoalEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return GoalEntity(
            id=model.id,
            title=model.title,
            description=model.description,
            goal_type=GoalType(model.goal_type),
            scope=GoalScope(model.scope),
            period=GoalPeriod(model.period),
            # Decimal -> float, silnik liczy na floatach
            target_value=float(model.target_value),
            current_value=float(model.current_value),
            start_date=model.start_date,
            end_date=model.end_date,
            owner_id=model.owner_id,
            team_id=model.team_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def get_by_id(self, goal_id: int) -> Optional[GoalEntity]:
        try:
            goal = GoalModel.objects.get(id=goal_id)
            return self.to_entity(goal)
        except GoalModel.DoesNotExist:
            return None

    def list(self, owner_id: Optional[int] = None, team_id: Optional[str] = None) -> List[GoalEntity]:
        qs = GoalModel.objects.all()
        if owner_id is not None:
            qs = qs.filter(owner_id=owner_id)
        if team_id:
            qs = qs.filter(team_id=team_id)
        return [self.to_entity(g) for g in qs.order_by('-created_at', '-id')]

    def save(self, goal: GoalEntity) -> GoalEntity:
        data = {
            'title': goal.title,
            'description': goal.description,
            'goal_type': goal.goal_type.value,
            'scope': goal.scope.value,
            'period': goal.period.value,
            'target_value': Decimal(str(goal.target_value)),
            'current_value': Decimal(str(goal.current_value)),
            'start_date': goal.start_date,
            'end_date': goal.end_date,
            'owner_id': goal.owner_id,
            'team_id': goal.team_id,
        }

        if goal.id is not None:
            # Aktualizacja istniejącego (save() zamiast update(), żeby ruszyło auto_now)
            try:
                obj = GoalModel.objects.get(id=goal.id)
            except GoalModel.DoesNotExist:
                raise GoalNotFoundError(goal.id)
            for field, value in data.items():
                setattr(obj, field, value)
            obj.save()
        else:
            obj = GoalModel.objects.create(**data)

        return self.to_entity(obj)

    def delete(self, goal_id: int) -> bool:
        deleted, _ = GoalModel.objects.filter(id=goal_id).delete()
        return deleted > 0

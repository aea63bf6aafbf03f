from datetime import date

import pytest

from apps.goals.adapters.memory_repository import InMemoryGoalRepository
from apps.goals.application.use_cases import (
    CreateGoalInput, CreateGoalUseCase, DeleteGoalUseCase, GoalProgressQuery, UpdateGoalUseCase,
)
from apps.goals.domain.entities import GoalEntity, GoalScope, GoalStatus
from apps.goals.ports.repositories import GoalNotFoundError


@pytest.fixture
def repo():
    return InMemoryGoalRepository()


def create(repo, **overrides):
    data = dict(title="Q2 revenue", target_value=500000, start_date=date(2023, 4, 1), end_date=date(2023, 6, 30))
    data.update(overrides)
    return CreateGoalUseCase(repository=repo).execute(CreateGoalInput(**data))


class TestCreateGoal:

    def test_assigns_id_and_defaults_current_value(self, repo):
        goal = create(repo)

        assert goal.id == 1
        assert goal.current_value == 0
        assert goal.created_at is not None
        assert repo.get_by_id(goal.id) == goal

    @pytest.mark.parametrize("overrides, message", [
        ({'title': '  '}, "Goal title cannot be empty"),
        ({'target_value': -1}, "Target value cannot be negative"),
        ({'current_value': -5}, "Current value cannot be negative"),
        ({'end_date': date(2023, 4, 1)}, "End date must be after start date"),
    ])
    def test_validation(self, repo, overrides, message):
        with pytest.raises(ValueError, match=message):
            create(repo, **overrides)

        assert repo.list() == []


class TestUpdateGoal:

    def test_updates_fields_and_converts_enums(self, repo):
        goal = create(repo)

        updated = UpdateGoalUseCase(repository=repo).execute(goal.id, current_value=325000, scope='team')

        assert updated.current_value == 325000
        assert updated.scope == GoalScope.TEAM
        assert updated.created_at == goal.created_at
        assert repo.get_by_id(goal.id).current_value == 325000

    def test_unknown_field_is_rejected(self, repo):
        goal = create(repo)

        with pytest.raises(ValueError, match="Cannot update fields: id"):
            UpdateGoalUseCase(repository=repo).execute(goal.id, id=99)

    def test_missing_goal(self, repo):
        with pytest.raises(GoalNotFoundError) as exc:
            UpdateGoalUseCase(repository=repo).execute(42, current_value=1)

        assert exc.value.goal_id == 42
        assert str(exc.value) == "Goal with ID 42 not found"

    def test_invalid_update_keeps_stored_goal(self, repo):
        goal = create(repo)

        with pytest.raises(ValueError):
            UpdateGoalUseCase(repository=repo).execute(goal.id, target_value=-10)

        assert repo.get_by_id(goal.id).target_value == 500000


class TestDeleteGoal:

    def test_delete(self, repo):
        goal = create(repo)

        DeleteGoalUseCase(repository=repo).execute(goal.id)

        assert repo.get_by_id(goal.id) is None

    def test_delete_missing(self, repo):
        with pytest.raises(GoalNotFoundError):
            DeleteGoalUseCase(repository=repo).execute(7)


class TestGoalProgressQuery:

    def test_computes_progress_for_stored_goal(self, repo):
        goal = create(repo, current_value=325000)

        progress = GoalProgressQuery(repo).execute(goal.id, date(2023, 5, 20))

        assert progress.percentage == pytest.approx(65.0)
        assert progress.status == GoalStatus.ON_TRACK

    def test_missing_goal(self, repo):
        with pytest.raises(GoalNotFoundError):
            GoalProgressQuery(repo).execute(3, date(2023, 5, 20))


class TestInMemoryGoalRepository:

    def test_returns_copies(self, repo):
        goal = create(repo)

        fetched = repo.get_by_id(goal.id)
        fetched.current_value = 1

        assert repo.get_by_id(goal.id).current_value == 0

    def test_seeded_ids_are_not_reused(self):
        seeded = GoalEntity(id=1, title="Seed", target_value=10,
                            start_date=date(2023, 1, 1), end_date=date(2023, 2, 1))
        repo = InMemoryGoalRepository([seeded])

        goal = create(repo)

        assert goal.id == 2

    def test_list_filters_by_owner_and_team(self, repo):
        create(repo, owner_id=1, team_id='north')
        create(repo, owner_id=2, team_id='south')

        assert [g.owner_id for g in repo.list(owner_id=1)] == [1]
        assert [g.team_id for g in repo.list(team_id='south')] == ['south']
        assert len(repo.list()) == 2

    def test_save_with_unknown_id_raises(self, repo):
        ghost = GoalEntity(id=42, title="Ghost", target_value=10,
                           start_date=date(2023, 1, 1), end_date=date(2023, 2, 1))

        with pytest.raises(GoalNotFoundError):
            repo.save(ghost)
        assert repo.list() == []

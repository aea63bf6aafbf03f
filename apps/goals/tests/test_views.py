from datetime import date
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.urls import reverse

from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.domain.entities import GoalEntity, GoalType
from apps.goals.models import SalesGoal
from apps.goals.ports.repositories import GoalNotFoundError
from apps.reports.models import ActivityLog

pytestmark = pytest.mark.django_db


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username='anna', password='secret')


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def goal(user):
    return SalesGoal.objects.create(
        title="Q2 revenue", target_value=Decimal('500000'), current_value=Decimal('325000'),
        start_date=date(2023, 4, 1), end_date=date(2023, 6, 30), owner=user,
    )


class TestDjangoGoalRepository:

    def test_round_trip_converts_decimals(self, goal):
        entity = DjangoGoalRepository().get_by_id(goal.id)

        assert entity.current_value == 325000.0
        assert isinstance(entity.target_value, float)
        assert entity.goal_type == GoalType.REVENUE

    def test_save_creates_and_updates(self):
        repo = DjangoGoalRepository()
        created = repo.save(GoalEntity(id=None, title="Calls", target_value=200, goal_type=GoalType.CALLS,
                                       start_date=date(2023, 1, 1), end_date=date(2023, 3, 31)))

        created.current_value = 50.5
        updated = repo.save(created)

        assert updated.id == created.id
        assert SalesGoal.objects.get(id=created.id).current_value == Decimal('50.50')

    def test_missing_goal_and_delete(self, goal):
        repo = DjangoGoalRepository()

        assert repo.get_by_id(goal.id + 100) is None
        assert repo.delete(goal.id) is True
        assert repo.delete(goal.id) is False

    def test_save_with_unknown_id_raises(self, goal):
        repo = DjangoGoalRepository()
        ghost = repo.get_by_id(goal.id)
        ghost.id = goal.id + 100

        with pytest.raises(GoalNotFoundError):
            repo.save(ghost)
        assert SalesGoal.objects.count() == 1


class TestGoalViews:

    def test_login_required(self, client):
        response = client.get(reverse('goal_list'))

        assert response.status_code == 302

    def test_list(self, auth_client, goal):
        response = auth_client.get(reverse('goal_list'))

        assert response.status_code == 200
        assert [row['goal'].id for row in response.context['rows']] == [goal.id]
        assert response.context['rows'][0]['bar_width'] == 65

    def test_create_logs_activity(self, auth_client, user):
        response = auth_client.post(reverse('goal_create'), {
            'title': 'Q3 deals', 'goal_type': 'deals', 'scope': 'team', 'period': 'quarterly',
            'target_value': '40', 'current_value': '0',
            'start_date': '2023-07-01', 'end_date': '2023-09-30',
        })

        assert response.status_code == 302
        goal = SalesGoal.objects.get(title='Q3 deals')
        assert goal.owner == user
        assert ActivityLog.objects.filter(object_id=goal.id, action_type='created').exists()

    def test_create_rejects_reversed_dates(self, auth_client):
        response = auth_client.post(reverse('goal_create'), {
            'title': 'Broken', 'goal_type': 'revenue', 'scope': 'individual', 'period': 'custom',
            'target_value': '10', 'current_value': '0',
            'start_date': '2023-07-01', 'end_date': '2023-06-30',
        })

        assert response.status_code == 200
        assert "End date must be after start date" in response.context['form'].non_field_errors()
        assert not SalesGoal.objects.filter(title='Broken').exists()

    def test_edit_and_delete(self, auth_client, goal):
        response = auth_client.post(reverse('goal_edit', args=[goal.id]), {
            'title': goal.title, 'goal_type': 'revenue', 'scope': 'individual', 'period': 'quarterly',
            'target_value': '500000', 'current_value': '400000',
            'start_date': '2023-04-01', 'end_date': '2023-06-30',
        })
        assert response.status_code == 302
        goal.refresh_from_db()
        assert goal.current_value == Decimal('400000')

        response = auth_client.post(reverse('goal_delete', args=[goal.id]))
        assert response.status_code == 302
        assert not SalesGoal.objects.filter(id=goal.id).exists()

    def test_delete_missing_is_404(self, auth_client):
        assert auth_client.post(reverse('goal_delete', args=[999])).status_code == 404

    def test_progress_api(self, auth_client, goal):
        response = auth_client.get(reverse('goal_progress_api', args=[goal.id]), {'as_of': '2023-05-20'})

        data = response.json()
        assert data['status'] == 'on_track'
        assert data['time_elapsed'] == 49
        assert data['display_percentage'] == 65

    def test_progress_api_bad_date(self, auth_client, goal):
        response = auth_client.get(reverse('goal_progress_api', args=[goal.id]), {'as_of': 'yesterday'})

        assert response.status_code == 400

    def test_progress_api_missing_goal(self, auth_client):
        assert auth_client.get(reverse('goal_progress_api', args=[999])).status_code == 404

    def test_dashboard(self, auth_client, goal):
        response = auth_client.get(reverse('goal_dashboard'), {'when': 'all'})

        assert response.status_code == 200
        assert response.context['summary'].total_goals == 1

    def test_dashboard_team_table(self, auth_client, goal, user):
        goal.team_id = 'emea'
        goal.save()
        SalesGoal.objects.create(
            title="Q2 deals", target_value=Decimal('10'), current_value=Decimal('5'),
            start_date=date(2023, 4, 1), end_date=date(2023, 6, 30), owner=user, team_id='emea',
        )

        response = auth_client.get(reverse('goal_dashboard'), {'when': 'all'})

        teams = response.context['teams']
        assert [t.team_id for t in teams] == ['emea']
        # (65 + 50) / 2 = 57.5 -> 58
        assert teams[0].average_completion == 58
        assert b'team-performance' in response.content
        assert response.context['forecast'].projected_final == 325005
        assert b'forecast-totals' in response.content

    def test_forecast_api(self, auth_client, goal):
        response = auth_client.get(reverse('goal_forecast_api'), {'period': '6months', 'goal': goal.id})

        assert response.status_code == 200
        assert response.json()['period'] == '6months'
        assert response.json()['points']
        # Cel z 2023 roku jest po terminie, więc prognoza = obecna wartość
        assert response.json()['totals'] == {
            'current': 325000, 'target': 500000, 'projected_final': 325000, 'change_vs_target': '-35.0%',
        }

    def test_forecast_api_unknown_period(self, auth_client):
        assert auth_client.get(reverse('goal_forecast_api'), {'period': '2years'}).status_code == 400

    def test_notifications_api(self, auth_client, goal):
        response = auth_client.get(reverse('goal_notifications_api'))

        # Cel z 2023 roku jest dziś po terminie i poniżej targetu
        assert [n['type'] for n in response.json()['notifications']] == ['behind']


class TestGoalProgressReportCommand:

    def test_prints_every_goal(self, goal):
        out = StringIO()

        call_command('goal_progress_report', '--as-of', '2023-05-20', stdout=out)

        output = out.getvalue()
        assert "Q2 revenue: 65.0%" in output
        assert "49/90" in output
        assert "on_track" in output
        assert "Przeliczono 1 celów." in output

    def test_invalid_date(self):
        with pytest.raises(CommandError):
            call_command('goal_progress_report', '--as-of', '2023-02-30', stdout=StringIO())

import pytest
from django.contrib.auth.models import AnonymousUser
from django.urls import reverse

from apps.goals.models import SalesGoal
from apps.reports.models import ActivityLog
from apps.reports.services import ActivityLogger

pytestmark = pytest.mark.django_db


class TestActivityLogger:

    def test_log_entry_for_model_class(self, django_user_model):
        user = django_user_model.objects.create_user(username='anna', password='secret')

        entry = ActivityLogger.log(user, SalesGoal, 7, ActivityLog.ActionType.DELETED, "Deleted goal #7",
                                   details={'title': 'Q2'})

        assert entry.content_type.model == 'salesgoal'
        assert entry.object_id == 7
        assert entry.details == {'title': 'Q2'}
        assert entry.content_object is None

    def test_anonymous_user_is_skipped(self):
        assert ActivityLogger.log(AnonymousUser(), SalesGoal, 1, ActivityLog.ActionType.CREATED) is None
        assert not ActivityLog.objects.exists()

    def test_activity_view(self, client, django_user_model):
        user = django_user_model.objects.create_user(username='anna', password='secret')
        ActivityLogger.log(user, SalesGoal, 3, ActivityLog.ActionType.UPDATED, "Updated goal")
        client.force_login(user)

        response = client.get(reverse('activity_log'))

        assert [e.description for e in response.context['entries']] == ["Updated goal"]

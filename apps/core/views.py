from django.shortcuts import render
from django.contrib.auth.decorators import login_required
from django.utils import timezone

from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.domain.notifications import GoalNotificationService
from apps.goals.domain.summary import filter_goals, summarize
from apps.territories.adapters.orm_repositories import DjangoTerritoryRepository
from apps.territories.domain.entities import RequestStatus
from apps.territories.views import territory_rows


@login_required
def dashboard_view(request):
    now = timezone.now()

    # Cele aktywne (nie zakończone w kalendarzu)
    goals = filter_goals(DjangoGoalRepository().list(), 'active', now)
    notifications = GoalNotificationService().build(goals, now)

    territory_repo = DjangoTerritoryRepository()
    territories = territory_repo.list()
    pending_count = len(territory_repo.list_requests(status=RequestStatus.PENDING))

    return render(request, 'core/dashboard.html', {
        'summary': summarize(goals, now),
        'notifications': notifications[:5],
        'territories': territory_rows(territories)[:5],
        'pending_requests': pending_count,
        'today': timezone.localdate(now),
    })

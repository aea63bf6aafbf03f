from django.shortcuts import render, redirect
from django.http import HttpResponse, JsonResponse, Http404
from django.contrib.auth.decorators import login_required
from django.views.decorators.http import require_http_methods
from django.utils import timezone
from django.utils.dateparse import parse_date

from apps.reports.models import ActivityLog
from apps.reports.services import ActivityLogger
from .adapters.orm_repositories import DjangoGoalRepository
from .application.use_cases import (
    CreateGoalUseCase, CreateGoalInput, UpdateGoalUseCase, DeleteGoalUseCase, GoalProgressQuery,
)
from .domain.forecast import build_goal_forecast, forecast_totals
from .domain.notifications import GoalNotificationService
from .domain.progress import GoalProgressEngine, display_percentage
from .domain.summary import filter_goals, summarize, summarize_by_team, TIME_FILTERS
from .filters import GoalFilter
from .forms import GoalForm
from .models import SalesGoal
from .ports.repositories import GoalNotFoundError

FORECAST_PERIODS = {'3months': 3, '6months': 6, '12months': 12}


def _now_from_request(request):
    """?as_of=YYYY-MM-DD pozwala podejrzeć stan na inny dzień."""
    as_of = request.GET.get('as_of')
    if not as_of:
        return timezone.now()
    parsed = parse_date(as_of)
    if parsed is None:
        raise ValueError(f"Invalid as_of date: {as_of}")
    return parsed


def _progress_rows(goals, now):
    engine = GoalProgressEngine()
    rows = []
    for goal in goals:
        progress = engine.compute(goal, now)
        rows.append({
            'goal': goal,
            'progress': progress,
            'bar_width': display_percentage(progress.percentage),
        })
    return rows


@login_required
def goal_list_view(request):
    """Lista celów z postępem i statusem."""
    repo = DjangoGoalRepository()
    f = GoalFilter(request.GET, queryset=SalesGoal.objects.all(), request=request)

    time_filter = request.GET.get('when', 'all')
    if time_filter not in TIME_FILTERS:
        time_filter = 'all'

    now = timezone.now()
    goals = filter_goals([repo.to_entity(g) for g in f.qs], time_filter, now)

    return render(request, 'goals/goal_list.html', {
        'filter': f,
        'rows': _progress_rows(goals, now),
        'time_filter': time_filter,
        'time_filters': TIME_FILTERS,
    })


@login_required
def goal_create_view(request):
    if request.method == 'POST':
        form = GoalForm(request.POST)
        if form.is_valid():
            input_dto = CreateGoalInput(owner_id=request.user.id, **form.to_use_case_kwargs())
            try:
                goal = CreateGoalUseCase(repository=DjangoGoalRepository()).execute(input_dto)
            except ValueError as e:
                form.add_error(None, str(e))
            else:
                ActivityLogger.log(request.user, SalesGoal, goal.id, ActivityLog.ActionType.CREATED,
                                   f"Created goal: {goal.title}")
                return redirect('goal_list')
    else:
        form = GoalForm()

    return render(request, 'goals/goal_form.html', {'form': form, 'title': 'New Goal'})


@login_required
def goal_edit_view(request, pk):
    repo = DjangoGoalRepository()
    try:
        instance = SalesGoal.objects.get(pk=pk)
    except SalesGoal.DoesNotExist:
        raise Http404("Goal not found")

    if request.method == 'POST':
        form = GoalForm(request.POST, instance=instance)
        if form.is_valid():
            changes = form.to_use_case_kwargs()
            try:
                goal = UpdateGoalUseCase(repository=repo).execute(pk, **changes)
            except ValueError as e:
                form.add_error(None, str(e))
            else:
                ActivityLogger.log(request.user, SalesGoal, goal.id, ActivityLog.ActionType.UPDATED,
                                   f"Updated goal: {goal.title}",
                                   details={'current_value': goal.current_value})
                return redirect('goal_list')
    else:
        form = GoalForm(instance=instance)

    return render(request, 'goals/goal_form.html', {'form': form, 'title': f'Edit: {instance.title}'})


@require_http_methods(["POST"])
@login_required
def goal_delete_view(request, pk):
    try:
        DeleteGoalUseCase(repository=DjangoGoalRepository()).execute(pk)
    except GoalNotFoundError:
        raise Http404("Goal not found")

    ActivityLogger.log(request.user, SalesGoal, pk, ActivityLog.ActionType.DELETED, f"Deleted goal #{pk}")
    return redirect('goal_list')


@login_required
def goal_progress_api_view(request, pk):
    try:
        now = _now_from_request(request)
        progress = GoalProgressQuery(DjangoGoalRepository()).execute(pk, now)
    except ValueError as e:
        return HttpResponse(f"Error: {e}", status=400)
    except GoalNotFoundError:
        raise Http404("Goal not found")

    data = progress.as_dict()
    data['display_percentage'] = display_percentage(progress.percentage)
    return JsonResponse(data)


@login_required
def goal_dashboard_view(request):
    """Dashboard: karty podsumowania, powiadomienia i tabela celów."""
    repo = DjangoGoalRepository()
    now = timezone.now()

    time_filter = request.GET.get('when', 'active')
    if time_filter not in TIME_FILTERS:
        time_filter = 'active'

    goals = filter_goals(repo.list(), time_filter, now)

    return render(request, 'goals/goal_dashboard.html', {
        'summary': summarize(goals, now),
        'teams': summarize_by_team(goals, now),
        'forecast': forecast_totals(goals, now),
        'notifications': GoalNotificationService().build(goals, now),
        'rows': _progress_rows(goals, now),
        'time_filter': time_filter,
        'time_filters': TIME_FILTERS,
    })


@login_required
def goal_forecast_api_view(request):
    """Dane do wykresu prognozy przychodów (wszystkie cele lub jeden ?goal=ID)."""
    repo = DjangoGoalRepository()

    period = request.GET.get('period', '3months')
    if period not in FORECAST_PERIODS:
        return HttpResponse(f"Error: unknown period {period}", status=400)

    goal_id = request.GET.get('goal')
    if goal_id:
        goal = repo.get_by_id(int(goal_id)) if goal_id.isdigit() else None
        if goal is None:
            raise Http404("Goal not found")
        goals = [goal]
    else:
        goals = repo.list()

    now = timezone.now()
    points = build_goal_forecast(goals, now, months=FORECAST_PERIODS[period])
    return JsonResponse({
        'period': period,
        'points': [p.as_dict() for p in points],
        'totals': forecast_totals(goals, now).as_dict(),
    })


@login_required
def goal_notifications_api_view(request):
    goals = DjangoGoalRepository().list()
    notifications = GoalNotificationService().build(goals, timezone.now())

    return JsonResponse({'notifications': [
        {
            'id': n.id,
            'goal_id': n.goal_id,
            'goal_title': n.goal_title,
            'type': n.type.value,
            'message': n.message,
            'timestamp': n.timestamp.isoformat(),
            'read': n.read,
        }
        for n in notifications
    ]})

from django.shortcuts import render, redirect
from django.http import Http404
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.views.decorators.http import require_http_methods

from apps.reports.models import ActivityLog
from apps.reports.services import ActivityLogger
from .adapters.orm_repositories import DjangoTerritoryRepository
from .domain.entities import TerritoryEntity, RequestStatus
from .domain.services import TerritoryService, progress_variant
from .forms import TerritoryForm, AssignmentRequestForm
from .models import Territory, TerritoryAssignmentRequest, AccountOwnership
from .ports.repositories import TerritoryNotFoundError, AssignmentRequestNotFoundError


def territory_rows(territories):
    rows = []
    for territory in territories:
        progress = TerritoryService.revenue_progress(territory)
        rows.append({
            'territory': territory,
            'progress': progress,
            'variant': progress_variant(progress),
        })
    return rows


def rep_rows(reps, territories):
    """Handlowcy z realizacją kwoty i nazwami terytoriów."""
    rows = []
    for rep in reps:
        attainment = TerritoryService.rep_attainment(rep)
        rows.append({
            'rep': rep,
            'attainment': attainment,
            'variant': progress_variant(attainment),
            'territories': [territories[t].name for t in rep.territory_ids if t in territories],
        })
    return rows


def request_rows(requests, territories, reps):
    reps_by_id = {r.id: r for r in reps}
    return [
        {
            'request': req,
            'territory': territories.get(req.territory_id),
            'rep': reps_by_id.get(req.requested_for_id),
        }
        for req in requests
    ]


@login_required
def territory_list_view(request):
    repo = DjangoTerritoryRepository()
    region = request.GET.get('region', '')

    territories = {t.id: t for t in repo.list()}
    reps = repo.list_reps()

    return render(request, 'territories/territory_list.html', {
        'rows': territory_rows(repo.list(region=region or None)),
        'regions': Territory.objects.order_by('region').values_list('region', flat=True).distinct(),
        'region': region,
        'reps': rep_rows(reps, territories),
        'pending_requests': request_rows(repo.list_requests(status=RequestStatus.PENDING), territories, reps),
    })


def _save_territory(form, territory_id=None):
    """Zapis przez serwis (walidacja domenowa). Zwraca encję albo None, gdy są błędy."""
    entity = TerritoryEntity(id=territory_id, **form.to_entity_kwargs())
    try:
        return TerritoryService(DjangoTerritoryRepository()).save_territory(entity)
    except ValueError as e:
        form.add_error(None, str(e))
        return None


@login_required
def territory_create_view(request):
    if request.method == 'POST':
        form = TerritoryForm(request.POST)
        if form.is_valid():
            territory = _save_territory(form)
            if territory:
                ActivityLogger.log(request.user, Territory, territory.id, ActivityLog.ActionType.CREATED,
                                   f"Created territory: {territory.name}")
                return redirect('territory_list')
    else:
        form = TerritoryForm()

    return render(request, 'territories/territory_form.html', {'form': form, 'title': 'New Territory'})


@login_required
def territory_edit_view(request, pk):
    try:
        instance = Territory.objects.get(pk=pk)
    except Territory.DoesNotExist:
        raise Http404("Territory not found")

    if request.method == 'POST':
        form = TerritoryForm(request.POST, instance=instance)
        if form.is_valid():
            territory = _save_territory(form, territory_id=pk)
            if territory:
                ActivityLogger.log(request.user, Territory, territory.id, ActivityLog.ActionType.UPDATED,
                                   f"Updated territory: {territory.name}",
                                   details={'revenue_current': territory.revenue_current})
                return redirect('territory_list')
    else:
        form = TerritoryForm(instance=instance)

    return render(request, 'territories/territory_form.html', {'form': form, 'title': f'Edit: {instance.name}'})


@require_http_methods(["POST"])
@login_required
def territory_delete_view(request, pk):
    try:
        TerritoryService(DjangoTerritoryRepository()).delete_territory(pk)
    except TerritoryNotFoundError:
        raise Http404("Territory not found")

    ActivityLogger.log(request.user, Territory, pk, ActivityLog.ActionType.DELETED, f"Deleted territory #{pk}")
    return redirect('territory_list')


@login_required
def assignment_request_create_view(request):
    if request.method == 'POST':
        form = AssignmentRequestForm(request.POST)
        if form.is_valid():
            service = TerritoryService(DjangoTerritoryRepository())
            try:
                assignment = service.create_request(
                    territory_id=form.cleaned_data['territory'].id,
                    requested_for_id=form.cleaned_data['requested_for'].id,
                    reason=form.cleaned_data['reason'],
                    requested_by_id=request.user.id,
                )
            except (ValueError, TerritoryNotFoundError) as e:
                form.add_error(None, str(e))
            else:
                ActivityLogger.log(request.user, TerritoryAssignmentRequest, assignment.id,
                                   ActivityLog.ActionType.CREATED,
                                   f"Requested {form.cleaned_data['requested_for']} for "
                                   f"{form.cleaned_data['territory']}")
                return redirect('territory_list')
    else:
        form = AssignmentRequestForm(initial={'territory': request.GET.get('territory')})

    return render(request, 'territories/request_form.html', {'form': form, 'title': 'Request Assignment'})


@require_http_methods(["POST"])
@login_required
def assignment_request_resolve_view(request, pk, decision):
    """decision: approved | rejected"""
    service = TerritoryService(DjangoTerritoryRepository())
    try:
        status = RequestStatus(decision)
        service.resolve_request(pk, status, resolved_by_id=request.user.id)
    except AssignmentRequestNotFoundError:
        raise Http404("Request not found")
    except ValueError as e:
        # Nieznana decyzja albo wniosek już rozpatrzony
        messages.error(request, str(e))
        return redirect('territory_list')

    ActivityLogger.log(request.user, TerritoryAssignmentRequest, pk, ActivityLog.ActionType.STATUS_CHANGE,
                       f"Request #{pk} {status.value}",
                       details={'old_status': RequestStatus.PENDING.value, 'new_status': status.value})
    messages.success(request, f"Request #{pk} {status.value}.")
    return redirect('territory_list')


@login_required
def account_ownership_view(request):
    ownerships = AccountOwnership.objects.select_related('owner', 'territory')
    territory_id = request.GET.get('territory')
    if territory_id and territory_id.isdigit():
        ownerships = ownerships.filter(territory_id=int(territory_id))
    return render(request, 'territories/account_list.html', {'ownerships': ownerships})

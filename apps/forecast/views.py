from django.http import HttpResponse, JsonResponse
from django.contrib.auth.decorators import login_required
from django.utils import timezone

from .domain.revenue import OpportunityData, calculate_revenue_forecast, apply_win_probability
from .models import Opportunity


def _opportunity_data():
    return [
        OpportunityData(created_at=o.created_at, expected_value=float(o.expected_value), status=o.status)
        for o in Opportunity.objects.all()
    ]


def _int_param(request, name, default, maximum=60):
    raw = request.GET.get(name)
    if raw in (None, ''):
        return default
    if not raw.isdigit() or not 0 < int(raw) <= maximum:
        raise ValueError(f"{name} must be an integer between 1 and {maximum}")
    return int(raw)


@login_required
def revenue_forecast_api_view(request):
    """
    ?history=12&months=6 -> historia wygranych szans + prognoza trendu.
    ?weighted=1 dodatkowo zwraca ważony lejek (pipeline) wg etapów.
    """
    try:
        history_months = _int_param(request, 'history', 12)
        forecast_months = _int_param(request, 'months', 6)
    except ValueError as e:
        return HttpResponse(f"Error: {e}", status=400)

    opportunities = _opportunity_data()
    forecast = calculate_revenue_forecast(
        opportunities, history_months=history_months, forecast_months=forecast_months, now=timezone.now()
    )
    data = {'months': [m.as_dict() for m in forecast]}

    if request.GET.get('weighted'):
        open_opps = [o for o in opportunities if o.status not in ('awarded', 'lost')]
        data['weighted_pipeline'] = round(sum(o.expected_value for o in apply_win_probability(open_opps)), 2)

    return JsonResponse(data)

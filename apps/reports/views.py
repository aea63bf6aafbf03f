import json
import math

from django.http import JsonResponse, HttpResponse
from django.shortcuts import render
from django.contrib.auth.decorators import login_required
from django.views.decorators.http import require_http_methods

from .domain.temperature import get_tcf, fahrenheit_to_celsius, celsius_to_fahrenheit, correct_row
from .models import ActivityLog


def _to_number(value, name):
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number")
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number")
    return number


def _parse_temperature(data):
    """Zwraca (celsius, fahrenheit) z celsius albo fahrenheit w danych."""
    if data.get('celsius') not in (None, ''):
        celsius = _to_number(data['celsius'], 'celsius')
        return celsius, celsius_to_fahrenheit(celsius)
    if data.get('fahrenheit') not in (None, ''):
        fahrenheit = _to_number(data['fahrenheit'], 'fahrenheit')
        return fahrenheit_to_celsius(fahrenheit), fahrenheit
    raise ValueError("celsius or fahrenheit is required")


@login_required
@require_http_methods(["GET", "POST"])
def temperature_correction_api_view(request):
    """
    GET  ?celsius=25 | ?fahrenheit=77  -> współczynnik TCF
    POST {"celsius": 25, "rows": [{"bus_section": "A", "ag": "100"}]} -> wiersze skorygowane do 20°C
    """
    if request.method == 'POST':
        try:
            data = json.loads(request.body or b'{}')
        except json.JSONDecodeError:
            return HttpResponse("Error: invalid JSON", status=400)
        if not isinstance(data, dict):
            return HttpResponse("Error: expected a JSON object", status=400)
    else:
        data = request.GET

    try:
        celsius, fahrenheit = _parse_temperature(data)
    except (ValueError, OverflowError) as e:
        return HttpResponse(f"Error: {e}", status=400)

    tcf = get_tcf(celsius)
    response = {'celsius': celsius, 'fahrenheit': fahrenheit, 'tcf': tcf}

    if request.method == 'POST':
        rows = data.get('rows') or []
        key_field = data.get('key_field', 'bus_section')
        if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
            return HttpResponse("Error: rows must be a list of objects", status=400)
        response['rows'] = [correct_row(row, tcf, key_field=key_field) for row in rows]

    return JsonResponse(response)


@login_required
def activity_log_view(request):
    """Historia zmian (ostatnie 100 wpisów)."""
    entries = ActivityLog.objects.select_related('user', 'content_type')[:100]
    return render(request, 'reports/activity_log.html', {'entries': entries})

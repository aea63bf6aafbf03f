# apps/forecast/domain/revenue.py
from dataclasses import dataclass, replace
from datetime import date
from typing import Dict, Iterable, List, Optional

from dateutil.relativedelta import relativedelta
from django.utils import timezone

from apps.goals.domain.progress import DateLike, as_date

AWARDED = 'awarded'

# Prawdopodobieństwo wygranej wg etapu szansy
WIN_PROBABILITY = {
    'lead': 0.1,
    'prospect': 0.2,
    'qualified': 0.3,
    'proposal': 0.5,
    'negotiation': 0.7,
    'awarded': 1.0,
    'lost': 0.0,
}


@dataclass
class OpportunityData:
    created_at: DateLike
    expected_value: float
    status: str


@dataclass
class ForecastMonth:
    month: str  # np. "Mar 2026"
    date: date  # pierwszy dzień miesiąca, do sortowania
    actual: Optional[float] = None
    forecast: Optional[float] = None

    def as_dict(self) -> dict:
        return {'month': self.month, 'actual': self.actual, 'forecast': self.forecast}


def _month_start(day: date) -> date:
    return day.replace(day=1)


def _linear_fit(values: List[float]):
    """Regresja liniowa (najmniejsze kwadraty) po indeksie miesiąca. Zwraca (slope, intercept)."""
    n = len(values)
    if n == 0:
        return 0.0, 0.0
    sum_x = sum(range(n))
    sum_y = sum(values)
    sum_xy = sum(x * y for x, y in enumerate(values))
    sum_xx = sum(x * x for x in range(n))

    denominator = n * sum_xx - sum_x * sum_x
    # Jeden punkt historii: brak trendu, prognoza = średnia
    slope = (n * sum_xy - sum_x * sum_y) / denominator if denominator else 0.0
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def calculate_revenue_forecast(opportunities: Iterable[OpportunityData], history_months: int = 12,
                               forecast_months: int = 6, now: Optional[DateLike] = None) -> List[ForecastMonth]:
    """
    Historia: suma expected_value wygranych (awarded) szans w każdym
    z ostatnich history_months miesięcy (łącznie z bieżącym).
    Prognoza: prosta trendu przedłużona na forecast_months kolejnych miesięcy, nie mniej niż 0.
    """
    today = as_date(now if now is not None else timezone.now())
    current = _month_start(today)

    totals: Dict[date, float] = {}
    for opp in opportunities:
        if (opp.status or '').lower() != AWARDED:
            continue
        month = _month_start(as_date(opp.created_at))
        totals[month] = totals.get(month, 0.0) + (opp.expected_value or 0.0)

    history = []
    for i in range(history_months):
        month = current - relativedelta(months=history_months - i - 1)
        history.append(ForecastMonth(month=month.strftime('%b %Y'), date=month, actual=totals.get(month, 0.0)))

    slope, intercept = _linear_fit([m.actual for m in history])

    future = []
    for i in range(forecast_months):
        month = current + relativedelta(months=i + 1)
        value = intercept + slope * (history_months + i)
        future.append(ForecastMonth(month=month.strftime('%b %Y'), date=month, forecast=max(0.0, value)))

    return sorted(history + future, key=lambda m: m.date)


def apply_win_probability(opportunities: Iterable[OpportunityData],
                          probability_map: Optional[Dict[str, float]] = None) -> List[OpportunityData]:
    """Ważenie wartości szans prawdopodobieństwem wygranej (nieznany status -> 0)."""
    probabilities = WIN_PROBABILITY if probability_map is None else probability_map
    return [
        replace(opp, expected_value=opp.expected_value * probabilities.get((opp.status or '').lower(), 0.0))
        for opp in opportunities
    ]

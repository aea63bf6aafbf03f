# apps/goals/domain/forecast.py
import calendar
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

from dateutil.relativedelta import relativedelta

from apps.goals.domain.entities import GoalEntity
from apps.goals.domain.progress import DateLike, as_date, days_between, time_elapsed_percentage


@dataclass
class ForecastPoint:
    date: date
    label: str
    actual: int = 0
    projected: int = 0
    target: int = 0

    def as_dict(self) -> dict:
        return {
            'date': self.date.isoformat(),
            'label': self.label,
            'actual': self.actual,
            'projected': self.projected,
            'target': self.target,
        }


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _month_index(day: date, origin: date) -> int:
    return (day.year - origin.year) * 12 + (day.month - origin.month)


def days_remaining(end: DateLike, now: DateLike) -> int:
    if as_date(now) > as_date(end):
        return 0
    return days_between(now, end)


def project_final_value(current_value: float, elapsed_percentage: float) -> int:
    """Wartość końcowa przy utrzymaniu obecnego tempa (procent czasu -> 100%)."""
    if elapsed_percentage == 0:
        return 0
    return _round((current_value / elapsed_percentage) * 100)


def percentage_change(current_value: float, previous_value: float) -> str:
    if previous_value == 0:
        return '+∞%'
    change = ((current_value - previous_value) / abs(previous_value)) * 100
    sign = '+' if change >= 0 else ''
    return f"{sign}{change:.1f}%"


def build_goal_forecast(goals: Iterable[GoalEntity], now: DateLike, months: int = 3) -> List[ForecastPoint]:
    """
    Miesięczna prognoza dla celów przychodowych.

    Miesiące przeszłe: proporcjonalna część obecnej wartości (actual).
    Miesiąc bieżący i przyszłe: projekcja trendu, ograniczona do targetu.
    Target rozkładany równo na miesiące, ostatni miesiąc proporcjonalnie do dnia końca.
    """
    revenue_goals = [g for g in goals if g.is_revenue()]
    if not revenue_goals:
        return []

    today = as_date(now)
    earliest_start = min([today] + [g.start_date for g in revenue_goals])
    latest_end = max([today] + [g.end_date for g in revenue_goals])
    latest_end = max(latest_end, today + relativedelta(months=months))

    month = earliest_start.replace(day=1)
    end_month = (latest_end + relativedelta(months=1)).replace(day=1)
    this_month_start = today.replace(day=1)

    points = []
    while month < end_month:
        actual = projected = target = 0.0

        for goal in revenue_goals:
            if month < goal.start_date.replace(day=1):
                continue

            if month < this_month_start:
                # Historia: liniowe przybliżenie tego, co było osiągnięte
                total = (goal.end_date - goal.start_date).days
                if total > 0:
                    progress = min(1.0, max(0.0, (month - goal.start_date).days / total))
                else:
                    progress = 1.0
                actual += goal.current_value * progress
            else:
                current_progress = goal.current_value / goal.target_value if goal.target_value else 0.0

                if current_progress >= 1:
                    actual += goal.current_value
                    projected += goal.current_value
                else:
                    if month == this_month_start:
                        actual += goal.current_value

                    elapsed_pct = time_elapsed_percentage(goal.start_date, goal.end_date, today)
                    progress_rate = current_progress / (elapsed_pct / 100) if elapsed_pct > 0 else 0.0

                    total_months = _month_index(goal.end_date, goal.start_date)
                    months_passed = _month_index(today, goal.start_date)
                    month_num = _month_index(month, goal.start_date)

                    if total_months == 0:
                        expected = 1.0
                    else:
                        expected = min(1.0, month_num / total_months)

                    linear_projection = goal.target_value * expected
                    if progress_rate > 0 and months_passed > 0:
                        trend_projection = goal.current_value * (
                            1 + ((month_num - months_passed) / months_passed) * progress_rate
                        )
                    else:
                        trend_projection = linear_projection

                    projected += min(trend_projection, goal.target_value)

            if month <= goal.end_date.replace(day=1):
                days_in_month = calendar.monthrange(month.year, month.month)[1]
                if goal.end_date.year == month.year and goal.end_date.month == month.month:
                    target += goal.target_value * goal.end_date.day / days_in_month
                else:
                    target += goal.target_value / (_month_index(goal.end_date, goal.start_date) + 1)

        points.append(ForecastPoint(
            date=month,
            label=month.strftime('%b %Y'),
            actual=_round(actual),
            projected=_round(projected),
            target=_round(target),
        ))
        month = month + relativedelta(months=1)

    return points


@dataclass
class ForecastTotals:
    current: int = 0
    target: int = 0
    projected_final: int = 0

    def as_dict(self) -> dict:
        return {
            'current': self.current,
            'target': self.target,
            'projected_final': self.projected_final,
            'change_vs_target': percentage_change(self.projected_final, self.target),
        }


def forecast_totals(goals: Iterable[GoalEntity], now: DateLike) -> ForecastTotals:
    """Suma celów przychodowych i ich wartość końcowa przy obecnym tempie."""
    totals = ForecastTotals()
    for goal in goals:
        if not goal.is_revenue():
            continue
        elapsed = time_elapsed_percentage(goal.start_date, goal.end_date, now)
        totals.current += _round(goal.current_value)
        totals.target += _round(goal.target_value)
        totals.projected_final += project_final_value(goal.current_value, elapsed)
    return totals

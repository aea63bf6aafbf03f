# apps/goals/domain/policies.py
"""
Polityki klasyfikacji statusu celu.

Każda polityka to czysta funkcja StatusInputs -> GoalStatus.
Wszystkie miejsca w aplikacji pobierają politykę przez get_status_policy(),
więc zmiana reguły to zmiana ustawienia GOAL_STATUS_POLICY, a nie kodu.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from django.conf import settings

from apps.goals.domain.entities import GoalStatus


@dataclass(frozen=True)
class StatusInputs:
    percentage: float         # surowy procent realizacji (bez przycinania)
    expected_progress: float  # surowy oczekiwany postęp (po terminie > 100)
    days_remaining: int
    progress: int             # procent zaokrąglony i przycięty do 0-100
    elapsed_percentage: float  # procent upływu czasu, 0-100 (po terminie 100)


StatusPolicy = Callable[[StatusInputs], GoalStatus]

DEFAULT_POLICY = 'schedule_variance'


def schedule_variance_status(inputs: StatusInputs) -> GoalStatus:
    """Domyślna reguła: odchylenie od harmonogramu (10 / 20 punktów), na surowych wartościach."""
    if inputs.percentage >= 100:
        return GoalStatus.COMPLETED
    if inputs.percentage < inputs.expected_progress - 20:
        return GoalStatus.BEHIND
    if inputs.percentage < inputs.expected_progress - 10:
        return GoalStatus.AT_RISK
    return GoalStatus.ON_TRACK


def elapsed_time_status(inputs: StatusInputs) -> GoalStatus:
    """Wariant z raportów: przed harmonogramem = on track, do 15 punktów straty = at risk."""
    if inputs.progress >= inputs.elapsed_percentage:
        return GoalStatus.ON_TRACK
    if inputs.progress >= inputs.elapsed_percentage - 15:
        return GoalStatus.AT_RISK
    return GoalStatus.BEHIND


def dashboard_threshold_status(inputs: StatusInputs) -> GoalStatus:
    # Progi z dashboardu: 70% i mniej niż tydzień do końca
    if inputs.progress >= 100:
        return GoalStatus.COMPLETED
    if inputs.progress >= 70:
        return GoalStatus.ON_TRACK
    if inputs.days_remaining < 7 and inputs.progress < 50:
        return GoalStatus.AT_RISK
    return GoalStatus.BEHIND


POLICIES: Dict[str, StatusPolicy] = {
    'schedule_variance': schedule_variance_status,
    'elapsed_time': elapsed_time_status,
    'dashboard_threshold': dashboard_threshold_status,
}


def get_status_policy(name: Optional[str] = None) -> StatusPolicy:
    """Zwraca politykę o podanej nazwie lub tę z ustawień."""
    if name is None:
        name = getattr(settings, 'GOAL_STATUS_POLICY', DEFAULT_POLICY)
    try:
        return POLICIES[name]
    except KeyError:
        raise KeyError(f"Unknown goal status policy: {name!r} (available: {', '.join(sorted(POLICIES))})")

# apps/goals/domain/summary.py
from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from apps.goals.domain.entities import GoalEntity, GoalStatus
from apps.goals.domain.progress import GoalProgressEngine, as_date, display_percentage

TIME_FILTERS = ('all', 'active', 'upcoming', 'completed')


@dataclass
class GoalSummary:
    total_goals: int = 0
    completed_goals: int = 0
    at_risk_goals: int = 0
    behind_goals: int = 0
    average_progress: int = 0
    highest_progress: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


def filter_goals(goals: Iterable[GoalEntity], time_filter: str, now: datetime) -> List[GoalEntity]:
    if time_filter not in TIME_FILTERS:
        raise ValueError(f"Unknown time filter: {time_filter}")

    goals = list(goals)
    if time_filter == 'all':
        return goals

    today = as_date(now)
    if time_filter == 'active':
        return [g for g in goals if g.end_date >= today]
    if time_filter == 'upcoming':
        return [g for g in goals if g.start_date > today]
    # completed: po terminie albo osiągnięty target
    return [g for g in goals if g.end_date < today or g.current_value >= g.target_value]


def summarize(goals: Iterable[GoalEntity], now: datetime,
              engine: Optional[GoalProgressEngine] = None) -> GoalSummary:
    """Karty podsumowania dashboardu celów."""
    goals = list(goals)
    if not goals:
        return GoalSummary()

    engine = engine or GoalProgressEngine()
    progresses = [engine.compute(g, now) for g in goals]
    display_values = [display_percentage(p.percentage) for p in progresses]

    average = sum(display_values) / len(display_values)

    return GoalSummary(
        total_goals=len(goals),
        completed_goals=sum(1 for p in progresses if p.percentage >= 100),
        at_risk_goals=sum(1 for p in progresses if p.status == GoalStatus.AT_RISK),
        behind_goals=sum(1 for p in progresses if p.status == GoalStatus.BEHIND),
        average_progress=display_percentage(average),
        highest_progress=max(display_values),
    )


@dataclass
class TeamSummary:
    team_id: str
    goals: List[GoalEntity] = field(default_factory=list)
    average_completion: int = 0
    on_track: int = 0
    at_risk: int = 0
    behind: int = 0


def summarize_by_team(goals: Iterable[GoalEntity], now: datetime,
                      engine: Optional[GoalProgressEngine] = None) -> List[TeamSummary]:
    """Tabela wyników zespołów; cele bez zespołu trafiają do team_id == ''."""
    engine = engine or GoalProgressEngine()

    grouped: Dict[str, List[GoalEntity]] = {}
    for goal in goals:
        grouped.setdefault(goal.team_id or '', []).append(goal)

    teams = []
    for team_id in sorted(grouped):
        team_goals = grouped[team_id]
        progresses = [engine.compute(g, now) for g in team_goals]
        statuses = [p.status for p in progresses]
        average = sum(display_percentage(p.percentage) for p in progresses) / len(progresses)
        teams.append(TeamSummary(
            team_id=team_id,
            goals=team_goals,
            average_completion=display_percentage(average),
            on_track=statuses.count(GoalStatus.ON_TRACK),
            at_risk=statuses.count(GoalStatus.AT_RISK),
            behind=statuses.count(GoalStatus.BEHIND),
        ))
    return teams

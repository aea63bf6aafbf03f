from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone
from django.utils.dateparse import parse_date

from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.domain.entities import GoalStatus
from apps.goals.domain.policies import POLICIES
from apps.goals.domain.progress import GoalProgressEngine


STATUS_STYLES = {
    GoalStatus.COMPLETED: 'SUCCESS',
    GoalStatus.ON_TRACK: 'SUCCESS',
    GoalStatus.AT_RISK: 'WARNING',
    GoalStatus.BEHIND: 'ERROR',
}


class Command(BaseCommand):
    help = 'Wypisuje postęp i status wszystkich celów sprzedażowych'

    def add_arguments(self, parser):
        parser.add_argument('--as-of', help='Data odniesienia YYYY-MM-DD (domyślnie dziś)')
        parser.add_argument('--policy', choices=sorted(POLICIES), help='Polityka statusu (domyślnie z ustawień)')

    def handle(self, *args, **options):
        now = timezone.now()
        if options.get('as_of'):
            try:
                now = parse_date(options['as_of'])
            except ValueError:
                now = None
            if now is None:
                raise CommandError(f"Invalid --as-of date: {options['as_of']}")

        engine = GoalProgressEngine(options.get('policy'))
        goals = DjangoGoalRepository().list()

        for goal in goals:
            progress = engine.compute(goal, now)
            style = getattr(self.style, STATUS_STYLES[progress.status])
            projected = f"{progress.projected_value:,.0f}" if progress.projected_value is not None else '-'
            self.stdout.write(
                f"- {goal.title}: {progress.percentage:.1f}% "
                f"({progress.time_elapsed}/{progress.days_total} dni, projekcja {projected}) "
                + style(progress.status.value)
            )

        self.stdout.write(self.style.SUCCESS(f'Przeliczono {len(goals)} celów.'))

"""
Silnik postępu celu: procent, czas, oczekiwany postęp, status i projekcja liniowa.
"""
from datetime import date, datetime

import pytest
from django.test import override_settings

from apps.goals.domain.entities import GoalEntity, GoalStatus
from apps.goals.domain.policies import (
    POLICIES, StatusInputs, get_status_policy, schedule_variance_status, elapsed_time_status,
    dashboard_threshold_status,
)
from apps.goals.domain.progress import GoalProgressEngine, compute_progress, display_percentage, days_between


def make_goal(target=100.0, current=0.0, start=date(2023, 1, 1), end=date(2023, 12, 31), **kwargs):
    return GoalEntity(id=1, title="Q2 revenue", target_value=target, current_value=current,
                      start_date=start, end_date=end, **kwargs)


class TestComputeProgress:

    def test_on_track_mid_quarter(self):
        goal = make_goal(target=500000, current=325000, start=date(2023, 4, 1), end=date(2023, 6, 30))

        progress = compute_progress(goal, date(2023, 5, 20), policy='schedule_variance')

        assert progress.days_total == 90
        assert progress.time_elapsed == 49
        assert progress.time_remaining == 41
        assert progress.expected_progress == pytest.approx(54.444, abs=0.01)
        assert progress.percentage == pytest.approx(65.0)
        assert progress.remaining == pytest.approx(175000)
        assert progress.status == GoalStatus.ON_TRACK

    def test_behind_half_year(self):
        goal = make_goal(target=100, current=10)

        progress = compute_progress(goal, date(2023, 7, 1), policy='schedule_variance')

        assert progress.days_total == 364
        assert progress.time_elapsed == 181
        assert progress.expected_progress == pytest.approx(49.7, abs=0.1)
        assert progress.percentage == pytest.approx(10.0)
        assert progress.status == GoalStatus.BEHIND

    def test_start_day_has_no_projection(self):
        goal = make_goal(target=100, current=0)

        progress = compute_progress(goal, goal.start_date, policy='schedule_variance')

        assert progress.time_elapsed == 0
        assert progress.projected_value is None
        assert progress.percentage == 0
        assert progress.expected_progress == 0
        assert progress.status == GoalStatus.ON_TRACK

    def test_projection_is_linear_extrapolation(self):
        goal = make_goal(target=500000, current=325000, start=date(2023, 4, 1), end=date(2023, 6, 30))

        progress = compute_progress(goal, date(2023, 5, 20))

        expected = 325000 + (325000 / 49) * 41
        assert progress.projected_value == pytest.approx(expected)

    def test_zero_target_gives_zero_percentage(self):
        goal = make_goal(target=0, current=50)

        progress = compute_progress(goal, date(2023, 3, 1))

        assert progress.percentage == 0
        assert progress.remaining == 0

    def test_same_day_goal_does_not_divide_by_zero(self):
        goal = make_goal(start=date(2023, 5, 1), end=date(2023, 5, 1), current=20)

        progress = compute_progress(goal, date(2023, 5, 1))

        assert progress.days_total == 1
        assert progress.expected_progress == 0

    def test_times_are_never_negative(self):
        goal = make_goal()

        before = compute_progress(goal, date(2022, 12, 1))
        after = compute_progress(goal, date(2024, 2, 1))

        assert before.time_elapsed == 0
        assert before.time_remaining > 0
        assert after.time_remaining == 0
        # Po terminie oczekiwany postęp rośnie ponad 100
        assert after.expected_progress > 100

    def test_percentage_is_not_clamped(self):
        goal = make_goal(target=100, current=150)

        progress = compute_progress(goal, date(2023, 6, 1))

        assert progress.percentage == pytest.approx(150.0)
        assert progress.remaining == 0
        assert progress.status == GoalStatus.COMPLETED

    def test_datetime_now_is_reduced_to_date(self):
        goal = make_goal(target=500000, current=325000, start=date(2023, 4, 1), end=date(2023, 6, 30))

        morning = compute_progress(goal, datetime(2023, 5, 20, 8, 0))
        evening = compute_progress(goal, datetime(2023, 5, 20, 23, 59))

        assert morning == evening

    def test_repeated_calls_are_identical(self):
        goal = make_goal(current=42)
        now = date(2023, 8, 15)
        engine = GoalProgressEngine('schedule_variance')

        assert engine.compute(goal, now) == engine.compute(goal, now)

    def test_input_goal_is_not_mutated(self):
        goal = make_goal(current=42)
        snapshot = make_goal(current=42)

        compute_progress(goal, date(2023, 8, 15))

        assert goal == snapshot

    def test_as_dict_contains_status_value(self):
        progress = compute_progress(make_goal(current=10), date(2023, 7, 1), policy='schedule_variance')

        data = progress.as_dict()

        assert data['status'] == 'behind'
        assert data['days_total'] == 364


class TestDisplayPercentage:

    @pytest.mark.parametrize("value, expected", [
        (0, 0), (49.5, 50), (65.4, 65), (99.6, 100), (150, 100), (-5, 0),
    ])
    def test_rounds_and_clamps(self, value, expected):
        assert display_percentage(value) == expected


class TestDaysBetween:

    def test_counts_calendar_days(self):
        assert days_between(date(2023, 4, 1), date(2023, 6, 30)) == 90
        assert days_between(date(2023, 6, 30), date(2023, 4, 1)) == -90


def status_inputs(percentage, expected, days_remaining=10, elapsed=None):
    return StatusInputs(
        percentage=percentage,
        expected_progress=expected,
        days_remaining=days_remaining,
        progress=display_percentage(percentage),
        elapsed_percentage=min(100.0, expected) if elapsed is None else elapsed,
    )


class TestStatusPolicies:

    def test_schedule_variance_thresholds(self):
        assert schedule_variance_status(status_inputs(100, 50)) == GoalStatus.COMPLETED
        assert schedule_variance_status(status_inputs(40, 50)) == GoalStatus.ON_TRACK
        assert schedule_variance_status(status_inputs(39.9, 50)) == GoalStatus.AT_RISK
        assert schedule_variance_status(status_inputs(30, 50)) == GoalStatus.AT_RISK
        assert schedule_variance_status(status_inputs(29.9, 50)) == GoalStatus.BEHIND

    def test_schedule_variance_uses_raw_percentage(self):
        # 99.6% zaokrągla się do 100 na pasku, ale cel nie jest ukończony
        assert schedule_variance_status(status_inputs(99.6, 50)) == GoalStatus.ON_TRACK

    def test_elapsed_time_has_no_completed_state(self):
        assert elapsed_time_status(status_inputs(120, 100)) == GoalStatus.ON_TRACK
        assert elapsed_time_status(status_inputs(40, 50)) == GoalStatus.AT_RISK
        assert elapsed_time_status(status_inputs(34, 50)) == GoalStatus.BEHIND

    def test_elapsed_time_compares_with_clamped_elapsed(self):
        # Po terminie oczekiwany postęp > 100, upływ czasu zostaje na 100
        assert elapsed_time_status(status_inputs(100, 137, elapsed=100)) == GoalStatus.ON_TRACK

    def test_dashboard_threshold(self):
        assert dashboard_threshold_status(status_inputs(100, 0, 30)) == GoalStatus.COMPLETED
        assert dashboard_threshold_status(status_inputs(99.6, 0, 30)) == GoalStatus.COMPLETED
        assert dashboard_threshold_status(status_inputs(70, 99, 30)) == GoalStatus.ON_TRACK
        assert dashboard_threshold_status(status_inputs(40, 0, 3)) == GoalStatus.AT_RISK
        assert dashboard_threshold_status(status_inputs(40, 0, 30)) == GoalStatus.BEHIND

    def test_every_status_is_reachable(self):
        # Rzędy: (procent, oczekiwany) -> status dla polityki domyślnej
        statuses = {
            schedule_variance_status(status_inputs(p, e))
            for p, e in [(100, 0), (50, 50), (35, 50), (10, 50)]
        }
        assert statuses == set(GoalStatus)

    @override_settings(GOAL_STATUS_POLICY='dashboard_threshold')
    def test_policy_comes_from_settings(self):
        assert get_status_policy() is dashboard_threshold_status

    def test_unknown_policy_raises(self):
        with pytest.raises(KeyError):
            get_status_policy('coin_flip')

    def test_engine_accepts_callable(self):
        engine = GoalProgressEngine(lambda inputs: GoalStatus.BEHIND)

        assert engine.compute(make_goal(current=100), date(2023, 5, 1)).status == GoalStatus.BEHIND

    def test_all_policies_registered(self):
        assert set(POLICIES) == {'schedule_variance', 'elapsed_time', 'dashboard_threshold'}


class TestPolicyInputsFromEngine:

    def test_elapsed_time_goal_met_after_end_date(self):
        goal = make_goal(target=100, current=100, start=date(2023, 1, 1), end=date(2023, 3, 31))

        progress = compute_progress(goal, date(2023, 6, 30), policy='elapsed_time')

        assert progress.expected_progress > 100
        assert progress.status == GoalStatus.ON_TRACK

    def test_dashboard_threshold_rounds_progress(self):
        goal = make_goal(target=1000, current=996)

        progress = compute_progress(goal, date(2023, 6, 1), policy='dashboard_threshold')

        assert progress.status == GoalStatus.COMPLETED
        # Surowy procent zostaje w wyniku
        assert progress.percentage == pytest.approx(99.6)

    def test_default_policy_keeps_raw_percentage(self):
        goal = make_goal(target=1000, current=996)

        progress = compute_progress(goal, date(2023, 6, 1), policy='schedule_variance')

        assert progress.status == GoalStatus.ON_TRACK

    def test_elapsed_time_before_start(self):
        goal = make_goal(target=100, current=0, start=date(2023, 1, 1), end=date(2023, 3, 31))

        assert compute_progress(goal, date(2022, 12, 1), policy='elapsed_time').status == GoalStatus.ON_TRACK

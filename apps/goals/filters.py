import django_filters
from django import forms
from .models import SalesGoal


class GoalFilter(django_filters.FilterSet):
    title = django_filters.CharFilter(
        lookup_expr='icontains',
        label="Title contains",
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Search...'})
    )
    goal_type = django_filters.ChoiceFilter(
        choices=SalesGoal.GoalTypeChoices.choices,
        label="Type",
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    scope = django_filters.ChoiceFilter(
        choices=SalesGoal.ScopeChoices.choices,
        label="Scope",
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    period = django_filters.ChoiceFilter(
        choices=SalesGoal.PeriodChoices.choices,
        label="Period",
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    mine = django_filters.BooleanFilter(
        method='filter_mine',
        label="Only my goals",
        widget=forms.CheckboxInput(attrs={'class': 'form-check-input'})
    )

    class Meta:
        model = SalesGoal
        fields = ['team_id']

    def filter_mine(self, queryset, name, value):
        if value and self.request is not None and self.request.user.is_authenticated:
            return queryset.filter(owner=self.request.user)
        return queryset

from django import forms
from .models import SalesGoal


class GoalForm(forms.ModelForm):
    class Meta:
        model = SalesGoal
        fields = [
            'title', 'description', 'goal_type', 'scope', 'period',
            'target_value', 'current_value', 'start_date', 'end_date', 'team_id',
        ]
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'goal_type': forms.Select(attrs={'class': 'form-select'}),
            'scope': forms.Select(attrs={'class': 'form-select'}),
            'period': forms.Select(attrs={'class': 'form-select'}),
            'target_value': forms.NumberInput(attrs={'class': 'form-control', 'min': 0, 'step': '0.01'}),
            'current_value': forms.NumberInput(attrs={'class': 'form-control', 'min': 0, 'step': '0.01'}),
            'start_date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
            'end_date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
            'team_id': forms.TextInput(attrs={'class': 'form-control'}),
        }

    def to_use_case_kwargs(self) -> dict:
        """cleaned_data -> argumenty dla use case'ów (Decimal -> float)."""
        data = dict(self.cleaned_data)
        data['target_value'] = float(data['target_value'])
        data['current_value'] = float(data.get('current_value') or 0)
        return data

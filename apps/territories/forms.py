from django import forms
from .models import Territory, SalesRep


class TerritoryForm(forms.ModelForm):
    class Meta:
        model = Territory
        fields = [
            'name', 'description', 'region', 'manager',
            'revenue_target', 'revenue_current', 'accounts', 'opportunities',
        ]
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'region': forms.TextInput(attrs={'class': 'form-control'}),
            'manager': forms.TextInput(attrs={'class': 'form-control'}),
            'revenue_target': forms.NumberInput(attrs={'class': 'form-control', 'min': 0, 'step': '0.01'}),
            'revenue_current': forms.NumberInput(attrs={'class': 'form-control', 'min': 0, 'step': '0.01'}),
            'accounts': forms.NumberInput(attrs={'class': 'form-control', 'min': 0}),
            'opportunities': forms.NumberInput(attrs={'class': 'form-control', 'min': 0}),
        }

    def to_entity_kwargs(self) -> dict:
        data = dict(self.cleaned_data)
        data['revenue_target'] = float(data.get('revenue_target') or 0)
        data['revenue_current'] = float(data.get('revenue_current') or 0)
        return data


class AssignmentRequestForm(forms.Form):
    territory = forms.ModelChoiceField(
        queryset=Territory.objects.all(),
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    requested_for = forms.ModelChoiceField(
        queryset=SalesRep.objects.all(),
        label="Sales rep",
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    reason = forms.CharField(widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}))

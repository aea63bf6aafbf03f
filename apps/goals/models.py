# apps/goals/models.py
from django.db import models
from django.conf import settings


class SalesGoal(models.Model):
    # Używamy TextChoices dla wygody w Adminie, ale mapujemy to na Enumy domenowe
    class GoalTypeChoices(models.TextChoices):
        REVENUE = 'revenue', 'Revenue'
        DEALS = 'deals', 'Deals'
        UNITS = 'units', 'Units'
        MEETINGS = 'meetings', 'Meetings'
        CALLS = 'calls', 'Calls'

    class ScopeChoices(models.TextChoices):
        INDIVIDUAL = 'individual', 'Individual'
        TEAM = 'team', 'Team'
        DEPARTMENT = 'department', 'Department'
        COMPANY = 'company', 'Company'

    class PeriodChoices(models.TextChoices):
        MONTHLY = 'monthly', 'Monthly'
        QUARTERLY = 'quarterly', 'Quarterly'
        YEARLY = 'yearly', 'Yearly'
        CUSTOM = 'custom', 'Custom'

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    goal_type = models.CharField(max_length=20, choices=GoalTypeChoices.choices, default=GoalTypeChoices.REVENUE)
    scope = models.CharField(max_length=20, choices=ScopeChoices.choices, default=ScopeChoices.INDIVIDUAL)
    period = models.CharField(max_length=20, choices=PeriodChoices.choices, default=PeriodChoices.QUARTERLY)

    target_value = models.DecimalField(max_digits=14, decimal_places=2)
    current_value = models.DecimalField(max_digits=14, decimal_places=2, default=0)

    start_date = models.DateField()
    end_date = models.DateField()

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='sales_goals'
    )
    team_id = models.CharField(max_length=100, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title

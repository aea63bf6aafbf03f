# apps/territories/models.py
from django.db import models
from django.conf import settings


class Territory(models.Model):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    region = models.CharField(max_length=100)
    manager = models.CharField(max_length=200, blank=True)

    revenue_target = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    revenue_current = models.DecimalField(max_digits=14, decimal_places=2, default=0)

    accounts = models.PositiveIntegerField(default=0)
    opportunities = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['region', 'name']
        verbose_name_plural = 'territories'

    def __str__(self):
        return self.name


class SalesRep(models.Model):
    class RoleChoices(models.TextChoices):
        TERRITORY_MANAGER = 'territory_manager', 'Territory Manager'
        ACCOUNT_EXECUTIVE = 'account_executive', 'Account Executive'
        SALES_DEVELOPMENT_REP = 'sales_development_rep', 'Sales Development Rep'

    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=30, choices=RoleChoices.choices, default=RoleChoices.ACCOUNT_EXECUTIVE)

    # Przypisane terytoria ("assigned sales reps" po stronie terytorium)
    territories = models.ManyToManyField(Territory, blank=True, related_name='sales_reps')

    quota = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    achieved = models.DecimalField(max_digits=14, decimal_places=2, default=0)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class TerritoryAssignmentRequest(models.Model):
    class StatusChoices(models.TextChoices):
        PENDING = 'pending', 'Pending'
        APPROVED = 'approved', 'Approved'
        REJECTED = 'rejected', 'Rejected'

    territory = models.ForeignKey(Territory, on_delete=models.CASCADE, related_name='assignment_requests')
    requested_for = models.ForeignKey(SalesRep, on_delete=models.CASCADE, related_name='assignment_requests')
    requested_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='territory_requests'
    )
    status = models.CharField(max_length=20, choices=StatusChoices.choices, default=StatusChoices.PENDING)
    reason = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    resolved_at = models.DateTimeField(null=True, blank=True)
    resolved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='resolved_territory_requests'
    )

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.requested_for} -> {self.territory} ({self.status})"


class AccountOwnership(models.Model):
    account_name = models.CharField(max_length=200)
    owner = models.ForeignKey(SalesRep, on_delete=models.CASCADE, related_name='accounts')
    territory = models.ForeignKey(Territory, on_delete=models.CASCADE, related_name='account_ownerships')
    assigned_date = models.DateField()
    last_interaction_date = models.DateField(null=True, blank=True)

    class Meta:
        ordering = ['account_name']

    def __str__(self):
        return f"{self.account_name} ({self.owner})"

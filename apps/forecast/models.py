# apps/forecast/models.py
from django.db import models


class Opportunity(models.Model):
    class StatusChoices(models.TextChoices):
        LEAD = 'lead', 'Lead'
        PROSPECT = 'prospect', 'Prospect'
        QUALIFIED = 'qualified', 'Qualified'
        PROPOSAL = 'proposal', 'Proposal'
        NEGOTIATION = 'negotiation', 'Negotiation'
        AWARDED = 'awarded', 'Awarded'
        LOST = 'lost', 'Lost'

    title = models.CharField(max_length=200)
    customer = models.CharField(max_length=200, blank=True)
    expected_value = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    status = models.CharField(max_length=20, choices=StatusChoices.choices, default=StatusChoices.LEAD)

    # Data utworzenia decyduje o miesiącu w historii przychodów
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name_plural = 'opportunities'

    def __str__(self):
        return self.title

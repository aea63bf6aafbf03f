from django.contrib import admin
from .models import Opportunity


@admin.register(Opportunity)
class OpportunityAdmin(admin.ModelAdmin):
    list_display = ('title', 'customer', 'status', 'expected_value', 'created_at')
    list_filter = ('status',)
    search_fields = ('title', 'customer')

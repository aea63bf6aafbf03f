from django.contrib import admin
from .models import SalesGoal


@admin.register(SalesGoal)
class SalesGoalAdmin(admin.ModelAdmin):
    list_display = ('title', 'goal_type', 'scope', 'period', 'current_value', 'target_value', 'start_date', 'end_date')
    list_filter = ('goal_type', 'scope', 'period')
    search_fields = ('title', 'team_id')

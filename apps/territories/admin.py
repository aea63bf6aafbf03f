from django.contrib import admin
from .models import Territory, SalesRep, TerritoryAssignmentRequest, AccountOwnership


@admin.register(Territory)
class TerritoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'region', 'manager', 'revenue_current', 'revenue_target', 'accounts', 'opportunities')
    list_filter = ('region',)
    search_fields = ('name', 'manager')


@admin.register(SalesRep)
class SalesRepAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'role', 'achieved', 'quota')
    list_filter = ('role',)
    filter_horizontal = ('territories',)


@admin.register(TerritoryAssignmentRequest)
class TerritoryAssignmentRequestAdmin(admin.ModelAdmin):
    list_display = ('territory', 'requested_for', 'status', 'created_at', 'resolved_at')
    list_filter = ('status',)


admin.site.register(AccountOwnership)

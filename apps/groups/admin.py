# ==========================================
# apps/groups/admin.py
# ==========================================

from django.contrib import admin
from apps.groups.models import GiftGroup
from apps.groups.services import run_scheduled_sweep


@admin.register(GiftGroup)
class GiftGroupAdmin(admin.ModelAdmin):
    """Admin interface for stored group documents."""

    list_display = [
        'group_id',
        'group_name',
        'member_count',
        'item_count',
        'created_at',
        'updated_at',
    ]
    list_filter = ['updated_at', 'created_at']
    search_fields = ['group_id']
    readonly_fields = ['group_id', 'created_at', 'updated_at']
    date_hierarchy = 'updated_at'
    ordering = ['-updated_at']

    fieldsets = (
        ('Group', {
            'fields': ('group_id', 'data')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def group_name(self, obj):
        return obj.group_name
    group_name.short_description = 'Name'

    def member_count(self, obj):
        """Show number of members."""
        return obj.member_count
    member_count.short_description = 'Members'

    def item_count(self, obj):
        return obj.item_count
    item_count.short_description = 'Items'

    actions = ['sweep_expired']

    def sweep_expired(self, request, queryset):
        """Run the retention sweep over all groups."""
        deleted = run_scheduled_sweep()
        self.message_user(request, f"Removed {deleted} expired group(s)")
    sweep_expired.short_description = "Run retention sweep"

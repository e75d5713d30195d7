from django.contrib import admin
from apps.contact.models import ContactSubmission, ContactStatus


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'status', 'submitted_at']
    list_filter = ['status', 'submitted_at']
    search_fields = ['name', 'email', 'message']
    readonly_fields = ['name', 'email', 'message', 'submitted_at']
    ordering = ['-submitted_at']

    actions = ['mark_read', 'mark_archived']

    def mark_read(self, request, queryset):
        updated = queryset.update(status=ContactStatus.READ)
        self.message_user(request, f"{updated} submission(s) marked as read")
    mark_read.short_description = "Mark as read"

    def mark_archived(self, request, queryset):
        updated = queryset.update(status=ContactStatus.ARCHIVED)
        self.message_user(request, f"{updated} submission(s) archived")
    mark_archived.short_description = "Archive"

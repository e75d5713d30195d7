from django.db import models


class ContactStatus(models.TextChoices):
    NEW = 'new', 'New'
    READ = 'read', 'Read'
    REPLIED = 'replied', 'Replied'
    ARCHIVED = 'archived', 'Archived'


class ContactSubmission(models.Model):
    """Message sent through the public contact form."""

    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=254)
    message = models.TextField(max_length=2000)
    submitted_at = models.DateTimeField(auto_now_add=True, db_index=True)
    status = models.CharField(max_length=20, choices=ContactStatus.choices, default=ContactStatus.NEW)
    admin_notes = models.TextField(blank=True)

    class Meta:
        db_table = 'contact_submissions'
        ordering = ['-submitted_at']
        indexes = [
            models.Index(fields=['status', 'submitted_at'], name='contact_status_submitted_idx'),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}> ({self.status})"

"""
Contact Services Module
=======================

Business logic for the public contact form and its admin inbox.

Functions:
    submit_contact: Sanitize and store a new submission.
    list_contacts: Newest-first submissions, optionally filtered by status.
    update_contact: Change the status and/or admin notes of a submission.
"""

import logging
from typing import Optional

from django.contrib.auth.base_user import BaseUserManager
from django.db import DatabaseError

from apps.groups.services import sanitize_text

from .exceptions import ContactNotFoundError, ContactStorageError
from .models import ContactStatus, ContactSubmission

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_MESSAGE_LENGTH = 2000
MAX_NOTES_LENGTH = 2000


def submit_contact(*, name: str, email: str, message: str) -> ContactSubmission:
    """
    Store a contact form submission.

    Name and message are stripped of markup the same way group documents
    are; the email domain is lowercased.

    Args:
        name: Sender name
        email: Sender email address (already format-checked)
        message: Message body

    Returns:
        Created ContactSubmission

    Raises:
        ContactStorageError: If the submission cannot be saved
    """
    try:
        submission = ContactSubmission.objects.create(
            name=sanitize_text(name, MAX_NAME_LENGTH),
            email=BaseUserManager.normalize_email(email.strip()),
            message=sanitize_text(message, MAX_MESSAGE_LENGTH),
        )
    except DatabaseError as e:
        logger.error("Could not store contact submission: %s", e)
        raise ContactStorageError("Failed to submit contact form") from e

    logger.info("Contact submission %s received", submission.pk)
    return submission


def list_contacts(*, status: Optional[str] = None):
    """Return submissions newest first, optionally only those with ``status``."""
    queryset = ContactSubmission.objects.all()
    if status:
        queryset = queryset.filter(status=status)
    return queryset.order_by('-submitted_at', '-id')


def update_contact(
    *,
    contact_id: int,
    status: Optional[str] = None,
    admin_notes: Optional[str] = None,
) -> ContactSubmission:
    """
    Update the inbox state of a submission.

    Args:
        contact_id: Submission primary key
        status: New status, one of ContactStatus values
        admin_notes: Private notes; replaces any existing notes

    Returns:
        Updated ContactSubmission

    Raises:
        ContactNotFoundError: If no submission has ``contact_id``
    """
    try:
        submission = ContactSubmission.objects.get(pk=contact_id)
    except ContactSubmission.DoesNotExist:
        raise ContactNotFoundError(f"Contact submission {contact_id} not found")

    update_fields = []
    if status is not None:
        submission.status = ContactStatus(status)
        update_fields.append('status')
    if admin_notes is not None:
        submission.admin_notes = sanitize_text(admin_notes, MAX_NOTES_LENGTH)
        update_fields.append('admin_notes')

    if update_fields:
        submission.save(update_fields=update_fields)
    return submission

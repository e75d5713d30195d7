"""
Dashboard Services Module
=========================

Operator-facing views over the stored groups and contact submissions.
Group reads and deletes go through the group service; the dashboard only
adds aggregation and listing on top.
"""

import logging
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone
from django.utils.crypto import constant_time_compare

from apps.contact.models import ContactStatus, ContactSubmission
from apps.groups.models import GiftGroup
from apps.groups.services import (
    StorageUnavailableError,
    delete_group,
    get_group,
    sweep_expired_groups,
)

from .exceptions import AdminNotConfiguredError, InvalidAdminPasswordError
from .sessions import get_session_store

logger = logging.getLogger(__name__)


def check_admin_password(*, password: str) -> None:
    """
    Check a login attempt against ``ADMIN_PASSWORD``.

    Raises:
        AdminNotConfiguredError: If no admin password is set
        InvalidAdminPasswordError: If ``password`` does not match
    """
    expected = settings.ADMIN_PASSWORD
    if not expected:
        logger.error("Admin login attempted but ADMIN_PASSWORD is not set")
        raise AdminNotConfiguredError("Admin password not configured")

    if not constant_time_compare(password or '', expected):
        logger.warning("Failed admin login attempt")
        raise InvalidAdminPasswordError("Invalid password")


def _count_members_and_items(documents):
    members = items = 0
    for data in documents:
        users = data.get('users') if isinstance(data, dict) else None
        if not isinstance(users, dict):
            continue
        members += len(users)
        for wishlist in users.values():
            if isinstance(wishlist, dict) and isinstance(wishlist.get('items'), list):
                items += len(wishlist['items'])
    return members, items


def get_system_stats() -> dict:
    """
    Collect dashboard totals.

    Returns:
        Dict with totalGroups, totalUsers, totalItems, totalContacts,
        newContacts and groupsCreatedToday

    Raises:
        StorageUnavailableError: If the database cannot be reached
    """
    today_start = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        total_groups = GiftGroup.objects.count()
        total_users, total_items = _count_members_and_items(
            GiftGroup.objects.values_list('data', flat=True).iterator()
        )
        total_contacts = ContactSubmission.objects.count()
        new_contacts = ContactSubmission.objects.filter(status=ContactStatus.NEW).count()
        created_today = GiftGroup.objects.filter(created_at__gte=today_start).count()
    except DatabaseError as e:
        logger.error("Could not collect dashboard stats: %s", e)
        raise StorageUnavailableError("Error loading stats") from e

    return {
        'totalGroups': total_groups,
        'totalUsers': total_users,
        'totalItems': total_items,
        'totalContacts': total_contacts,
        'newContacts': new_contacts,
        'groupsCreatedToday': created_today,
    }


def list_group_overviews(*, search: Optional[str] = None):
    """
    Groups for the dashboard list, most recently modified first.

    Args:
        search: Case-insensitive substring of the group name

    Returns:
        QuerySet of GiftGroup; the caller paginates it
    """
    queryset = GiftGroup.objects.all()
    if search:
        queryset = queryset.filter(data__groupName__icontains=search)
    return queryset.order_by('-updated_at')


def observe_group(*, group_id: str) -> dict:
    """Full, unfiltered group document as the operator sees it."""
    return get_group(group_id=group_id, member=None)


def remove_group(*, group_id: str) -> None:
    delete_group(group_id=group_id)
    logger.info("Admin deleted group %s", group_id)


def run_cleanup(*, max_age: Optional[timedelta] = None) -> int:
    """
    Run the retention sweep on demand.

    Unlike the scheduled sweep, storage failures are raised so the
    operator sees them.

    Returns:
        Number of groups deleted
    """
    deleted = sweep_expired_groups(max_age=max_age)
    logger.info("Admin triggered cleanup: %d group(s) deleted", deleted)
    return deleted


def start_admin_session(*, password: str):
    """
    Check ``password`` and open a new admin session.

    Returns:
        AdminSession holding the bearer token

    Raises:
        AdminNotConfiguredError: If no admin password is set
        InvalidAdminPasswordError: If ``password`` does not match
    """
    check_admin_password(password=password)
    session = get_session_store().create()
    logger.info("Admin logged in")
    return session


def end_admin_session(*, token: str) -> None:
    get_session_store().revoke(token)
    logger.info("Admin logged out")

"""
Document store for group documents.

Thin key-value layer over the ``groups`` table: one JSON document per
group ID plus created/updated timestamps. Callers never see database
exceptions; any failure to reach or query the database surfaces as
``StorageUnavailableError``. No retries happen here.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Optional, Tuple

from django.db import DatabaseError, transaction

from apps.groups.models import GiftGroup

from .exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(action: str):
    try:
        yield
    except DatabaseError as e:
        logger.error("Document store failed while %s: %s", action, e)
        raise StorageUnavailableError(f"Storage unavailable while {action}") from e


def fetch_document(group_id: str) -> Optional[dict]:
    """Return the stored document, or None if the key is absent."""
    with _storage_errors('loading group'):
        row = (
            GiftGroup.objects
            .filter(group_id=group_id)
            .values_list('data', flat=True)
            .first()
        )
    return row


def document_exists(group_id: str) -> bool:
    with _storage_errors('checking group'):
        return GiftGroup.objects.filter(group_id=group_id).exists()


def store_document(group_id: str, document: dict) -> Tuple[GiftGroup, bool]:
    """
    Insert or overwrite the document stored under ``group_id``.

    The row is locked for the duration of the write, so writes to the
    same key are serialized. The document is replaced in full and
    ``updated_at`` is refreshed.

    Returns:
        Tuple of (GiftGroup, created)
    """
    with _storage_errors('saving group'):
        with transaction.atomic():
            group, created = (
                GiftGroup.objects
                .select_for_update()
                .get_or_create(group_id=group_id, defaults={'data': document})
            )
            if not created:
                group.data = document
                group.save(update_fields=['data', 'updated_at'])
    return group, created


def remove_document(group_id: str) -> bool:
    """Delete the document; returns False if nothing was stored."""
    with _storage_errors('deleting group'):
        deleted, _ = GiftGroup.objects.filter(group_id=group_id).delete()
    return deleted > 0


def count_documents_older_than(cutoff: datetime) -> int:
    with _storage_errors('counting expired groups'):
        return GiftGroup.objects.filter(updated_at__lt=cutoff).count()


def remove_documents_older_than(cutoff: datetime) -> int:
    """Delete every document last modified strictly before ``cutoff``."""
    with _storage_errors('sweeping expired groups'):
        deleted, _ = GiftGroup.objects.filter(updated_at__lt=cutoff).delete()
    return deleted

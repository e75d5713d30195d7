"""Scheduled retention sweep."""

import logging
from datetime import timedelta
from typing import Optional

from .exceptions import StorageUnavailableError
from .group_management import sweep_expired_groups

logger = logging.getLogger(__name__)


def run_scheduled_sweep(*, max_age: Optional[timedelta] = None) -> int:
    """
    Run one retention sweep from a scheduler.

    A failed sweep is logged and reported as zero deletions; the next
    scheduled run simply tries again.
    """
    try:
        deleted = sweep_expired_groups(max_age=max_age)
    except StorageUnavailableError:
        logger.exception("Retention sweep failed; will retry on the next run")
        return 0

    logger.info("Retention sweep removed %d group(s)", deleted)
    return deleted

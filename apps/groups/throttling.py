"""
Throttles for the group document endpoints.

Reads and writes are counted separately so clients polling for updates
do not use up the write allowance. Creating a new group has its own,
much lower, limit.
"""

from config.throttling import WindowedRateThrottle

from apps.groups.services import GroupsServiceError, group_exists


class GroupReadThrottle(WindowedRateThrottle):
    scope = 'group_read'

    def allow_request(self, request, view):
        if request.method != 'GET':
            return True
        return super().allow_request(request, view)


class GroupWriteThrottle(WindowedRateThrottle):
    scope = 'group_write'

    def allow_request(self, request, view):
        if request.method == 'GET':
            return True
        return super().allow_request(request, view)


class GroupCreationThrottle(WindowedRateThrottle):
    """Counts only POSTs that would create a group that does not exist yet."""

    scope = 'group_creation'

    def allow_request(self, request, view):
        if request.method != 'POST':
            return True
        try:
            if group_exists(group_id=view.kwargs.get('group_id')):
                return True
        except GroupsServiceError:
            # Bad IDs and storage failures are reported by the view itself
            return True
        return super().allow_request(request, view)

"""
API tests for the group document endpoints.
"""

from unittest.mock import patch

import pytest
from django.urls import reverse
from rest_framework import status

from apps.groups.models import GiftGroup
from apps.groups.services import StorageUnavailableError


def _url(group_id):
    return reverse('groups:group-detail', kwargs={'group_id': group_id})


# =============================================================================
# GET /api/groups/{group_id}/
# =============================================================================

@pytest.mark.django_db
class TestGroupGet:

    def test_get_as_member(self, api_client, stored_group):
        response = api_client.get(_url(stored_group), {'member': 'Ann'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        socks = response.data['data']['users']['Ann']['items'][0]
        assert socks['claimedBy'] == []
        assert socks['purchased'] is False

    def test_get_as_other_member(self, api_client, stored_group):
        response = api_client.get(_url(stored_group), {'member': 'Bob'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['users']['Ann']['items'][0]['claimedBy'] == ['Bob']

    def test_get_without_member_is_unfiltered(self, api_client, stored_group):
        response = api_client.get(_url(stored_group))
        assert response.data['data']['users']['Ann']['items'][0]['claimedBy'] == ['Bob']

    def test_get_missing_group_returns_null(self, api_client):
        response = api_client.get(_url('nothing-here'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True, 'data': None}

    def test_get_invalid_id(self, api_client):
        response = api_client.get(_url('bad.id'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'success': False, 'message': 'Invalid group ID format'}

    def test_get_member_name_too_long(self, api_client, stored_group):
        response = api_client.get(_url(stored_group), {'member': 'x' * 101})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'success': False, 'message': 'Invalid member name'}

    def test_get_storage_unavailable(self, api_client):
        with patch('apps.groups.views.get_group', side_effect=StorageUnavailableError('down')):
            response = api_client.get(_url('g1'))

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data['success'] is False


# =============================================================================
# POST /api/groups/{group_id}/
# =============================================================================

@pytest.mark.django_db
class TestGroupPost:

    def test_create(self, api_client, group_document):
        response = api_client.post(_url('new-group'), group_document, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data == {'success': True, 'message': 'Group created successfully'}
        assert GiftGroup.objects.filter(group_id='new-group').exists()

    def test_update(self, api_client, stored_group):
        response = api_client.post(
            _url(stored_group),
            {'groupName': 'Renamed', 'users': {}},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Group updated successfully'
        assert GiftGroup.objects.get(group_id=stored_group).data['groupName'] == 'Renamed'

    def test_validation_failure(self, api_client):
        response = api_client.post(_url('g1'), {'users': []}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {
            'success': False,
            'message': 'Validation failed',
            'errors': ['Group name is required', 'Users must be an object'],
        }

    def test_non_object_body(self, api_client):
        response = api_client.post(_url('g1'), ['not', 'a', 'group'], format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'] == ['Group data must be an object']

    def test_invalid_id(self, api_client, group_document):
        response = api_client.post(_url('bad.id'), group_document, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_markup_is_stripped(self, api_client):
        api_client.post(
            _url('g1'),
            {'groupName': '<script>x</script>Smiths', 'users': {}},
            format='json',
        )
        assert GiftGroup.objects.get(group_id='g1').data['groupName'] == 'xSmiths'

    def test_names_colliding_after_sanitizing_rejected(self, api_client):
        response = api_client.post(
            _url('g1'),
            {'groupName': 'G', 'users': {'Ann': {'items': []}, 'Ann ': {'items': []}}},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'] == ['Duplicate username: Ann']
        assert not GiftGroup.objects.filter(group_id='g1').exists()

    def test_fetched_group_can_be_posted_back(self, api_client):
        api_client.post(
            _url('g1'),
            {'groupName': '<b>Smiths</b>', 'users': {'Ann': {'items': [{'description': '<i>Socks</i>'}]}}},
            format='json',
        )
        document = api_client.get(_url('g1')).data['data']

        response = api_client.post(_url('g1'), document, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Group updated successfully'

    def test_storage_unavailable(self, api_client, group_document):
        with patch('apps.groups.views.create_or_update_group', side_effect=StorageUnavailableError('down')):
            response = api_client.post(_url('g1'), group_document, format='json')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data == {'success': False, 'message': 'Error saving group data'}


# =============================================================================
# DELETE /api/groups/{group_id}/
# =============================================================================

@pytest.mark.django_db
class TestGroupDelete:

    def test_creator_deletes(self, api_client, stored_group):
        response = api_client.delete(f"{_url(stored_group)}?member=Ann")

        assert response.status_code == status.HTTP_200_OK
        assert not GiftGroup.objects.filter(group_id=stored_group).exists()

    def test_non_creator_forbidden(self, api_client, stored_group):
        response = api_client.delete(f"{_url(stored_group)}?member=Bob")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert GiftGroup.objects.filter(group_id=stored_group).exists()

    def test_member_name_too_long(self, api_client, stored_group):
        response = api_client.delete(f"{_url(stored_group)}?member={'x' * 101}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'success': False, 'message': 'Invalid member name'}
        assert GiftGroup.objects.filter(group_id=stored_group).exists()

    def test_missing_group(self, api_client):
        response = api_client.delete(f"{_url('nothing-here')}?member=Ann")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'success': False, 'message': 'Group not found'}


# =============================================================================
# Throttling
# =============================================================================

@pytest.mark.django_db
class TestGroupThrottling:

    def test_creation_limited(self, api_client):
        body = {'groupName': 'G', 'users': {}}
        for i in range(10):
            response = api_client.post(_url(f'g{i}'), body, format='json')
            assert response.status_code == status.HTTP_201_CREATED

        response = api_client.post(_url('g10'), body, format='json')
        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS

    def test_updates_not_counted_as_creations(self, api_client):
        body = {'groupName': 'G', 'users': {}}
        for i in range(10):
            api_client.post(_url(f'g{i}'), body, format='json')

        response = api_client.post(_url('g0'), body, format='json')
        assert response.status_code == status.HTTP_200_OK

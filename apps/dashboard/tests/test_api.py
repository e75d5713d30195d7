"""
API tests for the admin dashboard endpoints.
"""

from datetime import timedelta
from unittest.mock import patch

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from apps.contact.models import ContactStatus, ContactSubmission
from apps.dashboard.sessions import get_session_store
from apps.groups.models import GiftGroup


# =============================================================================
# Login / logout
# =============================================================================

@pytest.mark.django_db
class TestAdminLogin:
    """Tests for POST /admin/api/login/"""

    def test_login_success(self, api_client, settings):
        settings.ADMIN_PASSWORD = 'hunter2'
        response = api_client.post(reverse('dashboard:login'), {'password': 'hunter2'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert get_session_store().get(response.data['token']) is not None

    def test_login_wrong_password(self, api_client, settings):
        settings.ADMIN_PASSWORD = 'hunter2'
        response = api_client.post(reverse('dashboard:login'), {'password': 'nope'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'success': False, 'message': 'Invalid password'}

    def test_login_not_configured(self, api_client, settings):
        settings.ADMIN_PASSWORD = ''
        response = api_client.post(reverse('dashboard:login'), {'password': 'x'}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_login_rate_limited(self, api_client, settings):
        settings.ADMIN_PASSWORD = 'hunter2'
        url = reverse('dashboard:login')
        for _ in range(3):
            api_client.post(url, {'password': 'guess'}, format='json')

        response = api_client.post(url, {'password': 'hunter2'}, format='json')
        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS

    def test_logout_revokes_token(self, admin_client, admin_session):
        response = admin_client.post(reverse('dashboard:logout'))

        assert response.status_code == status.HTTP_200_OK
        assert get_session_store().get(admin_session.token) is None
        assert admin_client.get(reverse('dashboard:stats')).status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Authentication
# =============================================================================

@pytest.mark.django_db
class TestAdminAuthentication:

    @pytest.mark.parametrize('name', ['stats', 'group-list', 'contact-list'])
    def test_requires_session(self, api_client, name):
        response = api_client.get(reverse(f'dashboard:{name}'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unknown_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-real-token')
        response = api_client.get(reverse('dashboard:stats'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_expired_token(self, admin_client):
        later = timezone.now() + timedelta(hours=3)
        with patch('apps.dashboard.sessions.timezone.now', return_value=later):
            response = admin_client.get(reverse('dashboard:stats'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Stats and groups
# =============================================================================

@pytest.mark.django_db
class TestDashboardGroups:

    def test_stats(self, admin_client, sample_groups, contact_submissions):
        response = admin_client.get(reverse('dashboard:stats'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['stats']['totalGroups'] == 3
        assert response.data['stats']['newContacts'] == 1

    def test_list_groups(self, admin_client, sample_groups):
        response = admin_client.get(reverse('dashboard:group-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3
        smith = next(g for g in response.data['groups'] if g['groupId'] == 'smith')
        assert smith['groupName'] == 'Smith Family'
        assert smith['userCount'] == 2
        assert smith['itemCount'] == 3
        assert smith['holiday'] == 'Christmas'

    def test_list_groups_search(self, admin_client, sample_groups):
        response = admin_client.get(reverse('dashboard:group-list'), {'search': 'office'})

        assert [g['groupId'] for g in response.data['groups']] == ['office']

    def test_list_groups_paginated(self, admin_client, db):
        for i in range(25):
            GiftGroup.objects.create(group_id=f'g{i}', data={'groupName': f'G{i}', 'users': {}})

        first = admin_client.get(reverse('dashboard:group-list'))
        second = admin_client.get(reverse('dashboard:group-list'), {'page': 2})

        assert len(first.data['groups']) == 20
        assert len(second.data['groups']) == 5
        assert first.data['next'] is not None

    def test_observe_group(self, admin_client, sample_groups):
        response = admin_client.get(reverse('dashboard:group-detail', kwargs={'group_id': 'smith'}))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['groupName'] == 'Smith Family'

    def test_observe_missing_group(self, admin_client, db):
        response = admin_client.get(reverse('dashboard:group-detail', kwargs={'group_id': 'nope'}))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_group(self, admin_client, sample_groups):
        response = admin_client.delete(reverse('dashboard:group-detail', kwargs={'group_id': 'smith'}))

        assert response.status_code == status.HTTP_200_OK
        assert not GiftGroup.objects.filter(group_id='smith').exists()

    def test_cleanup(self, admin_client, sample_groups):
        GiftGroup.objects.filter(group_id='office').update(
            updated_at=timezone.now() - timedelta(days=800)
        )
        response = admin_client.post(reverse('dashboard:cleanup'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True, 'deletedCount': 1}


# =============================================================================
# Contact inbox
# =============================================================================

@pytest.mark.django_db
class TestDashboardContacts:

    def test_list_contacts(self, admin_client, contact_submissions):
        response = admin_client.get(reverse('dashboard:contact-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['contacts']) == 2

    def test_list_contacts_by_status(self, admin_client, contact_submissions):
        response = admin_client.get(reverse('dashboard:contact-list'), {'status': 'read'})
        assert [c['name'] for c in response.data['contacts']] == ['B']

    def test_update_contact(self, admin_client, contact_submissions):
        contact = contact_submissions[0]
        url = reverse('dashboard:contact-detail', kwargs={'contact_id': contact.pk})

        response = admin_client.put(url, {'status': 'replied', 'adminNotes': 'Answered'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        contact.refresh_from_db()
        assert contact.status == ContactStatus.REPLIED
        assert contact.admin_notes == 'Answered'

    def test_update_contact_invalid_status(self, admin_client, contact_submissions):
        url = reverse('dashboard:contact-detail', kwargs={'contact_id': contact_submissions[0].pk})
        response = admin_client.put(url, {'status': 'spam'}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_contact_empty_body(self, admin_client, contact_submissions):
        url = reverse('dashboard:contact-detail', kwargs={'contact_id': contact_submissions[0].pk})
        response = admin_client.put(url, {}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_missing_contact(self, admin_client, db):
        url = reverse('dashboard:contact-detail', kwargs={'contact_id': 999})
        response = admin_client.put(url, {'status': 'read'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert not ContactSubmission.objects.filter(pk=999).exists()

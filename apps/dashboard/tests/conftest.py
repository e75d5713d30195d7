import pytest
from rest_framework.test import APIClient

from apps.contact.models import ContactSubmission
from apps.dashboard.sessions import get_session_store
from apps.groups.services import create_or_update_group


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_session():
    return get_session_store().create()


@pytest.fixture
def admin_client(admin_session):
    """API client carrying a live admin bearer token."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {admin_session.token}')
    return client


@pytest.fixture
def sample_groups(db):
    """Three groups with members and items."""
    create_or_update_group(group_id='smith', data={
        'groupName': 'Smith Family',
        'holiday': 'Christmas',
        'users': {
            'Ann': {'items': [{'description': 'Socks'}, {'description': 'Scarf'}]},
            'Bob': {'items': [{'description': 'Book'}]},
        },
    })
    create_or_update_group(group_id='office', data={
        'groupName': 'Office Party',
        'holiday': 'Other',
        'users': {'Cid': {'items': []}},
    })
    create_or_update_group(group_id='jones', data={
        'groupName': 'Jones Birthday',
        'holiday': 'Birthday',
        'users': {},
    })
    return ['smith', 'office', 'jones']


@pytest.fixture
def contact_submissions(db):
    return [
        ContactSubmission.objects.create(name='A', email='a@example.com', message='1'),
        ContactSubmission.objects.create(name='B', email='b@example.com', message='2', status='read'),
    ]

import pytest
from rest_framework.test import APIClient

from apps.groups.services import create_or_update_group


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def group_document():
    """Group with two members; Bob has claimed Ann's socks."""
    return {
        'groupName': 'Smith Family',
        'holiday': 'Christmas',
        'eventDate': '2025-12-25',
        'createdBy': 'Ann',
        'users': {
            'Ann': {
                'items': [
                    {
                        'description': 'Socks',
                        'priority': 'high',
                        'price': '10',
                        'claimedBy': ['Bob'],
                        'purchased': True,
                        'splitWith': ['Cid'],
                    },
                ],
            },
            'Bob': {
                'items': [
                    {
                        'description': 'Book',
                        'priority': 'low',
                        'claimedBy': ['Ann'],
                        'purchased': False,
                        'splitWith': [],
                    },
                ],
            },
        },
    }


@pytest.fixture
def stored_group(db, group_document):
    """Store ``group_document`` under the ID ``smith-2025``."""
    create_or_update_group(group_id='smith-2025', data=group_document)
    return 'smith-2025'

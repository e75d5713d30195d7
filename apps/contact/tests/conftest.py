import pytest
from rest_framework.test import APIClient

from apps.contact.models import ContactSubmission


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def contact_submission(db):
    return ContactSubmission.objects.create(
        name='Ann Smith',
        email='ann@example.com',
        message='Love the app!',
    )

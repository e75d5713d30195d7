from unittest.mock import patch

import pytest
from django.db import DatabaseError

from apps.contact.exceptions import ContactNotFoundError, ContactStorageError
from apps.contact.models import ContactStatus, ContactSubmission
from apps.contact.services import list_contacts, submit_contact, update_contact


@pytest.mark.django_db
class TestSubmitContact:

    def test_submit(self):
        submission = submit_contact(name='Ann', email='ann@Example.COM', message='Hello')

        assert submission.pk is not None
        assert submission.status == ContactStatus.NEW
        assert submission.email == 'ann@example.com'

    def test_markup_stripped(self):
        submission = submit_contact(
            name='<b>Ann</b>',
            email='ann@example.com',
            message='<script>alert("x")</script>Hi',
        )
        assert submission.name == 'Ann'
        assert submission.message == 'alert(x)Hi'

    def test_message_truncated(self):
        submission = submit_contact(name='Ann', email='ann@example.com', message='x' * 3000)
        assert len(submission.message) == 2000

    def test_storage_failure(self):
        with patch('apps.contact.services.ContactSubmission.objects.create', side_effect=DatabaseError('down')):
            with pytest.raises(ContactStorageError):
                submit_contact(name='Ann', email='ann@example.com', message='Hi')


@pytest.mark.django_db
class TestListContacts:

    def test_newest_first(self):
        first = submit_contact(name='A', email='a@example.com', message='1')
        second = submit_contact(name='B', email='b@example.com', message='2')

        assert list(list_contacts()) == [second, first]

    def test_filter_by_status(self, contact_submission):
        other = submit_contact(name='B', email='b@example.com', message='2')
        update_contact(contact_id=other.pk, status='archived')

        assert list(list_contacts(status='new')) == [contact_submission]
        assert list(list_contacts(status='archived')) == [other]


@pytest.mark.django_db
class TestUpdateContact:

    def test_update_status_and_notes(self, contact_submission):
        updated = update_contact(
            contact_id=contact_submission.pk,
            status='replied',
            admin_notes='Sent a <i>reply</i>',
        )

        contact_submission.refresh_from_db()
        assert updated.status == ContactStatus.REPLIED
        assert contact_submission.status == ContactStatus.REPLIED
        assert contact_submission.admin_notes == 'Sent a reply'

    def test_update_notes_only_keeps_status(self, contact_submission):
        update_contact(contact_id=contact_submission.pk, admin_notes='later')

        contact_submission.refresh_from_db()
        assert contact_submission.status == ContactStatus.NEW
        assert contact_submission.admin_notes == 'later'

    def test_missing_submission(self, db):
        with pytest.raises(ContactNotFoundError):
            update_contact(contact_id=999, status='read')

    def test_invalid_status(self, contact_submission):
        with pytest.raises(ValueError):
            update_contact(contact_id=contact_submission.pk, status='spam')
        assert ContactSubmission.objects.get(pk=contact_submission.pk).status == ContactStatus.NEW

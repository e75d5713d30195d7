from rest_framework import serializers

from .models import ContactStatus, ContactSubmission
from .services import MAX_MESSAGE_LENGTH, MAX_NAME_LENGTH, MAX_NOTES_LENGTH


class ContactInputSerializer(serializers.Serializer):
    """Input serializer for the public contact form."""

    name = serializers.CharField(max_length=MAX_NAME_LENGTH)
    email = serializers.EmailField(max_length=254)
    message = serializers.CharField(max_length=MAX_MESSAGE_LENGTH)


class ContactSubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactSubmission
        fields = ['id', 'name', 'email', 'message', 'submitted_at', 'status', 'admin_notes']
        read_only_fields = fields


class ContactUpdateSerializer(serializers.Serializer):
    """Input serializer for admin updates of a submission."""

    status = serializers.ChoiceField(choices=ContactStatus.choices, required=False)
    adminNotes = serializers.CharField(
        source='admin_notes',
        max_length=MAX_NOTES_LENGTH,
        required=False,
        allow_blank=True,
    )

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide status or adminNotes")
        return attrs


class ContactFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ContactStatus.choices, required=False)

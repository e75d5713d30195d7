from rest_framework import serializers

from apps.groups.constants import MAX_MEMBER_NAME_LENGTH


class MemberQuerySerializer(serializers.Serializer):
    """Optional ``?member=`` query parameter naming the requesting member."""

    member = serializers.CharField(
        max_length=MAX_MEMBER_NAME_LENGTH,
        required=False,
        allow_blank=True,
        trim_whitespace=False,
        help_text="Requesting member; their own claim status is hidden",
    )


class GroupItemSerializer(serializers.Serializer):
    """One wishlist item (documentation only)."""

    description = serializers.CharField()
    priority = serializers.ChoiceField(choices=['high', 'medium', 'low'])
    price = serializers.CharField(allow_blank=True)
    notes = serializers.CharField(allow_blank=True)
    details = serializers.CharField(allow_blank=True)
    claimedBy = serializers.ListField(child=serializers.CharField())
    purchased = serializers.BooleanField()
    splitWith = serializers.ListField(child=serializers.CharField())


class WishlistSerializer(serializers.Serializer):
    items = GroupItemSerializer(many=True)


class GroupDocumentSerializer(serializers.Serializer):
    """Stored group document (documentation only)."""

    groupName = serializers.CharField()
    holiday = serializers.CharField()
    eventDate = serializers.CharField(allow_blank=True)
    createdBy = serializers.CharField(allow_blank=True)
    users = serializers.DictField(child=WishlistSerializer())


class GroupResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    data = GroupDocumentSerializer(allow_null=True)


class MessageResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()


class ValidationErrorResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    errors = serializers.ListField(child=serializers.CharField())

from rest_framework import serializers

from apps.groups.models import GiftGroup


class AdminLoginSerializer(serializers.Serializer):
    password = serializers.CharField(trim_whitespace=False, max_length=256)


class AdminLoginResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    token = serializers.CharField()
    expiresAt = serializers.DateTimeField()


class SystemStatsSerializer(serializers.Serializer):
    totalGroups = serializers.IntegerField()
    totalUsers = serializers.IntegerField()
    totalItems = serializers.IntegerField()
    totalContacts = serializers.IntegerField()
    newContacts = serializers.IntegerField()
    groupsCreatedToday = serializers.IntegerField()


class StatsResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    stats = SystemStatsSerializer()


class GroupSearchSerializer(serializers.Serializer):
    """Query parameters for the dashboard group list."""

    search = serializers.CharField(required=False, allow_blank=True, max_length=100)


class GroupOverviewSerializer(serializers.ModelSerializer):
    """One row of the dashboard group list."""

    groupId = serializers.CharField(source='group_id')
    groupName = serializers.CharField(source='group_name')
    holiday = serializers.SerializerMethodField()
    eventDate = serializers.SerializerMethodField()
    userCount = serializers.IntegerField(source='member_count')
    itemCount = serializers.IntegerField(source='item_count')
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')

    class Meta:
        model = GiftGroup
        fields = [
            'groupId', 'groupName', 'holiday', 'eventDate',
            'userCount', 'itemCount', 'createdAt', 'updatedAt',
        ]
        read_only_fields = fields

    def get_holiday(self, obj) -> str:
        return obj.data.get('holiday', '') if isinstance(obj.data, dict) else ''

    def get_eventDate(self, obj) -> str:
        return obj.data.get('eventDate', '') if isinstance(obj.data, dict) else ''


class CleanupResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    deletedCount = serializers.IntegerField()

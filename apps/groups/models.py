# ==========================================
# apps/groups/models.py
# ==========================================

from django.db import models


class Holiday(models.TextChoices):
    CHRISTMAS = 'Christmas', 'Christmas'
    BIRTHDAY = 'Birthday', 'Birthday'
    HANUKKAH = 'Hanukkah', 'Hanukkah'
    ANNIVERSARY = 'Anniversary', 'Anniversary'
    OTHER = 'Other', 'Other'


class Priority(models.TextChoices):
    HIGH = 'high', 'High'
    MEDIUM = 'medium', 'Medium'
    LOW = 'low', 'Low'


class GiftGroup(models.Model):
    """
    One gift exchange: the whole group document stored under its identifier.

    The document is always written in full; there is no per-item storage.
    """

    group_id = models.CharField(primary_key=True, max_length=255)
    data = models.JSONField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        db_table = 'groups'
        ordering = ['-updated_at']

    def __str__(self):
        return self.group_name or self.group_id

    @property
    def group_name(self):
        if isinstance(self.data, dict):
            return self.data.get('groupName', '')
        return ''

    @property
    def members(self):
        users = self.data.get('users') if isinstance(self.data, dict) else None
        return users if isinstance(users, dict) else {}

    @property
    def member_count(self):
        return len(self.members)

    @property
    def item_count(self):
        total = 0
        for wishlist in self.members.values():
            items = wishlist.get('items') if isinstance(wishlist, dict) else None
            if isinstance(items, list):
                total += len(items)
        return total

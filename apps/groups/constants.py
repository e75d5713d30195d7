# Size bounds for a single group document
MAX_GROUP_ID_LENGTH = 255
MAX_GROUP_NAME_LENGTH = 100
MAX_CREATED_BY_LENGTH = 100
MAX_EVENT_DATE_LENGTH = 50
MAX_USERS = 50
MAX_MEMBER_NAME_LENGTH = 100
MAX_ITEMS_PER_USER = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_DETAILS_LENGTH = 1000
MAX_NOTES_LENGTH = 1000
MAX_PRICE_LENGTH = 20
MAX_CLAIMANTS = 10
MAX_DOCUMENT_BYTES = 500 * 1024

GROUP_ID_PATTERN = r'^[a-zA-Z0-9_-]+$'

# Legacy field names, canonical name first
DESCRIPTION_ALIASES = ('description', 'item', 'name')
USERS_ALIASES = ('users', 'people')
ITEMS_ALIASES = ('items', 'wishlist')
HOLIDAY_ALIASES = ('holiday', 'eventType')

# Item fields hidden from a member when they look at their own list
CLAIM_FIELDS = ('claimedBy', 'purchased', 'splitWith')

"""
Contact App - Feedback form submissions

Visitors send a name, email address and message; submissions are stored
for the admin dashboard, where they can be marked as read, replied to
or archived, with private notes.
"""

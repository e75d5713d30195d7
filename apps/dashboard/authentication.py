from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

from .sessions import get_session_store


class AdminPrincipal:
    """Stand-in user for requests carrying a valid admin session."""

    is_authenticated = True
    is_staff = True
    is_anonymous = False

    def __str__(self):
        return 'admin'


class AdminSessionAuthentication(BaseAuthentication):
    """
    Authenticate ``Authorization: Bearer <token>`` against the admin
    session store.

    Requests without a bearer header are left anonymous; a header with an
    unknown or expired token is rejected outright.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            raise AuthenticationFailed('Invalid authorization header.')

        try:
            token = auth[1].decode()
        except UnicodeError:
            raise AuthenticationFailed('Invalid authorization header.')

        session = get_session_store().get(token)
        if session is None:
            raise AuthenticationFailed('Invalid or expired session')
        return (AdminPrincipal(), session)

    def authenticate_header(self, request):
        return self.keyword

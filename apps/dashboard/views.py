from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from config.throttling import GeneralRateThrottle
from apps.contact.exceptions import ContactNotFoundError
from apps.contact.serializers import (
    ContactFilterSerializer,
    ContactSubmissionSerializer,
    ContactUpdateSerializer,
)
from apps.contact.services import list_contacts, update_contact
from apps.groups.serializers import GroupResponseSerializer, MessageResponseSerializer
from apps.groups.services import (
    GroupNotFoundError,
    InvalidGroupIdError,
    StorageUnavailableError,
)

from .authentication import AdminSessionAuthentication
from .exceptions import AdminNotConfiguredError, InvalidAdminPasswordError
from .permissions import HasAdminSession
from .serializers import (
    AdminLoginResponseSerializer,
    AdminLoginSerializer,
    CleanupResponseSerializer,
    GroupOverviewSerializer,
    GroupSearchSerializer,
    StatsResponseSerializer,
)
from .services import (
    end_admin_session,
    get_system_stats,
    list_group_overviews,
    observe_group,
    remove_group,
    run_cleanup,
    start_admin_session,
)
from .throttling import AdminLoginThrottle


def _failure(message, status_code):
    return Response({'success': False, 'message': message}, status=status_code)


class DashboardPagination(PageNumberPagination):
    page_size = 20


class AdminAPIView(APIView):
    """Base view for endpoints that need a live admin session."""

    authentication_classes = [AdminSessionAuthentication]
    permission_classes = [HasAdminSession]


class AdminLoginView(APIView):
    """POST /admin/api/login/ - Exchange the admin password for a session token."""

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [GeneralRateThrottle, AdminLoginThrottle]

    @extend_schema(
        request=AdminLoginSerializer,
        responses={200: AdminLoginResponseSerializer, 401: MessageResponseSerializer},
        tags=['admin'],
    )
    def post(self, request):
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            session = start_admin_session(password=serializer.validated_data['password'])
        except AdminNotConfiguredError as e:
            return _failure(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        except InvalidAdminPasswordError as e:
            return _failure(str(e), status.HTTP_401_UNAUTHORIZED)

        return Response({
            'success': True,
            'token': session.token,
            'expiresAt': session.expires_at,
        })


class AdminLogoutView(AdminAPIView):
    """POST /admin/api/logout/ - Revoke the current session token."""

    @extend_schema(request=None, responses={200: MessageResponseSerializer}, tags=['admin'])
    def post(self, request):
        end_admin_session(token=request.auth.token)
        return Response({'success': True, 'message': 'Logged out'})


class SystemStatsView(AdminAPIView):
    """GET /admin/api/stats/"""

    @extend_schema(responses={200: StatsResponseSerializer}, tags=['admin'])
    def get(self, request):
        try:
            stats = get_system_stats()
        except StorageUnavailableError as e:
            return _failure(str(e), status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response({'success': True, 'stats': stats})


class GroupOverviewListView(AdminAPIView):
    """GET /admin/api/groups/?search=&page= - Paginated group list."""

    pagination_class = DashboardPagination

    @extend_schema(
        parameters=[GroupSearchSerializer],
        responses={200: GroupOverviewSerializer(many=True)},
        tags=['admin'],
    )
    def get(self, request):
        filters = GroupSearchSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = list_group_overviews(search=filters.validated_data.get('search'))
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(queryset, request, view=self)

        return Response({
            'success': True,
            'count': paginator.page.paginator.count,
            'next': paginator.get_next_link(),
            'previous': paginator.get_previous_link(),
            'groups': GroupOverviewSerializer(page, many=True).data,
        })


class GroupObserveView(AdminAPIView):
    """
    GET    /admin/api/groups/{group_id}/ - Full document, nothing hidden
    DELETE /admin/api/groups/{group_id}/ - Delete the group
    """

    @extend_schema(responses={200: GroupResponseSerializer, 404: MessageResponseSerializer}, tags=['admin'])
    def get(self, request, group_id):
        try:
            document = observe_group(group_id=group_id)
        except InvalidGroupIdError as e:
            return _failure(str(e), status.HTTP_400_BAD_REQUEST)
        except GroupNotFoundError:
            return _failure('Group not found', status.HTTP_404_NOT_FOUND)
        except StorageUnavailableError:
            return _failure('Error loading group', status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response({'success': True, 'data': document})

    @extend_schema(responses={200: MessageResponseSerializer, 404: MessageResponseSerializer}, tags=['admin'])
    def delete(self, request, group_id):
        try:
            remove_group(group_id=group_id)
        except InvalidGroupIdError as e:
            return _failure(str(e), status.HTTP_400_BAD_REQUEST)
        except GroupNotFoundError:
            return _failure('Group not found', status.HTTP_404_NOT_FOUND)
        except StorageUnavailableError:
            return _failure('Error deleting group', status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response({'success': True, 'message': 'Group deleted successfully'})


class ContactListView(AdminAPIView):
    """GET /admin/api/contacts/?status= - Contact inbox, newest first."""

    @extend_schema(
        parameters=[ContactFilterSerializer],
        responses={200: ContactSubmissionSerializer(many=True)},
        tags=['admin'],
    )
    def get(self, request):
        filters = ContactFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        contacts = list_contacts(status=filters.validated_data.get('status'))
        return Response({
            'success': True,
            'contacts': ContactSubmissionSerializer(contacts, many=True).data,
        })


class ContactUpdateView(AdminAPIView):
    """PUT /admin/api/contacts/{contact_id}/ - Set status and/or notes."""

    @extend_schema(
        request=ContactUpdateSerializer,
        responses={200: ContactSubmissionSerializer, 404: MessageResponseSerializer},
        tags=['admin'],
    )
    def put(self, request, contact_id):
        serializer = ContactUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            contact = update_contact(contact_id=contact_id, **serializer.validated_data)
        except ContactNotFoundError as e:
            return _failure(str(e), status.HTTP_404_NOT_FOUND)

        return Response({
            'success': True,
            'contact': ContactSubmissionSerializer(contact).data,
        })


class CleanupView(AdminAPIView):
    """POST /admin/api/cleanup/ - Run the retention sweep now."""

    @extend_schema(request=None, responses={200: CleanupResponseSerializer}, tags=['admin'])
    def post(self, request):
        try:
            deleted = run_cleanup()
        except StorageUnavailableError:
            return _failure('Error running cleanup', status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response({'success': True, 'deletedCount': deleted})

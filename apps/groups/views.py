from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import OpenApiParameter, extend_schema

from config.throttling import GeneralRateThrottle

from .serializers import (
    GroupDocumentSerializer,
    GroupResponseSerializer,
    MemberQuerySerializer,
    MessageResponseSerializer,
    ValidationErrorResponseSerializer,
)
from .throttling import GroupCreationThrottle, GroupReadThrottle, GroupWriteThrottle

from apps.groups.services import (
    create_or_update_group,
    get_group,
    delete_group,
    check_group_creator,
    # Exceptions
    GroupNotFoundError,
    GroupValidationError,
    InvalidGroupIdError,
    NotGroupCreatorError,
    StorageUnavailableError,
)

MEMBER_PARAMETER = OpenApiParameter(
    name='member',
    type=str,
    required=False,
    description="Requesting member's name",
)


def _failure(message, status_code):
    return Response({'success': False, 'message': message}, status=status_code)


class GroupDocumentView(APIView):
    """
    Read, write and delete one group document.

    GET    /api/groups/{group_id}/?member=Ann  - Group as seen by Ann
    POST   /api/groups/{group_id}/             - Create or overwrite the group
    DELETE /api/groups/{group_id}/?member=Ann  - Delete (creator only)

    Writes replace the whole document. Clients must merge their change
    into a freshly fetched copy before posting it back.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    parser_classes = [JSONParser]
    throttle_classes = [
        GeneralRateThrottle,
        GroupReadThrottle,
        GroupWriteThrottle,
        GroupCreationThrottle,
    ]

    @extend_schema(
        parameters=[MEMBER_PARAMETER],
        responses={200: GroupResponseSerializer, 400: MessageResponseSerializer},
        description="Get a group. Claim status on the requesting member's own wishlist is hidden.",
        tags=['groups'],
    )
    def get(self, request, group_id):
        query = MemberQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return _failure('Invalid member name', status.HTTP_400_BAD_REQUEST)
        member = query.validated_data.get('member') or None
        try:
            document = get_group(group_id=group_id, member=member)
        except InvalidGroupIdError as e:
            return _failure(str(e), status.HTTP_400_BAD_REQUEST)
        except GroupNotFoundError:
            return Response({'success': True, 'data': None})
        except StorageUnavailableError:
            return _failure('Error loading group data', status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response({'success': True, 'data': document})

    @extend_schema(
        request=GroupDocumentSerializer,
        responses={
            200: MessageResponseSerializer,
            201: MessageResponseSerializer,
            400: ValidationErrorResponseSerializer,
        },
        description="Create a group or overwrite it with a complete document.",
        tags=['groups'],
    )
    def post(self, request, group_id):
        try:
            _, created = create_or_update_group(group_id=group_id, data=request.data)
        except InvalidGroupIdError as e:
            return _failure(str(e), status.HTTP_400_BAD_REQUEST)
        except GroupValidationError as e:
            return Response({
                'success': False,
                'message': 'Validation failed',
                'errors': e.errors,
            }, status=status.HTTP_400_BAD_REQUEST)
        except StorageUnavailableError:
            return _failure('Error saving group data', status.HTTP_503_SERVICE_UNAVAILABLE)

        if created:
            return Response(
                {'success': True, 'message': 'Group created successfully'},
                status=status.HTTP_201_CREATED,
            )
        return Response({'success': True, 'message': 'Group updated successfully'})

    @extend_schema(
        parameters=[MEMBER_PARAMETER],
        responses={
            200: MessageResponseSerializer,
            400: MessageResponseSerializer,
            403: MessageResponseSerializer,
            404: MessageResponseSerializer,
        },
        description="Delete a group. Only the member recorded as creator may do this.",
        tags=['groups'],
    )
    def delete(self, request, group_id):
        query = MemberQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return _failure('Invalid member name', status.HTTP_400_BAD_REQUEST)
        member = query.validated_data.get('member') or None
        try:
            check_group_creator(group_id=group_id, member=member)
            delete_group(group_id=group_id)
        except InvalidGroupIdError as e:
            return _failure(str(e), status.HTTP_400_BAD_REQUEST)
        except NotGroupCreatorError as e:
            return _failure(str(e), status.HTTP_403_FORBIDDEN)
        except GroupNotFoundError:
            return _failure('Group not found', status.HTTP_404_NOT_FOUND)
        except StorageUnavailableError:
            return _failure('Error deleting group', status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response({'success': True, 'message': 'Group deleted successfully'})

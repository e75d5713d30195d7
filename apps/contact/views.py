from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from config.throttling import GeneralRateThrottle
from apps.groups.serializers import MessageResponseSerializer

from .exceptions import ContactStorageError
from .serializers import ContactInputSerializer
from .services import submit_contact
from .throttling import ContactThrottle


class ContactView(APIView):
    """
    POST /api/contact/ - Send a message to the site operators.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [GeneralRateThrottle, ContactThrottle]

    @extend_schema(
        request=ContactInputSerializer,
        responses={201: MessageResponseSerializer, 400: MessageResponseSerializer},
        description="Submit the contact form.",
        tags=['contact'],
    )
    def post(self, request):
        serializer = ContactInputSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                'success': False,
                'message': 'Validation failed',
                'errors': serializer.errors,
            }, status=status.HTTP_400_BAD_REQUEST)

        try:
            submit_contact(**serializer.validated_data)
        except ContactStorageError as e:
            return Response(
                {'success': False, 'message': str(e)},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(
            {'success': True, 'message': 'Thank you for your message!'},
            status=status.HTTP_201_CREATED,
        )

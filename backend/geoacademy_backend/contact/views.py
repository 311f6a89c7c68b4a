import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from registrations.notifications import EmailNotifier
from registrations.permissions import IsAdminOrCreateOnly
from registrations.storage import get_storage

from .serializers import ContactMessageSerializer


logger = logging.getLogger(__name__)


class ContactMessageView(APIView):
    """Public contact form (POST) and the admin inbox (GET, newest first)."""
    permission_classes = [IsAdminOrCreateOnly]
    validation_message = "Invalid contact data"

    def get(self, request):
        messages = get_storage().get_contact_messages()
        return Response(ContactMessageSerializer(messages, many=True).data)

    def post(self, request):
        serializer = ContactMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = get_storage().create_contact_message(serializer.validated_data)
        logger.info(f"Contact message {message.id} received from {message.email}")

        try:
            EmailNotifier().send_contact_message_notification(message)
        except Exception:
            logger.exception(f"Contact notification for message {message.id} failed")

        return Response(ContactMessageSerializer(message).data, status=status.HTTP_201_CREATED)

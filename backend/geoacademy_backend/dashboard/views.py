import logging
from datetime import datetime, time

from django.contrib.auth import authenticate, login, logout
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated, ValidationError
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from registrations.services import RegistrationService

from .serializers import AdminUserSerializer, DashboardStatsSerializer, LoginSerializer


logger = logging.getLogger(__name__)


class AdminLoginView(APIView):
    # no session yet, so no CSRF check either
    authentication_classes = []
    validation_message = "Username and password are required"

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            username=serializer.validated_data["username"],
            password=serializer.validated_data["password"],
        )
        if user is None or not user.is_staff:
            logger.warning(f"Failed admin login for {serializer.validated_data['username']}")
            raise AuthenticationFailed("Invalid credentials")

        login(request, user)
        logger.info(f"Admin {user.username} logged in")
        return Response({"user": AdminUserSerializer(user).data})


class AdminLogoutView(APIView):
    authentication_classes = []

    def post(self, request):
        logout(request)
        return Response({"message": "Logged out successfully"})


class AdminMeView(APIView):
    def get(self, request):
        if not request.user.is_authenticated:
            raise NotAuthenticated("Not authenticated")
        return Response({"user": AdminUserSerializer(request.user).data})


def parse_range_bound(value, name, end_of_day=False):
    """Accept an ISO date or datetime; a bare end date covers the whole day."""
    if not value:
        return None
    # well-formed but impossible dates (2024-02-30) raise ValueError
    try:
        moment = parse_datetime(value)
        day = parse_date(value) if moment is None else None
    except ValueError:
        raise ValidationError({name: ["Not a valid calendar date."]})
    if moment is None:
        if day is None:
            raise ValidationError({name: ["Use an ISO date (YYYY-MM-DD) or datetime."]})
        moment = datetime.combine(day, time.max if end_of_day else time.min)
    if timezone.is_naive(moment):
        moment = timezone.make_aware(moment)
    return moment


class DashboardStatsView(APIView):
    permission_classes = [IsAdminUser]
    validation_message = "Invalid date range"

    def get(self, request):
        start = parse_range_bound(request.query_params.get("startDate"), "startDate")
        end = parse_range_bound(request.query_params.get("endDate"), "endDate", end_of_day=True)
        if start and end and start > end:
            raise ValidationError({"endDate": ["End date must not be before start date."]})

        stats = RegistrationService().dashboard_stats(start=start, end=end)
        return Response(DashboardStatsSerializer(stats).data)

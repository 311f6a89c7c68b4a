from django.views import View
from django.http import JsonResponse
from django.core.cache import cache
from django.db import DatabaseError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAdminUser
import logging

from .permissions import IsAdminOrCreateOnly, IsAdminOrReadOnly, is_admin
from .serializers import CourseSerializer, RegistrationSerializer, RegistrationStatusSerializer
from .services import CourseCatalog, RegistrationService
from .storage import get_storage


logger = logging.getLogger(__name__)


def parse_bool(value):
    if value is None:
        return None
    return value.strip().lower() in ("1", "true", "yes")


class HealthCheckView(View):
    def get(self, request, *args, **kwargs):
        storage = get_storage()
        try:
            storage.ping()
            db_status = "ok"
        except DatabaseError as e:
            logger.error(f"Health check: storage unavailable: {e}")
            db_status = "error"

        try:
            cache.set("health_check", "ok", timeout=5)
            cache_status = "ok" if cache.get("health_check") == "ok" else "error"
        except Exception as e:
            logger.error(f"Health check: cache unavailable: {e}")
            cache_status = "error"

        overall_status = "ok" if db_status == "ok" and cache_status == "ok" else "error"
        return JsonResponse(
            {"status": overall_status, "database": db_status, "cache": cache_status, "storage": storage.name},
            status=200 if overall_status == "ok" else 500,
        )


class RegistrationListCreateView(APIView):
    """
    Handles:
    - Public registration form submissions (POST)
    - Admin listing, newest first (GET)
    """
    permission_classes = [IsAdminOrCreateOnly]
    validation_message = "Invalid registration data"

    def get(self, request):
        registrations = get_storage().get_registrations()
        return Response(RegistrationSerializer(registrations, many=True).data)

    def post(self, request):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        registration = RegistrationService().create_registration(serializer.validated_data)
        return Response(RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED)


class RegistrationDetailView(APIView):
    permission_classes = [IsAdminUser]

    def get(self, request, pk):
        registration = RegistrationService().get_registration(pk)
        return Response(RegistrationSerializer(registration).data)


class RegistrationStatusView(APIView):
    """ Admin status change: pending / confirmed / cancelled """
    permission_classes = [IsAdminUser]
    validation_message = "Invalid status"

    def patch(self, request, pk):
        serializer = RegistrationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        registration = RegistrationService().update_status(pk, serializer.validated_data["status"])
        return Response(RegistrationSerializer(registration).data)


class CourseListCreateView(APIView):
    permission_classes = [IsAdminOrReadOnly]
    validation_message = "Invalid course data"

    def get(self, request):
        # the public site never sees soft-deleted courses
        active = parse_bool(request.query_params.get("active")) if is_admin(request) else True
        courses = CourseCatalog().list_courses(active=active)
        return Response(CourseSerializer(courses, many=True).data)

    def post(self, request):
        serializer = CourseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        course = CourseCatalog().create_course(serializer.validated_data)
        return Response(CourseSerializer(course).data, status=status.HTTP_201_CREATED)


class CourseDetailView(APIView):
    permission_classes = [IsAdminOrReadOnly]
    validation_message = "Invalid course data"

    def get(self, request, pk):
        course = CourseCatalog().get_course(pk, include_inactive=is_admin(request))
        return Response(CourseSerializer(course).data)

    def patch(self, request, pk):
        catalog = CourseCatalog()
        course = catalog.get_course(pk)
        serializer = CourseSerializer(course, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        course = catalog.update_course(pk, serializer.validated_data)
        return Response(CourseSerializer(course).data)

    def delete(self, request, pk):
        CourseCatalog().delete_course(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

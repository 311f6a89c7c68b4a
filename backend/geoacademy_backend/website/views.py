import logging

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from registrations.permissions import IsAdminOrReadOnly, is_admin
from registrations.storage import get_storage

from .serializers import BannerSerializer, WebsiteSettingSerializer


logger = logging.getLogger(__name__)


class BannerListCreateView(APIView):
    permission_classes = [IsAdminOrReadOnly]
    validation_message = "Invalid banner data"

    def get(self, request):
        # visitors only get the live carousel
        banners = get_storage().get_banners(active=None if is_admin(request) else True)
        return Response(BannerSerializer(banners, many=True).data)

    def post(self, request):
        serializer = BannerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        banner = get_storage().create_banner(serializer.validated_data)
        logger.info(f"Banner {banner.id} created")
        return Response(BannerSerializer(banner).data, status=status.HTTP_201_CREATED)


class BannerDetailView(APIView):
    permission_classes = [IsAdminOrReadOnly]
    validation_message = "Invalid banner data"

    def get_banner(self, request, pk):
        banner = get_storage().get_banner(pk)
        if banner is None or (not banner.is_active and not is_admin(request)):
            raise NotFound("Banner not found")
        return banner

    def get(self, request, pk):
        return Response(BannerSerializer(self.get_banner(request, pk)).data)

    def patch(self, request, pk):
        banner = self.get_banner(request, pk)
        serializer = BannerSerializer(banner, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        banner = get_storage().update_banner(pk, serializer.validated_data)
        if banner is None:
            raise NotFound("Banner not found")
        return Response(BannerSerializer(banner).data)

    def delete(self, request, pk):
        if not get_storage().delete_banner(pk):
            raise NotFound("Banner not found")
        logger.info(f"Banner {pk} deleted")
        return Response(status=status.HTTP_204_NO_CONTENT)


class WebsiteSettingListView(APIView):
    permission_classes = [IsAdminOrReadOnly]
    validation_message = "Invalid website setting"

    def get(self, request):
        settings = get_storage().get_website_settings()
        return Response(WebsiteSettingSerializer(settings, many=True).data)

    def post(self, request):
        serializer = WebsiteSettingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        setting, created = get_storage().upsert_website_setting(serializer.validated_data)
        logger.info(f"Website setting {setting.key} {'created' if created else 'updated'}")
        return Response(
            WebsiteSettingSerializer(setting).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class WebsiteSettingDetailView(APIView):
    permission_classes = [IsAdminOrReadOnly]
    validation_message = "Invalid website setting"

    def get_setting(self, key):
        setting = get_storage().get_website_setting(key)
        if setting is None:
            raise NotFound("Website setting not found")
        return setting

    def get(self, request, key):
        return Response(WebsiteSettingSerializer(self.get_setting(key)).data)

    def patch(self, request, key):
        setting = self.get_setting(key)
        serializer = WebsiteSettingSerializer(setting, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        setting = get_storage().update_website_setting(key, serializer.validated_data)
        return Response(WebsiteSettingSerializer(setting).data)

    def delete(self, request, key):
        if not get_storage().delete_website_setting(key):
            raise NotFound("Website setting not found")
        return Response(status=status.HTTP_204_NO_CONTENT)

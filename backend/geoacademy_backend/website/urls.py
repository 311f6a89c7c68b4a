from django.urls import path
from . import views


urlpatterns = [
    path('banners', views.BannerListCreateView.as_view(), name='banners-api'),
    path('banners/<int:pk>', views.BannerDetailView.as_view(), name='banner-detail'),
    path('website-settings', views.WebsiteSettingListView.as_view(), name='website-settings-api'),
    path('website-settings/<str:key>', views.WebsiteSettingDetailView.as_view(), name='website-setting-detail'),
]

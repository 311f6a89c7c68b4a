from django.urls import path
from . import views


urlpatterns = [
    path('admin/login', views.AdminLoginView.as_view(), name='admin-login'),
    path('admin/logout', views.AdminLogoutView.as_view(), name='admin-logout'),
    path('admin/me', views.AdminMeView.as_view(), name='admin-me'),
    path('dashboard/stats', views.DashboardStatsView.as_view(), name='dashboard-stats'),
]

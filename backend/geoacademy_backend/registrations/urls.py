from django.urls import path
from .views import (
    CourseDetailView,
    CourseListCreateView,
    HealthCheckView,
    RegistrationDetailView,
    RegistrationListCreateView,
    RegistrationStatusView,
)


urlpatterns = [
    path('registrations', RegistrationListCreateView.as_view(), name='registrations-api'),
    path('registrations/<int:pk>', RegistrationDetailView.as_view(), name='registration-detail'),
    path('registrations/<int:pk>/status', RegistrationStatusView.as_view(), name='registration-status'),
    path('courses', CourseListCreateView.as_view(), name='courses-api'),
    path('courses/<str:pk>', CourseDetailView.as_view(), name='course-detail'),
    path('health/', HealthCheckView.as_view(), name='health-check'),
]

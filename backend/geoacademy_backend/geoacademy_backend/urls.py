from django.contrib import admin
from django.urls import path, include

urlpatterns = [

    path('admin/', admin.site.urls),
    path('api/', include('registrations.urls')),  # courses, registrations, health
    path('api/', include('dashboard.urls')),      # admin session + dashboard stats
    path('api/contact', include('contact.urls')),
    path('api/', include('website.urls')),        # banners + website settings
]

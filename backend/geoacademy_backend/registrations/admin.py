from django.contrib import admin
from .models import Course, Registration


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ('title', 'level', 'price', 'enrolled', 'is_active')
    list_filter = ('level', 'is_active')
    search_fields = ('id', 'title')


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = (
        'full_name',
        'email',
        'course_id',
        'experience_level',
        'country',
        'status',
        'registration_date'
    )
    list_filter = ('status', 'course_id', 'newsletter')
    search_fields = ('first_name', 'last_name', 'email', 'phone')
    readonly_fields = ('registration_date',)

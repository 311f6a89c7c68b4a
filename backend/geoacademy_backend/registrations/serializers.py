from rest_framework import serializers

from .models import Course, Registration


class CourseSerializer(serializers.ModelSerializer):
    # Optional on create: derived from the title when absent
    id = serializers.SlugField(max_length=100, required=False)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    enrolled = serializers.IntegerField(min_value=0, required=False)
    imageUrl = serializers.URLField(source="image_url", max_length=500, required=False, allow_null=True, allow_blank=True)
    detailsUrl = serializers.URLField(source="details_url", max_length=500, required=False, allow_blank=True)
    isActive = serializers.BooleanField(source="is_active", required=False)

    class Meta:
        model = Course
        fields = [
            "id",
            "title",
            "description",
            "level",
            "duration",
            "price",
            "enrolled",
            "imageUrl",
            "detailsUrl",
            "isActive",
        ]


class RegistrationSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source="first_name", max_length=100)
    lastName = serializers.CharField(source="last_name", max_length=100)
    email = serializers.EmailField(max_length=255)
    phone = serializers.CharField(max_length=20, required=False, allow_null=True, allow_blank=True)
    courseId = serializers.CharField(source="course_id", max_length=100)
    experienceLevel = serializers.CharField(source="experience_level", max_length=50)
    goals = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    agreeTerms = serializers.BooleanField(source="agree_terms", default=False)
    newsletter = serializers.BooleanField(default=False)
    # Always server side: a client-sent status or date is ignored
    status = serializers.CharField(read_only=True)
    registrationDate = serializers.DateTimeField(source="registration_date", read_only=True)

    class Meta:
        model = Registration
        fields = [
            "id",
            "firstName",
            "lastName",
            "email",
            "phone",
            "country",
            "courseId",
            "experienceLevel",
            "goals",
            "agreeTerms",
            "newsletter",
            "status",
            "registrationDate",
        ]
        read_only_fields = ["id"]


class RegistrationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Registration.STATUS_CHOICES)

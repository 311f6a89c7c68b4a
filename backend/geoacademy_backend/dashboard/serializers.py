from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class AdminUserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    role = serializers.SerializerMethodField()

    def get_role(self, user):
        return "admin" if user.is_staff else "user"


class CoursePopularitySerializer(serializers.Serializer):
    course = serializers.CharField()
    count = serializers.IntegerField()


class DashboardStatsSerializer(serializers.Serializer):
    totalRegistrations = serializers.IntegerField(source="total_registrations")
    thisMonthRegistrations = serializers.IntegerField(source="this_month_registrations")
    activeCourses = serializers.IntegerField(source="active_courses")
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)
    completionRate = serializers.IntegerField(source="completion_rate")
    registrationTrends = serializers.ListField(child=serializers.IntegerField(), source="registration_trends")
    coursePopularity = CoursePopularitySerializer(many=True, source="course_popularity")

import logging

from rest_framework.exceptions import NotFound, ValidationError

from .models import Registration
from .notifications import EmailNotifier
from .stats import (
    COMPLETION_RATE,
    DashboardStats,
    compute_registration_stats,
    compute_revenue,
)
from .storage import get_storage


logger = logging.getLogger(__name__)

VALID_STATUSES = tuple(value for value, _ in Registration.STATUS_CHOICES)


class RegistrationService:
    """Registration lifecycle and the dashboard figures derived from it."""

    def __init__(self, storage=None, notifier=None):
        self.storage = storage if storage is not None else get_storage()
        self._notifier = notifier

    @property
    def notifier(self):
        if self._notifier is None:
            self._notifier = EmailNotifier()
        return self._notifier

    def _notify(self, send, *args):
        try:
            send(*args)
        except Exception:
            logger.exception(f"Notification {getattr(send, '__name__', send)} failed")

    def create_registration(self, data):
        """Store a new pending registration and bump the course's enrollment.

        An unknown course id is tolerated: the registration is still saved and
        no counter changes.
        """
        registration = self.storage.create_registration(data)
        logger.info(f"Registration {registration.id} created for course {registration.course_id}")

        course = self.storage.increment_enrollment(registration.course_id, 1)
        if course is None:
            logger.warning(
                f"Course {registration.course_id} not found - enrollment not updated "
                f"for registration {registration.id}"
            )

        self._notify(self.notifier.send_admin_registration_notification, registration, course)
        return registration

    def get_registration(self, registration_id):
        registration = self.storage.get_registration(registration_id)
        if registration is None:
            raise NotFound("Registration not found")
        return registration

    def update_status(self, registration_id, status):
        """Overwrite the status; any transition between known statuses is allowed."""
        if status not in VALID_STATUSES:
            raise ValidationError({"status": [f"Must be one of: {', '.join(VALID_STATUSES)}."]})

        registration = self.storage.update_registration_status(registration_id, status)
        if registration is None:
            raise NotFound("Registration not found")
        logger.info(f"Registration {registration_id} status set to {status}")

        if status == Registration.STATUS_CONFIRMED:
            course = self.storage.get_course(registration.course_id)
            if course is None:
                logger.info(f"Course {registration.course_id} missing - confirmation email skipped")
            else:
                self._notify(self.notifier.send_registration_confirmation, registration, course)
        return registration

    def registration_stats(self, start=None, end=None, now=None):
        registrations = self.storage.get_registrations(start=start, end=end)
        courses = self.storage.get_courses_by_ids({r.course_id for r in registrations})
        return compute_registration_stats(registrations, courses, now=now), courses

    def dashboard_stats(self, start=None, end=None, now=None):
        stats, courses = self.registration_stats(start=start, end=end, now=now)
        return DashboardStats(
            total_registrations=stats.total,
            this_month_registrations=stats.this_month,
            active_courses=self.storage.count_active_courses(),
            revenue=compute_revenue(stats.by_course, courses),
            completion_rate=COMPLETION_RATE,
            registration_trends=stats.by_month,
            course_popularity=stats.by_course,
        )


class CourseCatalog:
    """Course CRUD on top of the storage backend."""

    def __init__(self, storage=None):
        self.storage = storage if storage is not None else get_storage()

    def list_courses(self, active=None):
        return self.storage.get_courses(active=active)

    def get_course(self, course_id, include_inactive=True):
        course = self.storage.get_course(course_id)
        if course is None or (not include_inactive and not course.is_active):
            raise NotFound("Course not found")
        return course

    def create_course(self, data):
        course_id = data.get("id")
        if course_id and self.storage.get_course(course_id) is not None:
            raise ValidationError({"id": ["A course with this id already exists."]})
        course = self.storage.create_course(data)
        logger.info(f"Course {course.id} created")
        return course

    def update_course(self, course_id, data):
        if "id" in data and data["id"] != course_id:
            raise ValidationError({"id": ["Course id cannot be changed."]})
        course = self.storage.update_course(course_id, data)
        if course is None:
            raise NotFound("Course not found")
        logger.info(f"Course {course_id} updated")
        return course

    def delete_course(self, course_id):
        if not self.storage.delete_course(course_id):
            raise NotFound("Course not found")
        logger.info(f"Course {course_id} deactivated")

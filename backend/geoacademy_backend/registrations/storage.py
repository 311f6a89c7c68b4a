"""Storage backends for courses, registrations and the site content.

Two implementations share one interface:

- ``DatabaseStorage`` persists through the Django ORM (production).
- ``MemoryStorage`` keeps unsaved model instances in dictionaries. Every
  instance is isolated, which is what the tests rely on.

The active backend is picked by the ``GEOACADEMY_STORAGE`` setting and
obtained with ``get_storage()``.
"""

import functools
import logging
from itertools import count

from django.conf import settings
from django.db import connections
from django.db.models import F
from django.dispatch import receiver
from django.test.signals import setting_changed
from django.utils import timezone
from django.utils.module_loading import import_string

from contact.models import ContactMessage
from website.models import Banner, WebsiteSetting

from .models import Course, Registration, generate_course_id


logger = logging.getLogger(__name__)

# Fields a caller may never set on a new registration
REGISTRATION_SYSTEM_FIELDS = ("id", "status", "registration_date")


class BaseStorage:
    """Repository contract. ``data`` arguments use model field names."""

    name = "base"

    def ping(self):
        """Return True when the backing store answers."""
        raise NotImplementedError

    # Courses
    def get_courses(self, active=None):
        raise NotImplementedError

    def get_course(self, course_id):
        raise NotImplementedError

    def get_courses_by_ids(self, course_ids):
        raise NotImplementedError

    def count_active_courses(self):
        raise NotImplementedError

    def create_course(self, data):
        raise NotImplementedError

    def update_course(self, course_id, data):
        raise NotImplementedError

    def delete_course(self, course_id):
        raise NotImplementedError

    def increment_enrollment(self, course_id, by=1):
        raise NotImplementedError

    # Registrations
    def create_registration(self, data):
        raise NotImplementedError

    def get_registrations(self, start=None, end=None):
        raise NotImplementedError

    def get_registration(self, registration_id):
        raise NotImplementedError

    def update_registration_status(self, registration_id, status):
        raise NotImplementedError

    # Contact messages
    def create_contact_message(self, data):
        raise NotImplementedError

    def get_contact_messages(self):
        raise NotImplementedError

    # Banners
    def get_banners(self, active=None):
        raise NotImplementedError

    def get_banner(self, banner_id):
        raise NotImplementedError

    def create_banner(self, data):
        raise NotImplementedError

    def update_banner(self, banner_id, data):
        raise NotImplementedError

    def delete_banner(self, banner_id):
        raise NotImplementedError

    # Website settings
    def get_website_settings(self):
        raise NotImplementedError

    def get_website_setting(self, key):
        raise NotImplementedError

    def upsert_website_setting(self, data):
        """Create or overwrite the setting named ``data["key"]``.

        Returns ``(setting, created)``.
        """
        raise NotImplementedError

    def update_website_setting(self, key, data):
        raise NotImplementedError

    def delete_website_setting(self, key):
        raise NotImplementedError

    @staticmethod
    def _new_registration_fields(data):
        fields = {k: v for k, v in data.items() if k not in REGISTRATION_SYSTEM_FIELDS}
        fields["status"] = Registration.STATUS_PENDING
        fields["registration_date"] = timezone.now()
        return fields


class MemoryStorage(BaseStorage):
    """In-process store; nothing survives a restart."""

    name = "memory"

    def __init__(self):
        self.courses = {}
        self.registrations = {}
        self.contact_messages = {}
        self.banners = {}
        self.website_settings = {}
        self._registration_ids = count(1)
        self._contact_ids = count(1)
        self._banner_ids = count(1)
        self._setting_ids = count(1)

    def ping(self):
        return True

    def get_courses(self, active=None):
        courses = sorted(self.courses.values(), key=lambda c: c.title)
        if active is not None:
            courses = [c for c in courses if c.is_active == active]
        return courses

    def get_course(self, course_id):
        return self.courses.get(course_id)

    def get_courses_by_ids(self, course_ids):
        return {cid: self.courses[cid] for cid in course_ids if cid in self.courses}

    def count_active_courses(self):
        return sum(1 for c in self.courses.values() if c.is_active)

    def create_course(self, data):
        fields = dict(data)
        fields["id"] = fields.get("id") or generate_course_id(fields["title"])
        course = Course(**fields)
        self.courses[course.id] = course
        return course

    def update_course(self, course_id, data):
        course = self.courses.get(course_id)
        if course is None:
            return None
        for field, value in data.items():
            if field != "id":
                setattr(course, field, value)
        return course

    def delete_course(self, course_id):
        course = self.courses.get(course_id)
        if course is None:
            return False
        course.is_active = False
        return True

    def increment_enrollment(self, course_id, by=1):
        course = self.courses.get(course_id)
        if course is None:
            return None
        course.enrolled += by
        return course

    def create_registration(self, data):
        registration = Registration(id=next(self._registration_ids), **self._new_registration_fields(data))
        self.registrations[registration.id] = registration
        return registration

    def get_registrations(self, start=None, end=None):
        registrations = [
            r for r in self.registrations.values()
            if (start is None or r.registration_date >= start)
            and (end is None or r.registration_date <= end)
        ]
        return sorted(registrations, key=lambda r: (r.registration_date, r.id), reverse=True)

    def get_registration(self, registration_id):
        return self.registrations.get(registration_id)

    def update_registration_status(self, registration_id, status):
        registration = self.registrations.get(registration_id)
        if registration is None:
            return None
        registration.status = status
        return registration

    def create_contact_message(self, data):
        message = ContactMessage(id=next(self._contact_ids), created_at=timezone.now(), **data)
        self.contact_messages[message.id] = message
        return message

    def get_contact_messages(self):
        return sorted(self.contact_messages.values(), key=lambda m: (m.created_at, m.id), reverse=True)

    def get_banners(self, active=None):
        banners = sorted(self.banners.values(), key=lambda b: (b.display_order, b.id))
        if active is not None:
            banners = [b for b in banners if b.is_active == active]
        return banners

    def get_banner(self, banner_id):
        return self.banners.get(banner_id)

    def create_banner(self, data):
        now = timezone.now()
        banner = Banner(id=next(self._banner_ids), created_at=now, updated_at=now, **data)
        self.banners[banner.id] = banner
        return banner

    def update_banner(self, banner_id, data):
        banner = self.banners.get(banner_id)
        if banner is None:
            return None
        for field, value in data.items():
            setattr(banner, field, value)
        banner.updated_at = timezone.now()
        return banner

    def delete_banner(self, banner_id):
        return self.banners.pop(banner_id, None) is not None

    def get_website_settings(self):
        return sorted(self.website_settings.values(), key=lambda s: s.key)

    def get_website_setting(self, key):
        return self.website_settings.get(key)

    def upsert_website_setting(self, data):
        existing = self.website_settings.get(data["key"])
        if existing is not None:
            return self.update_website_setting(data["key"], data), False
        setting = WebsiteSetting(id=next(self._setting_ids), updated_at=timezone.now(), **data)
        self.website_settings[setting.key] = setting
        return setting, True

    def update_website_setting(self, key, data):
        setting = self.website_settings.get(key)
        if setting is None:
            return None
        for field, value in data.items():
            if field != "key":
                setattr(setting, field, value)
        setting.updated_at = timezone.now()
        return setting

    def delete_website_setting(self, key):
        return self.website_settings.pop(key, None) is not None


class DatabaseStorage(BaseStorage):
    """Django ORM backed store."""

    name = "database"

    def ping(self):
        with connections["default"].cursor() as cursor:
            cursor.execute("SELECT 1")
        return True

    def get_courses(self, active=None):
        qs = Course.objects.all()
        if active is not None:
            qs = qs.filter(is_active=active)
        return list(qs)

    def get_course(self, course_id):
        return Course.objects.filter(pk=course_id).first()

    def get_courses_by_ids(self, course_ids):
        return Course.objects.in_bulk(list(course_ids))

    def count_active_courses(self):
        return Course.objects.filter(is_active=True).count()

    def create_course(self, data):
        fields = dict(data)
        fields["id"] = fields.get("id") or generate_course_id(fields["title"])
        return Course.objects.create(**fields)

    def update_course(self, course_id, data):
        course = self.get_course(course_id)
        if course is None:
            return None
        changed = [field for field in data if field != "id"]
        for field in changed:
            setattr(course, field, data[field])
        if changed:
            course.save(update_fields=changed)
        return course

    def delete_course(self, course_id):
        return Course.objects.filter(pk=course_id).update(is_active=False) > 0

    def increment_enrollment(self, course_id, by=1):
        # one UPDATE statement, atomic in the database
        updated = Course.objects.filter(pk=course_id).update(enrolled=F("enrolled") + by)
        if not updated:
            return None
        return self.get_course(course_id)

    def create_registration(self, data):
        return Registration.objects.create(**self._new_registration_fields(data))

    def get_registrations(self, start=None, end=None):
        qs = Registration.objects.all()
        if start is not None:
            qs = qs.filter(registration_date__gte=start)
        if end is not None:
            qs = qs.filter(registration_date__lte=end)
        return list(qs.order_by("-registration_date", "-id"))

    def get_registration(self, registration_id):
        return Registration.objects.filter(pk=registration_id).first()

    def update_registration_status(self, registration_id, status):
        registration = self.get_registration(registration_id)
        if registration is None:
            return None
        registration.status = status
        registration.save(update_fields=["status"])
        return registration

    def create_contact_message(self, data):
        return ContactMessage.objects.create(**data)

    def get_contact_messages(self):
        return list(ContactMessage.objects.order_by("-created_at", "-id"))

    def get_banners(self, active=None):
        qs = Banner.objects.all()
        if active is not None:
            qs = qs.filter(is_active=active)
        return list(qs.order_by("display_order", "id"))

    def get_banner(self, banner_id):
        return Banner.objects.filter(pk=banner_id).first()

    def create_banner(self, data):
        return Banner.objects.create(**data)

    def update_banner(self, banner_id, data):
        banner = self.get_banner(banner_id)
        if banner is None:
            return None
        for field, value in data.items():
            setattr(banner, field, value)
        banner.updated_at = timezone.now()
        banner.save()
        return banner

    def delete_banner(self, banner_id):
        deleted, _ = Banner.objects.filter(pk=banner_id).delete()
        return deleted > 0

    def get_website_settings(self):
        return list(WebsiteSetting.objects.all())

    def get_website_setting(self, key):
        return WebsiteSetting.objects.filter(key=key).first()

    def upsert_website_setting(self, data):
        defaults = {k: v for k, v in data.items() if k != "key"}
        defaults["updated_at"] = timezone.now()
        return WebsiteSetting.objects.update_or_create(key=data["key"], defaults=defaults)

    def update_website_setting(self, key, data):
        setting = self.get_website_setting(key)
        if setting is None:
            return None
        for field, value in data.items():
            if field != "key":
                setattr(setting, field, value)
        setting.updated_at = timezone.now()
        setting.save()
        return setting

    def delete_website_setting(self, key):
        deleted, _ = WebsiteSetting.objects.filter(key=key).delete()
        return deleted > 0


@functools.lru_cache(maxsize=None)
def get_storage():
    """Shared storage instance configured by ``GEOACADEMY_STORAGE``."""
    storage_class = import_string(settings.GEOACADEMY_STORAGE)
    logger.info(f"Using {storage_class.__name__} for persistence")
    return storage_class()


@receiver(setting_changed)
def reset_storage(sender, setting, **kwargs):
    if setting == "GEOACADEMY_STORAGE":
        get_storage.cache_clear()

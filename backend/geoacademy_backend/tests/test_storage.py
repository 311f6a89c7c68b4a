from datetime import timedelta

import pytest
from django.utils import timezone

from registrations.storage import DatabaseStorage, MemoryStorage, get_storage

from .helpers import course_data, registration_data


def banner_data(title, order, active=True):
    return {
        "title": title,
        "image_url": "https://example.com/banner.jpg",
        "is_active": active,
        "display_order": order,
    }


def test_increment_enrollment(storage):
    storage.create_course(course_data())

    storage.increment_enrollment("gis-fundamentals")
    storage.increment_enrollment("gis-fundamentals", 2)

    assert storage.get_course("gis-fundamentals").enrolled == 3


def test_increment_enrollment_of_missing_course_returns_none(storage):
    assert storage.increment_enrollment("ghost") is None


def test_soft_delete_keeps_course_readable(storage):
    storage.create_course(course_data())
    storage.create_course(course_data(id="web-gis", title="Web GIS"))

    assert storage.delete_course("gis-fundamentals") is True
    assert storage.delete_course("missing") is False

    assert storage.get_course("gis-fundamentals").is_active is False
    assert [c.id for c in storage.get_courses(active=True)] == ["web-gis"]
    assert len(storage.get_courses()) == 2
    assert storage.count_active_courses() == 1


def test_update_course_never_changes_id(storage):
    storage.create_course(course_data())

    course = storage.update_course("gis-fundamentals", {"id": "renamed", "title": "GIS Basics"})

    assert course.id == "gis-fundamentals"
    assert storage.get_course("gis-fundamentals").title == "GIS Basics"
    assert storage.get_course("renamed") is None


def test_registrations_are_listed_newest_first_and_filtered_by_date(storage):
    first = storage.create_registration(registration_data())
    second = storage.create_registration(registration_data(email="bo@example.com"))

    assert [r.id for r in storage.get_registrations()] == [second.id, first.id]

    future = timezone.now() + timedelta(days=1)
    assert storage.get_registrations(start=future) == []
    assert len(storage.get_registrations(end=future)) == 2


def test_update_registration_status(storage):
    registration = storage.create_registration(registration_data())

    assert storage.update_registration_status(registration.id, "cancelled").status == "cancelled"
    assert storage.get_registration(registration.id).status == "cancelled"
    assert storage.update_registration_status(999, "cancelled") is None


def test_contact_messages_newest_first(storage):
    first = storage.create_contact_message(
        {"name": "A", "email": "a@example.com", "subject": "Hi", "message": "Hello"}
    )
    second = storage.create_contact_message(
        {"name": "B", "email": "b@example.com", "subject": "Hi", "message": "Hello"}
    )

    assert [m.id for m in storage.get_contact_messages()] == [second.id, first.id]


def test_banners_sorted_by_display_order_then_insertion(storage):
    late = storage.create_banner(banner_data("late", 1))
    early = storage.create_banner(banner_data("early", 0))
    tie = storage.create_banner(banner_data("tie", 1))
    hidden = storage.create_banner(banner_data("hidden", 0, active=False))

    assert [b.id for b in storage.get_banners()] == [early.id, hidden.id, late.id, tie.id]
    assert [b.id for b in storage.get_banners(active=True)] == [early.id, late.id, tie.id]


def test_banner_update_and_delete(storage):
    banner = storage.create_banner(banner_data("promo", 0))

    updated = storage.update_banner(banner.id, {"title": "Spring promo"})
    assert updated.title == "Spring promo"
    assert storage.update_banner(999, {"title": "x"}) is None

    assert storage.delete_banner(banner.id) is True
    assert storage.delete_banner(banner.id) is False
    assert storage.get_banner(banner.id) is None


def test_website_setting_upsert_by_key(storage):
    setting, created = storage.upsert_website_setting({"key": "site_title", "value": "Hub", "type": "string"})
    assert created is True

    setting, created = storage.upsert_website_setting({"key": "site_title", "value": "Training Hub", "type": "string"})
    assert created is False
    assert storage.get_website_setting("site_title").value == "Training Hub"
    assert len(storage.get_website_settings()) == 1


def test_website_setting_update_and_delete(storage):
    storage.upsert_website_setting({"key": "show_banner", "value": "true", "type": "boolean"})

    assert storage.update_website_setting("show_banner", {"value": "false"}).value == "false"
    assert storage.update_website_setting("missing", {"value": "x"}) is None
    assert storage.delete_website_setting("show_banner") is True
    assert storage.delete_website_setting("show_banner") is False


def test_memory_storages_are_isolated():
    one, two = MemoryStorage(), MemoryStorage()
    one.create_course(course_data())

    assert two.get_course("gis-fundamentals") is None


def test_get_storage_follows_setting(settings):
    settings.GEOACADEMY_STORAGE = "registrations.storage.MemoryStorage"
    assert isinstance(get_storage(), MemoryStorage)
    assert get_storage() is get_storage()

    settings.GEOACADEMY_STORAGE = "registrations.storage.DatabaseStorage"
    assert isinstance(get_storage(), DatabaseStorage)


@pytest.mark.django_db
def test_database_ping():
    assert DatabaseStorage().ping() is True

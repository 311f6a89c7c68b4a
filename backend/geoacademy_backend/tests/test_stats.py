from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

import pytest

from registrations.models import Course, Registration
from registrations.stats import compute_registration_stats, compute_revenue


NOW = datetime(2026, 10, 19, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture(autouse=True)
def utc_clock(settings):
    settings.TIME_ZONE = "UTC"


def make_registration(pk, course_id, when):
    return Registration(
        id=pk,
        first_name="Student",
        last_name=str(pk),
        email=f"student{pk}@example.com",
        country="Kenya",
        course_id=course_id,
        experience_level="beginner",
        registration_date=when,
    )


def make_course(course_id, title, price):
    return Course(
        id=course_id, title=title, description="", level="Beginner", duration="10 hours", price=Decimal(price)
    )


def test_empty_input_gives_zeroed_twelve_month_trend():
    stats = compute_registration_stats([], {}, now=NOW)

    assert stats.total == 0
    assert stats.this_month == 0
    assert stats.by_month == [0] * 12
    assert stats.by_course == []


def test_months_are_bucketed_with_current_month_last():
    registrations = [
        make_registration(1, "a", NOW),
        make_registration(2, "a", NOW.replace(day=1, hour=0)),
        make_registration(3, "a", datetime(2026, 9, 30, 23, 59, tzinfo=dt_timezone.utc)),
        make_registration(4, "a", datetime(2025, 11, 1, tzinfo=dt_timezone.utc)),
    ]

    stats = compute_registration_stats(registrations, {}, now=NOW)

    assert stats.this_month == 2
    assert stats.by_month[11] == 2
    assert stats.by_month[10] == 1
    assert stats.by_month[0] == 1
    assert sum(stats.by_month) == 4


def test_registration_older_than_window_counts_only_in_total():
    old = NOW - timedelta(days=365 + 1)  # 12 months and a day back
    registrations = [make_registration(1, "a", old), make_registration(2, "a", NOW)]

    stats = compute_registration_stats(registrations, {}, now=NOW)

    assert stats.total == 2
    assert len(stats.by_month) == 12
    assert sum(stats.by_month) == 1
    assert [entry.count for entry in stats.by_course] == [1]


def test_future_dated_registration_is_not_trended():
    registrations = [make_registration(1, "a", NOW + timedelta(days=40))]

    stats = compute_registration_stats(registrations, {}, now=NOW)

    assert stats.total == 1
    assert stats.this_month == 0
    assert sum(stats.by_month) == 0


def test_by_course_resolves_titles_and_keeps_dangling_ids():
    courses = {"web-gis": make_course("web-gis", "Web GIS", "499.00")}
    registrations = [
        make_registration(1, "web-gis", NOW),
        make_registration(2, "web-gis", NOW - timedelta(days=40)),
        make_registration(3, "ghost", NOW),
    ]

    stats = compute_registration_stats(registrations, courses, now=NOW)

    assert [(e.course, e.count) for e in stats.by_course] == [("Web GIS", 2), ("ghost", 1)]
    assert sum(e.count for e in stats.by_course) == sum(stats.by_month)


def test_revenue_matches_on_course_id_and_ignores_missing_courses():
    courses = {
        "a": make_course("a", "Same Title", "100.00"),
        "b": make_course("b", "Same Title", "250.50"),
    }
    registrations = [
        make_registration(1, "a", NOW),
        make_registration(2, "b", NOW),
        make_registration(3, "b", NOW),
        make_registration(4, "ghost", NOW),
    ]

    stats = compute_registration_stats(registrations, courses, now=NOW)

    assert compute_revenue(stats.by_course, courses) == Decimal("601.00")

"""Dashboard aggregation over registration records.

Everything here is read-only and works on plain sequences, so the same code
serves both storage backends.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

from django.utils import timezone


TREND_MONTHS = 12

# Shown on the dashboard as-is; there is no completion tracking behind it.
COMPLETION_RATE = 87


@dataclass(frozen=True)
class CoursePopularity:
    course_id: str
    course: str  # course title, or the raw id when the course is gone
    count: int


@dataclass(frozen=True)
class RegistrationStats:
    total: int
    this_month: int
    by_month: List[int]
    by_course: List[CoursePopularity] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardStats:
    total_registrations: int
    this_month_registrations: int
    active_courses: int
    revenue: Decimal
    completion_rate: int
    registration_trends: List[int]
    course_popularity: List[CoursePopularity]


def month_number(moment) -> int:
    """Months since year 0 in the server's local time zone."""
    local = timezone.localtime(moment)
    return local.year * 12 + (local.month - 1)


def compute_registration_stats(registrations, courses_by_id: Optional[Dict] = None, now=None) -> RegistrationStats:
    """Count registrations overall, this month, per month and per course.

    ``by_month`` always holds 12 entries: index 11 is the current month and
    index 0 is eleven months earlier. Registrations older than that window
    (or dated in the future) only count towards ``total``. ``by_course`` is
    built from the same 12-month window, most popular first.
    """
    courses_by_id = courses_by_id or {}
    current = month_number(now or timezone.now())

    total = 0
    this_month = 0
    by_month = [0] * TREND_MONTHS
    course_counts = {}

    for registration in registrations:
        total += 1
        months_ago = current - month_number(registration.registration_date)
        if months_ago == 0:
            this_month += 1
        if 0 <= months_ago < TREND_MONTHS:
            by_month[TREND_MONTHS - 1 - months_ago] += 1
            course_counts[registration.course_id] = course_counts.get(registration.course_id, 0) + 1

    by_course = [
        CoursePopularity(
            course_id=course_id,
            course=courses_by_id[course_id].title if course_id in courses_by_id else course_id,
            count=n,
        )
        for course_id, n in course_counts.items()
    ]
    by_course.sort(key=lambda entry: entry.count, reverse=True)

    return RegistrationStats(total=total, this_month=this_month, by_month=by_month, by_course=by_course)


def compute_revenue(by_course, courses_by_id: Dict) -> Decimal:
    """Price times registrations, matched on course id.

    Entries whose course no longer exists add nothing.
    """
    revenue = Decimal("0.00")
    for entry in by_course:
        course = courses_by_id.get(entry.course_id)
        if course is not None:
            revenue += Decimal(course.price) * entry.count
    return revenue.quantize(Decimal("0.01"))

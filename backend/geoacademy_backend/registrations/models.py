from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.text import slugify


def generate_course_id(title):
    """Slug of the title plus a timestamp suffix, e.g. ``web-gis-20261019104512123456``."""
    base_slug = slugify(title)[:70].strip("-") or "course"
    unique_suffix = timezone.now().strftime("%Y%m%d%H%M%S%f")
    return f"{base_slug}-{unique_suffix}"


class Course(models.Model):
    LEVEL_CHOICES = (
        ("Beginner", "Beginner"),
        ("Intermediate", "Intermediate"),
        ("Advanced", "Advanced"),
        ("Specialized", "Specialized"),
        ("Professional", "Professional"),
    )

    id = models.SlugField(max_length=100, primary_key=True)
    title = models.CharField(max_length=200)
    description = models.TextField()
    level = models.CharField(max_length=50, choices=LEVEL_CHOICES)
    duration = models.CharField(max_length=50)
    price = models.DecimalField(max_digits=10, decimal_places=2)  # course fee
    enrolled = models.PositiveIntegerField(default=0, validators=[MinValueValidator(0)])
    image_url = models.URLField(max_length=500, blank=True, null=True)
    details_url = models.URLField(max_length=500, blank=True, default="")
    is_active = models.BooleanField(default=True)  # soft delete marker

    class Meta:
        ordering = ["title"]

    def __str__(self):
        return f"{self.title} - ${self.price}"


class Registration(models.Model):
    STATUS_PENDING = "pending"
    STATUS_CONFIRMED = "confirmed"
    STATUS_CANCELLED = "cancelled"

    STATUS_CHOICES = (
        (STATUS_PENDING, "Pending"),       # submitted from the public form
        (STATUS_CONFIRMED, "Confirmed"),   # accepted by an admin
        (STATUS_CANCELLED, "Cancelled"),
    )

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=20, blank=True, null=True)
    country = models.CharField(max_length=100)
    # Plain course id, not a foreign key: registrations outlive their course
    course_id = models.CharField(max_length=100, db_index=True)
    experience_level = models.CharField(max_length=50)
    goals = models.TextField(blank=True, null=True)
    agree_terms = models.BooleanField(default=False)
    newsletter = models.BooleanField(default=False)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    registration_date = models.DateTimeField(default=timezone.now, editable=False, db_index=True)

    class Meta:
        ordering = ["-registration_date"]

    def __str__(self):
        return f"{self.full_name} - {self.course_id} ({self.status})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

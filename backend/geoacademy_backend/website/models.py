import json
import math

from django.db import models
from django.utils import timezone


def _reject_constant(name):
    # NaN and Infinity are not valid JSON
    raise ValueError(f"{name} is not allowed in JSON values")


def _finite_float(literal):
    number = float(literal)
    if not math.isfinite(number):
        raise ValueError(f"{literal} is out of range")
    return number


class Banner(models.Model):
    title = models.CharField(max_length=200)
    subtitle = models.TextField(blank=True, null=True)
    image_url = models.URLField(max_length=500)
    link_url = models.CharField(max_length=500, blank=True, null=True)
    link_text = models.CharField(max_length=100, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    display_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        # ties on display_order fall back to insertion order
        ordering = ["display_order", "id"]

    def __str__(self):
        return self.title


class WebsiteSetting(models.Model):
    TYPE_STRING = "string"
    TYPE_BOOLEAN = "boolean"
    TYPE_NUMBER = "number"
    TYPE_JSON = "json"

    TYPE_CHOICES = (
        (TYPE_STRING, "String"),
        (TYPE_BOOLEAN, "Boolean"),
        (TYPE_NUMBER, "Number"),
        (TYPE_JSON, "JSON"),
    )

    key = models.CharField(max_length=100, unique=True)
    value = models.TextField()
    type = models.CharField(max_length=50, choices=TYPE_CHOICES, default=TYPE_STRING)
    description = models.TextField(blank=True, null=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return f"{self.key} = {self.value}"

    @classmethod
    def parse_value(cls, value, value_type):
        """Interpret the stored string according to its type tag.

        Raises ValueError when the string does not fit the type.
        """
        if value_type == cls.TYPE_BOOLEAN:
            lowered = value.strip().lower()
            if lowered in ("true", "1", "yes", "on"):
                return True
            if lowered in ("false", "0", "no", "off", ""):
                return False
            raise ValueError(f"'{value}' is not a boolean")
        if value_type == cls.TYPE_NUMBER:
            number = float(value)
            if not math.isfinite(number):
                raise ValueError(f"'{value}' is not a finite number")
            return int(number) if number.is_integer() and "." not in value else number
        if value_type == cls.TYPE_JSON:
            return json.loads(value, parse_constant=_reject_constant, parse_float=_finite_float)
        return value

    @property
    def typed_value(self):
        try:
            return self.parse_value(self.value, self.type)
        except ValueError:
            return self.value

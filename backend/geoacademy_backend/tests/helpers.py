from decimal import Decimal


class RecordingNotifier:
    """Stands in for EmailNotifier and remembers every call."""

    def __init__(self, fail=False):
        self.fail = fail
        self.admin_notifications = []
        self.confirmations = []
        self.contact_notifications = []

    def send_admin_registration_notification(self, registration, course=None):
        self.admin_notifications.append((registration, course))
        if self.fail:
            raise RuntimeError("smtp down")
        return True

    def send_registration_confirmation(self, registration, course):
        self.confirmations.append((registration, course))
        if self.fail:
            raise RuntimeError("smtp down")
        return True

    def send_contact_message_notification(self, contact_message):
        self.contact_notifications.append(contact_message)
        return True


def course_data(**overrides):
    data = {
        "id": "gis-fundamentals",
        "title": "GIS Fundamentals",
        "description": "Intro to GIS",
        "level": "Beginner",
        "duration": "40 hours",
        "price": Decimal("100.00"),
    }
    data.update(overrides)
    return data


def registration_data(**overrides):
    data = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "country": "UK",
        "course_id": "gis-fundamentals",
        "experience_level": "beginner",
    }
    data.update(overrides)
    return data

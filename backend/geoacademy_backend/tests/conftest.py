import pytest
from rest_framework.test import APIClient

from registrations.services import RegistrationService
from registrations.storage import DatabaseStorage, MemoryStorage

from .helpers import RecordingNotifier, course_data


@pytest.fixture(autouse=True)
def no_outgoing_email(settings):
    settings.SENDGRID_API_KEY = ""


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture(params=["memory", "database"])
def storage(request):
    if request.param == "database":
        request.getfixturevalue("db")
        return DatabaseStorage()
    return MemoryStorage()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def service(memory_storage, notifier):
    return RegistrationService(storage=memory_storage, notifier=notifier)


@pytest.fixture
def course(memory_storage):
    return memory_storage.create_course(course_data())


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="admin@geospatialacademy.com", password="s3cret-pass", is_staff=True
    )


@pytest.fixture
def admin_client(staff_user):
    client = APIClient()
    client.force_login(staff_user)
    return client

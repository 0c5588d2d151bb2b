import pytest
from django.contrib.auth.models import User
from django.http import HttpResponse
from django.test import RequestFactory

from oauthrevoke.integrations.django_oauth2 import RevocationMiddleware
from tests.util import RecordingAuthenticator


@pytest.fixture
def factory():
    return RequestFactory()


@pytest.fixture
def user():
    return User(username="foo")


@pytest.fixture
def authenticator():
    return RecordingAuthenticator()


@pytest.fixture
def downstream():
    seen = []

    def get_response(request):
        seen.append(request)
        return HttpResponse("", status=200)

    get_response.seen = seen
    return get_response


@pytest.fixture
def middleware(settings, authenticator, downstream):
    settings.OAUTHREVOKE_PROVIDER = {
        "authenticator": authenticator,
        "error_uris": {"invalid_request": "https://client.test/error#invalid_request"},
    }
    return RevocationMiddleware(downstream)

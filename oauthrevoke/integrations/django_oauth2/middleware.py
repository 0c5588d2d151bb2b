from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse
from django.utils.module_loading import import_string

from oauthrevoke.oauth2.rfc7009 import DEFAULT_ENDPOINT_URI
from oauthrevoke.oauth2.rfc7009 import RevocationEndpoint

from .requests import DjangoOAuth2Request


class RevocationMiddleware:
    """Django middleware guarding the token revocation endpoint. Add it
    after ``AuthenticationMiddleware`` and configure it in settings::

        MIDDLEWARE = [
            ...,
            "django.contrib.auth.middleware.AuthenticationMiddleware",
            "oauthrevoke.integrations.django_oauth2.RevocationMiddleware",
        ]

        OAUTHREVOKE_PROVIDER = {
            "authenticator": "myapp.oauth2.Authenticator",
            "revocation_endpoint": "/oauth2/revoke",
            "error_uris": {"invalid_request": "https://myapp.test/errors"},
        }

    ``authenticator`` is a dotted path or the object itself; a class is
    instantiated without arguments. Accepted revocation requests go on
    to the view routed at the endpoint.
    """

    def __init__(self, get_response):
        self.get_response = get_response

        config = getattr(settings, "OAUTHREVOKE_PROVIDER", None) or {}
        authenticator = config.get("authenticator")
        if authenticator is None:
            raise ImproperlyConfigured(
                "OAUTHREVOKE_PROVIDER['authenticator'] is required"
            )
        if isinstance(authenticator, str):
            authenticator = import_string(authenticator)
        if isinstance(authenticator, type):
            authenticator = authenticator()

        self.endpoint = RevocationEndpoint(
            authenticator,
            endpoint_uri=config.get("revocation_endpoint", DEFAULT_ENDPOINT_URI),
            error_uris=config.get("error_uris"),
        )
        if self.endpoint.is_async:
            raise ImproperlyConfigured(
                "OAUTHREVOKE_PROVIDER['authenticator'] must be synchronous"
            )

    def __call__(self, request):
        if self.endpoint.matches(request.method, request.path_info):
            rv = self.endpoint.create_endpoint_response(DjangoOAuth2Request(request))
            if rv is not None:
                return self.handle_response(*rv)
        return self.get_response(request)

    def handle_response(self, status_code, body, headers):
        resp = HttpResponse(body, status=status_code)
        for k, v in headers:
            resp[k] = v
        return resp

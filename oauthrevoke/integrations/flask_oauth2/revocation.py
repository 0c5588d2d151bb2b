from flask import Response
from flask import json
from flask import request as flask_req

from oauthrevoke.oauth2.rfc7009 import DEFAULT_ENDPOINT_URI
from oauthrevoke.oauth2.rfc7009 import RevocationEndpoint

from .requests import FlaskOAuth2Request


class RevocationFilter:
    """Flask extension guarding the token revocation endpoint::

        def authenticate(revocation_request):
            ...


        revocation = RevocationFilter(app, authenticator=authenticate)

    or with the application factory pattern::

        revocation = RevocationFilter(authenticator=authenticate)
        revocation.init_app(app)

    It registers a ``before_request`` hook. Requests that are not a
    ``POST`` to ``OAUTH2_REVOCATION_ENDPOINT`` are not touched. Invalid
    and rejected revocation requests get a 400 error response; accepted
    ones continue to the view registered for the endpoint, which
    creates the success response.

    The current principal is read from ``g`` under :attr:`PRINCIPAL_KEY`.
    """

    #: name of the ``flask.g`` attribute holding the current principal
    PRINCIPAL_KEY = "oauth2_principal"

    def __init__(self, app=None, authenticator=None):
        self.authenticator = authenticator
        self.endpoint = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app, authenticator=None):
        """Configure the endpoint from ``app.config`` and register the
        request hook.
        """
        if authenticator is not None:
            self.authenticator = authenticator

        self.endpoint = RevocationEndpoint(
            self.authenticator,
            endpoint_uri=app.config.get(
                "OAUTH2_REVOCATION_ENDPOINT", DEFAULT_ENDPOINT_URI
            ),
            error_uris=app.config.get("OAUTH2_ERROR_URIS"),
            serializer=json.dumps,
        )
        if self.endpoint.is_async:
            raise ValueError("RevocationFilter requires a synchronous authenticator")
        app.before_request(self.process_request)

    def create_oauth2_request(self, request):
        return FlaskOAuth2Request(request, self.PRINCIPAL_KEY)

    def handle_response(self, status_code, payload, headers):
        return Response(payload, status=status_code, headers=headers)

    def process_request(self):
        if not self.endpoint.matches(flask_req.method, flask_req.path):
            return None

        rv = self.endpoint.create_endpoint_response(
            self.create_oauth2_request(flask_req)
        )
        if rv is None:
            return None
        return self.handle_response(*rv)

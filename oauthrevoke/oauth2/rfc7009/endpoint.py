from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING
from typing import Any

from ..rfc6749.endpoint import Endpoint
from ..rfc6749.errors import OAuth2Error
from .matcher import RequestMatcher
from .models import AuthenticationResult
from .models import TokenRevocationRequest
from .parameters import parse_revocation_request
from .responder import ErrorResponder

if TYPE_CHECKING:
    from ..rfc6749.requests import OAuth2Request

#: The default endpoint URI for token revocation requests
DEFAULT_ENDPOINT_URI = "/oauth2/revoke"

log = logging.getLogger(__name__)


class RevocationEndpoint(Endpoint):
    """Filter handling OAuth 2.0 Token Revocation requests, which is
    described in `RFC7009`_.

    It only acts on ``POST`` requests to ``endpoint_uri``. A matched
    request is validated and handed to the ``authenticator``; when that
    fails, the principal of the request is cleared and a 400 error
    response is returned. A successful revocation returns ``None``, so
    the next handler in the pipeline produces the response::

        endpoint = RevocationEndpoint(MyAuthenticator())

        rv = endpoint.create_endpoint_response(oauth2_request)
        if rv is None:
            return next_handler(request)
        status_code, body, headers = rv

    Async hosts call :meth:`acreate_endpoint_response` instead, which
    also accepts coroutine authenticators.

    The endpoint holds no per-request state and can be shared between
    concurrent requests.

    :param authenticator: a :class:`RevocationAuthenticator`, or any
        callable taking a :class:`TokenRevocationRequest`
    :param endpoint_uri: exact path or Ant-style pattern to match
    :param error_uris: mapping or list of ``(error, uri)`` pairs that
        override the default error reference pages
    :param serializer: callable turning the error body dict into bytes
        or text, JSON by default

    .. _RFC7009: https://tools.ietf.org/html/rfc7009
    """

    ENDPOINT_NAME = "revocation"

    def __init__(
        self,
        authenticator,
        endpoint_uri: str = DEFAULT_ENDPOINT_URI,
        error_uris=None,
        serializer=None,
    ):
        if authenticator is None:
            raise ValueError("authenticator cannot be None")
        authenticate = getattr(authenticator, "authenticate", authenticator)
        if not callable(authenticate):
            raise ValueError("authenticator must be callable")
        if not endpoint_uri:
            raise ValueError("endpoint_uri cannot be empty")

        self.authenticator = authenticator
        self.authenticate_func = authenticate
        self.endpoint_uri = endpoint_uri
        self.error_uris = dict(error_uris or {})
        self.matcher = RequestMatcher(endpoint_uri, "POST")
        self.responder = ErrorResponder(serializer)

    @property
    def is_async(self) -> bool:
        """Whether the authenticator is a coroutine function, which only
        :meth:`acreate_endpoint_response` can call.
        """
        func = self.authenticate_func
        return inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
            getattr(func, "__call__", None)
        )

    def matches(self, method: str, path: str) -> bool:
        return self.matcher.matches(method, path)

    def validate_request(self, request: OAuth2Request) -> TokenRevocationRequest:
        return parse_revocation_request(
            request.form, request.principal, self.error_uris
        )

    def authenticate(
        self, revocation_request: TokenRevocationRequest
    ) -> AuthenticationResult:
        """Hand the request to the authenticator and return its outcome.
        An :class:`OAuth2Error` raised by the authenticator becomes a
        failed result; any other exception propagates.
        """
        try:
            rv = self.authenticate_func(revocation_request)
        except OAuth2Error as error:
            return AuthenticationResult.failure(error)

        if inspect.isawaitable(rv):
            if inspect.iscoroutine(rv):
                rv.close()
            raise TypeError(
                f"{self.authenticator!r} returned an awaitable, "
                "use acreate_endpoint_response() for async authenticators"
            )
        return AuthenticationResult.from_value(rv)

    async def aauthenticate(
        self, revocation_request: TokenRevocationRequest
    ) -> AuthenticationResult:
        """Async variant of :meth:`authenticate`. Coroutine authenticators
        are awaited, plain ones go through :meth:`run_sync`.
        """
        try:
            if self.is_async:
                rv = await self.authenticate_func(revocation_request)
            else:
                rv = await self.run_sync(self.authenticate_func, revocation_request)
            if inspect.isawaitable(rv):
                rv = await rv
        except OAuth2Error as error:
            return AuthenticationResult.failure(error)
        return AuthenticationResult.from_value(rv)

    async def run_sync(self, func, *args):
        """Call a blocking authenticator from :meth:`aauthenticate`.
        Integrations override it to move the call off the event loop.
        """
        return func(*args)

    def create_response(
        self, request: OAuth2Request, validated_request: Any
    ) -> tuple[int, Any, list] | None:
        """Create the response for an authentication outcome. It accepts
        either an :class:`AuthenticationResult` or a
        :class:`TokenRevocationRequest`, which is authenticated first.
        """
        if isinstance(validated_request, AuthenticationResult):
            result = validated_request
        else:
            result = self.authenticate(validated_request)

        if result.succeeded:
            log.debug("Token revocation accepted for %r", request)
            return None

        log.debug("Token revocation rejected for %r: %r", request, result.error)
        return self.handle_error_response(request, result.error)

    def create_endpoint_response(
        self, request: OAuth2Request
    ) -> tuple[int, Any, list] | None:
        if not self.matches(request.method, request.path):
            return None

        try:
            revocation_request = self.validate_request(request)
        except OAuth2Error as error:
            return self.handle_invalid_request(request, error)
        return self.create_response(request, self.authenticate(revocation_request))

    async def acreate_endpoint_response(
        self, request: OAuth2Request
    ) -> tuple[int, Any, list] | None:
        """Async variant of :meth:`create_endpoint_response`."""
        if not self.matches(request.method, request.path):
            return None

        try:
            revocation_request = self.validate_request(request)
        except OAuth2Error as error:
            return self.handle_invalid_request(request, error)
        result = await self.aauthenticate(revocation_request)
        return self.create_response(request, result)

    def handle_invalid_request(
        self, request: OAuth2Request, error: OAuth2Error
    ) -> tuple[int, Any, list]:
        """Respond to a request rejected before it reached the
        authenticator.
        """
        log.debug("Invalid token revocation request %r: %r", request, error)
        return self.handle_error_response(request, error)

    def handle_error_response(
        self, request: OAuth2Request, error: OAuth2Error
    ) -> tuple[int, Any, list]:
        request.clear_principal()
        return self.responder(error)

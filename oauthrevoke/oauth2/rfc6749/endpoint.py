"""
oauthrevoke.oauth2.rfc6749.endpoint
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Base class for OAuth2 endpoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from .requests import OAuth2Request


class Endpoint:
    """Base class for OAuth2 endpoints that sit in front of a request
    pipeline.

    An endpoint first decides with :meth:`matches` whether a request is
    meant for it. Requests it does not match are left untouched for the
    next handler. For matched requests :meth:`validate_request` builds a
    validated request object, and :meth:`create_response` turns it into
    an HTTP response, or ``None`` to let the next handler respond.

    Subclasses must implement :meth:`matches`, :meth:`validate_request`,
    :meth:`create_response` and :meth:`create_endpoint_response`.
    """

    #: Endpoint name used for registration
    ENDPOINT_NAME: str | None = None

    def matches(self, method: str, path: str) -> bool:
        """Tell whether the request line belongs to this endpoint. It
        MUST NOT read the request body.
        """
        raise NotImplementedError()

    def validate_request(self, request: OAuth2Request) -> Any:
        """Validate the request and return a validated request object.

        :param request: The OAuth2Request to validate
        :raises OAuth2Error: If validation fails
        """
        raise NotImplementedError()

    def create_response(
        self, request: OAuth2Request, validated_request: Any
    ) -> tuple[int, Any, list] | None:
        """Create the HTTP response from a validated request.

        :param request: The OAuth2Request being processed
        :param validated_request: The object returned by :meth:`validate_request`
        :returns: Tuple of (status_code, body, headers), or None
        """
        raise NotImplementedError()

    def create_endpoint_response(
        self, request: OAuth2Request
    ) -> tuple[int, Any, list] | None:
        """Match, validate and respond in one step. Each endpoint decides
        how a failed validation is reported.

        :param request: The OAuth2Request to process
        :returns: Tuple of (status_code, body, headers), or None
        """
        raise NotImplementedError()

    def __call__(self, request: OAuth2Request) -> tuple[int, Any, list] | None:
        return self.create_endpoint_response(request)

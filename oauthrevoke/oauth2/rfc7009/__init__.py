"""oauthrevoke.oauth2.rfc7009.
~~~~~~~~~~~~~~~~~~~~~~~~~~~

This module represents a direct implementation of
OAuth 2.0 Token Revocation.

https://tools.ietf.org/html/rfc7009
"""

from .authenticator import RevocationAuthenticator
from .endpoint import DEFAULT_ENDPOINT_URI
from .endpoint import RevocationEndpoint
from .errors import ERROR_URIS
from .errors import get_error_uri
from .matcher import RequestMatcher
from .models import AuthenticationResult
from .models import TokenRevocationRequest
from .parameters import parse_revocation_request
from .responder import ErrorResponder

__all__ = [
    "DEFAULT_ENDPOINT_URI",
    "ERROR_URIS",
    "AuthenticationResult",
    "ErrorResponder",
    "RequestMatcher",
    "RevocationAuthenticator",
    "RevocationEndpoint",
    "TokenRevocationRequest",
    "get_error_uri",
    "parse_revocation_request",
]

"""oauthrevoke.oauth2.rfc6749.
~~~~~~~~~~~~~~~~~~~~~~~~~~~

The pieces of The OAuth 2.0 Authorization Framework that token endpoints
build upon: error responses and the framework neutral request.

https://tools.ietf.org/html/rfc6749
"""

from .endpoint import Endpoint
from .errors import InvalidClientError
from .errors import InvalidGrantError
from .errors import InvalidRequestError
from .errors import OAuth2Error
from .errors import ServerError
from .errors import UnsupportedTokenTypeError
from .requests import OAuth2Request

__all__ = [
    "Endpoint",
    "OAuth2Error",
    "InvalidRequestError",
    "InvalidClientError",
    "InvalidGrantError",
    "UnsupportedTokenTypeError",
    "ServerError",
    "OAuth2Request",
]

from .rfc6749 import InvalidRequestError
from .rfc6749 import OAuth2Error
from .rfc6749 import OAuth2Request
from .rfc7009 import AuthenticationResult
from .rfc7009 import RevocationAuthenticator
from .rfc7009 import RevocationEndpoint
from .rfc7009 import TokenRevocationRequest

__all__ = [
    "OAuth2Error",
    "InvalidRequestError",
    "OAuth2Request",
    "AuthenticationResult",
    "RevocationAuthenticator",
    "RevocationEndpoint",
    "TokenRevocationRequest",
]

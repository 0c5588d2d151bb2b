from .endpoint import StarletteRevocationEndpoint
from .middleware import RevocationMiddleware
from .requests import StarletteOAuth2Request

__all__ = [
    "RevocationMiddleware",
    "StarletteOAuth2Request",
    "StarletteRevocationEndpoint",
]

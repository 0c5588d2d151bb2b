from .middleware import RevocationMiddleware
from .requests import DjangoOAuth2Request

__all__ = ["DjangoOAuth2Request", "RevocationMiddleware"]

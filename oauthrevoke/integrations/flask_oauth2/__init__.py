from .requests import FlaskOAuth2Request
from .revocation import RevocationFilter

__all__ = ["FlaskOAuth2Request", "RevocationFilter"]
